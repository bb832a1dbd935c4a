# Copyright (C) 2025 licensekit Authors
# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

import os
from datetime import date
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


def default_jobs() -> int:
    return min(32, (os.cpu_count() or 1) + 4)


class Settings(BaseSettings):
    """Defaults for command-line options, read from ``LICENSEKIT_*`` variables."""

    holder: str = ""
    license: str = "apache"
    year: str = Field(default_factory=lambda: str(date.today().year))
    jobs: int = Field(default_factory=default_jobs)
    queue_size: int = 1000
    log_file: Optional[str] = None

    model_config = {
        "env_prefix": "LICENSEKIT_",
        "env_file": ".env",
        "extra": "ignore",
    }

    @field_validator("jobs", "queue_size")
    @classmethod
    def _positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("must be at least 1")
        return value
