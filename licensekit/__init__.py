# Copyright (C) 2025 licensekit Authors
# SPDX-License-Identifier: AGPL-3.0-or-later
"""Add and check copyright license headers in source files."""

from __future__ import annotations

from .header import CopyrightData, license_header, render_header
from .mutate import apply_license, check_license
from .pipeline import Pipeline, run_pipeline
from .reporting import RunResult
from .templates import SpdxMode, compile_template, resolve_template

__version__ = "0.1.0"

__all__ = [
    "CopyrightData",
    "Pipeline",
    "RunResult",
    "SpdxMode",
    "apply_license",
    "check_license",
    "compile_template",
    "license_header",
    "render_header",
    "resolve_template",
    "run_pipeline",
]
