# Copyright (C) 2025 licensekit Authors
# SPDX-License-Identifier: AGPL-3.0-or-later
"""Run configuration assembled from command-line arguments and settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from .errors import ConfigurationError, InvalidPatternError
from .matcher import validate_pattern
from .settings import Settings
from .templates import SpdxMode


@dataclass(frozen=True)
class RunConfig:
    holder: str
    license: str
    year: str
    paths: Tuple[str, ...]
    template_file: str = ""
    spdx: SpdxMode = SpdxMode.OFF
    check_only: bool = False
    verbose: bool = False
    ignore_patterns: Tuple[str, ...] = field(default_factory=tuple)
    jobs: int = 8
    queue_size: int = 1000
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        for pattern in self.ignore_patterns:
            if not validate_pattern(pattern):
                raise InvalidPatternError(pattern)
        if self.jobs < 1:
            raise ConfigurationError(f"jobs must be at least 1, got {self.jobs}")
        if self.queue_size < 1:
            raise ConfigurationError(f"queue size must be at least 1, got {self.queue_size}")


def skip_to_ignore(extensions: Sequence[str]) -> Tuple[str, ...]:
    """Convert deprecated ``--skip`` extensions into ignore patterns."""

    return tuple(f"**/*.{ext.lstrip('.')}" for ext in extensions)


def build_config(args, settings: Optional[Settings] = None) -> RunConfig:
    """Merge parsed arguments over ``settings`` defaults.

    Raises :class:`ConfigurationError` for invalid values, so nothing is
    scanned with a bad configuration.
    """

    settings = settings or Settings()
    ignore = tuple(getattr(args, "ignore", None) or ()) + skip_to_ignore(getattr(args, "skip", None) or ())
    return RunConfig(
        holder=args.holder if args.holder is not None else settings.holder,
        license=args.license if args.license is not None else settings.license,
        year=args.year if args.year is not None else settings.year,
        paths=tuple(args.paths),
        template_file=args.template_file or "",
        spdx=SpdxMode(args.spdx or SpdxMode.OFF),
        check_only=bool(args.check),
        verbose=bool(args.verbose),
        ignore_patterns=ignore,
        jobs=args.jobs if args.jobs is not None else settings.jobs,
        queue_size=settings.queue_size,
        log_file=args.log_file or settings.log_file,
    )


__all__ = ["RunConfig", "build_config", "skip_to_ignore"]
