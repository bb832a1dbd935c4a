# Copyright (C) 2025 licensekit Authors
# SPDX-License-Identifier: AGPL-3.0-or-later
"""Exception hierarchy for licensekit."""

from __future__ import annotations


class LicenseKitError(Exception):
    """Base exception for licensekit."""


class ConfigurationError(LicenseKitError):
    """Raised before any file is touched; the run cannot start."""


class UnknownLicenseError(ConfigurationError):
    def __init__(self, license_id: str):
        self.license_id = license_id
        super().__init__(
            f"unknown license: {license_id!r}. "
            "Use the '--spdx-only' flag to request SPDX style headers using this license"
        )


class TemplateFileError(ConfigurationError):
    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.errno = getattr(cause, "errno", None)
        if isinstance(cause, UnicodeDecodeError):
            reason = f"not valid UTF-8 ({cause.reason} at byte {cause.start})"
        else:
            reason = getattr(cause, "strerror", None) or cause
        super().__init__(f"cannot read template file {path!r}: {reason}")


class LogFileError(ConfigurationError):
    def __init__(self, path: str, cause: OSError):
        self.path = path
        self.errno = cause.errno
        super().__init__(f"cannot open log file {path!r}: {cause.strerror or cause}")


class TemplateSyntaxError(ConfigurationError):
    pass


class InvalidPatternError(ConfigurationError):
    def __init__(self, pattern: str):
        self.pattern = pattern
        super().__init__(f"--ignore pattern {pattern!r} is not valid")


class TemplateRenderError(LicenseKitError):
    pass
