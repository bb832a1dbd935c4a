# Copyright (C) 2025 licensekit Authors
# SPDX-License-Identifier: AGPL-3.0-or-later
"""Insert license headers into individual files."""

from __future__ import annotations

import os

import jinja2

from .classify import has_license, is_generated, leading_declaration
from .header import CopyrightData, license_header


def _read_file(path: str) -> bytes:
    with open(path, "rb") as handle:
        return handle.read()


def _write_file(path: str, content: bytes, mode: int) -> None:
    # Truncate in place: the permission bits of an existing file are kept and
    # ``mode`` only applies if the file has to be created.
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    with os.fdopen(fd, "wb") as handle:
        handle.write(content)


def apply_license(path: str, mode: int, template: jinja2.Template, data: CopyrightData) -> bool:
    """Add a license header to ``path`` if it is missing.

    Returns ``True`` when the file was rewritten. Unsupported file types, files
    that already carry a license and generated files are left untouched. I/O
    errors propagate to the caller.
    """

    header = license_header(path, template, data)
    if header is None:
        return False

    content = _read_file(path)
    if has_license(content) or is_generated(content):
        return False

    line = leading_declaration(content)
    if line:
        content = content[len(line):]
        if not line.endswith(b"\n"):
            line += b"\n"
        header = line + header

    _write_file(path, header + content, mode)
    return True


def check_license(path: str, template: jinja2.Template, data: CopyrightData) -> bool:
    """Report whether ``path`` is compliant without modifying it.

    Generated files and unsupported file types count as compliant.
    """

    if license_header(path, template, data) is None:
        return True
    content = _read_file(path)
    return has_license(content) or is_generated(content)


__all__ = ["apply_license", "check_license"]
