# Copyright (C) 2025 licensekit Authors
# SPDX-License-Identifier: AGPL-3.0-or-later
"""Content checks over raw file bytes."""

from __future__ import annotations

import re

LICENSE_SCAN_BYTES = 1000

LICENSE_MARKERS = (
    b"copyright",
    b"mozilla public",
    b"spdx-license-identifier",
)

# First lines that must stay first after a header is inserted.
DECLARATION_PREFIXES = (
    b"#!",  # shell script
    b"<?xml",  # XML declaration
    b"<!doctype",  # HTML doctype
    b"# encoding:",  # Ruby encoding
    b"# frozen_string_literal:",  # Ruby interpreter instruction
    b"<?php",  # PHP opening tag
    b"# escape",  # Dockerfile directive
    b"# syntax",  # Dockerfile directive
)

# go generate: "// Code generated by <tool>; DO NOT EDIT."
_GO_GENERATED = re.compile(rb"^.{1,2} Code generated .* DO NOT EDIT\.$", re.MULTILINE)
_CARGO_RAZE_GENERATED = re.compile(rb"^DO NOT EDIT! Replaced on runs of cargo-raze$", re.MULTILINE)


def has_license(content: bytes) -> bool:
    """Return ``True`` when a license marker appears in the first 1000 bytes."""

    head = content[:LICENSE_SCAN_BYTES].lower()
    return any(marker in head for marker in LICENSE_MARKERS)


def is_generated(content: bytes) -> bool:
    return bool(_GO_GENERATED.search(content) or _CARGO_RAZE_GENERATED.search(content))


def leading_declaration(content: bytes) -> bytes:
    """Return the first line (newline included) if it is a declaration line.

    An empty result means the header can go at byte 0.
    """

    end = content.find(b"\n")
    line = content if end == -1 else content[: end + 1]
    if line.lower().startswith(DECLARATION_PREFIXES):
        return line
    return b""


__all__ = ["has_license", "is_generated", "leading_declaration"]
