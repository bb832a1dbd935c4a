# Copyright (C) 2025 licensekit Authors
# SPDX-License-Identifier: AGPL-3.0-or-later
"""Glob matching for ignore patterns."""

from __future__ import annotations

import os
from typing import Iterable

from wcmatch import glob

# ``*`` and ``?`` stay inside one path segment, ``**`` spans segments, braces
# expand to alternatives and dot files are not special.
GLOB_FLAGS = glob.GLOBSTAR | glob.BRACE | glob.DOTGLOB | glob.FORCEUNIX


def validate_pattern(pattern: str) -> bool:
    """Return ``False`` for patterns that cannot be matched.

    That covers an unterminated class, brace or escape, and brace patterns
    that expand past wcmatch's pattern limit.
    """

    if not _balanced(pattern):
        return False
    try:
        glob.translate(pattern, flags=GLOB_FLAGS)
    except Exception:
        # PatternLimitException lives in a private wcmatch module
        return False
    return True


def _balanced(pattern: str) -> bool:

    depth = 0
    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "\\":
            if i + 1 >= n:
                return False
            i += 2
            continue
        if ch == "[":
            j = i + 1
            if j < n and pattern[j] in "!^":
                j += 1
            while j < n and pattern[j] != "]":
                j += 2 if pattern[j] == "\\" else 1
            if j >= n:
                return False
            i = j + 1
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            if depth == 0:
                return False
            depth -= 1
        i += 1
    return depth == 0


def match(pattern: str, path: str) -> bool:
    if not pattern:
        return False
    return glob.globmatch(path.replace(os.sep, "/"), pattern, flags=GLOB_FLAGS)


def file_matches(path: str, patterns: Iterable[str]) -> bool:
    """Report whether ``path`` matches any of ``patterns``.

    Patterns are assumed to have passed :func:`validate_pattern`.
    """

    return any(match(pattern, path) for pattern in patterns)


__all__ = ["GLOB_FLAGS", "file_matches", "match", "validate_pattern"]
