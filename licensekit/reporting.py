# Copyright (C) 2025 licensekit Authors
# SPDX-License-Identifier: AGPL-3.0-or-later
"""Run result aggregation and reporting helpers."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class RunResult:
    """Outcome of one pipeline run.

    Workers record into it concurrently; every mutation goes through the
    ``record_*`` methods, which hold ``_lock``.
    """

    scanned: int = 0
    modified: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    failures: Dict[str, str] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    def record_scanned(self) -> None:
        with self._lock:
            self.scanned += 1

    def record_modified(self, path: str) -> None:
        with self._lock:
            self.modified.append(path)

    def record_missing(self, path: str) -> None:
        with self._lock:
            self.missing.append(path)

    def record_failure(self, path: str, message: str) -> None:
        with self._lock:
            self.failures[path] = message

    @property
    def ok(self) -> bool:
        with self._lock:
            return not self.failures and not self.missing

    def summary(self) -> str:
        with self._lock:
            output = [f"Scanned {self.scanned} files. Modified {len(self.modified)} files."]
            if self.missing:
                output.append("\nMissing license header:")
                output.extend(f"  - {path}" for path in sorted(self.missing))
            if self.failures:
                output.append("\nErrors:")
                output.extend(f"  - {path}: {message}" for path, message in sorted(self.failures.items()))
        return "\n".join(output)


__all__ = ["RunResult"]
