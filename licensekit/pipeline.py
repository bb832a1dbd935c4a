# Copyright (C) 2025 licensekit Authors
# SPDX-License-Identifier: AGPL-3.0-or-later
"""Directory traversal and the concurrent worker pool.

One producer walks the input paths and feeds a bounded queue; a fixed number
of worker threads drain it. Once the queue is full the walk blocks until a
worker catches up, so memory stays bounded regardless of tree size. A failing
file never stops the run: its error is logged, recorded in the
:class:`~licensekit.reporting.RunResult`, and the remaining files are still
processed.
"""

from __future__ import annotations

import logging
import os
import queue
import stat
import threading
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

import jinja2

from .config import RunConfig
from .errors import TemplateRenderError
from .header import CopyrightData
from .matcher import file_matches
from .mutate import apply_license, check_license
from .reporting import RunResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileTask:
    path: str
    mode: int


_STOP = None


def _log_walk_error(exc: OSError) -> None:
    logger.error("%s error: %s", exc.filename, exc.strerror or exc)


def walk(root: str, submit: Callable[[FileTask], None], ignore_patterns: Sequence[str] = ()) -> None:
    """Call ``submit`` for every regular file below ``root``.

    ``root`` may itself be a file. Entries that cannot be read are logged and
    skipped; ignored paths are never submitted.
    """

    def visit(path: str) -> None:
        try:
            st = os.stat(path)
        except OSError as exc:
            _log_walk_error(exc)
            return
        if not stat.S_ISREG(st.st_mode):
            return
        if file_matches(path, ignore_patterns):
            logger.info("skipping: %s", path)
            return
        submit(FileTask(path, stat.S_IMODE(st.st_mode)))

    root = os.path.normpath(root)
    if not os.path.isdir(root):
        visit(root)
        return
    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        dirnames.sort()
        for name in sorted(filenames):
            visit(os.path.normpath(os.path.join(dirpath, name)))


def _contains(outer: str, inner: str) -> bool:
    return inner == outer or inner.startswith(outer.rstrip(os.sep) + os.sep)


def distinct_roots(paths: Sequence[str]) -> List[str]:
    """Drop roots that repeat or lie inside another root.

    Every file is then walked once, so it is rewritten at most once per run.
    Paths are compared after resolving symlinks; the first of two equal roots
    is kept.
    """

    resolved = [os.path.realpath(path) for path in paths]
    kept = []
    for i, (path, real) in enumerate(zip(paths, resolved)):
        covering = next(
            (
                paths[j]
                for j, other in enumerate(resolved)
                if j != i and _contains(other, real) and (other != real or j < i)
            ),
            None,
        )
        if covering is not None:
            logger.info("skipping %s: already covered by %s", path, covering)
            continue
        kept.append(path)
    return kept


class Pipeline:
    """Process every file under ``config.paths`` with a bounded worker pool."""

    def __init__(self, config: RunConfig, template: jinja2.Template, data: CopyrightData):
        self.config = config
        self.template = template
        self.data = data
        self._tasks: "queue.Queue[Optional[FileTask]]" = queue.Queue(maxsize=config.queue_size)
        self._threads: List[threading.Thread] = []
        self.result = RunResult()

    def run(self) -> RunResult:
        for index in range(self.config.jobs):
            thread = threading.Thread(target=self._worker, name=f"licensekit-worker-{index}", daemon=True)
            thread.start()
            self._threads.append(thread)
        try:
            for root in distinct_roots(self.config.paths):
                walk(root, self._tasks.put, self.config.ignore_patterns)
        finally:
            for _ in self._threads:
                self._tasks.put(_STOP)
            for thread in self._threads:
                thread.join()
        return self.result

    def _worker(self) -> None:
        while True:
            task = self._tasks.get()
            try:
                if task is _STOP:
                    return
                self._process(task)
            finally:
                self._tasks.task_done()

    def _process(self, task: FileTask) -> None:
        self.result.record_scanned()
        try:
            if self.config.check_only:
                if not check_license(task.path, self.template, self.data):
                    self.result.record_missing(task.path)
                return
            if apply_license(task.path, task.mode, self.template, self.data):
                self.result.record_modified(task.path)
                logger.info("%s modified", task.path)
        except OSError as exc:
            logger.error("%s: %s", task.path, exc.strerror or exc)
            self.result.record_failure(task.path, str(exc))
        except TemplateRenderError as exc:
            logger.error("%s: %s", task.path, exc)
            self.result.record_failure(task.path, str(exc))
        except Exception as exc:
            logger.exception("%s: unexpected error", task.path)
            self.result.record_failure(task.path, str(exc))


def run_pipeline(config: RunConfig, template: jinja2.Template, data: CopyrightData) -> RunResult:
    return Pipeline(config, template, data).run()


__all__ = ["FileTask", "Pipeline", "distinct_roots", "run_pipeline", "walk"]
