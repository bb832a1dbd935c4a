# Copyright (C) 2025 licensekit Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .errors import LogFileError

LOGGER_NAME = "licensekit"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logging(verbose: bool = False, log_path: Optional[Path] = None) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)

    level = logging.INFO if verbose else logging.WARNING
    stream = next(
        (h for h in logger.handlers if type(h) is logging.StreamHandler),
        None,
    )
    if stream is None:
        stream = logging.StreamHandler(sys.stderr)
        stream.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(stream)
    else:
        stream.setStream(sys.stderr)
    stream.setLevel(level)

    if log_path is not None and not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            handler = RotatingFileHandler(log_path, maxBytes=5_000_000, backupCount=3, encoding="utf-8")
        except OSError as exc:
            raise LogFileError(str(log_path), exc) from exc
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
