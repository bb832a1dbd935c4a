# Copyright (C) 2025 licensekit Authors
# SPDX-License-Identifier: AGPL-3.0-or-later
"""licensekit command-line entrypoint."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .config import RunConfig, build_config
from .errors import ConfigurationError, TemplateRenderError
from .header import CopyrightData, render_header
from .logging_setup import setup_logging
from .pipeline import run_pipeline
from .settings import Settings
from .templates import SpdxMode, compile_template, normalize_license, resolve_template

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG = 2

HELP_TEXT = """\
Ensures source code files have copyright license headers by scanning the given
paths recursively.

All source files are modified in place; files that already have a license
header, or that were generated, are left alone. Each path may be a directory or
a single file.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="licensekit",
        description=HELP_TEXT,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("paths", nargs="*", metavar="PATH", help="file or directory to process")
    parser.add_argument("-c", "--holder", default=None, help="copyright holder")
    parser.add_argument("-l", "--license", default=None, help="license type: apache, bsd, mit, mpl (default: apache)")
    parser.add_argument("-f", "--template-file", default="", help="custom license template file")
    parser.add_argument("-y", "--year", default=None, help="copyright year(s) (default: current year)")
    parser.add_argument("-v", "--verbose", action="store_true", help="print the name of the files that are modified")
    parser.add_argument(
        "--check",
        action="store_true",
        help="check only mode: report files missing a license header and exit non-zero",
    )
    spdx = parser.add_mutually_exclusive_group()
    spdx.add_argument(
        "-s",
        "--spdx",
        dest="spdx",
        action="store_const",
        const=SpdxMode.ON,
        default=SpdxMode.OFF,
        help="append an SPDX identifier to the license header",
    )
    spdx.add_argument(
        "--spdx-only",
        dest="spdx",
        action="store_const",
        const=SpdxMode.ONLY,
        help="write only the copyright line and SPDX identifier",
    )
    parser.add_argument(
        "--ignore",
        action="append",
        default=[],
        metavar="PATTERN",
        help="file patterns to ignore, for example: --ignore '**/*.go' --ignore 'vendor/**'",
    )
    parser.add_argument(
        "--skip",
        action="append",
        default=[],
        metavar="EXT",
        help="[deprecated: see --ignore] file extensions to skip, for example: --skip rb --skip go",
    )
    parser.add_argument("-j", "--jobs", type=int, default=None, help="number of worker threads")
    parser.add_argument("--log-file", default=None, help="also write log records to this file")
    return parser


def _copyright_data(config: RunConfig) -> CopyrightData:
    return CopyrightData(year=config.year, holder=config.holder, spdx_id=normalize_license(config.license))


def _ensure_renders(template, data: CopyrightData) -> None:
    # A template naming an unknown placeholder would otherwise fail on every file.
    try:
        render_header(template, data, "", "", "")
    except TemplateRenderError as exc:
        raise ConfigurationError(str(exc)) from exc


def run(config: RunConfig) -> int:
    template_text = resolve_template(config.license, config.template_file, config.spdx)
    template = compile_template(template_text)
    data = _copyright_data(config)
    _ensure_renders(template, data)
    result = run_pipeline(config, template, data)

    if config.check_only:
        for path in sorted(result.missing):
            print(path)
    if config.verbose:
        logger.info(result.summary())
    return EXIT_OK if result.ok else EXIT_FAILED


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.paths:
        parser.print_help(sys.stderr)
        return EXIT_FAILED

    try:
        config = build_config(args, Settings())
        setup_logging(config.verbose, Path(config.log_file) if config.log_file else None)
        return run(config)
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CONFIG
    except ValidationError as exc:
        print(f"error: invalid settings: {exc}", file=sys.stderr)
        return EXIT_CONFIG


__all__ = ["build_parser", "main", "run"]
