# Copyright (C) 2025 licensekit Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from licensekit.header import CopyrightData  # noqa: E402
from licensekit.templates import compile_template  # noqa: E402


@pytest.fixture()
def hys_template():
    return compile_template("{{Holder}}{{Year}}{{SPDXID}}")


@pytest.fixture()
def hys_data():
    return CopyrightData(year="Y", holder="H", spdx_id="S")


@pytest.fixture(autouse=True)
def _isolate_licensekit_logger():
    import logging

    logger = logging.getLogger("licensekit")
    before = list(logger.handlers)
    yield
    for handler in list(logger.handlers):
        if handler not in before:
            logger.removeHandler(handler)
            handler.close()
