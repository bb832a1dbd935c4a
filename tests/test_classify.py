# Copyright (C) 2025 licensekit Authors
# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

import pytest

from licensekit.classify import has_license, is_generated, leading_declaration


@pytest.mark.parametrize(
    "content, expected",
    [
        (b"", False),
        (b"This is my license", False),
        (b"This code is released into the public domain.", False),
        (b"SPDX: MIT", False),
        (b"Copyright 2018", True),
        (b"CoPyRiGhT 2018", True),
        (b"Subject to the terms of the Mozilla Public License", True),
        (b"SPDX-License-Identifier: MIT", True),
        (b"spdx-license-identifier: MIT", True),
    ],
)
def test_has_license(content, expected):
    assert has_license(content) is expected


def test_has_license_only_scans_first_1000_bytes():
    assert has_license(b"x" * 990 + b"Copyright 2020")
    assert not has_license(b"x" * 1000 + b"Copyright 2020")


@pytest.mark.parametrize(
    "content, expected",
    [
        (b"", False),
        (b"Generated", False),
        (b"// Code generated by X; DO NOT EDIT.", True),
        (b"/*\n* Code generated by X; DO NOT EDIT.\n*/\n", True),
        (b"package main\n\n// Code generated by stringer; DO NOT EDIT.\n", True),
        (b"DO NOT EDIT! Replaced on runs of cargo-raze", True),
        (b"// Code generated by X; DO NOT EDIT", False),
    ],
)
def test_is_generated(content, expected):
    assert is_generated(content) is expected


@pytest.mark.parametrize(
    "content, expected",
    [
        (b"#!/bin/bash\ncontent", b"#!/bin/bash\n"),
        (b"<?xml version='1.0'?>\ncontent", b"<?xml version='1.0'?>\n"),
        (b"<!DOCTYPE HTML>\ncontent", b"<!DOCTYPE HTML>\n"),
        (b"# encoding: UTF-8\ncontent", b"# encoding: UTF-8\n"),
        (b"# frozen_string_literal: true\n", b"# frozen_string_literal: true\n"),
        (b"<?php", b"<?php"),
        (b"# syntax: docker/dockerfile:1.3\nFROM x", b"# syntax: docker/dockerfile:1.3\n"),
        (b"content\n#!/bin/bash\n", b""),
        (b"", b""),
    ],
)
def test_leading_declaration(content, expected):
    assert leading_declaration(content) == expected
