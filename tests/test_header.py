# Copyright (C) 2025 licensekit Authors
# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

import pytest

from licensekit.header import CopyrightData, comment_style, license_header, render_header
from licensekit.templates import compile_template


@pytest.mark.parametrize(
    "text, data, style, expected",
    [
        ("", CopyrightData("", "", ""), ("", "", ""), "\n"),
        ("{{Holder}}{{Year}}{{SPDXID}}", CopyrightData("Y", "H", "S"), ("", "", ""), "HYS\n\n"),
        ("{{Holder}}{{Year}}{{SPDXID}}", CopyrightData("Y", "H", "S"), ("", "// ", ""), "// HYS\n\n"),
        ("{{Holder}}{{Year}}{{SPDXID}}", CopyrightData("Y", "H", "S"), ("/*", " * ", "*/"), "/*\n * HYS\n*/\n\n"),
        # no HTML escaping
        ("{{Holder}}", CopyrightData("", "A&Z", ""), ("", "", ""), "A&Z\n\n"),
        # blank template lines lose the trailing space of the prefix
        ("a\n\nb\n", CopyrightData("", "", ""), ("", "# ", ""), "# a\n#\n# b\n\n"),
    ],
)
def test_render_header(text, data, style, expected):
    assert render_header(compile_template(text), data, *style) == expected.encode()


def test_render_header_is_deterministic(hys_template, hys_data):
    first = render_header(hys_template, hys_data, "/**", " * ", " */")
    second = render_header(hys_template, hys_data, "/**", " * ", " */")
    assert first == second


@pytest.mark.parametrize(
    "paths, expected",
    [
        (["f.unknown", "README", "f.txt"], None),
        (["f.c", "f.h", "f.gv", "f.java", "f.scala", "f.kt", "f.kts"], "/*\n * HYS\n */\n\n"),
        (["f.js", "f.mjs", "f.cjs", "f.jsx", "f.tsx", "f.css", "f.scss", "f.sass", "f.tf", "f.ts"], "/**\n * HYS\n */\n\n"),
        (
            ["f.cc", "f.cpp", "f.cs", "f.go", "f.hcl", "f.hh", "f.hpp", "f.m", "f.mm", "f.proto",
             "f.rs", "f.swift", "f.dart", "f.groovy", "f.v", "f.sv", "f.php"],
            "// HYS\n\n",
        ),
        (
            ["f.py", "f.sh", "f.yaml", "f.yml", "f.dockerfile", "dockerfile", "f.rb", "gemfile", "f.tcl", "f.bzl", "f.pl"],
            "# HYS\n\n",
        ),
        (["f.el", "f.lisp"], ";; HYS\n\n"),
        (["f.erl"], "% HYS\n\n"),
        (["f.hs", "f.sql", "f.sdl"], "-- HYS\n\n"),
        (["f.html", "f.xml", "f.vue", "f.wxi", "f.wxl", "f.wxs"], "<!--\n HYS\n-->\n\n"),
        (["f.ml", "f.mli", "f.mll", "f.mly"], "(**\n   HYS\n*)\n\n"),
        (["cmakelists.txt", "f.cmake", "f.cmake.in", "src/CMakeLists.txt"], "# HYS\n\n"),
        (["F.PY", "DoCkErFiLe", "dir/sub/Gemfile"], "# HYS\n\n"),
    ],
)
def test_license_header_by_file_type(paths, expected, hys_template, hys_data):
    for path in paths:
        header = license_header(path, hys_template, hys_data)
        if expected is None:
            assert header is None, path
        else:
            assert header == expected.encode(), path


def test_comment_style_ignores_directory_names():
    assert comment_style("project.py/README") is None
    assert comment_style("docs.txt/main.go") is not None
