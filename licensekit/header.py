# Copyright (C) 2025 licensekit Authors
# SPDX-License-Identifier: AGPL-3.0-or-later
"""Render license templates into comment-wrapped headers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, NamedTuple, Optional

import jinja2

from .errors import TemplateRenderError


@dataclass(frozen=True)
class CopyrightData:
    year: str
    holder: str
    spdx_id: str

    def as_context(self) -> Dict[str, str]:
        """Names the license templates refer to."""

        return {"Year": self.year, "Holder": self.holder, "SPDXID": self.spdx_id}


class CommentStyle(NamedTuple):
    top: str
    mid: str
    bottom: str


C_BLOCK = CommentStyle("/*", " * ", " */")
JSDOC_BLOCK = CommentStyle("/**", " * ", " */")
SLASH_LINE = CommentStyle("", "// ", "")
HASH_LINE = CommentStyle("", "# ", "")
LISP_LINE = CommentStyle("", ";; ", "")
ERLANG_LINE = CommentStyle("", "% ", "")
DASH_LINE = CommentStyle("", "-- ", "")
MARKUP_BLOCK = CommentStyle("<!--", " ", "-->")
OCAML_BLOCK = CommentStyle("(**", "   ", "*)")


def _styles(style: CommentStyle, *keys: str) -> Dict[str, CommentStyle]:
    return {key: style for key in keys}


# Keyed by lowercase extension, or by the whole lowercase name when the file
# has no extension (``dockerfile``).
COMMENT_STYLES: Dict[str, CommentStyle] = {
    **_styles(C_BLOCK, ".c", ".h", ".gv", ".java", ".scala", ".kt", ".kts"),
    **_styles(JSDOC_BLOCK, ".js", ".mjs", ".cjs", ".jsx", ".tsx", ".css", ".scss", ".sass", ".tf", ".ts"),
    **_styles(
        SLASH_LINE,
        ".cc", ".cpp", ".cs", ".go", ".hcl", ".hh", ".hpp", ".m", ".mm", ".proto",
        ".rs", ".swift", ".dart", ".groovy", ".v", ".sv", ".php",
    ),
    **_styles(
        HASH_LINE,
        ".py", ".sh", ".yaml", ".yml", ".dockerfile", "dockerfile", ".rb", "gemfile", ".tcl", ".bzl", ".pl",
    ),
    **_styles(LISP_LINE, ".el", ".lisp"),
    **_styles(ERLANG_LINE, ".erl"),
    **_styles(DASH_LINE, ".hs", ".sql", ".sdl"),
    **_styles(MARKUP_BLOCK, ".html", ".xml", ".vue", ".wxi", ".wxl", ".wxs"),
    **_styles(OCAML_BLOCK, ".ml", ".mli", ".mll", ".mly"),
}

# cmake files are recognized by name rather than by extension
NAMED_STYLES: Dict[str, CommentStyle] = {"cmakelists.txt": HASH_LINE}
SUFFIX_STYLES: Dict[str, CommentStyle] = {".cmake": HASH_LINE, ".cmake.in": HASH_LINE}


def file_extension(name: str) -> str:
    """Return the extension of ``name``, or ``name`` itself if it has none."""

    ext = os.path.splitext(name)[1]
    return ext or name


def comment_style(path: str) -> Optional[CommentStyle]:
    base = os.path.basename(path).lower()
    style = COMMENT_STYLES.get(file_extension(base))
    if style is not None:
        return style
    style = NAMED_STYLES.get(base)
    if style is not None:
        return style
    for suffix, candidate in SUFFIX_STYLES.items():
        if base.endswith(suffix):
            return candidate
    return None


def render_header(
    template: jinja2.Template,
    data: CopyrightData,
    top: str,
    mid: str,
    bottom: str,
) -> bytes:
    """Render ``template`` and wrap every line in the given comment markers.

    The result always ends with a blank line separating it from the file body.
    """

    try:
        text = template.render(data.as_context())
    except jinja2.TemplateError as exc:
        raise TemplateRenderError(f"cannot render license template: {exc}") from exc

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()

    out = []
    if top:
        out.append(top)
    for line in lines:
        if line.endswith("\r"):
            line = line[:-1]
        out.append((mid + line).rstrip())
    if bottom:
        out.append(bottom)
    out.append("")
    return ("\n".join(out) + "\n").encode("utf-8")


def license_header(path: str, template: jinja2.Template, data: CopyrightData) -> Optional[bytes]:
    """Return the header for ``path``, or ``None`` for unsupported file types.

    Only the name of ``path`` is used; the file does not need to exist.
    """

    style = comment_style(path)
    if style is None:
        return None
    return render_header(template, data, *style)


__all__ = [
    "COMMENT_STYLES",
    "CommentStyle",
    "CopyrightData",
    "comment_style",
    "file_extension",
    "license_header",
    "render_header",
]
