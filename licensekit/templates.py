# Copyright (C) 2025 licensekit Authors
# SPDX-License-Identifier: AGPL-3.0-or-later
"""License template selection and compilation."""

from __future__ import annotations

import enum
from pathlib import Path
from typing import Dict, Optional

import jinja2

from .errors import TemplateFileError, TemplateSyntaxError, UnknownLicenseError

_TEMPLATE_ROOT = Path(__file__).resolve().parent / "licenses"

SPDX_SUFFIX = "\n\nSPDX-License-Identifier: {{ SPDXID }}"


class SpdxMode(str, enum.Enum):
    OFF = "off"
    ON = "on"
    ONLY = "only"


# canonical SPDX id -> bundled template file
BUILTIN_TEMPLATES: Dict[str, str] = {
    "Apache-2.0": "apache.tpl",
    "BSD-3-Clause": "bsd.tpl",
    "MIT": "mit.tpl",
    "MPL-2.0": "mpl.tpl",
}

LEGACY_LICENSE_TYPES: Dict[str, str] = {
    "apache": "Apache-2.0",
    "bsd": "BSD-3-Clause",
    "mit": "MIT",
    "mpl": "MPL-2.0",
}

_BY_LOWER: Dict[str, str] = {
    **{spdx_id.lower(): spdx_id for spdx_id in BUILTIN_TEMPLATES},
    **LEGACY_LICENSE_TYPES,
}

_env = jinja2.Environment(
    autoescape=False,
    keep_trailing_newline=True,
    undefined=jinja2.StrictUndefined,
)


def normalize_license(license_id: str) -> str:
    """Map a license name or alias to its SPDX id; unknown names pass through."""

    return _BY_LOWER.get(license_id.strip().lower(), license_id)


def builtin_template(license_id: str) -> Optional[str]:
    name = BUILTIN_TEMPLATES.get(normalize_license(license_id))
    if name is None:
        return None
    return _read_bundled(name)


def spdx_template() -> str:
    return _read_bundled("spdx.tpl")


def _read_bundled(name: str) -> str:
    return (_TEMPLATE_ROOT / name).read_text(encoding="utf-8").rstrip("\n")


def resolve_template(license_id: str, template_file: str = "", spdx: SpdxMode = SpdxMode.OFF) -> str:
    """Return the template text for this run.

    A custom ``template_file`` wins over ``license_id``. With ``SpdxMode.ONLY``
    the selected body is discarded and only the SPDX stub is returned, so an
    unknown ``license_id`` is accepted in that mode.
    """

    spdx = SpdxMode(spdx)
    text: Optional[str]
    if template_file:
        try:
            text = Path(template_file).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise TemplateFileError(template_file, exc) from exc
    else:
        text = builtin_template(license_id)
        if text is None and spdx is not SpdxMode.ONLY:
            raise UnknownLicenseError(license_id)

    if spdx is SpdxMode.ONLY:
        return spdx_template()
    if spdx is SpdxMode.ON:
        return text.rstrip("\n") + SPDX_SUFFIX
    return text


def compile_template(text: str) -> jinja2.Template:
    try:
        return _env.from_string(text)
    except jinja2.TemplateSyntaxError as exc:
        raise TemplateSyntaxError(f"invalid license template (line {exc.lineno}): {exc.message}") from exc


__all__ = [
    "BUILTIN_TEMPLATES",
    "LEGACY_LICENSE_TYPES",
    "SPDX_SUFFIX",
    "SpdxMode",
    "builtin_template",
    "compile_template",
    "normalize_license",
    "resolve_template",
    "spdx_template",
]
