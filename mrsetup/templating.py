"""Thin wrapper around Jinja2 for rendering service descriptors and usage text."""

from __future__ import annotations

from typing import Any, Dict

from jinja2 import BaseLoader, Environment, StrictUndefined

_ENV = Environment(loader=BaseLoader(), trim_blocks=True, lstrip_blocks=True, undefined=StrictUndefined)
_XML_ENV = Environment(
    loader=BaseLoader(),
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=StrictUndefined,
    autoescape=True,
)


def render_template(template: str, context: Dict[str, Any]) -> str:
    tmpl = _ENV.from_string(template)
    return tmpl.render(**context)


def render_xml_template(template: str, context: Dict[str, Any]) -> str:
    """Render with XML escaping applied to every substituted value."""
    tmpl = _XML_ENV.from_string(template)
    return tmpl.render(**context)
