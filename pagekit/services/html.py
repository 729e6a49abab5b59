"""Minimal HTML building blocks: escaping, tags and anchors."""

from collections.abc import Mapping
from typing import Any

from markupsafe import escape as _escape


def escape(text: Any) -> str:
    """HTML-escape ``text``; values already marked safe pass through."""
    return str(_escape(text))


def attributes(attrs: Mapping[str, Any] | None) -> str:
    """Render ``attrs`` as ` key="value"` pairs, skipping None/False values."""
    if not attrs:
        return ""
    parts = []
    for key, value in attrs.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {key}")
            continue
        parts.append(f' {key}="{escape(value)}"')
    return "".join(parts)


def tag(name: str | None, content: Any = "", attrs: Mapping[str, Any] | None = None) -> str:
    """Wrap ``content`` in ``<name attrs>...</name>``; no name returns the content as-is."""
    text = "" if content is None else str(content)
    if not name:
        return text
    return f"<{name}{attributes(attrs)}>{text}</{name}>"


def link(title: Any, href: str, attrs: Mapping[str, Any] | None = None, escape_title: bool = True) -> str:
    """``<a href="...">title</a>``. ``href`` must already be HTML-safe."""
    text = escape(title) if escape_title else str(title)
    attrs = {k: v for k, v in (attrs or {}).items() if k != "href"}
    return f'<a href="{href}"{attributes(attrs)}>{text}</a>'
