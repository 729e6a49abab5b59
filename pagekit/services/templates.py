"""String templates with ``{{placeholder}}`` substitution."""

import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import orjson

from pagekit.core.exceptions import TemplateLoadError
from pagekit.core.logging import get_logger

log = get_logger(__name__)

PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")

DEFAULT_TEMPLATES: dict[str, str] = {
    "nextActive": '<li class="next"><a rel="next" href="{{url}}">{{text}}</a></li>',
    "nextDisabled": '<li class="next disabled"><span>{{text}}</span></li>',
    "prevActive": '<li class="prev"><a rel="prev" href="{{url}}">{{text}}</a></li>',
    "prevDisabled": '<li class="prev disabled"><span>{{text}}</span></li>',
    "counterRange": "{{start}} - {{end}} of {{count}}",
    "counterPages": "{{page}} of {{pages}}",
    "first": '<li class="first"><a rel="first" href="{{url}}">{{text}}</a></li>',
    "last": '<li class="last"><a rel="last" href="{{url}}">{{text}}</a></li>',
    "number": '<li><a href="{{url}}">{{text}}</a></li>',
    "ellipsis": "...",
    "separator": " | ",
    "sort": '<a href="{{url}}">{{text}}</a>',
    "sortAsc": '<a class="asc" href="{{url}}">{{text}}</a>',
    "sortDesc": '<a class="desc" href="{{url}}">{{text}}</a>',
}


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    return str(value)


def render_template(pattern: str, values: Mapping[str, Any]) -> str:
    """Replace each ``{{key}}`` with ``values[key]``; unknown keys are left as written.

    Substitution is a single pass, so placeholders inside substituted values
    are never expanded. Nothing is escaped here.
    """

    def _sub(match: re.Match[str]) -> str:
        key = match.group(1)
        if key not in values:
            return match.group(0)
        return _to_text(values[key])

    return PLACEHOLDER.sub(_sub, pattern)


class StringTemplate:
    """Named template registry. ``add`` overwrites same-named entries; nothing is ever removed."""

    def __init__(self, templates: Mapping[str, str] | None = None) -> None:
        self._templates: dict[str, str] = {}
        if templates:
            self.add(templates)

    def get(self, name: str | None = None) -> str | dict[str, str] | None:
        if name is None:
            return dict(self._templates)
        return self._templates.get(name)

    def add(self, templates: Mapping[str, str]) -> None:
        self._templates.update({str(k): str(v) for k, v in templates.items()})

    def load(self, path: str | Path) -> None:
        """Merge templates from a JSON object file (``{"name": "pattern", ...}``)."""
        path = Path(path)
        try:
            data = orjson.loads(path.read_bytes())
        except FileNotFoundError as exc:
            raise TemplateLoadError(f"Template file not found: {path}") from exc
        except orjson.JSONDecodeError as exc:
            raise TemplateLoadError(f"Template file is not valid JSON: {path}", details={"error": str(exc)}) from exc
        if not isinstance(data, dict) or not all(isinstance(v, str) for v in data.values()):
            raise TemplateLoadError(f"Template file must hold an object of strings: {path}")
        self.add(data)
        log.debug("templates_loaded", path=str(path), names=sorted(data))

    def format(self, name: str, values: Mapping[str, Any] | None = None) -> str:
        """Render a registered template; an unknown name renders as ``""``."""
        pattern = self._templates.get(name)
        if pattern is None:
            return ""
        return render_template(pattern, values or {})
