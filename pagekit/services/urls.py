"""URL builder used by the paginator to turn option maps into hrefs."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

from fastapi import Request

from pagekit.core.pagination import PAGING_KEYS
from pagekit.services.html import escape

QUERY_KEY = "?"
# Keys the paginator always sets itself, so they are never carried over from the request.
_RESERVED_QUERY_KEYS = frozenset(PAGING_KEYS) | {"order"}


def _flatten(params: Mapping[str, Any]) -> list[tuple[str, Any]]:
    pairs: list[tuple[str, Any]] = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((key, v) for v in value if v is not None)
        elif isinstance(value, bool):
            pairs.append((key, int(value)))
        else:
            pairs.append((key, value))
    return pairs


class UrlBuilder:
    """Builds ``path?query`` strings for one base path.

    ``query`` holds parameters carried on every URL (e.g. filters from the
    current request). Option maps passed to :meth:`build_url` override them.
    """

    def __init__(self, path: str = "/", query: Mapping[str, Any] | None = None) -> None:
        self.path = path or "/"
        self.query = dict(query or {})

    @classmethod
    def from_request(cls, request: Request) -> "UrlBuilder":
        query: dict[str, Any] = {}
        for key in request.query_params.keys():
            if key in _RESERVED_QUERY_KEYS:
                continue
            values = request.query_params.getlist(key)
            query[key] = values if len(values) > 1 else values[0]
        return cls(request.url.path, query)

    def build_url(self, options: Mapping[str, Any], escape_html: bool = True) -> str:
        options = dict(options)
        extra = options.pop(QUERY_KEY, None) or {}
        params = {**self.query, **dict(extra), **options}
        qs = urlencode(_flatten(params), doseq=False)
        url = f"{self.path}?{qs}" if qs else self.path
        return escape(url) if escape_html else url
