"""Pagination view helper.

Renders navigation fragments (prev/next links, sort links, page-number ranges,
first/last links and counters) for the paging state of named collections,
using a mutable set of string templates.

Usage:
    helper = PaginatorHelper({"Article": PagingState(page=2, page_count=5, count=90)})
    helper.prev()
    helper.numbers({"modulus": 4, "first": 1, "last": 1})
    helper.counter("range")
"""

from collections.abc import Mapping
from typing import Any

from pagekit.core.logging import get_logger
from pagekit.core.pagination import PagingState
from pagekit.models.options import (
    CounterOptions,
    EdgeOptions,
    HelperOptions,
    LinkOptions,
    NumbersOptions,
    SortOptions,
    ToggleOptions,
)
from pagekit.services import html, inflector
from pagekit.services.templates import DEFAULT_TEMPLATES, StringTemplate
from pagekit.services.urls import UrlBuilder

log = get_logger(__name__)

CUSTOM_COUNTER_TEMPLATE = "counterCustom"


def _as_state(value: PagingState | Mapping[str, Any]) -> PagingState:
    if isinstance(value, PagingState):
        return value
    return PagingState.from_params(value)


class PaginatorHelper:
    """Pagination links and counters bound to a set of paging states.

    ``paging`` maps collection (model) names to their state; the first key is
    the default collection. Every method reads state fresh on each call.
    """

    def __init__(
        self,
        paging: Mapping[str, PagingState | Mapping[str, Any]] | None = None,
        *,
        url_builder: UrlBuilder | None = None,
        templates: Mapping[str, str] | None = None,
        templates_file: str | None = None,
        options: HelperOptions | Mapping[str, Any] | None = None,
        default_model: str | None = None,
    ) -> None:
        self._paging: dict[str, PagingState] = {name: _as_state(s) for name, s in (paging or {}).items()}
        self._url_builder = url_builder or UrlBuilder()
        self._options = HelperOptions.coerce(options)
        self._default_model = default_model

        self._templater = StringTemplate(DEFAULT_TEMPLATES)
        if templates_file:
            self._templater.load(templates_file)
        if templates:
            self._templater.add(templates)

    # ------------------------------------------------------------------
    # Templates and helper-level options
    # ------------------------------------------------------------------

    def templates(self, templates: str | Mapping[str, str] | None = None) -> str | dict[str, str] | None:
        """Read all templates (None), one template (a name), or add/override templates (a mapping)."""
        if templates is None or isinstance(templates, str):
            return self._templater.get(templates)
        self._templater.add(templates)
        return None

    def options(self, options: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """Merge default link options.

        A ``paging`` entry merges new collection states in; an entry keyed by
        the default model updates that collection's state. Everything else is
        merged into the helper options, dropping empty values.
        """
        options = {**(options or {}), **kwargs}

        paging = options.pop("paging", None)
        if paging:
            for name, state in paging.items():
                self._paging[name] = _as_state(state)

        model = self.default_model()
        if model is not None and options.get(model):
            updates = options.pop(model)
            current = self._paging.get(model)
            self._paging[model] = current.merged(updates) if current else _as_state(updates)
        elif model is not None:
            options.pop(model, None)

        merged = {**self._options.model_dump(), **options}
        self._options = HelperOptions.coerce({k: v for k, v in merged.items() if v})

    # ------------------------------------------------------------------
    # Paging state access
    # ------------------------------------------------------------------

    def default_model(self) -> str | None:
        """The first paged collection, or the model given to the constructor."""
        if self._default_model:
            return self._default_model
        if not self._paging:
            return None
        self._default_model = next(iter(self._paging))
        return self._default_model

    def params(self, model: str | None = None) -> PagingState | None:
        if not model:
            model = self.default_model()
        if model is None or model not in self._paging:
            log.debug("paging_state_missing", model=model)
            return None
        return self._paging[model]

    def param(self, key: str, model: str | None = None) -> Any:
        params = self.params(model)
        if params is None:
            return None
        return getattr(params, key, None)

    def current(self, model: str | None = None) -> int:
        params = self.params(model)
        return params.page if params is not None else 1

    def sort_key(
        self, model: str | None = None, options: PagingState | Mapping[str, Any] | None = None
    ) -> str | None:
        """The key the collection is sorted by, or None."""
        sort = self._read(model, options, "sort")
        return sort or None

    def sort_dir(self, model: str | None = None, options: PagingState | Mapping[str, Any] | None = None) -> str:
        """``"desc"`` when sorted descending, ``"asc"`` otherwise."""
        direction = self._read(model, options, "direction")
        if isinstance(direction, str) and direction.lower() == "desc":
            return "desc"
        return "asc"

    def _read(self, model: str | None, options: PagingState | Mapping[str, Any] | None, key: str) -> Any:
        source: Any = options if options else self.params(model)
        if source is None:
            return None
        if isinstance(source, Mapping):
            return source.get(key)
        return getattr(source, key, None)

    def has_prev(self, model: str | None = None) -> bool:
        return self._has_page(model, "prev")

    def has_next(self, model: str | None = None) -> bool:
        return self._has_page(model, "next")

    def has_page(self, model: str | int | None = None, page: int = 1) -> bool:
        """True if the collection has page number ``page``. An int first argument is taken as the page."""
        if isinstance(model, int) and not isinstance(model, bool):
            page, model = model, None
        params = self.params(model)
        if params is None:
            return False
        return page <= params.page_count

    def _has_page(self, model: str | None, which: str) -> bool:
        params = self.params(model)
        return params is not None and bool(getattr(params, f"{which}_page"))

    # ------------------------------------------------------------------
    # URLs and links
    # ------------------------------------------------------------------

    def url(
        self,
        options: Mapping[str, Any] | None = None,
        as_array: bool = False,
        model: str | None = None,
    ) -> str | dict[str, Any]:
        """Merge ``options`` over the collection's current paging params into a URL.

        Page 1 is dropped from the URL. With ``as_array`` the merged map is
        returned instead of a string.
        """
        paging = self.params(model)
        url: dict[str, Any] = {
            "page": paging.page if paging else None,
            "limit": paging.limit if paging else None,
            "sort": paging.sort if paging else None,
            "direction": paging.direction if paging else None,
        }
        if self._options.url:
            url = {**self._options.url, **url}
        url = {k: v for k, v in url.items() if v}
        url.update(options or {})

        if url.get("page") == 1:
            url["page"] = None
        if as_array:
            return url
        return self._url_builder.build_url(url)

    def link(
        self,
        title: Any,
        url: Mapping[str, Any] | None = None,
        options: LinkOptions | Mapping[str, Any] | None = None,
    ) -> str:
        """An ``<a>`` pointing at ``url`` merged over the current paging params."""
        opts = LinkOptions.coerce(options)
        model = opts.model or self._options.model
        escape = opts.escape
        if "escape" not in opts.model_fields_set and self._options.escape is not None:
            escape = self._options.escape
        href = self.url({**opts.url, **(url or {})}, model=model)
        return html.link(title, href, opts.attrs, escape_title=escape)

    def _toggled_link(self, text: str, enabled: bool, opts: ToggleOptions, step: int, templates: dict[str, str]) -> str:
        template = templates["active"]
        if not enabled:
            disabled = opts.disabled_title
            if disabled is False:
                return ""
            text = text if disabled is None or disabled is True else disabled
            template = templates["disabled"]

        text = html.escape(text) if opts.escape else text
        if not enabled:
            return self._templater.format(template, {"text": text})

        paging = self.params(opts.model)
        url = {**opts.url, "page": paging.page + step}
        return self._templater.format(template, {
            "url": self.url(url, model=opts.model),
            "text": text,
        })

    def prev(self, title: str = "<< Previous", options: ToggleOptions | Mapping[str, Any] | None = None) -> str:
        """A "previous" link, or the disabled rendering on the first page."""
        opts = ToggleOptions.coerce(options)
        if opts.model is None:
            opts = opts.model_copy(update={"model": self.default_model()})
        return self._toggled_link(
            title, self.has_prev(opts.model), opts, -1,
            {"active": "prevActive", "disabled": "prevDisabled"},
        )

    def next(self, title: str = "Next >>", options: ToggleOptions | Mapping[str, Any] | None = None) -> str:
        """A "next" link, or the disabled rendering on the last page."""
        opts = ToggleOptions.coerce(options)
        if opts.model is None:
            opts = opts.model_copy(update={"model": self.default_model()})
        return self._toggled_link(
            title, self.has_next(opts.model), opts, 1,
            {"active": "nextActive", "disabled": "nextDisabled"},
        )

    def sort(
        self,
        key: str,
        title: str | Mapping[str, str] | None = None,
        options: SortOptions | Mapping[str, Any] | None = None,
    ) -> str:
        """A link sorting by ``key``; clicking an active sort link flips its direction.

        ``title`` defaults to a humanized ``key``. A mapping title picks the
        label for the direction the link requests.
        """
        opts = SortOptions.coerce(options)

        if not title:
            title = key.replace(".", " ")
            if title.endswith("_id"):
                title = title[: -len("_id")]
            title = inflector.humanize(title)

        direction = opts.direction or "asc"
        sort_key = self.sort_key(opts.model)
        default_model = self.default_model()
        is_sorted = sort_key is not None and (
            sort_key == key
            or sort_key == f"{default_model}.{key}"
            or key == f"{default_model}.{sort_key}"
        )

        template = "sort"
        if is_sorted:
            direction = "desc" if self.sort_dir(opts.model) == "asc" else "asc"
            template = "sortAsc" if direction == "asc" else "sortDesc"
        if isinstance(title, Mapping):
            title = title.get(direction, key)

        url = {"sort": key, "direction": direction, **opts.url, "order": None}
        return self._templater.format(template, {
            "text": html.escape(title) if opts.escape else title,
            "url": self.url(url, model=opts.model),
        })

    # ------------------------------------------------------------------
    # Counter
    # ------------------------------------------------------------------

    def counter(self, options: CounterOptions | Mapping[str, Any] | str | None = None) -> str:
        """Counter text such as ``"3 of 7"`` or ``"11 - 20 of 25"``.

        ``format`` is ``"pages"`` (default), ``"range"``, or a custom pattern
        using ``{{page}}``, ``{{pages}}``, ``{{current}}``, ``{{count}}``,
        ``{{start}}``, ``{{end}}`` and ``{{model}}``.
        """
        if isinstance(options, str):
            options = {"format": options}
        opts = CounterOptions.coerce(options)
        model = opts.model or self.default_model()

        paging = self.params(model)
        if paging is None:
            return ""
        page_count = paging.page_count or 1
        start = 0
        if paging.count >= 1:
            start = (paging.page - 1) * paging.limit + 1
        end = min(start + paging.limit - 1, paging.count)

        if opts.format in ("range", "pages"):
            template = "counter" + opts.format.capitalize()
        else:
            template = CUSTOM_COUNTER_TEMPLATE
            self._templater.add({template: opts.format})

        return self._templater.format(template, {
            "page": paging.page,
            "pages": page_count,
            "current": paging.current,
            "count": paging.count,
            "start": start,
            "end": end,
            "model": inflector.humanize(inflector.tableize(model or "")).lower(),
        })

    # ------------------------------------------------------------------
    # Page numbers
    # ------------------------------------------------------------------

    def numbers(self, options: NumbersOptions | Mapping[str, Any] | bool | None = None) -> str:
        """Links for a window of page numbers around the current page.

        ``modulus`` bounds how many numbers are shown (falsy shows all).
        ``first``/``last`` add edge blocks: an int gives that many numbered
        links, a string a single labelled link. ``True`` selects the
        separator-wrapped preset with labelled first/last links.
        """
        opts = NumbersOptions.preset() if options is True else NumbersOptions.coerce(options or None)
        model = opts.model or self.default_model()

        params = self.params(model)
        if params is None or params.page_count <= 1:
            return ""

        page, page_count = params.page, params.page_count
        tag, separator, css = opts.tag, opts.separator, opts.class_
        current_class = opts.current_class
        if css:
            current_class = f"{current_class} {css}"
        link_opts = LinkOptions(model=model, url=opts.url, escape=opts.escape)

        def number(i: int) -> str:
            return html.tag(tag, self.link(i, {"page": i}, link_opts), {"class": css})

        def current() -> str:
            if opts.current_tag:
                return html.tag(tag, html.tag(opts.current_tag, page), {"class": current_class})
            return html.tag(tag, page, {"class": current_class})

        out = ""
        modulus = opts.modulus

        if not modulus or page_count <= modulus:
            out += opts.before or ""
            for i in range(1, page_count + 1):
                out += current() if i == page else number(i)
                if i != page_count:
                    out += separator
            out += opts.after or ""
            return out

        half = modulus // 2
        end = min(page + half, page_count)
        start = page - (modulus - (end - page))
        if start <= 1:
            start = 1
            end = page + (modulus - page) + 1

        if opts.first and start > 1:
            out += self._edge_block("first", opts.first, start - 1, model, opts)

        out += opts.before or ""
        for i in range(start, page):
            out += number(i) + separator
        out += current()
        if page != page_count:
            out += separator
        for i in range(page + 1, end):
            out += number(i) + separator
        if end != page:
            out += number(end)
        out += opts.after or ""

        if opts.last and end < page_count:
            out += self._edge_block("last", opts.last, page_count - end, model, opts)

        return out

    def _edge_block(self, side: str, setting: bool | int | str, gap: int, model: str | None, opts: NumbersOptions) -> str:
        """Render the first/last block next to a numbers window ``gap`` pages from the edge.

        Numbered blocks are joined to the window with the ellipsis when pages
        are skipped and with the separator when they touch it.
        """
        edge = EdgeOptions(model=model, escape=opts.escape, separator=opts.separator, ellipsis=opts.ellipsis)
        render = self.first if side == "first" else self.last
        if setting is True:
            return render(options=edge)
        if isinstance(setting, str):
            return render(setting, edge)

        offset = min(setting, gap)
        joiner = opts.ellipsis if offset < gap else opts.separator
        if side == "first":
            return render(offset, edge.model_copy(update={"after": joiner}))
        return render(offset, edge.model_copy(update={"before": joiner}))

    def first(self, first: int | str = "<< first", options: EdgeOptions | Mapping[str, Any] | None = None) -> str:
        """Numbered links to the first ``first`` pages, or one labelled link to page 1.

        The numbered form shows once the current page reaches ``first``; the
        labelled form shows on any page after the first.
        """
        opts = EdgeOptions.coerce(options)
        model = opts.model or self.default_model()
        params = self.params(model)
        if params is None or params.page_count <= 1:
            return ""

        out = ""
        if isinstance(first, int) and not isinstance(first, bool):
            if params.page >= first:
                separator = self._separator(opts)
                out = separator.join(self._number(i, model) for i in range(1, first + 1))
                out += opts.after or ""
        elif isinstance(first, str) and params.page > 1:
            out = self._templater.format("first", {
                "url": self.url({"page": 1}, model=model),
                "text": html.escape(first) if opts.escape else first,
            })
        return out

    def last(self, last: int | str = "last >>", options: EdgeOptions | Mapping[str, Any] | None = None) -> str:
        """Numbered links to the last ``last`` pages (after an ellipsis), or one labelled link to the last page."""
        opts = EdgeOptions.coerce(options)
        model = opts.model or self.default_model()
        params = self.params(model)
        if params is None or params.page_count <= 1:
            return ""

        out = ""
        page_count = params.page_count
        if isinstance(last, int) and not isinstance(last, bool):
            lower = page_count - last + 1
            if params.page <= lower:
                separator = self._separator(opts)
                out = separator.join(self._number(i, model) for i in range(lower, page_count + 1))
                before = opts.before if opts.before is not None else self._ellipsis(opts)
                out = before + out
        elif isinstance(last, str) and params.page < page_count:
            out = self._templater.format("last", {
                "url": self.url({"page": page_count}, model=model),
                "text": html.escape(last) if opts.escape else last,
            })
        return out

    def _number(self, page: int, model: str | None) -> str:
        return self._templater.format("number", {
            "url": self.url({"page": page}, model=model),
            "text": page,
        })

    def _separator(self, opts: EdgeOptions) -> str:
        if opts.separator is not None:
            return opts.separator
        return self._templater.format("separator")

    def _ellipsis(self, opts: EdgeOptions) -> str:
        if opts.ellipsis is not None:
            return opts.ellipsis
        return self._templater.format("ellipsis")
