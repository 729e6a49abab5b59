from starlette.requests import Request

from pagekit.services import html
from pagekit.services.urls import UrlBuilder


def _request(path: str, query: bytes) -> Request:
    return Request({
        "type": "http",
        "method": "GET",
        "path": path,
        "root_path": "",
        "query_string": query,
        "headers": [],
    })


def test_build_url_drops_none_values():
    assert UrlBuilder().build_url({"page": 2, "order": None}) == "/?page=2"


def test_build_url_without_params_is_path():
    assert UrlBuilder("/articles").build_url({"page": None}) == "/articles"


def test_build_url_escapes_html_by_default():
    builder = UrlBuilder("/a")
    assert builder.build_url({"page": 2, "limit": 10}) == "/a?page=2&amp;limit=10"
    assert builder.build_url({"page": 2, "limit": 10}, escape_html=False) == "/a?page=2&limit=10"


def test_build_url_merges_query_sub_map():
    builder = UrlBuilder("/a", {"tag": "x"})
    url = builder.build_url({"?": {"q": "shoes"}, "page": 3}, escape_html=False)
    assert url == "/a?tag=x&q=shoes&page=3"


def test_build_url_options_override_carried_query():
    builder = UrlBuilder("/a", {"tag": "x"})
    assert builder.build_url({"tag": "y"}, escape_html=False) == "/a?tag=y"


def test_build_url_repeats_list_values():
    url = UrlBuilder().build_url({"ids": [1, 2]}, escape_html=False)
    assert url == "/?ids=1&ids=2"


def test_from_request_drops_paging_keys():
    request = _request("/articles", b"q=x&page=3&sort=title&direction=asc&order=id&tag=a&tag=b")
    builder = UrlBuilder.from_request(request)
    assert builder.path == "/articles"
    assert builder.query == {"q": "x", "tag": ["a", "b"]}


def test_html_tag_and_attributes():
    assert html.tag("span", 3, {"class": "current"}) == '<span class="current">3</span>'
    assert html.tag("span", "x", {"class": None}) == "<span>x</span>"
    assert html.tag(None, "x") == "x"
    assert html.attributes({"disabled": True, "title": 'a"b'}) == ' disabled title="a&#34;b"'
