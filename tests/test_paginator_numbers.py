"""Page-number ranges and first/last edge links."""

import pytest

from conftest import current_pages, linked_pages
from pagekit.models.options import EdgeOptions, NumbersOptions


# ---------------------------------------------------------------------------
# numbers: full range
# ---------------------------------------------------------------------------


def test_numbers_single_page_renders_nothing(make_helper):
    helper = make_helper(page=1, page_count=1, count=5)
    assert helper.numbers() == ""
    assert helper.numbers({"first": 2, "last": 2, "modulus": 0}) == ""
    assert helper.numbers(True) == ""


def test_numbers_full_range(make_helper):
    helper = make_helper(page=2, page_count=3)
    assert helper.numbers() == (
        '<span><a href="/?limit=20">1</a></span>'
        ' | <span class="current">2</span>'
        ' | <span><a href="/?page=3&amp;limit=20">3</a></span>'
    )


def test_numbers_full_range_with_wrappers(make_helper):
    helper = make_helper(page=1, page_count=3)
    out = helper.numbers({"before": "[", "after": "]", "separator": ", ", "tag": "li"})
    assert out.startswith('[<li class="current">1</li>, <li><a href=')
    assert out.endswith("3</a></li>]")
    assert out.count(", ") == 2


def test_numbers_current_tag_and_class(make_helper):
    helper = make_helper(page=2, page_count=3)
    out = helper.numbers({"class": "page", "currentTag": "a"})
    assert '<span class="current page"><a>2</a></span>' in out
    assert out.startswith('<span class="page"><a href="/?limit=20">1</a></span>')


def test_numbers_without_tag(make_helper):
    helper = make_helper(page=2, page_count=3)
    out = helper.numbers(NumbersOptions(tag=None))
    assert out == '<a href="/?limit=20">1</a> | 2 | <a href="/?page=3&amp;limit=20">3</a>'


def test_numbers_modulus_disabled_lists_every_page(make_helper):
    helper = make_helper(page=15, page_count=30)
    out = helper.numbers({"modulus": 0})
    assert linked_pages(out) == [p for p in range(1, 31) if p != 15]
    assert current_pages(out) == [15]
    assert out.count(" | ") == 29


def test_numbers_page_count_equal_to_modulus_is_not_windowed(make_helper):
    helper = make_helper(page=4, page_count=8)
    assert linked_pages(helper.numbers()) == [1, 2, 3, 5, 6, 7, 8]


# ---------------------------------------------------------------------------
# numbers: windowed
# ---------------------------------------------------------------------------


def test_numbers_window_centered_on_page(make_helper):
    helper = make_helper(page=10, page_count=20)
    out = helper.numbers({"modulus": 4})
    assert linked_pages(out) == [8, 9, 11, 12]
    assert current_pages(out) == [10]


def test_numbers_window_clamped_at_start_extends_right(make_helper):
    helper = make_helper(page=2, page_count=20)
    out = helper.numbers()
    assert linked_pages(out) == [1, 3, 4, 5, 6, 7, 8, 9]
    assert current_pages(out) == [2]


def test_numbers_window_at_last_page(make_helper):
    helper = make_helper(page=20, page_count=20)
    out = helper.numbers()
    assert linked_pages(out) == list(range(12, 20))
    assert out.endswith('<span class="current">20</span>')


def test_numbers_edge_blocks_with_gaps_use_ellipsis(make_helper):
    helper = make_helper(page=10, page_count=20)
    out = helper.numbers({"modulus": 4, "first": 2, "last": 2})
    assert linked_pages(out) == [1, 2, 8, 9, 11, 12, 19, 20]
    assert '2</a></li>...<span><a href="/?page=8' in out
    assert '12</a></span>...<li><a href="/?page=19' in out


def test_numbers_first_block_touching_window_uses_separator(make_helper):
    helper = make_helper(page=6, page_count=20)
    out = helper.numbers({"modulus": 4, "first": 3})
    assert linked_pages(out) == [1, 2, 3, 4, 5, 7, 8]
    assert '3</a></li> | <span><a href="/?page=4' in out
    assert "..." not in out


def test_numbers_first_block_shrinks_to_gap(make_helper):
    helper = make_helper(page=5, page_count=20)
    out = helper.numbers({"modulus": 4, "first": 5})
    # window is 3..7, so only pages 1-2 are left for the first block
    assert linked_pages(out) == [1, 2, 3, 4, 6, 7]
    assert "..." not in out


def test_numbers_last_block_touching_window_uses_separator(make_helper):
    helper = make_helper(page=15, page_count=20)
    out = helper.numbers({"modulus": 4, "last": 3})
    assert linked_pages(out) == [13, 14, 16, 17, 18, 19, 20]
    assert '17</a></span> | <li><a href="/?page=18' in out


def test_numbers_last_block_after_clamped_window(make_helper):
    helper = make_helper(page=2, page_count=20)
    out = helper.numbers({"last": 1})
    assert linked_pages(out) == [1, 3, 4, 5, 6, 7, 8, 9, 20]
    assert '9</a></span>...<li><a href="/?page=20' in out


def test_numbers_labelled_edges_preset(make_helper):
    helper = make_helper(page=10, page_count=20)
    out = helper.numbers(True)
    assert out.startswith('<li class="first"><a rel="first" href="/?limit=20">first</a></li> | ')
    assert out.endswith(' | <li class="last"><a rel="last" href="/?page=20&amp;limit=20">last</a></li>')
    assert current_pages(out) == [10]


def test_numbers_first_true_uses_default_label(make_helper):
    helper = make_helper(page=10, page_count=20)
    out = helper.numbers({"first": True, "last": True})
    assert ">&lt;&lt; first</a>" in out
    assert ">last &gt;&gt;</a>" in out


def test_numbers_carries_url_options(make_helper):
    helper = make_helper(page=2, page_count=3)
    out = helper.numbers({"url": {"q": "x"}})
    assert 'href="/?page=3&amp;limit=20&amp;q=x"' in out


# ---------------------------------------------------------------------------
# first / last
# ---------------------------------------------------------------------------


def test_first_numbered_hidden_before_reaching_count(make_helper):
    assert make_helper(page=2, page_count=10).first(3) == ""


def test_first_numbered_links(make_helper):
    out = make_helper(page=5, page_count=10).first(3)
    assert out == (
        '<li><a href="/?limit=20">1</a></li>'
        ' | <li><a href="/?page=2&amp;limit=20">2</a></li>'
        ' | <li><a href="/?page=3&amp;limit=20">3</a></li>'
    )


def test_first_numbered_custom_separator_and_after(make_helper):
    out = make_helper(page=5, page_count=10).first(2, EdgeOptions(separator=" ", after="~"))
    assert linked_pages(out) == [1, 2]
    assert "</li> <li>" in out
    assert out.endswith("~")


def test_first_label(make_helper):
    assert make_helper(page=1, page_count=10).first() == ""
    assert make_helper(page=3, page_count=10).first() == (
        '<li class="first"><a rel="first" href="/?limit=20">&lt;&lt; first</a></li>'
    )


def test_first_label_without_escaping(make_helper):
    out = make_helper(page=3, page_count=10).first("<i>1</i>", {"escape": False})
    assert "><i>1</i></a>" in out


def test_last_numbered_links_after_ellipsis(make_helper):
    out = make_helper(page=2, page_count=10).last(3)
    assert out.startswith("...<li>")
    assert linked_pages(out) == [8, 9, 10]
    assert out.count(" | ") == 2


def test_last_numbered_hidden_inside_range(make_helper):
    assert make_helper(page=9, page_count=10).last(3) == ""


def test_last_numbered_custom_before(make_helper):
    out = make_helper(page=2, page_count=10).last(2, {"before": " | "})
    assert out.startswith(' | <li><a href="/?page=9')


def test_last_label(make_helper):
    assert make_helper(page=10, page_count=10).last() == ""
    assert make_helper(page=2, page_count=10).last() == (
        '<li class="last"><a rel="last" href="/?page=10&amp;limit=20">last &gt;&gt;</a></li>'
    )


@pytest.mark.parametrize("method", ["first", "last"])
def test_edges_single_page(make_helper, method):
    helper = make_helper(page=1, page_count=1)
    assert getattr(helper, method)() == ""
    assert getattr(helper, method)(1) == ""
