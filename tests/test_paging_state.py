import pytest
from pydantic import ValidationError

from pagekit.core.exceptions import InvalidPagingStateError
from pagekit.core.pagination import PagingState, page_count_for, page_to_offset


def test_flags_derived_from_page_and_page_count():
    state = PagingState(page=2, page_count=3, count=50, limit=20)
    assert state.prev_page is True
    assert state.next_page is True
    assert state.current == 20


def test_last_page_has_no_next_and_partial_current():
    state = PagingState(page=3, page_count=3, count=50, limit=20)
    assert state.next_page is False
    assert state.current == 10


def test_explicit_flags_win():
    state = PagingState.model_validate({"page": 1, "pageCount": 2, "prevPage": True, "nextPage": False})
    assert state.page_count == 2
    assert state.prev_page is True
    assert state.next_page is False


def test_state_is_frozen():
    state = PagingState(page=1, page_count=1)
    with pytest.raises(ValidationError):
        state.page = 2


def test_page_out_of_range_rejected():
    with pytest.raises(ValidationError):
        PagingState(page=4, page_count=3)


def test_empty_collection_allows_page_one():
    state = PagingState(page=1, page_count=0, count=0)
    assert state.current == 0
    assert state.next_page is False


@pytest.mark.parametrize(
    "params",
    [
        {"page": -1, "page_count": 3},
        {"page": "abc", "page_count": 3},
        {"page": 1, "page_count": 3, "limit": 0},
        {"page": 9, "page_count": 3},
    ],
)
def test_from_params_raises_typed_error(params):
    with pytest.raises(InvalidPagingStateError) as exc_info:
        PagingState.from_params(params)
    assert exc_info.value.code == "INVALID_PAGING_STATE"
    assert exc_info.value.status_code == 400
    assert exc_info.value.details["errors"]


def test_merged_recomputes_flags():
    state = PagingState(page=1, page_count=4, count=80, limit=20)
    moved = state.merged({"page": 4})
    assert moved.page == 4
    assert moved.prev_page is True
    assert moved.next_page is False
    assert state.page == 1


def test_page_count_for():
    assert page_count_for(0, 10) == 0
    assert page_count_for(25, 10) == 3
    assert page_count_for(30, 10) == 3


def test_page_to_offset():
    assert page_to_offset(1, 20) == 0
    assert page_to_offset(3, 20) == 40


def test_merged_accepts_alias_keys_and_recomputes_flags():
    state = PagingState(page=2, page_count=2, count=40)
    assert state.next_page is False
    updated = state.merged({"pageCount": 5})
    assert updated.page_count == 5
    assert updated.next_page is True
    assert updated.prev_page is True


def test_merged_alias_and_field_name_agree():
    state = PagingState(page=1, page_count=1, count=10)
    assert state.merged({"pageCount": 3}) == state.merged({"page_count": 3})
