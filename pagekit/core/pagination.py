"""Paging state and page arithmetic."""

import math
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from pagekit.core.exceptions import InvalidPagingStateError

PAGING_KEYS = ("page", "limit", "sort", "direction")


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class PagingState(BaseModel):
    """Read-only paging metadata for one named collection."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    page: int = Field(default=1, ge=1)
    page_count: int = Field(default=0, ge=0, alias="pageCount")
    count: int = Field(default=0, ge=0)
    limit: int = Field(default=20, ge=1)
    current: int = Field(default=0, ge=0)
    sort: str | None = None
    direction: str | None = None
    prev_page: bool = Field(default=False, alias="prevPage")
    next_page: bool = Field(default=False, alias="nextPage")

    @model_validator(mode="before")
    @classmethod
    def _derive_flags(cls, data: Any) -> Any:
        # prev/next flags and the current item count follow from page/page_count/count/limit
        # unless the caller supplied them.
        if not isinstance(data, Mapping):
            return data
        data = dict(data)
        page = _as_int(data.get("page", 1))
        page_count = _as_int(data.get("pageCount", data.get("page_count", 0)))
        count = _as_int(data.get("count", 0))
        limit = _as_int(data.get("limit", 20))
        if page is None or page_count is None:
            return data
        if "prevPage" not in data and "prev_page" not in data:
            data["prev_page"] = page > 1
        if "nextPage" not in data and "next_page" not in data:
            data["next_page"] = page < page_count
        if "current" not in data and count is not None and limit:
            data["current"] = max(0, min(limit, count - (page - 1) * limit))
        return data

    @model_validator(mode="after")
    def _check_page_in_range(self) -> "PagingState":
        if self.page > max(self.page_count, 1):
            raise ValueError(f"page {self.page} is outside 1..{max(self.page_count, 1)}")
        return self

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "PagingState":
        """Validate raw paging values, raising InvalidPagingStateError instead of ValidationError."""
        try:
            return cls.model_validate(params)
        except ValidationError as exc:
            raise InvalidPagingStateError(
                details={"errors": exc.errors(include_url=False, include_context=False, include_input=False)},
            ) from exc

    def merged(self, updates: Mapping[str, Any]) -> "PagingState":
        """Return a new state with ``updates`` applied; derived flags are recomputed unless given."""
        base = self.model_dump(exclude={"prev_page", "next_page", "current"})
        aliases = {f.alias: name for name, f in PagingState.model_fields.items() if f.alias}
        updates = {aliases.get(key, key): value for key, value in updates.items()}
        return PagingState.from_params({**base, **updates})


def page_count_for(count: int, limit: int) -> int:
    """Number of pages needed to show ``count`` items ``limit`` at a time."""
    if count <= 0:
        return 0
    return math.ceil(count / max(1, limit))


def page_to_offset(page: int, limit: int) -> int:
    return (max(1, page) - 1) * limit
