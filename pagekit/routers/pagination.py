from fastapi import APIRouter, Depends, Query

from pagekit.core.config import Settings, get_settings
from pagekit.core.logging import get_logger
from pagekit.core.pagination import PagingState, page_count_for, page_to_offset
from pagekit.deps import PaginatorFactory
from pagekit.models.options import NumbersOptions
from pagekit.services.templates import DEFAULT_TEMPLATES

router = APIRouter()
log = get_logger(__name__)


@router.get("/render")
async def pagination_render(
    page: int = Query(1, ge=1),
    count: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=1),
    sort: str | None = None,
    direction: str | None = Query(None, pattern="(?i)^(asc|desc)$"),
    model: str = Query("Item", min_length=1),
    modulus: int | None = Query(None, ge=0),
    format: str = Query("pages", min_length=1),
    first: int = Query(0, ge=0),
    last: int = Query(0, ge=0),
    settings: Settings = Depends(get_settings),
    paginator_for: PaginatorFactory = Depends(),
):
    """Render pagination fragments for a collection described by query params."""
    limit = max(1, min(limit or settings.default_limit, settings.max_limit))
    offset = page_to_offset(page, limit)
    state = PagingState.from_params({
        "page": page,
        "page_count": page_count_for(count, limit),
        "count": count,
        "limit": limit,
        "sort": sort,
        "direction": direction,
    })
    helper = paginator_for({model: state})
    numbers = helper.numbers(NumbersOptions(
        modulus=settings.default_modulus if modulus is None else modulus,
        first=first or None,
        last=last or None,
    ))
    log.info("pagination_rendered", model=model, page=state.page, page_count=state.page_count, offset=offset)
    return {
        "paging": state.model_dump(),
        "offset": offset,
        "prev": helper.prev(),
        "next": helper.next(),
        "numbers": numbers,
        "first": helper.first(),
        "last": helper.last(),
        "counter": helper.counter(format),
    }


@router.get("/templates")
async def pagination_templates():
    """Default template set used by the paginator helper."""
    return {"templates": DEFAULT_TEMPLATES}
