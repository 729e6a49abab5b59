import os
import re
from typing import AsyncGenerator, Callable

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from pagekit.core.pagination import PagingState
from pagekit.services.paginator import PaginatorHelper

os.environ.setdefault("ENV", "test")

LINKED_PAGE = re.compile(r'<a href="[^"]*">(\d+)</a>')
CURRENT_PAGE = re.compile(r'class="current[^"]*">(?:<\w+>)?(\d+)<')


def linked_pages(out: str) -> list[int]:
    return [int(n) for n in LINKED_PAGE.findall(out)]


def current_pages(out: str) -> list[int]:
    return [int(n) for n in CURRENT_PAGE.findall(out)]


@pytest.fixture
def make_helper() -> Callable[..., PaginatorHelper]:
    """Helper bound to a single "Article" collection built from keyword paging values."""

    def _make(model: str = "Article", **state) -> PaginatorHelper:
        return PaginatorHelper({model: PagingState(**state)})

    return _make


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    from pagekit.main import app
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
