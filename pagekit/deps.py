"""Shared FastAPI dependencies."""

from collections.abc import Mapping

from fastapi import Depends, Request

from pagekit.core.config import Settings, get_settings
from pagekit.core.pagination import PagingState
from pagekit.services.paginator import PaginatorHelper
from pagekit.services.urls import UrlBuilder


def get_url_builder(request: Request) -> UrlBuilder:
    """Dependency: URL builder for the current path, carrying non-paging query params."""
    return UrlBuilder.from_request(request)


def build_paginator(
    paging: Mapping[str, PagingState],
    url_builder: UrlBuilder,
    settings: Settings | None = None,
) -> PaginatorHelper:
    settings = settings or get_settings()
    return PaginatorHelper(
        paging,
        url_builder=url_builder,
        templates_file=settings.templates_file,
    )


class PaginatorFactory:
    """Dependency: binds helpers to the request's URL builder and configured templates."""

    def __init__(
        self,
        url_builder: UrlBuilder = Depends(get_url_builder),
        settings: Settings = Depends(get_settings),
    ) -> None:
        self.url_builder = url_builder
        self.settings = settings

    def __call__(self, paging: Mapping[str, PagingState]) -> PaginatorHelper:
        return build_paginator(paging, self.url_builder, self.settings)
