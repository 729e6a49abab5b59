from pagekit.models.options import (
    CounterOptions,
    EdgeOptions,
    HelperOptions,
    LinkOptions,
    NumbersOptions,
    SortOptions,
    ToggleOptions,
)

__all__ = [
    "CounterOptions",
    "EdgeOptions",
    "HelperOptions",
    "LinkOptions",
    "NumbersOptions",
    "SortOptions",
    "ToggleOptions",
]
