"""Typed option structs for the paginator helper.

Each public helper method takes one of these. Plain mappings are accepted too
and validated into the struct, so a misspelt key raises instead of being
silently ignored.
"""

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field

O = TypeVar("O", bound="BaseOptions")


class BaseOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    @classmethod
    def coerce(cls: type[O], value: "O | Mapping[str, Any] | None", **overrides: Any) -> O:
        """Build options from an instance, a mapping or None, then apply ``overrides``."""
        if value is None:
            opts = cls()
        elif isinstance(value, cls):
            opts = value
        else:
            opts = cls.model_validate(dict(value))
        if overrides:
            opts = opts.model_copy(update=overrides)
        return opts


class HelperOptions(BaseOptions):
    """Defaults applied to every link the helper builds."""

    url: dict[str, Any] = Field(default_factory=dict)
    model: str | None = None
    escape: bool | None = None


class ToggleOptions(BaseOptions):
    model: str | None = None
    url: dict[str, Any] = Field(default_factory=dict)
    # None: reuse the active title. False: render nothing when disabled.
    disabled_title: str | bool | None = Field(default=None, alias="disabledTitle")
    escape: bool = True


class SortOptions(BaseOptions):
    model: str | None = None
    url: dict[str, Any] = Field(default_factory=dict)
    direction: str | None = None
    escape: bool = True


class LinkOptions(BaseOptions):
    model: str | None = None
    url: dict[str, Any] = Field(default_factory=dict)
    escape: bool = True
    attrs: dict[str, Any] = Field(default_factory=dict)


class CounterOptions(BaseOptions):
    model: str | None = None
    format: str = "pages"


class EdgeOptions(BaseOptions):
    model: str | None = None
    escape: bool = True
    separator: str | None = None
    ellipsis: str | None = None
    before: str | None = None
    after: str | None = None


class NumbersOptions(BaseOptions):
    model: str | None = None
    url: dict[str, Any] = Field(default_factory=dict)
    escape: bool = True
    tag: str | None = "span"
    before: str | None = None
    after: str | None = None
    class_: str | None = Field(default=None, alias="class")
    modulus: int | None = 8
    separator: str = " | "
    first: bool | int | str | None = None
    last: bool | int | str | None = None
    ellipsis: str = "..."
    current_class: str = Field(default="current", alias="currentClass")
    current_tag: str | None = Field(default=None, alias="currentTag")

    @classmethod
    def preset(cls) -> "NumbersOptions":
        """Separators around the range plus labelled first/last links."""
        return cls(before=" | ", after=" | ", first="first", last="last")
