"""Immutable per-instance paginator configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from .errors import ConfigurationError

DEFAULT_ITEMS_PER_PAGE = 10
DEFAULT_PLACEHOLDER = "%"

DEFAULT_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "first": "First",
        "previous": "Previous",
        "next": "Next",
        "last": "Last",
        "page": "Page",
        "current": "Current Page",
    }
)


def merge_labels(
    overrides: Mapping[str, str], base: Mapping[str, str] = DEFAULT_LABELS
) -> Mapping[str, str]:
    """Return ``base`` with ``overrides`` applied, leaving both untouched."""
    unknown = set(overrides) - set(DEFAULT_LABELS)
    if unknown:
        raise ConfigurationError(
            f"Unknown label keys: {', '.join(sorted(unknown))}. "
            f"Expected a subset of: {', '.join(DEFAULT_LABELS)}"
        )
    merged = dict(base)
    merged.update({key: str(value) for key, value in overrides.items()})
    return MappingProxyType(merged)


def check_positive(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f'"{name}" must be an integer, got {value!r}')
    if value < 1:
        raise ConfigurationError(f'"{name}" must be >= 1, got {value}')
    return value


@dataclass(frozen=True, slots=True)
class PaginationConfig:
    """Settings a paginator instance is built with.

    Instances are never mutated; the ``with_*`` helpers return copies so a
    shared default configuration can be reused across requests safely.
    """

    items_per_page: int = DEFAULT_ITEMS_PER_PAGE
    labels: Mapping[str, str] = field(default_factory=lambda: DEFAULT_LABELS)
    placeholder: str = DEFAULT_PLACEHOLDER
    offset_param: str = "raw_skip_num"
    limit_param: str = "raw_limit_num"
    positional_marker: str = "?"

    def __post_init__(self) -> None:
        check_positive("items_per_page", self.items_per_page)
        if not self.placeholder:
            raise ConfigurationError("URI placeholder can't be empty")
        if self.offset_param == self.limit_param:
            raise ConfigurationError("offset and limit parameter names must differ")
        if self.labels is not DEFAULT_LABELS:
            object.__setattr__(self, "labels", merge_labels(self.labels))

    def with_labels(self, overrides: Mapping[str, str]) -> "PaginationConfig":
        return replace(self, labels=merge_labels(overrides, self.labels))

    def with_items_per_page(self, items_per_page: int) -> "PaginationConfig":
        return replace(self, items_per_page=items_per_page)
