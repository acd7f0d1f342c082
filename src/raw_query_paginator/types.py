"""Type aliases and parameter containers."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, TypeAlias, Union

from sqlalchemy.orm import Session as _Session
from sqlalchemy.orm import scoped_session as _ScopedSession

ErrorLogger = Callable[..., None]

# Same session shape as the CRUD helpers: a plain ORM Session or the
# scoped_session wrapper Flask-SQLAlchemy exposes as ``db.session``.
SessionLike = _Session | _ScopedSession[_Session]
SessionProvider = Callable[[], SessionLike]


@dataclass(frozen=True, slots=True)
class NamedParams:
    """Parameters bound by name (``:name`` placeholders)."""

    values: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def as_dict(self) -> dict[str, Any]:
        return dict(self.values)


@dataclass(frozen=True, slots=True)
class PositionalParams:
    """Parameters bound by position (driver-level markers such as ``?``)."""

    values: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))


QueryParams: TypeAlias = Union[NamedParams, PositionalParams]
ParamsInput: TypeAlias = Union[
    QueryParams, Mapping[str, Any], Sequence[Any], None
]


def coerce_params(params: ParamsInput) -> QueryParams:
    """Normalize caller input into one parameter style."""
    if params is None:
        return NamedParams()
    if isinstance(params, (NamedParams, PositionalParams)):
        return params
    if isinstance(params, Mapping):
        return NamedParams(params)
    if isinstance(params, (str, bytes)):
        raise TypeError("query params must be a mapping or a sequence, not a string")
    return PositionalParams(tuple(params))
