"""Absent-value results.

``head`` and ``get`` return ``Some(value)`` when the requested position exists
and ``ABSENT`` when it does not. ``Some(None)`` is a present result, so a list
holding ``None`` stays distinguishable from a miss.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
T_co = TypeVar("T_co", covariant=True)


@dataclass(frozen=True)
class Some(Generic[T_co]):
    """A present value."""

    value: T_co

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@dataclass(frozen=True)
class Absent:
    """The absent marker. There is exactly one instance, ``ABSENT``."""

    _instance: ClassVar[Absent | None] = None

    def __new__(cls) -> Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Absent"


ABSENT = Absent()

Option = Union[Some[T_co], Absent]


def is_present(opt: Option[Any]) -> bool:
    return isinstance(opt, Some)


def map_option(opt: Option[T], f: Callable[[T], U]) -> Option[U]:
    """Apply f to a present value; absence passes through."""
    if isinstance(opt, Some):
        return Some(f(opt.value))
    return ABSENT


def flat_map_option(opt: Option[T], f: Callable[[T], Option[U]]) -> Option[U]:
    """Chain a computation that may itself be absent."""
    if isinstance(opt, Some):
        return f(opt.value)
    return ABSENT


def get_or_else(opt: Option[T], default: U) -> T | U:
    if isinstance(opt, Some):
        return opt.value
    return default


__all__ = [
    "ABSENT",
    "Absent",
    "Option",
    "Some",
    "flat_map_option",
    "get_or_else",
    "is_present",
    "map_option",
]
