"""The immutable singly-linked list type.

A list is either the unique empty list (``EMPTY``) or a ``Node`` holding one
element and the rest of the list. Both variants are frozen dataclasses, so a
node never changes after construction and suffixes can be shared freely.

Every traversal here is iterative: equality, hashing, ``len`` and ``repr``
work on lists far longer than the interpreter's recursion limit.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar, Union

T_co = TypeVar("T_co", covariant=True)


class _ConsList(Generic[T_co]):
    """Behaviour shared by both list variants."""

    def __iter__(self) -> Iterator[T_co]:
        current: _ConsList[T_co] = self
        while isinstance(current, Node):
            yield current.head
            current = current.tail

    def __len__(self) -> int:
        count = 0
        current: _ConsList[T_co] = self
        while isinstance(current, Node):
            count += 1
            current = current.tail
        return count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _ConsList):
            return NotImplemented
        left: _ConsList[Any] = self
        right: _ConsList[Any] = other
        while isinstance(left, Node) and isinstance(right, Node):
            if left is right:
                return True
            if left.head != right.head:
                return False
            left, right = left.tail, right.tail
        # Only equal if both ran out together
        return left is right

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"ConsList({', '.join(repr(item) for item in self)})"


@dataclass(frozen=True, eq=False, repr=False)
class Empty(_ConsList[Any]):
    """The empty list. There is exactly one instance, ``EMPTY``."""

    _instance: ClassVar[Empty | None] = None

    def __new__(cls) -> Empty:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True, eq=False, repr=False)
class Node(_ConsList[T_co]):
    """A list cell: one element followed by the rest of the list.

    Attributes:
        head: The element stored in this cell.
        tail: The remainder of the list, possibly ``EMPTY``.
    """

    head: T_co
    tail: ConsList[T_co]

    def __post_init__(self) -> None:
        if not isinstance(self.tail, _ConsList):
            msg = f"Node tail must be a ConsList, not {type(self.tail).__name__}"
            raise TypeError(msg)

    def __bool__(self) -> bool:
        return True


EMPTY = Empty()

# Public name for "either variant"
ConsList = Union[Empty, Node[T_co]]


def is_cons_list(value: object) -> bool:
    """Return True if value is an ``Empty`` or a ``Node``."""
    return isinstance(value, _ConsList)


def ensure_list(value: object, name: str = "list") -> None:
    """Raise TypeError unless value is a ConsList.

    Args:
        value: The object to check.
        name: Argument name used in the error message.
    """
    if not isinstance(value, _ConsList):
        msg = f"{name} must be a ConsList, not {type(value).__name__}"
        raise TypeError(msg)


__all__ = ["EMPTY", "ConsList", "Empty", "Node", "ensure_list", "is_cons_list"]
