"""Combinators over ConsList.

Every function here is pure: it never modifies its arguments and returns
either a new list (sharing structure with its inputs where possible) or a
plain value. Traversals are loops or left folds, so call depth stays constant
regardless of list length. The one exception is ``fold_right_recursive``,
kept as a reference formulation of ``fold_right``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any, TypeVar

from funlist.option import ABSENT, Option, Some
from funlist.types import EMPTY, ConsList, Node, ensure_list

A = TypeVar("A")
B = TypeVar("B")
T = TypeVar("T")
U = TypeVar("U")


# =============================================================================
# Construction
# =============================================================================


def cons(head: T, tail: ConsList[T]) -> ConsList[T]:
    """Prepend head to tail in O(1). The tail is shared, not copied."""
    ensure_list(tail, "tail")
    return Node(head, tail)


def from_sequence(items: Iterable[T]) -> ConsList[T]:
    """Build a list holding items in their original order.

    The list is built back to front, so construction is linear.

    Args:
        items: Any iterable. Non-sequences are consumed once.

    Returns:
        A list whose head is the first item.
    """
    if not isinstance(items, Sequence):
        items = list(items)
    result: ConsList[T] = EMPTY
    for item in reversed(items):
        result = Node(item, result)
    return result


def cons_list(*items: T) -> ConsList[T]:
    """Variadic form of from_sequence: ``cons_list(1, 2, 3)``."""
    return from_sequence(items)


def to_list(lst: ConsList[T]) -> list[T]:
    """Copy the elements into a Python list."""
    ensure_list(lst)
    return list(lst)


# =============================================================================
# Reduction
# =============================================================================


def fold_left(lst: ConsList[A], seed: U, combine: Callable[[U, A], U]) -> U:
    """Reduce from the left: ``combine(...combine(combine(seed, e0), e1)..., eN)``."""
    ensure_list(lst)
    acc = seed
    for item in lst:
        acc = combine(acc, item)
    return acc


def fold_right(lst: ConsList[A], seed: U, combine: Callable[[A, U], U]) -> U:
    """Reduce from the right: ``combine(e0, combine(e1, ... combine(eN, seed)))``.

    Runs as a left fold over the reversed list with the combiner's arguments
    swapped, so the stack does not grow with the list.
    """
    return fold_left(reverse(lst), seed, lambda acc, item: combine(item, acc))


def fold_right_recursive(lst: ConsList[A], seed: U, combine: Callable[[A, U], U]) -> U:
    """Direct recursive right fold.

    Same results as ``fold_right``, but uses one stack frame per element and
    raises RecursionError on long lists. Prefer ``fold_right``.
    """
    ensure_list(lst)
    if isinstance(lst, Node):
        return combine(lst.head, fold_right_recursive(lst.tail, seed, combine))
    return seed


def length(lst: ConsList[Any]) -> int:
    return fold_left(lst, 0, lambda count, _: count + 1)


# =============================================================================
# Transformation
# =============================================================================


def _prepend(acc: ConsList[T], item: T) -> ConsList[T]:
    return Node(item, acc)


def reverse(lst: ConsList[T]) -> ConsList[T]:
    return fold_left(lst, EMPTY, _prepend)


def map_list(lst: ConsList[A], f: Callable[[A], U]) -> ConsList[U]:
    """Apply f to every element, keeping order and length."""
    return reverse(fold_left(lst, EMPTY, lambda acc, item: Node(f(item), acc)))


def filter_list(lst: ConsList[T], predicate: Callable[[T], bool]) -> ConsList[T]:
    """Keep the elements for which predicate holds, in order."""
    kept = fold_left(
        lst, EMPTY, lambda acc, item: Node(item, acc) if predicate(item) else acc
    )
    return reverse(kept)


def concat(first: ConsList[T], second: ConsList[T]) -> ConsList[T]:
    """Elements of first followed by elements of second.

    Only first is copied; second becomes the shared tail of the result, and
    ``concat(EMPTY, second)`` is second itself.
    """
    ensure_list(first, "first")
    ensure_list(second, "second")
    return fold_right(first, second, Node)


def flat_map(lst: ConsList[A], f: Callable[[A], ConsList[U]]) -> ConsList[U]:
    """Map each element to a list and concatenate the results in order."""
    # Right fold so each piece is copied once
    return fold_right(map_list(lst, f), EMPTY, concat)


def take(lst: ConsList[T], n: int) -> ConsList[T]:
    """First ``min(n, length)`` elements. Empty when n <= 0."""
    ensure_list(lst)
    taken: ConsList[T] = EMPTY
    remaining = n
    current = lst
    while remaining > 0 and isinstance(current, Node):
        taken = Node(current.head, taken)
        current = current.tail
        remaining -= 1
    return reverse(taken)


def drop(lst: ConsList[T], n: int) -> ConsList[T]:
    """Skip the first ``min(n, length)`` elements.

    No copy is made: the result is a suffix of lst, and lst itself when
    n <= 0.
    """
    ensure_list(lst)
    current = lst
    remaining = n
    while remaining > 0 and isinstance(current, Node):
        current = current.tail
        remaining -= 1
    return current


# =============================================================================
# Access
# =============================================================================


def head(lst: ConsList[T]) -> Option[T]:
    ensure_list(lst)
    if isinstance(lst, Node):
        return Some(lst.head)
    return ABSENT


def tail(lst: ConsList[T]) -> ConsList[T]:
    """Everything after the first element. ``tail(EMPTY)`` is EMPTY."""
    ensure_list(lst)
    if isinstance(lst, Node):
        return lst.tail
    return EMPTY


def get(lst: ConsList[T], index: int) -> Option[T]:
    """Element at zero-based index, or ABSENT outside ``0 <= index < length``."""
    if index < 0:
        ensure_list(lst)
        return ABSENT
    return head(drop(lst, index))


def contains(lst: ConsList[Any], element: object) -> bool:
    ensure_list(lst)
    for item in lst:
        if item == element:
            return True
    return False


# =============================================================================
# Combining
# =============================================================================


def zip_with(
    first: ConsList[A], second: ConsList[B], combine: Callable[[A, B], U]
) -> ConsList[U]:
    """Pairwise combination, truncated to the shorter list."""
    ensure_list(first, "first")
    ensure_list(second, "second")
    zipped: ConsList[U] = EMPTY
    for left, right in zip(first, second):
        zipped = Node(combine(left, right), zipped)
    return reverse(zipped)


__all__ = [
    "concat",
    "cons",
    "cons_list",
    "contains",
    "drop",
    "filter_list",
    "flat_map",
    "fold_left",
    "fold_right",
    "fold_right_recursive",
    "from_sequence",
    "get",
    "head",
    "length",
    "map_list",
    "reverse",
    "tail",
    "take",
    "to_list",
    "zip_with",
]
