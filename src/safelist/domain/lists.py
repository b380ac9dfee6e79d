"""Immutable singly-linked list and its structural operations.

A list is either :class:`Empty` or :class:`Cons` (a head plus a shared
tail).  Cells are frozen; operations build new cells and share any
untouched suffix instead of copying it.

Traversals walk the cells in a loop rather than recursing, so list length
is never bounded by the interpreter recursion limit.

INVARIANT: every list is finite and acyclic (a tail is fixed at
construction and must already exist).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from itertools import zip_longest
from typing import Any, overload

from safelist.domain.errors import EmptyListReduceError

_MISSING = object()


class LinkedList[T]:
    """Common behaviour for both list variants.

    Equality, hashing and ``len`` are defined over the element sequence,
    so two lists with the same elements compare equal whether or not
    they share cells.
    """

    __slots__ = ()

    def __iter__(self) -> Iterator[T]:
        node: LinkedList[T] = self
        while isinstance(node, Cons):
            yield node.head
            node = node.tail

    def __len__(self) -> int:
        return length(self)

    def __bool__(self) -> bool:
        return isinstance(self, Cons)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return all(
            a == b for a, b in zip_longest(self, other, fillvalue=_MISSING)
        )

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"linked({', '.join(repr(item) for item in self)})"

    def cons(self, item: T) -> Cons[T]:
        """Prepend *item*, sharing this list as the new tail."""
        return Cons(item, self)


@dataclass(frozen=True, eq=False, repr=False, slots=True)
class Empty(LinkedList[Any]):
    """The list with no elements."""


@dataclass(frozen=True, eq=False, repr=False, slots=True)
class Cons[T](LinkedList[T]):
    """A non-empty list cell."""

    head: T
    tail: LinkedList[T]


EMPTY = Empty()


# --- Construction -----------------------------------------------------------


def from_iterable[T](items: Iterable[T]) -> LinkedList[T]:
    """Build a list holding *items* in iteration order."""
    result: LinkedList[T] = EMPTY
    for item in reversed(list(items)):
        result = Cons(item, result)
    return result


def linked[T](*items: T) -> LinkedList[T]:
    """Build a list from positional arguments.

    Examples:
        >>> linked(1, 2, 3)
        linked(1, 2, 3)
        >>> linked()
        linked()
    """
    return from_iterable(items)


def to_list[T](xs: LinkedList[T]) -> list[T]:
    """Copy the elements of *xs* into a Python list."""
    return list(xs)


# --- Measures ---------------------------------------------------------------


def length(xs: LinkedList[Any]) -> int:
    """Number of elements in *xs*. Always >= 0, and > 0 for any Cons."""
    count = 0
    node = xs
    while isinstance(node, Cons):
        count += 1
        node = node.tail
    return count


def not_empty(xs: LinkedList[Any]) -> bool:
    """True iff *xs* is a Cons, i.e. ``length(xs) > 0``."""
    return isinstance(xs, Cons)


# --- Higher-order operations -------------------------------------------------


@overload
def map_list[T, U](f: Callable[[T], U], xs: Cons[T]) -> Cons[U]: ...


@overload
def map_list[T, U](f: Callable[[T], U], xs: LinkedList[T]) -> LinkedList[U]: ...


def map_list[T, U](f: Callable[[T], U], xs: LinkedList[T]) -> LinkedList[U]:
    """Apply *f* to every element, preserving order and length.

    A Cons maps to a Cons, so non-emptiness survives the mapping.
    """
    return from_iterable(f(item) for item in xs)


def span[T](
    predicate: Callable[[T], bool], xs: LinkedList[T]
) -> tuple[LinkedList[T], LinkedList[T]]:
    """Split *xs* into its longest prefix satisfying *predicate* and the rest.

    The returned suffix is the original tail cell, not a copy.
    """
    prefix: list[T] = []
    node = xs
    while isinstance(node, Cons) and predicate(node.head):
        prefix.append(node.head)
        node = node.tail
    return from_iterable(prefix), node


def fold_right[T, A](combine: Callable[[T, A], A], initial: A, xs: LinkedList[T]) -> A:
    """Total right fold: ``combine(x1, combine(x2, ... combine(xn, initial)))``."""
    acc = initial
    for item in reversed(to_list(xs)):
        acc = combine(item, acc)
    return acc


def reduce1[T](combine: Callable[[T, T], T], xs: LinkedList[T]) -> T:
    """Right fold without a seed: ``combine(x1, combine(x2, ... xn))``.

    Raises:
        EmptyListReduceError: *xs* is empty.
    """
    if not isinstance(xs, Cons):
        raise EmptyListReduceError(
            "reduce1 requires a non-empty list",
            hint="Use fold_right with an explicit initial value for possibly-empty input.",
        )
    items = to_list(xs)
    acc = items[-1]
    for item in reversed(items[:-1]):
        acc = combine(item, acc)
    return acc


def concat[T](xss: Iterable[LinkedList[T]]) -> LinkedList[T]:
    """Flatten a sequence of lists into one, preserving order."""
    return from_iterable(item for xs in xss for item in xs)
