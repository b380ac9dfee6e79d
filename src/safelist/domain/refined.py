"""Refinement types — non-empty lists and positive weighted pairs.

A refinement is a base type plus a predicate.  Here each predicate is
checked once by a smart constructor; after that the type carries the
invariant and downstream code does not re-check it.

- ``NonEmptyList[T]`` is the ``Cons`` variant.  ``non_empty`` is the
  only checked route from a general ``LinkedList`` to it.
- ``WeightedValue`` holds a strictly positive weight and value,
  validated by pydantic.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, PositiveInt, ValidationError

from safelist.domain.errors import NotPositiveError, PreconditionViolationError
from safelist.domain.lists import Cons, LinkedList

type NonEmptyList[T] = Cons[T]
type Grouped[T] = LinkedList[NonEmptyList[T]]


def non_empty[T](xs: LinkedList[T]) -> NonEmptyList[T]:
    """Narrow *xs* to a non-empty list.

    Raises:
        PreconditionViolationError: *xs* is empty.
    """
    if not isinstance(xs, Cons):
        raise PreconditionViolationError("Expected a non-empty list, got an empty one")
    return xs


def head[T](xs: NonEmptyList[T]) -> T:
    """First element of a non-empty list."""
    if not isinstance(xs, Cons):
        raise PreconditionViolationError("head called on an empty list")
    return xs.head


def tail[T](xs: NonEmptyList[T]) -> LinkedList[T]:
    """Everything after the first element of a non-empty list."""
    if not isinstance(xs, Cons):
        raise PreconditionViolationError("tail called on an empty list")
    return xs.tail


class WeightedValue(BaseModel):
    """A (weight, value) pair where both components are > 0."""

    model_config = ConfigDict(frozen=True, strict=True)

    weight: PositiveInt
    value: PositiveInt


def weighted(weight: Any, value: Any) -> WeightedValue:
    """Validate and build a :class:`WeightedValue`.

    Raises:
        NotPositiveError: either component is not a positive integer.
    """
    try:
        return WeightedValue(weight=weight, value=value)
    except ValidationError as exc:
        fields = sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]})
        raise NotPositiveError(
            f"Weighted pair ({weight!r}, {value!r}) must hold positive integers",
            hint=f"Invalid field(s): {', '.join(fields)}" if fields else None,
        ) from exc
