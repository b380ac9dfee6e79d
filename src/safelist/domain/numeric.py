"""Integer folds over linked lists — division, sums, and averages.

The chain behind ``average``: a NonEmptyList has ``length > 0``, so
``divide`` never sees a zero divisor on that path.  ``weighted_average``
relies on the same argument, using positive weights.

``sum_list`` on an empty list is an error, not ``0``.  Callers must prove
non-emptiness before summing.
"""

from __future__ import annotations

import operator

from safelist.domain.errors import (
    DivisionByZeroError,
    EmptyListSumError,
    PreconditionViolationError,
)
from safelist.domain.lists import Cons, LinkedList, length, map_list, reduce1
from safelist.domain.refined import NonEmptyList, WeightedValue


def divide(x: int, n: int) -> int:
    """Integer quotient ``x // n`` (floors toward negative infinity).

    Raises:
        DivisionByZeroError: *n* is zero.
    """
    if n == 0:
        raise DivisionByZeroError(f"Cannot divide {x} by zero")
    return x // n


def sum_list(xs: LinkedList[int]) -> int:
    """Sum of a non-empty integer list.

    Raises:
        EmptyListSumError: *xs* is empty.
    """
    if not isinstance(xs, Cons):
        raise EmptyListSumError(
            "Cannot sum an empty list",
            hint="Check non-emptiness first, or use average_or_nothing.",
        )
    return reduce1(operator.add, xs)


def average(xs: NonEmptyList[int]) -> int:
    """Integer mean of a non-empty list: ``divide(sum_list(xs), length(xs))``."""
    if not isinstance(xs, Cons):
        raise PreconditionViolationError("average called on an empty list")
    return divide(sum_list(xs), length(xs))


def average_or_nothing(xs: LinkedList[int]) -> int | None:
    """Total wrapper over :func:`average`: ``None`` for an empty list."""
    if not isinstance(xs, Cons):
        return None
    return average(xs)


def weighted_average(wxs: NonEmptyList[WeightedValue]) -> int:
    """``divide(sum of w*x, sum of w)`` over positive weighted pairs."""
    if not isinstance(wxs, Cons):
        raise PreconditionViolationError("weighted_average called on an empty list")
    total = sum_list(map_list(lambda p: p.weight * p.value, wxs))
    weights = sum_list(map_list(lambda p: p.weight, wxs))
    return divide(total, weights)
