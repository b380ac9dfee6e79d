"""Run grouping and stutter elimination."""

from __future__ import annotations

import operator
from collections.abc import Callable

from safelist.domain.lists import Cons, LinkedList, from_iterable, map_list, span
from safelist.domain.refined import Grouped, NonEmptyList, head


def group_equal[T](xs: LinkedList[T], equals: Callable[[T, T], bool]) -> Grouped[T]:
    """Partition *xs* into maximal runs of consecutive equal elements.

    The first element of each run is compared against every later
    element of that run, so *equals* should be an equivalence.  Each
    group is a Cons: it holds at least the element that started the run.

    Examples:
        >>> from safelist.domain.lists import linked
        >>> group_equal(linked(1, 1, 2, 1), lambda a, b: a == b)
        linked(linked(1, 1), linked(2), linked(1))
    """
    groups: list[NonEmptyList[T]] = []
    node = xs
    while isinstance(node, Cons):
        first = node.head
        run, node = span(lambda y: equals(first, y), node.tail)
        groups.append(Cons(first, run))
    return from_iterable(groups)


def eliminate_stutter[T](
    xs: LinkedList[T], equals: Callable[[T, T], bool] = operator.eq
) -> LinkedList[T]:
    """Collapse every run of consecutive equal elements into its first element."""
    return map_list(head, group_equal(xs, equals))
