"""ListService — runs the safe list operations for outside callers.

Inputs arrive as plain Python values (ints from the CLI, raw text for
grouping).  Each method builds a linked list, narrows it through the
smart constructors where an operation needs non-empty input, and
returns a ServiceResult.  Contract violations become ``ok=False``
results carrying the violation's error code.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

import structlog

from safelist.config.models import GroupingConfig, WeightedConfig
from safelist.domain import numeric
from safelist.domain.errors import SafeListError
from safelist.domain.grouping import eliminate_stutter, group_equal
from safelist.domain.lists import from_iterable, length, not_empty, to_list
from safelist.domain.refined import non_empty, weighted
from safelist.services.result import ServiceError, ServiceResult
from safelist.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from safelist.config.settings import SafeListSettings

logger = structlog.get_logger(__name__)


def _casefold_equal(a: str, b: str) -> bool:
    return a.casefold() == b.casefold()


class ListService:
    """Integer folds, averages, and run grouping over linked lists."""

    def __init__(self, settings: SafeListSettings | None = None) -> None:
        self._grouping = settings.grouping if settings else GroupingConfig()
        self._weighted = settings.weighted if settings else WeightedConfig()

    # ------------------------------------------------------------------
    # Numeric operations
    # ------------------------------------------------------------------

    @traced
    def length(self, values: Sequence[int]) -> ServiceResult:
        xs = from_iterable(values)
        return ServiceResult(
            ok=True,
            op="length",
            data={"length": length(xs), "not_empty": not_empty(xs)},
        )

    @traced
    def total(self, values: Sequence[int]) -> ServiceResult:
        """Sum *values*; an empty input is an EMPTY_LIST_SUM error."""
        xs = from_iterable(values)
        return self._guarded("sum", lambda: {"sum": numeric.sum_list(xs), "length": length(xs)})

    @traced
    def average(self, values: Sequence[int]) -> ServiceResult:
        """Integer mean of *values*, which must be non-empty."""

        def compute() -> dict[str, Any]:
            with trace_span("non_empty") as span:
                xs = non_empty(from_iterable(values))
                if span is not None:
                    span.annotate("length", length(xs))
            return {
                "average": numeric.average(xs),
                "sum": numeric.sum_list(xs),
                "length": length(xs),
            }

        return self._guarded("average", compute)

    @traced
    def average_or_nothing(self, values: Sequence[int]) -> ServiceResult:
        """Integer mean of *values*, or ``None`` (with a warning) when empty."""
        result = numeric.average_or_nothing(from_iterable(values))
        warnings: list[str] = []
        if result is None:
            warnings.append("Empty input: no average")
        return ServiceResult(
            ok=True,
            op="average_or_nothing",
            data={"average": result},
            warnings=warnings,
        )

    @traced
    def weighted_average(self, pairs: Sequence[str]) -> ServiceResult:
        """Weighted mean of ``"W:V"`` pairs (separator from ``[weighted]``)."""
        op = "weighted_average"
        sep = self._weighted.pair_separator
        parsed: list[tuple[int, int]] = []
        for raw in pairs:
            weight, found, value = raw.partition(sep)
            try:
                if not found:
                    raise ValueError(raw)
                parsed.append((int(weight), int(value)))
            except ValueError:
                return ServiceResult.failure(
                    op,
                    "INVALID_INPUT",
                    f"Expected WEIGHT{sep}VALUE with integer parts, got {raw!r}",
                    pair=raw,
                )

        def compute() -> dict[str, Any]:
            wxs = non_empty(from_iterable(weighted(w, v) for w, v in parsed))
            return {
                "weighted_average": numeric.weighted_average(wxs),
                "total_weight": sum(w for w, _ in parsed),
                "pairs": len(parsed),
            }

        return self._guarded(op, compute)

    # ------------------------------------------------------------------
    # Grouping operations
    # ------------------------------------------------------------------

    @traced
    def group(
        self,
        text: str,
        *,
        ignore_case: bool | None = None,
        split_words: bool | None = None,
    ) -> ServiceResult:
        """Split *text* into maximal runs of equal characters (or words)."""
        tokens, equals, joiner = self._tokenize(text, ignore_case, split_words)
        groups = group_equal(from_iterable(tokens), equals)
        rendered = [joiner.join(g) for g in groups]
        logger.debug("list.grouped", tokens=len(tokens), groups=len(rendered))
        return ServiceResult(
            ok=True,
            op="group",
            data={"groups": rendered, "count": len(rendered)},
        )

    @traced
    def stutter(
        self,
        text: str,
        *,
        ignore_case: bool | None = None,
        split_words: bool | None = None,
    ) -> ServiceResult:
        """Collapse runs of repeated characters (or words) in *text*."""
        tokens, equals, joiner = self._tokenize(text, ignore_case, split_words)
        kept = to_list(eliminate_stutter(from_iterable(tokens), equals))
        logger.debug("list.destuttered", tokens=len(tokens), kept=len(kept))
        return ServiceResult(
            ok=True,
            op="stutter",
            data={"result": joiner.join(kept), "removed": len(tokens) - len(kept)},
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _tokenize(
        self,
        text: str,
        ignore_case: bool | None,
        split_words: bool | None,
    ) -> tuple[list[str], Callable[[str, str], bool], str]:
        if ignore_case is None:
            ignore_case = self._grouping.ignore_case
        if split_words is None:
            split_words = self._grouping.split_words
        tokens = text.split() if split_words else list(text)
        equals = _casefold_equal if ignore_case else operator.eq
        return tokens, equals, " " if split_words else ""

    @staticmethod
    def _guarded(op: str, compute: Callable[[], dict[str, Any]]) -> ServiceResult:
        """Run *compute*, turning a SafeListError into a failed result."""
        try:
            data = compute()
        except SafeListError as exc:
            logger.debug("contract.violated", op=op, code=exc.code)
            return ServiceResult(ok=False, op=op, error=ServiceError.from_exception(exc))
        return ServiceResult(ok=True, op=op, data=data)
