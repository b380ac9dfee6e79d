"""Exception hierarchy for safelist contract violations.

Every partial list operation signals failure with a subclass of
:class:`SafeListError`.  These are programming errors rather than
transient failures: there is nothing to retry.  The service layer maps
each subclass onto a :class:`~safelist.services.result.ServiceError`
using its ``code``.

Hierarchy
---------
SafeListError
├── DivisionByZeroError
├── EmptyListSumError
├── EmptyListReduceError
├── PreconditionViolationError
└── NotPositiveError
"""

from __future__ import annotations


class SafeListError(Exception):
    """Base exception for all safelist contract violations."""

    code: str = "SAFELIST_ERROR"

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint: str | None = hint
        """Optional guidance shown below the error message."""


# --- Arithmetic ------------------------------------------------------------


class DivisionByZeroError(SafeListError):
    """Raised when ``divide`` receives a zero divisor."""

    code = "DIVISION_BY_ZERO"


# --- Folding ---------------------------------------------------------------


class EmptyListSumError(SafeListError):
    """Raised when summing an empty list (the sum of nothing is undefined)."""

    code = "EMPTY_LIST_SUM"


class EmptyListReduceError(SafeListError):
    """Raised when ``reduce1`` is given an empty list."""

    code = "EMPTY_LIST_REDUCE"


# --- Refinements -----------------------------------------------------------


class PreconditionViolationError(SafeListError):
    """Raised when a non-empty-only operation receives an empty list."""

    code = "PRECONDITION_VIOLATION"


class NotPositiveError(SafeListError):
    """Raised when a weighted pair holds a weight or value that is not > 0."""

    code = "NOT_POSITIVE"
