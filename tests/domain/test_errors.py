"""Tests for the contract violation hierarchy."""

from __future__ import annotations

import pytest

from safelist.domain.errors import (
    DivisionByZeroError,
    EmptyListReduceError,
    EmptyListSumError,
    NotPositiveError,
    PreconditionViolationError,
    SafeListError,
)

SUBCLASSES = [
    (DivisionByZeroError, "DIVISION_BY_ZERO"),
    (EmptyListSumError, "EMPTY_LIST_SUM"),
    (EmptyListReduceError, "EMPTY_LIST_REDUCE"),
    (PreconditionViolationError, "PRECONDITION_VIOLATION"),
    (NotPositiveError, "NOT_POSITIVE"),
]


class TestSafeListError:
    @pytest.mark.parametrize(("cls", "code"), SUBCLASSES)
    def test_codes(self, cls: type[SafeListError], code: str) -> None:
        assert issubclass(cls, SafeListError)
        assert cls("boom").code == code

    def test_codes_are_unique(self) -> None:
        codes = [code for _, code in SUBCLASSES]
        assert len(set(codes)) == len(codes)

    def test_message_and_hint(self) -> None:
        err = EmptyListSumError("empty", hint="check first")
        assert str(err) == "empty"
        assert err.message == "empty"
        assert err.hint == "check first"

    def test_hint_defaults_to_none(self) -> None:
        assert DivisionByZeroError("x").hint is None
