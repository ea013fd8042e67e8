"""
Test assertions for Result and Option values.

Expressive assert helpers that produce clear failure messages.

Usage in tests:
    from fpkit import ResultAssertions

    def test_pay_with_enough_balance():
        account = ResultAssertions.assert_success(pay(50)(rich_account))
        assert account.balance == 20

    def test_pay_with_frozen_account():
        ResultAssertions.assert_failure_kind(pay(50)(frozen_account), "AccountFrozen")
"""

from __future__ import annotations

from typing import Any, TypeVar

from fpkit.dispatch import kind_of
from fpkit.option import Option
from fpkit.result import Result

A = TypeVar("A")
E = TypeVar("E")


class ResultAssertions:
    """Expressive test assertions for Result and Option values."""

    @staticmethod
    def assert_success(result: Result[Any, A], message: str = "") -> A:
        """
        Assert the Result is a Success and return the value.

            value = ResultAssertions.assert_success(result)
        """
        context = f" — {message}" if message else ""
        assert result.is_success(), (
            f"Expected Success but got Failure({result.error()!r}){context}"
        )
        return result.value()

    @staticmethod
    def assert_failure(result: Result[E, Any], message: str = "") -> E:
        """
        Assert the Result is a Failure and return the error payload.

            error = ResultAssertions.assert_failure(result)
        """
        context = f" — {message}" if message else ""
        assert result.is_failure(), (
            f"Expected Failure but got Success({result.value()!r}){context}"
        )
        return result.error()

    @staticmethod
    def assert_failure_kind(result: Result[E, Any], expected_kind: str, message: str = "") -> E:
        """Assert the Result is a Failure whose payload has the given discriminant."""
        error = ResultAssertions.assert_failure(result, message)
        actual = kind_of(error)
        context = f" — {message}" if message else ""
        assert actual == expected_kind, (
            f"Expected failure kind {expected_kind!r} but got {actual!r}: {error!r}{context}"
        )
        return error

    @staticmethod
    def assert_success_value(result: Result[Any, A], expected_value: Any) -> None:
        """Assert the Result is a Success with the specific value."""
        value = ResultAssertions.assert_success(result)
        assert value == expected_value, (
            f"Expected success value {expected_value!r} but got {value!r}"
        )

    @staticmethod
    def assert_present(option: Option[A]) -> A:
        """Assert the Option is Present and return the value."""
        assert option.is_present(), "Expected Present but got Empty()"
        return option.value()

    @staticmethod
    def assert_empty(option: Option[Any]) -> None:
        assert option.is_empty(), f"Expected Empty() but got {option!r}"
