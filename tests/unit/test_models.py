"""
Unit tests for domain models and error records — value objects.

Verifies frozen dataclass behavior, kind discriminants and computed
properties.
"""

from __future__ import annotations

import pytest

from fpkit.dispatch import declared_kinds

from fp_primer.domain.errors import (
    AccountFrozen,
    Base64DecodeError,
    InvalidUser,
    JsonParseError,
    LoginNameError,
    NotEnoughBalance,
    PaymentError,
    UserDecodeError,
)
from fp_primer.domain.models import Account, Cart, Circle, Email, Item, LoginName, Movie, Shape


class TestModels:
    """Verify model value semantics."""

    def test_frozen_prevents_mutation(self) -> None:
        """
        GIVEN a frozen Account
        WHEN attempting to modify a field
        THEN an AttributeError (FrozenInstanceError) is raised.
        """
        account = Account(balance=10)
        with pytest.raises(AttributeError):
            account.balance = 0  # type: ignore[misc]

    def test_cart_of_sums_item_prices(self) -> None:
        cart = Cart.of(Item(name="a", price=1.5), Item(name="b", price=2))
        assert cart.total == 3.5
        assert len(cart.items) == 2

    def test_empty_cart(self) -> None:
        assert Cart().total == 0

    def test_optional_award_defaults_to_none(self) -> None:
        assert Movie(title="m", release_year=2000, rating_position=5).award is None

    def test_kind_defaults_to_variant_name(self) -> None:
        assert Email(value="a@b.cd").kind == "Email"
        assert Circle(radius=1).kind == "circle"


class TestErrorRecords:
    """Verify error records and the unions they form."""

    def test_exception_is_ignored_by_equality(self) -> None:
        """
        GIVEN two decode errors wrapping different exceptions
        WHEN compared
        THEN they are equal: the kind is what identifies a failure.
        """
        assert Base64DecodeError(error=ValueError("a")) == Base64DecodeError(error=ValueError("b"))
        assert Base64DecodeError(error=ValueError("a")) != JsonParseError(error=ValueError("a"))

    def test_messages(self) -> None:
        assert InvalidUser(obj={"a": 1}).message == "Not a user: {'a': 1}"
        assert JsonParseError(error=ValueError("bad")).message == "Invalid JSON: bad"

    @pytest.mark.parametrize(
        ("union", "kinds"),
        [
            (PaymentError, {"AccountFrozen", "NotEnoughBalance"}),
            (UserDecodeError, {"Base64DecodeError", "JsonParseError", "InvalidUser"}),
            (LoginNameError, {"MalformedEmail", "InvalidPhoneNumber"}),
            (LoginName, {"Email", "PhoneNumber"}),
            (Shape, {"circle", "square"}),
        ],
    )
    def test_union_kinds(self, union: object, kinds: set[str]) -> None:
        assert declared_kinds(union) == kinds

    def test_domain_errors_carry_message(self) -> None:
        assert AccountFrozen(message="x").message == "x"
        assert NotEnoughBalance(message="y").kind == "NotEnoughBalance"
