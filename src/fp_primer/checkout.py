"""
Checkout — paying from an account, with typed domain failures.

pay() is a fallible step with two failure kinds. checkout() folds the
outcome into a message through Result.match, and the failure branch goes
through an exhaustive kind dispatcher. Adding a third payment error without
a handler makes this module fail at import time.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable

from fpkit import result
from fpkit.dispatch import match_kind
from fpkit.function import pipe
from fpkit.result import Result

from fp_primer.domain.errors import AccountFrozen, NotEnoughBalance, PaymentError
from fp_primer.domain.models import Account, Cart


def pay(amount: float) -> Callable[[Account], Result[PaymentError, Account]]:
    """
    Charge `amount` to an account.

    A frozen account is rejected before its balance is looked at.
    """

    def charge(account: Account) -> Result[PaymentError, Account]:
        if account.frozen:
            return Result.failure(AccountFrozen(message="Cannot pay with a frozen account!"))
        if account.balance < amount:
            return Result.failure(
                NotEnoughBalance(
                    message=f"Cannot pay {amount} with a balance of {account.balance}!",
                )
            )
        return Result.success(replace(account, balance=account.balance - amount))

    return charge


describe_payment_error: Callable[[PaymentError], str] = match_kind(
    PaymentError,
    {
        "AccountFrozen": lambda e: e.message,
        "NotEnoughBalance": lambda e: e.message,
    },
)


def checkout(cart: Cart) -> Callable[[Account], str]:
    """Pay the cart total and describe the outcome."""
    return lambda account: pipe(
        account,
        pay(cart.total),
        result.match(
            describe_payment_error,
            lambda paid: f"Success. Remaining balance {paid.balance}",
        ),
    )
