"""
Numbers — Option basics and sequence folding.

inverse() has no answer for 0, so it returns an Option instead of raising
ZeroDivisionError. The helpers below consume that Option in the usual ways:
fold it into a message, unwrap with a same-typed default, unwrap with a
default of another type, or chain it after another optional step.
"""

from __future__ import annotations

import operator
from collections.abc import Sequence
from typing import Callable

from fpkit import option, seq
from fpkit.function import pipe
from fpkit.option import Option


def inverse(x: float) -> Option[float]:
    return Option.none() if x == 0 else Option.some(1 / x)


def inverse_message(x: float) -> str:
    return pipe(
        x,
        inverse,
        option.match(
            lambda: f"Cannot get the inverse of {x}.",
            lambda ix: f"The inverse of {x} is {ix}",
        ),
    )


def safe_inverse(x: float) -> float:
    """Inverse of x, or 0 when there is none."""
    return pipe(x, inverse, option.get_or_else(lambda: 0))


def safe_inverse_or_label(x: float, label: str = "no inverse") -> float | str:
    return pipe(x, inverse, option.get_or_else_widen(lambda: label))


def inverse_head(numbers: Sequence[float]) -> Option[float]:
    """Inverse of the first number; Empty for no numbers or a leading 0."""
    return pipe(numbers, seq.head, option.chain(inverse))


def is_even(n: int) -> bool:
    return n % 2 == 0


get_even: Callable[[int], Option[int]] = Option.from_predicate(is_even)


def count_sum_max_common(a1: Sequence[int], a2: Sequence[int]) -> int:
    """
    Sum of the pairwise maxima over the common length of both sequences.

        count_sum_max_common([1, 2, 3], [4, 0, 7, 1])   # → 4 + 2 + 7 = 13
    """
    return pipe(
        a1,
        seq.zip_with(a2),
        seq.map(max),
        seq.reduce(0, operator.add),
    )
