"""
Pipeable helpers over finite sequences.

    pipe(
        (1, 2, 3),
        seq.zip_with((4, 0, 7, 1)),
        seq.map(lambda pair: max(*pair)),
        seq.reduce(0, lambda acc, v: acc + v),
    )   # → 13

Every helper that builds a new sequence returns a tuple.
"""

from __future__ import annotations

import functools
from collections.abc import Sequence
from typing import Callable, Iterable, TypeVar

from fpkit.option import Option

A = TypeVar("A")
B = TypeVar("B")


def head(items: Sequence[A]) -> Option[A]:
    """First element, or Empty for an empty sequence."""
    if len(items) == 0:
        return Option.none()
    return Option.some(items[0])


def zip_with(other: Iterable[B]) -> Callable[[Iterable[A]], tuple[tuple[A, B], ...]]:
    """Pair elements position by position, stopping at the shorter input."""
    right = tuple(other)
    return lambda items: tuple(zip(items, right))


def map(mapper: Callable[[A], B]) -> Callable[[Iterable[A]], tuple[B, ...]]:
    return lambda items: tuple(mapper(item) for item in items)


def reduce(initial: B, reducer: Callable[[B, A], B]) -> Callable[[Iterable[A]], B]:
    """Left fold starting from `initial`."""
    return lambda items: functools.reduce(reducer, items, initial)
