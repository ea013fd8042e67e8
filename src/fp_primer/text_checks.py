"""String checks assembled from small functions with flow() and pipe()."""

from __future__ import annotations

from typing import Callable

from fpkit.function import flow, pipe

MIN_LENGTH = 3


def size(s: str) -> int:
    return len(s)


def at_least_3(n: int) -> bool:
    return n >= MIN_LENGTH


def trim(s: str) -> str:
    return s.strip()


def concat(s1: str, s2: str) -> str:
    return s1 + s2


is_long_enough: Callable[[str], bool] = flow(size, at_least_3)

# trims before measuring: " hi " is too short
is_valid: Callable[[str], bool] = flow(trim, size, at_least_3)

is_strings_valid: Callable[[str, str], bool] = flow(concat, trim, size, at_least_3)


def check_length(text: str) -> bool:
    """Same as is_valid, applied on the spot with pipe()."""
    return pipe(text, trim, size, at_least_3)
