"""
Function composition helpers.

    pipe(" hi ", trim, size, at_least_3)        # → False
    is_valid = flow(trim, size, at_least_3)     # reusable str -> bool
    is_valid(" hi ")                            # → False

pipe() applies a value to a chain of functions right away; flow() builds
the chain as a new function. Adjacent functions must agree on types: each
one receives what the previous one returned.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

A = TypeVar("A")
B = TypeVar("B")


def identity(value: A) -> A:
    return value


def constant(value: A) -> Callable[..., A]:
    """A function that ignores its arguments and always returns `value`."""
    return lambda *_args, **_kwargs: value


def pipe(value: Any, *fns: Callable[[Any], Any]) -> Any:
    """
    Pass `value` through `fns` left to right and return the final result.

    pipe(x, f, g, h) == h(g(f(x))); pipe(x) == x.
    """
    return functools.reduce(lambda acc, fn: fn(acc), fns, value)


def flow(first: Callable[..., Any], *rest: Callable[[Any], Any]) -> Callable[..., Any]:
    """
    Compose functions left to right.

    The first function may take any arguments; the others must be unary:

        is_strings_valid = flow(concat, trim, size, at_least_3)
        is_strings_valid(" hi ", "dude ")    # → True
    """

    def composed(*args: Any, **kwargs: Any) -> Any:
        return pipe(first(*args, **kwargs), *rest)

    return composed


def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """
    Compose unary functions right to left: compose(g, f)(x) == g(f(x)).

    compose() with no functions is the identity.
    """
    return lambda value: pipe(value, *reversed(fns))
