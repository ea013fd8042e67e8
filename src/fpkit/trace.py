"""
Diagnostic sink — look at values without touching them.

trace() logs a label and a value and hands the value back unchanged, so it
can sit anywhere inside a pipe() or a .peek() without affecting the result:

    pipe(
        encoded,
        decode_user,
        tap("decoded user"),
        result.map(lambda user: user.name),
    )

traced() is the decorator form for Result-returning functions: it logs
entry, duration and the SUCCESS/FAILURE state of the outcome.

Output goes through the standard logging module (logger "fpkit.trace");
the application decides how it is rendered.
"""

from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable, ParamSpec, TypeVar

from fpkit.result import Result

A = TypeVar("A")
P = ParamSpec("P")

logger = logging.getLogger("fpkit.trace")


def trace(label: str, value: A, *, level: int = logging.INFO) -> A:
    """Log `label` and `value`, then return `value` as is."""
    logger.log(level, "%s: %r", label, value)
    return value


def tap(label: str, *, level: int = logging.INFO) -> Callable[[A], A]:
    """Pipeable form of trace()."""
    return lambda value: trace(label, value, level=level)


def traced(
    operation: str,
    *,
    level: int = logging.INFO,
) -> Callable[[Callable[P, Result[Any, A]]], Callable[P, Result[Any, A]]]:
    """
    Decorator logging the start, duration and outcome state of a
    Result-returning function.

        @traced("decode_user")
        def decode_user(encoded: str) -> Result[UserError, User]: ...
    """

    def decorator(fn: Callable[P, Result[Any, A]]) -> Callable[P, Result[Any, A]]:
        @functools.wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[Any, A]:
            logger.log(level, "[%s] Starting", operation)
            start = time.monotonic()
            outcome = fn(*args, **kwargs)
            elapsed = time.monotonic() - start
            state = "SUCCESS" if outcome.is_success() else "FAILURE"
            logger.log(level, "[%s] Completed in %.3fs — %s", operation, elapsed, state)
            return outcome

        return wrapper

    return decorator
