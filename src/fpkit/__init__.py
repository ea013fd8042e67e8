"""
fpkit — small functional building blocks for Python.

Explicit, composable error handling: fallible steps return a Result instead
of raising, absent values are an Option instead of None.

    from typing import Literal

    from fpkit import Result, match_kind

    def parse_age(text: str) -> Result[str, int]:
        return Result.try_catch(lambda: int(text), lambda exc: "NotANumber").ensure(
            lambda age: age >= 0, lambda age: "NegativeAge"
        )

    message = parse_age("-3").match(
        on_failure=match_kind(
            Literal["NotANumber", "NegativeAge"],
            {
                "NotANumber": lambda e: "Age must be a number",
                "NegativeAge": lambda e: "Age must be non-negative",
            },
        ),
        on_success=lambda age: f"Age {age}",
    )
"""

from fpkit.assertions import ResultAssertions
from fpkit.dispatch import dispatch_on, kind_of, match_kind
from fpkit.errors import FpkitError, NonExhaustiveMatchError, UnwrapError
from fpkit.function import compose, constant, flow, identity, pipe
from fpkit.option import Empty, Option, Present
from fpkit.result import Failure, Result, Success
from fpkit.trace import tap, trace, traced

__all__ = [
    "Result",
    "Success",
    "Failure",
    "Option",
    "Present",
    "Empty",
    "pipe",
    "flow",
    "compose",
    "identity",
    "constant",
    "match_kind",
    "dispatch_on",
    "kind_of",
    "trace",
    "tap",
    "traced",
    "FpkitError",
    "UnwrapError",
    "NonExhaustiveMatchError",
    "ResultAssertions",
]

__version__ = "0.1.0"
