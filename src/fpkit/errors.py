"""
Exceptions raised by fpkit itself.

Domain failures never travel as exceptions — they live on the failure track
of a Result. The classes below signal *programming* errors: unwrapping the
wrong variant or dispatching on a kind nobody handles.
"""

from __future__ import annotations

from collections.abc import Iterable


class FpkitError(Exception):
    """Base exception for all fpkit errors."""


class UnwrapError(FpkitError, ValueError):
    """value() or error() was called on the variant that does not hold it."""


class NonExhaustiveMatchError(FpkitError, LookupError):
    """
    A kind dispatcher is missing handlers, has unknown ones, or was called
    with a discriminant it does not know.
    """

    def __init__(
        self,
        message: str,
        *,
        missing: Iterable[str] = (),
        unexpected: Iterable[str] = (),
    ) -> None:
        super().__init__(message)
        self.missing = tuple(sorted(missing))
        self.unexpected = tuple(sorted(unexpected))
