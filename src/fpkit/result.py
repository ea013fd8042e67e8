"""
Result — a disjoint success/failure container.

A Result[E, A] is either Success(value: A) or Failure(error: E). Fallible
steps return a Result instead of raising, and chaining them with
.flat_map() stops at the first failure, carrying that failure's payload
untouched to the end of the chain.

    ┌───────────┐   flat_map    ┌───────────┐   flat_map    ┌──────────┐
    │  decode   │──Success──────│   parse   │──Success──────│ validate │──→ Result[E, A]
    │           │               │           │               │          │
    └─────┬─────┘               └─────┬─────┘               └─────┬────┘
          │ Failure(E1)               │ Failure(E2)               │ Failure(E3)
          └───────────────────────────┴───────────────────────────┴──→ Result[E1 | E2 | E3, A]

Each step may fail with a different error type. The error type of the chain
widens to the union of all of them, and match() (or fpkit.dispatch) is where
the caller finally handles every kind.

Every operator exists twice:
  - as a method, for fluent chains:     r.map(f).flat_map(g)
  - as a curried module function, for pipe():
        pipe(r, result.map(f), result.flat_map(g))
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Generic,
    Iterable,
    ParamSpec,
    TypeGuard,
    TypeVar,
    overload,
)

from fpkit.errors import UnwrapError

if TYPE_CHECKING:
    from fpkit.option import Option

E = TypeVar("E")
E2 = TypeVar("E2")
A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")
P = ParamSpec("P")


class Result(Generic[E, A]):
    """
    Disjoint success/failure container.

    Two possible states:
      - Success(value: A) — the happy path
      - Failure(error: E) — the error track

    Transformations short-circuit on failure; recovery operators
    short-circuit on success.

        >>> Result.success(21).map(lambda x: x * 2)
        Success(42)

        >>> Result.failure("boom").map(lambda x: x * 2)
        Failure('boom')
    """

    # ──────────────────────── Introspection ────────────────────────

    def is_success(self) -> bool:
        """Check if this Result is a Success."""
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        """Check if this Result is a Failure."""
        return isinstance(self, Failure)

    def value(self) -> A:
        """
        Extract the success value. Raises UnwrapError on a Failure.

        Prefer .match() or match/case for safe access.
        """
        match self:
            case Success(v):
                return v
            case Failure(err):
                raise UnwrapError(f"Cannot get value from a Failure: {err!r}")
        raise TypeError("unreachable")  # pragma: no cover

    def error(self) -> E:
        """
        Extract the failure payload. Raises UnwrapError on a Success.

        Prefer .match() or match/case for safe access.
        """
        match self:
            case Failure(err):
                return err
            case Success(v):
                raise UnwrapError(f"Cannot get error from a Success: {v!r}")
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Destructor ────────────────────────

    def match(self, on_failure: Callable[[E], R], on_success: Callable[[A], R]) -> R:
        """
        Fold both branches into a common result type R.

        This is the one place where both tracks are inspected; presentation
        code should go through here instead of checking the tag.

            result.match(
                on_failure=lambda err: f"Error: {err.message}",
                on_success=lambda account: f"Remaining {account.balance}",
            )
        """
        match self:
            case Success(v):
                return on_success(v)
            case Failure(err):
                return on_failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Core Transformations ────────────────────────

    def map(self, mapper: Callable[[A], B]) -> Result[E, B]:
        """
        Transform the success value. Short-circuits on failure.

            Result.success(5).map(lambda x: x * 2)    # → Success(10)
            Result.failure(e).map(lambda x: x * 2)    # → Failure(e), mapper never called
        """
        match self:
            case Success(v):
                return Success(mapper(v))
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def map_error(self, mapper: Callable[[E], E2]) -> Result[E2, A]:
        """
        Transform the failure payload. Passes success through unchanged.

            result.map_error(lambda exc: JsonStringifyError(exc))
        """
        match self:
            case Success(v):
                return Success(v)
            case Failure(err):
                return Failure(mapper(err))
        raise TypeError("unreachable")  # pragma: no cover

    def bimap(self, on_failure: Callable[[E], E2], on_success: Callable[[A], B]) -> Result[E2, B]:
        """Transform whichever payload is present."""
        return self.map_error(on_failure).map(on_success)

    def flat_map(self, mapper: Callable[[A], Result[E2, B]]) -> Result[E | E2, B]:
        """
        Chain a Result-returning function. Short-circuits on failure.

        This is the operator that sequences dependent fallible steps. The
        error type widens to the union of the receiver's and the mapper's.

            def parse(text: str) -> Result[JsonParseError, object]: ...

            Result.success('{"id": 1}').flat_map(parse)   # → Success({'id': 1})
            Result.failure(decode_err).flat_map(parse)    # → Failure(decode_err), parse never called
        """
        match self:
            case Success(v):
                return mapper(v)
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def ensure(
        self,
        predicate: Callable[[A], bool],
        on_false: Callable[[A], E2],
    ) -> Result[E | E2, A]:
        """
        Keep a success only while it satisfies a condition.
        Short-circuits on existing failure.

            Result.success(order).ensure(
                lambda o: o.total > 0,
                lambda o: NonPositiveTotal(o.total),
            )
        """
        return self.flat_map(
            lambda v: Success(v) if predicate(v) else Failure(on_false(v))
        )

    # ──────────────────────── Side Effects ────────────────────────

    def peek(self, action: Callable[[A], Any]) -> Result[E, A]:
        """
        Run a side effect on the success value and return self unchanged.

        Whatever the action returns is discarded.

            result.peek(lambda user: trace("decoded", user))
        """
        match self:
            case Success(v):
                action(v)
        return self

    def peek_failure(self, action: Callable[[E], Any]) -> Result[E, A]:
        """Run a side effect on the failure payload and return self unchanged."""
        match self:
            case Failure(err):
                action(err)
        return self

    # ──────────────────────── Recovery ────────────────────────

    def or_else(self, fallback: Callable[[E], Result[E2, B]]) -> Result[E2, A | B]:
        """
        Recover from a failure with a computation seeded by the error.
        Passes success through unchanged; fallback is never called then.

        The fallback decides from the error whether to retry or to keep
        failing:

            validate_email(name).or_else(
                lambda e: validate_phone(name) if e == "NotAnEmail" else Result.failure(e)
            )
        """
        match self:
            case Success(v):
                return Success(v)
            case Failure(err):
                return fallback(err)
        raise TypeError("unreachable")  # pragma: no cover

    def alt(self, fallback: Callable[[], Result[E2, B]]) -> Result[E2, A | B]:
        """
        Discard a failure and try an independent computation instead.
        Passes success through unchanged; fallback is never called then.

            award_highlight(movie).alt(lambda: top10_highlight(movie))
        """
        match self:
            case Success(v):
                return Success(v)
            case Failure(_):
                return fallback()
        raise TypeError("unreachable")  # pragma: no cover

    def get_or_else(self, default: Callable[[], A]) -> A:
        """
        Unwrap the success value, or compute a default of the same type.

        The default must have the success type. Use get_or_else_widen()
        when the default is of a different type, and get_or_else_get()
        when it depends on the error.
        """
        match self:
            case Success(v):
                return v
            case Failure(_):
                return default()
        raise TypeError("unreachable")  # pragma: no cover

    def get_or_else_widen(self, default: Callable[[], B]) -> A | B:
        """Like get_or_else(), but the default may be of another type."""
        match self:
            case Success(v):
                return v
            case Failure(_):
                return default()
        raise TypeError("unreachable")  # pragma: no cover

    def get_or_else_get(self, fallback: Callable[[E], A]) -> A:
        """Unwrap the success value, or compute a default from the error."""
        match self:
            case Success(v):
                return v
            case Failure(err):
                return fallback(err)
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Conversion ────────────────────────

    def to_option(self) -> Option[A]:
        """Forget the error: Success(a) → Present(a), Failure → Empty."""
        from fpkit.option import Option

        match self:
            case Success(v):
                return Option.some(v)
            case Failure(_):
                return Option.none()
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def success(value: B) -> Result[Any, B]:
        """Create a successful Result. Any value, None included, is accepted."""
        return Success(value)

    @staticmethod
    def failure(error: E2) -> Result[E2, Any]:
        """Create a failed Result carrying the given error payload."""
        return Failure(error)

    @overload
    @staticmethod
    def from_predicate(
        predicate: Callable[[A], TypeGuard[B]],
        on_false: Callable[[A], E2],
    ) -> Callable[[A], Result[E2, B]]: ...

    @overload
    @staticmethod
    def from_predicate(
        predicate: Callable[[A], bool],
        on_false: Callable[[A], E2],
    ) -> Callable[[A], Result[E2, A]]: ...

    @staticmethod
    def from_predicate(
        predicate: Callable[[A], Any],
        on_false: Callable[[A], E2],
    ) -> Callable[[A], Result[E2, Any]]:
        """
        Build a lifting function: Success(a) when predicate(a) holds,
        otherwise Failure(on_false(a)).

        When the predicate is a TypeGuard, the success payload is typed as
        the narrowed type, so downstream steps need not re-check it:

            def is_circle(shape: Shape) -> TypeGuard[Circle]: ...

            to_circle = Result.from_predicate(is_circle, lambda s: NotACircle(s))
            to_circle(shape)   # Result[NotACircle, Circle]
        """

        def lift(value: A) -> Result[E2, Any]:
            if predicate(value):
                return Success(value)
            return Failure(on_false(value))

        return lift

    @staticmethod
    def try_catch(
        thunk: Callable[[], B],
        on_throw: Callable[[Exception], E2],
    ) -> Result[E2, B]:
        """
        Run a computation that may raise, capturing the exception as a Failure.

        This is the boundary between raising primitives (decoders, parsers,
        serializers) and Result-returning code.

            Result.try_catch(
                lambda: json.loads(text),
                lambda exc: JsonParseError(error=exc),
            )
        """
        try:
            return Success(thunk())
        except Exception as e:
            return Failure(on_throw(e))

    @staticmethod
    def try_catch_k(
        fn: Callable[P, B],
        on_throw: Callable[[Exception], E2],
    ) -> Callable[P, Result[E2, B]]:
        """
        Lift a raising function into one that returns a Result.

            json_parse = Result.try_catch_k(json.loads, JsonParseError)
            json_parse("{invalid}")   # → Failure(JsonParseError(...))
        """

        @functools.wraps(fn)
        def lifted(*args: P.args, **kwargs: P.kwargs) -> Result[E2, B]:
            return Result.try_catch(lambda: fn(*args, **kwargs), on_throw)

        return lifted

    @staticmethod
    def from_nullable(value: B | None, on_none: Callable[[], E2]) -> Result[E2, B]:
        """
        Lift a possibly-None value. Only None counts as absent.

            Result.from_nullable(movie.award, lambda: "NoAward")
        """
        if value is None:
            return Failure(on_none())
        return Success(value)

    @staticmethod
    def all_of(results: Iterable[Result[E2, B]]) -> Result[E2, list[B]]:
        """
        Collect Results into a Result of list.
        Returns the first failure encountered, or Success with all values.
        """
        values: list[B] = []
        for r in results:
            match r:
                case Success(v):
                    values.append(v)
                case Failure(err):
                    return Failure(err)
        return Success(values)

    # ──────────────────────── Dunder methods ────────────────────────

    def __bool__(self) -> bool:
        """Allow truthiness check: `if result: ...` succeeds only on Success."""
        return self.is_success()


@dataclass(frozen=True, slots=True)
class Success(Result[E, A]):
    """The success track — wraps a value of type A."""

    _value: A

    def __repr__(self) -> str:
        return f"Success({self._value!r})"


@dataclass(frozen=True, slots=True)
class Failure(Result[E, A]):
    """The failure track — wraps an error payload of type E."""

    _error: E

    def __repr__(self) -> str:
        return f"Failure({self._error!r})"


# ──────────────────────── Pipeable operators ────────────────────────
#
# Curried counterparts of the methods above, for use with fpkit.function.pipe:
#
#     pipe(account, pay(50), result.map(lambda a: a.balance))

success = Result.success
failure = Result.failure
from_predicate = Result.from_predicate
from_nullable = Result.from_nullable
try_catch = Result.try_catch
try_catch_k = Result.try_catch_k
all_of = Result.all_of


def map(mapper: Callable[[A], B]) -> Callable[[Result[E, A]], Result[E, B]]:
    return lambda r: r.map(mapper)


def map_error(mapper: Callable[[E], E2]) -> Callable[[Result[E, A]], Result[E2, A]]:
    return lambda r: r.map_error(mapper)


def bimap(
    on_failure: Callable[[E], E2],
    on_success: Callable[[A], B],
) -> Callable[[Result[E, A]], Result[E2, B]]:
    return lambda r: r.bimap(on_failure, on_success)


def flat_map(mapper: Callable[[A], Result[E2, B]]) -> Callable[[Result[E, A]], Result[E | E2, B]]:
    return lambda r: r.flat_map(mapper)


def ensure(
    predicate: Callable[[A], bool],
    on_false: Callable[[A], E2],
) -> Callable[[Result[E, A]], Result[E | E2, A]]:
    return lambda r: r.ensure(predicate, on_false)


def or_else(fallback: Callable[[E], Result[E2, B]]) -> Callable[[Result[E, A]], Result[E2, A | B]]:
    return lambda r: r.or_else(fallback)


def alt(fallback: Callable[[], Result[E2, B]]) -> Callable[[Result[E, A]], Result[E2, A | B]]:
    return lambda r: r.alt(fallback)


def get_or_else(default: Callable[[], A]) -> Callable[[Result[E, A]], A]:
    return lambda r: r.get_or_else(default)


def get_or_else_widen(default: Callable[[], B]) -> Callable[[Result[E, A]], A | B]:
    return lambda r: r.get_or_else_widen(default)


def get_or_else_get(fallback: Callable[[E], A]) -> Callable[[Result[E, A]], A]:
    return lambda r: r.get_or_else_get(fallback)


def match(
    on_failure: Callable[[E], R],
    on_success: Callable[[A], R],
) -> Callable[[Result[E, A]], R]:
    return lambda r: r.match(on_failure, on_success)


def peek(action: Callable[[A], Any]) -> Callable[[Result[E, A]], Result[E, A]]:
    return lambda r: r.peek(action)


def peek_failure(action: Callable[[E], Any]) -> Callable[[Result[E, A]], Result[E, A]]:
    return lambda r: r.peek_failure(action)


def flatten(nested: Result[E, Result[E2, A]]) -> Result[E | E2, A]:
    """Collapse a Result of a Result into a single Result."""
    return nested.flat_map(lambda inner: inner)


def to_option(r: Result[E, A]) -> Option[A]:
    return r.to_option()
