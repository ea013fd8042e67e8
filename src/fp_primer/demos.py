"""
Demo registry — the example walkthroughs as labelled values.

Each demo is a generator of (label, value) pairs; the runner sends every
pair to the log. Demos build their own sample data and never depend on
each other.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from functools import partial
from typing import Callable, Literal

from fpkit.function import pipe
from fpkit.option import Option
from fpkit.result import Result

from fp_primer import checkout, login, movies, numbers, shapes, text_checks
from fp_primer.adapters.codecs import Base64Codec, JsonParser, JsonSerializer
from fp_primer.domain.models import Account, Cart, Circle, Movie, Square
from fp_primer.responses import create_response
from fp_primer.user_decoding import decode_user, describe_user_error

type Demo = Callable[[], Iterator[tuple[str, object]]]


@dataclass(frozen=True, slots=True)
class UnknownDemo:
    name: str
    kind: Literal["UnknownDemo"] = "UnknownDemo"

    @property
    def message(self) -> str:
        return f"Unknown demo {self.name!r}; available: {', '.join(DEMOS)}"


def pipe_demo() -> Iterator[tuple[str, object]]:
    yield "pipe('hello', size)", pipe("hello", text_checks.size)
    yield "pipe('hello', size, at_least_3)", pipe("hello", text_checks.size, text_checks.at_least_3)
    yield "pipe(' hi ', trim, size, at_least_3)", text_checks.check_length(" hi ")


def flow_demo() -> Iterator[tuple[str, object]]:
    yield "is_long_enough('hello')", text_checks.is_long_enough("hello")
    yield "is_valid(' hi ')", text_checks.is_valid(" hi ")
    yield "is_strings_valid(' hi ', 'dude ')", text_checks.is_strings_valid(" hi ", "dude ")


def array_demo() -> Iterator[tuple[str, object]]:
    yield "count_sum_max_common([1, 2, 3], [4, 0, 7, 1])", numbers.count_sum_max_common(
        [1, 2, 3], [4, 0, 7, 1]
    )


def option_demo() -> Iterator[tuple[str, object]]:
    for x in (0, 2):
        yield f"inverse({x})", numbers.inverse(x)
        yield f"inverse_message({x})", numbers.inverse_message(x)
        yield f"safe_inverse({x})", numbers.safe_inverse(x)
        yield f"safe_inverse_or_label({x})", numbers.safe_inverse_or_label(x)
    yield "from_nullable(3)", Option.from_nullable(3)
    yield "from_nullable(None)", Option.from_nullable(None)
    yield "some(5).chain(inverse)", Option.some(5).chain(numbers.inverse)
    yield "some(0).chain(inverse)", Option.some(0).chain(numbers.inverse)
    for sample in ([], [0, 1], [2, 0]):
        yield f"inverse_head({sample})", numbers.inverse_head(sample)
    yield "get_even(4)", numbers.get_even(4)
    yield "get_even(5)", numbers.get_even(5)


def shapes_demo() -> Iterator[tuple[str, object]]:
    for shape in (Circle(radius=1), Square(side=2)):
        yield f"circle_from_shape({shapes.describe_shape(shape)})", shapes.circle_from_shape(shape)
        yield f"circle_area({shapes.describe_shape(shape)})", shapes.circle_area(shape)


SAMPLE_MOVIES = (
    Movie(title="The Kingdom of Monads", release_year=2023, rating_position=1, award="Oscar"),
    Movie(title="Natural Transformations", release_year=2023, rating_position=3),
    Movie(title="Fun with loops", release_year=2023, rating_position=74),
)


def movies_demo() -> Iterator[tuple[str, object]]:
    yield "best_movie(['a', 'b'])", movies.best_movie(["a", "b"])
    yield "best_movie([])", movies.best_movie([])
    for movie in SAMPLE_MOVIES:
        yield f"movie_highlight({movie.title!r})", movies.movie_highlight(movie)


SAMPLE_ACCOUNTS = (
    Account(balance=70),
    Account(balance=30),
    Account(balance=100, frozen=True),
)


def payments_demo() -> Iterator[tuple[str, object]]:
    checkout_fifty = checkout.checkout(Cart(total=50))
    for account in SAMPLE_ACCOUNTS:
        yield f"pay(50)({account})", checkout.pay(50)(account)
    for account in SAMPLE_ACCOUNTS:
        yield f"checkout_fifty({account})", checkout_fifty(account)


def json_demo() -> Iterator[tuple[str, object]]:
    serializer = JsonSerializer()
    circular: dict[str, object] = {}
    circular["self"] = circular
    yield "create_response({'balance': 100, 'success': True})", create_response(
        {"balance": 100, "success": True}, serializer
    )
    yield "create_response(circular)", create_response(circular, serializer)


def user_decoding_demo() -> Iterator[tuple[str, object]]:
    codec = Base64Codec()
    parser = JsonParser()
    serializer = JsonSerializer()
    decode = partial(decode_user, decoder=codec, parser=parser)

    encoded_user = codec.encode(serializer.serialize({"id": 1, "name": "Dude"}))
    encoded_not_user = codec.encode(serializer.serialize({"a": 1, "b": 2}))

    yield f"decode_user({encoded_user!r})", decode(encoded_user)
    yield "decode_user('invalidBase64!!!')", decode("invalidBase64!!!")
    yield f"decode_user({encoded_not_user!r})", decode(encoded_not_user)
    for encoded in ("invalidBase64!!!", encoded_not_user):
        yield f"describe_user_error({encoded!r})", decode(encoded).match(
            describe_user_error, lambda user: f"Decoded user {user.name}"
        )


def login_demo() -> Iterator[tuple[str, object]]:
    for name in ("a@b.cd", "1-123-123", "ftw?", "a@b"):
        yield f"validate_login_name({name!r})", login.validate_login_name(name)
    for name in ("ftw?", "a@b"):
        yield f"describe_login_error({name!r})", login.validate_login_name(name).match(
            login.describe_login_error, lambda login_name: login_name.value
        )


DEMOS: dict[str, Demo] = {
    "pipe": pipe_demo,
    "flow": flow_demo,
    "array": array_demo,
    "option": option_demo,
    "shapes": shapes_demo,
    "movies": movies_demo,
    "payments": payments_demo,
    "json": json_demo,
    "users": user_decoding_demo,
    "login": login_demo,
}


def select_demos(names: Iterable[str]) -> Result[UnknownDemo, tuple[str, ...]]:
    """
    Resolve demo names, keeping their order. No names selects every demo.

    Fails on the first unknown name.
    """
    requested = tuple(names) or tuple(DEMOS)
    return Result.all_of(
        [
            Result.from_predicate(lambda n: n in DEMOS, UnknownDemo)(name)
            for name in requested
        ]
    ).map(tuple)
