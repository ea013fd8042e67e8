"""
User decoding — a chain of three fallible steps with three error kinds.

  base64_decode(encoded)     → Result[Base64DecodeError, str]
    → json_parse(text)       → Result[JsonParseError, Any]
      → decode_user_object() → Result[InvalidUser, User]

decode_user() connects them with flat_map. The chain's error type is the
union of the three, and the first failing step ends the chain: a bad base64
string never reaches the parser.

The raw decoder and parser are injected ports; only they may raise, and
their exceptions are captured with Result.try_catch right here.
"""

from __future__ import annotations

from typing import Any, Callable

import structlog
from pydantic import TypeAdapter, ValidationError

from fpkit.dispatch import match_kind
from fpkit.result import Result
from fpkit.trace import traced

from fp_primer.domain.errors import (
    Base64DecodeError,
    InvalidUser,
    JsonParseError,
    UserDecodeError,
)
from fp_primer.domain.models import User
from fp_primer.domain.ports import StructuredTextParser, TextDecoder

log = structlog.get_logger()

_USER_SHAPE = TypeAdapter(User)


def base64_decode(encoded: str, decoder: TextDecoder) -> Result[Base64DecodeError, str]:
    return Result.try_catch(lambda: decoder.decode(encoded), Base64DecodeError)


def json_parse(text: str, parser: StructuredTextParser) -> Result[JsonParseError, Any]:
    return Result.try_catch(lambda: parser.parse(text), JsonParseError)


def decode_user_object(obj: Any) -> Result[InvalidUser, User]:
    """
    Check that an arbitrary decoded value has the shape of a User.

    The failure carries the offending value so callers can report it.
    """
    try:
        return Result.success(_USER_SHAPE.validate_python(obj))
    except ValidationError as e:
        log.debug("user.invalid_shape", error_count=e.error_count())
        return Result.failure(InvalidUser(obj=obj))


@traced("decode_user")
def decode_user(
    encoded: str,
    decoder: TextDecoder,
    parser: StructuredTextParser,
) -> Result[UserDecodeError, User]:
    """
    Decode a base64-encoded JSON user record.

    Returns Success(User), or the failure of the first step that failed.
    """
    return (
        base64_decode(encoded, decoder)
        .flat_map(lambda text: json_parse(text, parser))
        .flat_map(decode_user_object)
    )


describe_user_error: Callable[[UserDecodeError], str] = match_kind(
    UserDecodeError,
    {
        "Base64DecodeError": lambda e: e.message,
        "JsonParseError": lambda e: e.message,
        "InvalidUser": lambda e: e.message,
    },
)
