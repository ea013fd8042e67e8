"""
Error taxonomy — tagged records for the failure track.

Every error is a frozen dataclass with a `kind` discriminant; the error of a
chain is the union of the errors of its steps:

  - encoding:   Base64DecodeError      (text is not valid base64)
  - parsing:    JsonParseError         (text is not valid JSON)
  - serializing JsonStringifyError     (value cannot be rendered as JSON)
  - shape:      InvalidUser            (decoded value is not a user record)
  - domain:     AccountFrozen, NotEnoughBalance

Login-name validation uses bare string literals as its error kinds.
Each string is its own discriminant.

Exceptions are kept on the record (`error`) for inspection, but they are
never re-raised.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal


@dataclass(frozen=True, slots=True)
class Base64DecodeError:
    error: Exception = field(compare=False)
    kind: Literal["Base64DecodeError"] = "Base64DecodeError"

    @property
    def message(self) -> str:
        return f"Invalid base64 input: {self.error}"


@dataclass(frozen=True, slots=True)
class JsonParseError:
    error: Exception = field(compare=False)
    kind: Literal["JsonParseError"] = "JsonParseError"

    @property
    def message(self) -> str:
        return f"Invalid JSON: {self.error}"


@dataclass(frozen=True, slots=True)
class JsonStringifyError:
    error: Exception = field(compare=False)
    kind: Literal["JsonStringifyError"] = "JsonStringifyError"

    @property
    def message(self) -> str:
        return f"Cannot serialize to JSON: {self.error}"


@dataclass(frozen=True, slots=True)
class InvalidUser:
    """The decoded value does not have the shape of a User; `obj` is that value."""

    obj: Any
    kind: Literal["InvalidUser"] = "InvalidUser"

    @property
    def message(self) -> str:
        return f"Not a user: {self.obj!r}"


@dataclass(frozen=True, slots=True)
class AccountFrozen:
    message: str
    kind: Literal["AccountFrozen"] = "AccountFrozen"


@dataclass(frozen=True, slots=True)
class NotEnoughBalance:
    message: str
    kind: Literal["NotEnoughBalance"] = "NotEnoughBalance"


type PaymentError = AccountFrozen | NotEnoughBalance
type UserDecodeError = Base64DecodeError | JsonParseError | InvalidUser

type EmailError = Literal["MalformedEmail", "NotAnEmail"]
type PhoneNumberError = Literal["InvalidPhoneNumber"]
type LoginNameError = Literal["MalformedEmail", "InvalidPhoneNumber"]
