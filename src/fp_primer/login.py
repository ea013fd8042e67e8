"""
Login-name validation — recovering from one specific failure.

A login name is either an email address or a phone number. Email is tried
first. If the input is not email-shaped at all (no "@"), the phone check
runs instead. An input that looks like an email but is malformed is NOT
retried as a phone number. or_else() gets to look at the error before it
decides.

The patterns are illustrative and reject some real-world values (phone
numbers with spaces, for one).
"""

from __future__ import annotations

import re
from typing import Callable

from fpkit import result
from fpkit.dispatch import match_kind
from fpkit.function import flow
from fpkit.result import Result

from fp_primer.domain.errors import EmailError, LoginNameError, PhoneNumberError
from fp_primer.domain.models import Email, LoginName, PhoneNumber

EMAIL_PATTERN = re.compile(r"[a-z0-9._-]+@[a-z0-9.-]+\.[a-z]{2,4}")
PHONE_NUMBER_PATTERN = re.compile(r"[0-9\-+]{9,15}")


def _email_error(invalid_email: str) -> EmailError:
    return "MalformedEmail" if "@" in invalid_email else "NotAnEmail"


validate_email: Callable[[str], Result[EmailError, Email]] = flow(
    Result.from_predicate(
        lambda maybe_email: EMAIL_PATTERN.fullmatch(maybe_email) is not None,
        _email_error,
    ),
    result.map(lambda email: Email(value=email)),
)

validate_phone_number: Callable[[str], Result[PhoneNumberError, PhoneNumber]] = flow(
    Result.from_predicate(
        lambda maybe_phone: PHONE_NUMBER_PATTERN.fullmatch(maybe_phone) is not None,
        lambda _: "InvalidPhoneNumber",
    ),
    result.map(lambda phone: PhoneNumber(value=phone)),
)


def validate_login_name(login_name: str) -> Result[LoginNameError, LoginName]:
    return validate_email(login_name).or_else(
        lambda error: (
            validate_phone_number(login_name)
            if error == "NotAnEmail"
            else Result.failure(error)
        )
    )


describe_login_error: Callable[[LoginNameError], str] = match_kind(
    LoginNameError,
    {
        "MalformedEmail": lambda _: "The email address is malformed",
        "InvalidPhoneNumber": lambda _: "Not an email address nor a valid phone number",
    },
)
