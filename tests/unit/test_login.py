"""
Unit tests for login-name validation.

The phone-number check must run only when the input is not email-shaped;
a malformed email keeps its own failure.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from fpkit import NonExhaustiveMatchError, ResultAssertions, match_kind

from fp_primer import login
from fp_primer.domain.errors import LoginNameError
from fp_primer.domain.models import Email, PhoneNumber
from fp_primer.login import (
    describe_login_error,
    validate_email,
    validate_login_name,
    validate_phone_number,
)


class TestValidateEmail:
    def test_valid_email(self) -> None:
        ResultAssertions.assert_success_value(validate_email("a@b.cd"), Email(value="a@b.cd"))

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("a@b", "MalformedEmail"),
            ("A@B.CD", "MalformedEmail"),
            ("ftw?", "NotAnEmail"),
            ("", "NotAnEmail"),
        ],
    )
    def test_invalid_email_kind(self, text: str, expected: str) -> None:
        assert validate_email(text).error() == expected


class TestValidatePhoneNumber:
    def test_valid_phone_number(self) -> None:
        ResultAssertions.assert_success_value(
            validate_phone_number("1-123-123"), PhoneNumber(value="1-123-123")
        )

    @pytest.mark.parametrize("text", ["12345678", "1234567890123456", "123 456 789"])
    def test_invalid_phone_number(self, text: str) -> None:
        assert validate_phone_number(text).error() == "InvalidPhoneNumber"


class TestValidateLoginName:
    """Verify the email-then-phone fallback."""

    def test_email(self) -> None:
        """
        GIVEN "a@b.cd"
        WHEN validated as a login name
        THEN it is an Email.
        """
        ResultAssertions.assert_success_value(validate_login_name("a@b.cd"), Email(value="a@b.cd"))

    def test_phone_number(self) -> None:
        """
        GIVEN "1-123-123" (no "@")
        WHEN validated as a login name
        THEN the phone fallback accepts it.
        """
        ResultAssertions.assert_success_value(
            validate_login_name("1-123-123"), PhoneNumber(value="1-123-123")
        )

    def test_neither(self) -> None:
        """
        GIVEN "ftw?" (no "@", not a phone number)
        WHEN validated as a login name
        THEN the failure is the phone check's "InvalidPhoneNumber".
        """
        assert validate_login_name("ftw?").error() == "InvalidPhoneNumber"

    def test_malformed_email_skips_phone_check(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """
        GIVEN "a@b" (contains "@" but is not a valid email)
        WHEN validated as a login name
        THEN the failure stays "MalformedEmail" and the phone check never runs.
        """
        phone_check = MagicMock()
        monkeypatch.setattr(login, "validate_phone_number", phone_check)
        assert validate_login_name("a@b").error() == "MalformedEmail"
        assert phone_check.call_count == 0


class TestDescribeLoginError:
    """Verify login failures are described through kind dispatch."""

    @pytest.mark.parametrize(
        ("login_name", "expected"),
        [
            ("a@b", "The email address is malformed"),
            ("ftw?", "Not an email address nor a valid phone number"),
        ],
    )
    def test_failure_is_described(self, login_name: str, expected: str) -> None:
        """
        GIVEN a login name that fails validation
        WHEN the outcome is folded with match
        THEN the failure kind selects the description.
        """
        message = validate_login_name(login_name).match(describe_login_error, lambda name: name.value)
        assert message == expected

    def test_incomplete_handlers_rejected_at_construction(self) -> None:
        """
        GIVEN a dispatcher for LoginNameError lacking "InvalidPhoneNumber"
        WHEN it is built
        THEN NonExhaustiveMatchError is raised.
        """
        with pytest.raises(NonExhaustiveMatchError):
            match_kind(LoginNameError, {"MalformedEmail": lambda _: "malformed"})
