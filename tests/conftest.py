"""
Shared test fixtures for the fp-primer test suite.

Provides sample accounts, codec adapters and a logging reset so tests that
configure structlog or the standard logging module do not leak into each
other.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog

from fp_primer.adapters.codecs import Base64Codec, JsonParser, JsonSerializer
from fp_primer.domain.models import Account


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo structlog.configure() and logging.basicConfig(force=True) after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    for handler in list(root.handlers):
        if handler not in handlers and type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture()
def rich_account() -> Account:
    return Account(balance=70, frozen=False)


@pytest.fixture()
def poor_account() -> Account:
    return Account(balance=30, frozen=False)


@pytest.fixture()
def frozen_account() -> Account:
    return Account(balance=100, frozen=True)


@pytest.fixture()
def base64_codec() -> Base64Codec:
    return Base64Codec()


@pytest.fixture()
def json_parser() -> JsonParser:
    return JsonParser()


@pytest.fixture()
def json_serializer() -> JsonSerializer:
    return JsonSerializer()
