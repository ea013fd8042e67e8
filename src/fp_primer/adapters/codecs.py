"""
Codec adapters — base64 and JSON primitives behind the text ports.

Adapter layer — implements TextDecoder, StructuredTextParser and
StructuredTextSerializer with the standard library codecs.

These adapters RAISE on bad input, like the primitives they wrap.
Converting exceptions into failures is the caller's job (Result.try_catch).
"""

from __future__ import annotations

import base64
import json
from typing import Any


class Base64Codec:
    """
    Strict base64 text codec.

    Implements the TextDecoder port. Characters outside the base64 alphabet
    are rejected instead of being silently discarded.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def encode(self, text: str) -> str:
        return base64.b64encode(text.encode(self._encoding)).decode("ascii")

    def decode(self, text: str) -> str:
        """Raises binascii.Error on bad base64, UnicodeDecodeError on bad bytes."""
        return base64.b64decode(text, validate=True).decode(self._encoding)


class JsonParser:
    """Implements the StructuredTextParser port. Raises json.JSONDecodeError."""

    def parse(self, text: str) -> Any:
        return json.loads(text)


class JsonSerializer:
    """
    Compact JSON serializer.

    Implements the StructuredTextSerializer port. Raises ValueError on
    circular references or NaN/Infinity, TypeError on unserializable values.
    """

    def serialize(self, value: Any) -> str:
        return json.dumps(value, separators=(",", ":"), allow_nan=False)
