"""
Ports — Protocol-based interfaces for the raw text primitives.

These are the raising collaborators the examples wrap with
Result.try_catch. The port never returns a Result itself. It either
returns a value or raises, and the caller converts the exception into a
typed failure at the boundary:

  Result world ← try_catch ← Port (raises) ← Adapter (base64, json)

Each port is a Protocol (structural typing), so a test double only has to
implement the method.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TextDecoder(Protocol):
    """
    Port: reverse a reversible text encoding.

    Raises on malformed input (bad alphabet, bad padding, undecodable bytes).
    """

    def decode(self, text: str) -> str: ...


@runtime_checkable
class StructuredTextParser(Protocol):
    """Port: parse structured text into plain values. Raises on malformed text."""

    def parse(self, text: str) -> Any: ...


@runtime_checkable
class StructuredTextSerializer(Protocol):
    """
    Port: render plain values as structured text.

    Raises on cyclic or unserializable values.
    """

    def serialize(self, value: Any) -> str: ...
