"""
Unit tests for the codec adapters.

The adapters raise on bad input; these tests pin down which exceptions
escape so the Result-returning callers know what they capture.
"""

from __future__ import annotations

import binascii

import pytest

from fp_primer.adapters.codecs import Base64Codec, JsonParser, JsonSerializer
from fp_primer.domain.ports import StructuredTextParser, StructuredTextSerializer, TextDecoder


class TestPortConformance:
    def test_adapters_implement_ports(self) -> None:
        assert isinstance(Base64Codec(), TextDecoder)
        assert isinstance(JsonParser(), StructuredTextParser)
        assert isinstance(JsonSerializer(), StructuredTextSerializer)


class TestBase64Codec:
    def test_encode_then_decode(self, base64_codec: Base64Codec) -> None:
        assert base64_codec.encode('{"id":1}') == "eyJpZCI6MX0="
        assert base64_codec.decode("eyJpZCI6MX0=") == '{"id":1}'

    def test_invalid_alphabet_raises(self, base64_codec: Base64Codec) -> None:
        """
        GIVEN text with characters outside the base64 alphabet
        WHEN decoded
        THEN binascii.Error is raised instead of the characters being dropped.
        """
        with pytest.raises(binascii.Error):
            base64_codec.decode("invalidBase64!!!")

    def test_undecodable_bytes_raise(self, base64_codec: Base64Codec) -> None:
        with pytest.raises(UnicodeDecodeError):
            base64_codec.decode("/w==")


class TestJsonParser:
    def test_parse(self, json_parser: JsonParser) -> None:
        assert json_parser.parse('{"foo": ["bar", 1]}') == {"foo": ["bar", 1]}

    def test_malformed_raises(self, json_parser: JsonParser) -> None:
        with pytest.raises(ValueError):
            json_parser.parse("{invalid}")


class TestJsonSerializer:
    def test_compact_output(self, json_serializer: JsonSerializer) -> None:
        assert json_serializer.serialize({"a": 1, "b": None}) == '{"a":1,"b":null}'

    def test_nan_rejected(self, json_serializer: JsonSerializer) -> None:
        with pytest.raises(ValueError):
            json_serializer.serialize(float("nan"))

    def test_unserializable_rejected(self, json_serializer: JsonSerializer) -> None:
        with pytest.raises(TypeError):
            json_serializer.serialize(object())
