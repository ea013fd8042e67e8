"""
Responses — serializing a payload into a response body.

The serializer may raise (cyclic or unserializable payloads). json_stringify
converts that into a JsonStringifyError, and create_response only maps the
success track.
"""

from __future__ import annotations

from typing import Any

from fpkit import result
from fpkit.function import pipe
from fpkit.result import Result

from fp_primer.domain.errors import JsonStringifyError
from fp_primer.domain.models import Response
from fp_primer.domain.ports import StructuredTextSerializer


def json_stringify(
    value: Any,
    serializer: StructuredTextSerializer,
) -> Result[JsonStringifyError, str]:
    return Result.try_catch(lambda: serializer.serialize(value), JsonStringifyError)


def create_response(
    payload: Any,
    serializer: StructuredTextSerializer,
) -> Result[JsonStringifyError, Response]:
    return pipe(
        json_stringify(payload, serializer),
        result.map(lambda body: Response(body=body, content_length=len(body))),
    )
