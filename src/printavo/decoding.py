"""Decode response bodies into typed values.

Any type pydantic can validate works as a target: models, `Page[Order]`,
``list[Payment]``, ``dict[str, Any]`` and so on. Validation is strict: a
string ``"123"`` is not an integer and ``true`` is not a count. Failures
become `DecodeError` with the path of the first offending field in document
order, which is the main clue when the remote schema drifts.
"""

import json
from collections.abc import Sequence
from functools import lru_cache
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from printavo.errors import DecodeError

T = TypeVar("T")

ROOT_PATH = "."


@lru_cache(maxsize=128)
def _adapter_for(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def format_path(loc: Sequence[int | str]) -> str:
    """Render a pydantic error location as ``data[0].id``."""
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        elif path:
            path += f".{segment}"
        else:
            path = str(segment)
    return path or ROOT_PATH


def document_position(document: Any, loc: Sequence[int | str]) -> tuple[int, ...]:
    """Where ``loc`` sits in ``document``, as sortable key/index offsets.

    A missing key sorts after every key present in its object, since a
    reader only notices it at the closing brace.
    """
    position: list[int] = []
    node = document
    for segment in loc:
        if isinstance(node, dict):
            if segment not in node:
                position.append(len(node))
                break
            position.append(list(node).index(segment))
            node = node[segment]
        elif isinstance(node, list) and isinstance(segment, int) and 0 <= segment < len(node):
            position.append(segment)
            node = node[segment]
        else:
            break
    return tuple(position)


def _first_error(exc: ValidationError, text: str | bytes) -> dict[str, Any]:
    errors = exc.errors(include_url=False)
    if len(errors) == 1:
        return errors[0]
    try:
        document = json.loads(text)
    except ValueError:
        return errors[0]
    return min(errors, key=lambda error: document_position(document, error["loc"]))


def decode_json(text: str | bytes, target: type[T]) -> T:
    """Deserialize a JSON document into ``target``.

    Raises:
        DecodeError: If the document is not valid JSON or does not match
            ``target``. Only the error that comes first in the document is
            reported.
    """
    try:
        return _adapter_for(target).validate_json(text, strict=True)
    except ValidationError as exc:
        first = _first_error(exc, text)
        body = text.decode("utf-8", errors="replace") if isinstance(text, bytes) else text
        raise DecodeError(format_path(first["loc"]), first["msg"], body=body) from exc


async def decode(response: httpx.Response, target: type[T]) -> T:
    """Read the full body of ``response`` and decode it into ``target``."""
    await response.aread()
    return decode_json(response.text, target)
