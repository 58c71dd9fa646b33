"""JSON codec between external callers and the contract message types.

Execute and query messages are externally tagged, one key naming the
variant::

    {"set_greeting": {"greeting": "Hello World!"}}
    {"greet": {}}

Instantiate takes the bare payload ``{"greeting": "..."}``.
"""

from __future__ import annotations

from typing import Any, Final, TypeVar

import orjson
from pydantic import TypeAdapter, ValidationError

from ...domain.errors import UnknownMessage
from ...domain.messages import (
    ExecuteMsg,
    Greet,
    GreetResponse,
    InstantiateMsg,
    QueryMsg,
    SetGreeting,
)
from ...domain.response import Response

T = TypeVar("T")

EXECUTE_VARIANTS: Final[dict[str, type[ExecuteMsg]]] = {"set_greeting": SetGreeting}
QUERY_VARIANTS: Final[dict[str, type[QueryMsg]]] = {"greet": Greet}


class MessageDecodeError(ValueError):
    """Raw input is not valid JSON or does not fit the named variant.

    Example:
        >>> isinstance(MessageDecodeError("bad"), ValueError)
        True
    """


def decode_instantiate_msg(raw: str | bytes) -> InstantiateMsg:
    """Parse ``{"greeting": ...}``.

    Example:
        >>> decode_instantiate_msg('{"greeting": "Ciao Mondo!"}')
        InstantiateMsg(greeting='Ciao Mondo!')
    """
    return _build(InstantiateMsg, _parse_object(raw))


def decode_execute_msg(raw: str | bytes) -> ExecuteMsg:
    """Parse a tagged execute message.

    Raises:
        UnknownMessage: The tag names no execute variant.
        MessageDecodeError: The input is malformed.

    Example:
        >>> decode_execute_msg('{"set_greeting": {"greeting": "hi"}}')
        SetGreeting(greeting='hi')
    """
    return _decode_tagged(raw, EXECUTE_VARIANTS, "execute")


def decode_query_msg(raw: str | bytes) -> QueryMsg:
    """Parse a tagged query message.

    Example:
        >>> decode_query_msg('{"greet": {}}')
        Greet()
    """
    return _decode_tagged(raw, QUERY_VARIANTS, "query")


def encode_response(response: Response) -> bytes:
    """Encode a response as ``{"attributes": [{"key": ..., "value": ...}, ...]}``.

    Example:
        >>> encode_response(Response().add_attribute("method", "reset"))
        b'{"attributes":[{"key":"method","value":"reset"}]}'
    """
    return orjson.dumps(response)


def encode_query_result(result: GreetResponse) -> bytes:
    """Encode a query result.

    Example:
        >>> encode_query_result(GreetResponse(greeting="hi"))
        b'{"greeting":"hi"}'
    """
    return orjson.dumps(result)


def _decode_tagged(raw: str | bytes, variants: dict[str, type[T]], kind: str) -> T:
    payload = _parse_object(raw)
    if len(payload) != 1:
        raise MessageDecodeError(f"{kind} message must hold exactly one variant key, got {len(payload)}")
    ((tag, body),) = payload.items()
    variant = variants.get(tag)
    if variant is None:
        raise UnknownMessage(f"unknown {kind} message: {tag}")
    if not isinstance(body, dict):
        raise MessageDecodeError(f"{kind} message {tag!r} must carry a JSON object")
    return _build(variant, body)


def _parse_object(raw: str | bytes) -> dict[str, Any]:
    try:
        payload = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise MessageDecodeError(f"message is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise MessageDecodeError("message must be a JSON object")
    return payload  # pyright: ignore[reportUnknownVariableType]


def _build(variant: type[T], body: dict[str, Any]) -> T:
    try:
        return TypeAdapter(variant).validate_python(body)
    except ValidationError as exc:
        raise MessageDecodeError(f"invalid {variant.__name__} payload: {exc}") from exc


__all__ = [
    "EXECUTE_VARIANTS",
    "QUERY_VARIANTS",
    "MessageDecodeError",
    "decode_execute_msg",
    "decode_instantiate_msg",
    "decode_query_msg",
    "encode_query_result",
    "encode_response",
]
