"""JSON text hooks for the request/response pipeline.

``dumps`` and ``loads`` have the signatures aiohttp expects for
``ClientSession(json_serialize=...)`` and ``ClientResponse.json(loads=...)``,
so they can be plugged straight into a session.
"""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

from ._serialization import to_client_model, to_wire_model
from .exceptions import PayloadDecodeError, PayloadEncodeError

_LOGGER = logging.getLogger(__name__)

_BodyT = TypeVar("_BodyT")


def dumps(value: Any, **kwargs: Any) -> str:
    """Serialize a client model to JSON text with wire-notation keys.

    Extra keyword arguments are passed to :func:`json.dumps`.

    Raises:
        PayloadEncodeError: If the value holds something JSON cannot encode.
    """
    try:
        return json.dumps(to_wire_model(value), **kwargs)
    except (TypeError, ValueError) as err:
        raise PayloadEncodeError(f"Cannot encode request body: {err}") from err


def loads(text: str | bytes, **kwargs: Any) -> Any:
    """Parse wire JSON text into a client model.

    Raises:
        PayloadDecodeError: If the text is not valid JSON.
    """
    try:
        data = json.loads(text, **kwargs)
    except ValueError as err:
        raise PayloadDecodeError(f"Invalid JSON body: {err}", body=text) from err
    return to_client_model(data)


def rewrite_request_body(body: _BodyT) -> _BodyT:
    """Re-encode an already serialized JSON request body in wire notation.

    ``str`` and ``bytes`` bodies that parse as JSON are rewritten and keep
    their type, written compactly as UTF-8. Anything else (empty bodies,
    non-JSON text, form data, streams) is returned as-is.
    """
    if not body or not isinstance(body, (str, bytes)):
        return body
    try:
        parsed = json.loads(body)
    except ValueError:
        _LOGGER.debug("Request body is not JSON, sending as-is")
        return body
    text = json.dumps(to_wire_model(parsed), ensure_ascii=False, separators=(",", ":"))
    if isinstance(body, bytes):
        return text.encode()  # type: ignore[return-value]
    return text  # type: ignore[return-value]
