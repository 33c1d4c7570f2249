"""Key-casing transformation between snake_case wire JSON and camelCase client models."""

from .const import __version__
from ._json import dumps, loads, rewrite_request_body
from ._keys import key_to_client, key_to_wire
from ._serialization import instant_to_wire, to_client_model, to_wire_model
from ._session import read_client_model, wire_session
from .exceptions import PayloadDecodeError, PayloadEncodeError, WireCaseError

__all__ = [
    "__version__",
    "key_to_client",
    "key_to_wire",
    "to_client_model",
    "to_wire_model",
    "instant_to_wire",
    "dumps",
    "loads",
    "rewrite_request_body",
    "wire_session",
    "read_client_model",
    "WireCaseError",
    "PayloadDecodeError",
    "PayloadEncodeError",
]
