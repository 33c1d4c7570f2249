"""aiohttp glue for the wire/client key transformation."""

from __future__ import annotations

from typing import Any

import aiohttp

from ._json import dumps, loads


def wire_session(**kwargs: Any) -> aiohttp.ClientSession:
    """Create a ClientSession that sends ``json=`` bodies in wire notation.

    Usage::

        async with wire_session() as session:
            async with session.post(url, json={"equipmentTypeId": 3}) as resp:
                data = await read_client_model(resp)

    Keyword arguments are passed to :class:`aiohttp.ClientSession`. An
    explicit ``json_serialize`` overrides :func:`wirecase.dumps`.
    """
    kwargs.setdefault("json_serialize", dumps)
    return aiohttp.ClientSession(**kwargs)


async def read_client_model(response: aiohttp.ClientResponse) -> Any:
    """Read a JSON response body and convert its keys to client notation.

    Status codes are not inspected; check ``response.ok`` before calling.

    Raises:
        PayloadDecodeError: If the body is not valid JSON.
        aiohttp.ContentTypeError: If the response is not ``application/json``.
    """
    return await response.json(loads=loads)
