"""Deep JSON key transformation between wire and client notation."""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Any, Callable

from ._keys import key_to_client, key_to_wire
from .const import GREGORIAN_CYCLE_YEARS, UTC_DESIGNATOR

_LOGGER = logging.getLogger(__name__)


def to_client_model(data: Any) -> Any:
    """Recursively convert all dict keys from wire to client notation.

    Instants are returned unchanged; turning timestamp strings back into
    ``datetime`` objects is left to the caller.
    """
    return _transform(data, key_to_client, _keep_instant)


def to_wire_model(data: Any) -> Any:
    """Recursively convert all dict keys from client to wire notation.

    ``datetime`` and ``date`` values are replaced by their wire text,
    see :func:`instant_to_wire`.
    """
    return _transform(data, key_to_wire, instant_to_wire)


def instant_to_wire(value: date) -> str:
    """Format an instant as ``YYYY-MM-DDTHH:MM:SS.sssZ`` in UTC.

    Naive datetimes (``utcoffset()`` is ``None``) are taken to be UTC
    already. A plain ``date`` is midnight UTC of that day. Shifting to UTC
    may leave ``datetime``'s year range; such years are written like
    JavaScript does (``0000``, ``+010000``).
    """
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    offset = value.utcoffset() or timedelta(0)
    local = value.replace(tzinfo=None)
    year_shift = 0
    try:
        utc = local - offset
    except OverflowError:
        year_shift = GREGORIAN_CYCLE_YEARS if local.year < 5000 else -GREGORIAN_CYCLE_YEARS
        utc = local.replace(year=local.year + year_shift) - offset
    return (
        f"{_format_year(utc.year - year_shift)}-{utc.month:02d}-{utc.day:02d}"
        f"T{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}"
        f".{utc.microsecond // 1000:03d}{UTC_DESIGNATOR}"
    )


def _format_year(year: int) -> str:
    if 0 <= year <= 9999:
        return f"{year:04d}"
    return f"{year:+07d}"


def _keep_instant(value: date) -> date:
    return value


def _transform(
    data: Any,
    convert_key: Callable[[str], str],
    convert_instant: Callable[[date], Any],
) -> Any:
    if data is None:
        return None
    if isinstance(data, (list, tuple)):
        return [_transform(item, convert_key, convert_instant) for item in data]
    # datetime is a subclass of date
    if isinstance(data, date):
        return convert_instant(data)
    if isinstance(data, dict):
        result: dict[Any, Any] = {}
        for key, value in data.items():
            new_key = convert_key(key) if isinstance(key, str) else key
            if new_key in result:
                # Last write wins; callers must not send colliding keys.
                _LOGGER.debug("Key %r overwrites an earlier key mapped to %r", key, new_key)
            result[new_key] = _transform(value, convert_key, convert_instant)
        return result
    return data
