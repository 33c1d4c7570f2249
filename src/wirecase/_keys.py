"""Single-key conversion between wire (snake_case) and client (camelCase) notation."""

from __future__ import annotations

import re

_SNAKE_TO_CAMEL = re.compile(r"_([a-z])")
_CAMEL_TO_SNAKE = re.compile(r"[A-Z]")


def key_to_client(key: str) -> str:
    """Convert a wire key to client notation.

    Every ``_`` directly followed by a lowercase ASCII letter is dropped and
    the letter uppercased. Nothing else changes, so ``trailing_`` and
    ``item_2`` are returned as-is and ``__foo`` becomes ``_Foo``.
    """
    return _SNAKE_TO_CAMEL.sub(lambda m: m.group(1).upper(), key)


def key_to_wire(key: str) -> str:
    """Convert a client key to wire notation.

    Every uppercase ASCII letter is replaced by ``_`` plus its lowercase
    form. Leading capitals and acronyms are not special-cased:
    ``PascalCase`` becomes ``_pascal_case`` and ``userID`` becomes
    ``user_i_d``.
    """
    return _CAMEL_TO_SNAKE.sub(lambda m: "_" + m.group(0).lower(), key)
