"""Small string and method helpers shared by the request parser and router."""

from __future__ import annotations

import re
from enum import IntEnum


class HttpMethod(IntEnum):
    """Request methods the server recognises."""

    GET = 0
    POST = 1
    OPTION = 2
    PUT = 3
    DELETE = 4
    PATCH = 5
    UNKNOWN = 6


_METHODS = {
    "option": HttpMethod.OPTION,
    "post": HttpMethod.POST,
    "delete": HttpMethod.DELETE,
    "put": HttpMethod.PUT,
    "patch": HttpMethod.PATCH,
    "get": HttpMethod.GET,
}


def split(text: str, delimiters: str, keep_empty: bool = False) -> list[str]:
    """Split ``text`` on any character in ``delimiters``.

    Empty pieces are dropped unless ``keep_empty`` is true.
    """
    if delimiters:
        pieces = re.split(f"[{re.escape(delimiters)}]", text)
    else:
        pieces = [text]
    if keep_empty:
        return pieces
    return [piece for piece in pieces if piece]


def http_method(name: str) -> HttpMethod:
    """Map a method name, in any case, to an :class:`HttpMethod`."""
    return _METHODS.get(name.lower(), HttpMethod.UNKNOWN)