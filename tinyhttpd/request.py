"""Parsing of raw HTTP/1.1 requests."""

from __future__ import annotations

from dataclasses import dataclass, field

from .helpers import HttpMethod, http_method, split


@dataclass
class HttpRequest:
    """A parsed request: method, path segments, version, headers and body.

    Header names are stored in lower case.
    """

    method: HttpMethod
    url: list[str]
    version: str
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""

    @classmethod
    def parse(cls, raw: str) -> "HttpRequest":
        """Parse the text of a request; raise ValueError if it is malformed."""
        head, _, body = raw.partition("\r\n\r\n")
        lines = split(head, "\r\n")
        if not lines:
            raise ValueError("empty request")
        start = split(lines[0], " ")
        if len(start) < 3:
            raise ValueError(f"malformed request line: {lines[0]!r}")
        headers: dict[str, str] = {}
        for line in lines[1:]:
            name, colon, value = line.partition(":")
            if not colon:
                raise ValueError(f"malformed header line: {line!r}")
            headers[name.lower()] = value[1:] if value.startswith(" ") else value
        return cls(
            method=http_method(start[0]),
            url=split(start[1], "/"),
            version=start[2],
            headers=headers,
            body=body,
        )