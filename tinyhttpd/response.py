"""HTTP responses and their wire form."""

from __future__ import annotations

from dataclasses import dataclass, field

HTTP_VERSION = "HTTP/1.1"

STATUS_CODES: dict[int, str] = {
    100: "100 Continue",
    101: "101 Switching Protocols",
    200: "200 OK",
    201: "201 Created",
    202: "202 Accepted",
    203: "203 Non-Authoritative Information",
    204: "204 No Content",
    205: "205 Reset Content",
    206: "206 Partial Content",
    300: "300 Multiple Choices",
    301: "301 Moved Permanently",
    302: "302 Found",
    303: "303 See Other",
    304: "304 Not Modified",
    307: "307 Temporary Redirect",
    308: "308 Permanent Redirect",
    400: "400 Bad Request",
    401: "401 Unauthorized",
    402: "402 Payment Required",
    403: "403 Forbidden",
    404: "404 Not Found",
    405: "405 Method Not Allowed",
    406: "406 Not Acceptable",
    408: "408 Request Timeout",
    409: "409 Conflict",
    410: "410 Gone",
    411: "411 Length Required",
    412: "412 Precondition Failed",
    413: "413 Content Too Large",
    414: "414 URI Too Long",
    500: "500 Internal Server Error",
    501: "501 Not Implemented",
    502: "502 Bad Gateway",
    503: "503 Service Unavailable",
    504: "504 Gateway Timeout",
    505: "505 HTTP Version Not Supported",
}


def status_line(code: int) -> str:
    """Return the status text for ``code``, e.g. ``"200 OK"``."""
    try:
        return STATUS_CODES[code]
    except KeyError:
        raise ValueError(f"unknown status code: {code}") from None


@dataclass
class HttpResponse:
    """A response; the body is text holding one character per byte."""

    status: str = STATUS_CODES[200]
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""
    version: str = HTTP_VERSION

    def serialize(self) -> str:
        """Return the full response text: status line, headers, blank line, body."""
        lines = [f"{self.version} {self.status}"]
        lines.extend(f"{key}: {value}" for key, value in self.headers.items())
        return "\r\n".join(lines) + "\r\n\r\n" + self.body

    def to_bytes(self) -> bytes:
        """Return the response as bytes ready to send."""
        return self.serialize().encode("latin-1")