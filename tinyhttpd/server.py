"""Routing and a threaded TCP server for the small HTTP service."""

from __future__ import annotations

import socket
import sys
import threading
from collections.abc import Callable

from .helpers import HttpMethod
from .request import HttpRequest
from .response import HttpResponse, status_line

DEFAULT_PORT = 4221
_BACKLOG = 5
_RECV_SIZE = 1023


class Router:
    """Maps parsed requests to responses; files are served from ``directory``."""

    def __init__(self, directory: str = "") -> None:
        self.directory = directory
        self._get: dict[str, Callable[[str], HttpResponse]] = {
            "echo": self.echo,
            "files": self.read_file,
        }
        self._post: dict[str, Callable[[str, str], HttpResponse]] = {
            "files": self.write_file,
        }
        self._header: dict[str, Callable[[str], HttpResponse]] = {
            "user-agent": self.user_agent,
        }

    def echo(self, text: str = "") -> HttpResponse:
        """Reply with ``text`` as plain text."""
        return HttpResponse(
            status=status_line(200),
            headers={"Content-Length": str(len(text)), "Content-Type": "text/plain"},
            body=text,
        )

    def user_agent(self, value: str) -> HttpResponse:
        """Reply with the value of the User-Agent header."""
        return self.echo(value)

    def ok(self) -> HttpResponse:
        """An empty 200 reply."""
        return HttpResponse(status=status_line(200), headers={"Content-Length": "0"})

    def not_found(self) -> HttpResponse:
        """An empty 404 reply."""
        return HttpResponse(status=status_line(404), headers={"Content-Length": "0"})

    def read_file(self, name: str) -> HttpResponse:
        """Reply with the contents of a file, or 404 if it cannot be opened."""
        path = self.directory + name
        print(path)
        try:
            with open(path, "rb") as handle:
                data = handle.read().decode("latin-1")
        except OSError:
            return self.not_found()
        return HttpResponse(
            status=status_line(200),
            headers={
                "Content-Length": str(len(data)),
                "Content-Type": "application/octet-stream",
            },
            body=data,
        )

    def write_file(self, name: str, body: str) -> HttpResponse:
        """Store ``body`` in a file; names with '..' or '/' get 404."""
        if ".." in name or "/" in name:
            return self.not_found()
        with open(self.directory + name, "wb") as handle:
            handle.write(body.encode("latin-1"))
        return HttpResponse(status=status_line(201))

    def dispatch(self, request: HttpRequest) -> HttpResponse:
        """Choose and build the response for ``request``."""
        url = request.url
        response = self.not_found()
        if not url:
            response = self.ok()
        else:
            first = url[0].lower()
            if len(url) == 1:
                if first == "index.html":
                    response = self.ok()
                elif first in self._header:
                    response = self._header[first](request.headers.get(url[0], ""))
            elif first in self._get and request.method is HttpMethod.GET:
                response = self._get[first](url[1])
            elif first in self._post and request.method is HttpMethod.POST:
                response = self._post[first](url[1], request.body)
        if request.headers.get("connection") == "close":
            response.headers["Connection"] = "close"
        return response


def handle_connection(conn: socket.socket, router: Router) -> None:
    """Serve requests on ``conn`` until the peer closes or asks to close."""
    with conn:
        while True:
            try:
                data = conn.recv(_RECV_SIZE)
            except OSError:
                break
            if not data:
                break
            raw = data.split(b"\0", 1)[0].decode("latin-1")
            try:
                request = HttpRequest.parse(raw)
            except ValueError:
                break
            response = router.dispatch(request)
            try:
                conn.sendall(response.to_bytes())
            except OSError:
                break
            if request.headers.get("connection") == "close":
                break


def serve(directory: str = "", host: str = "", port: int = DEFAULT_PORT) -> None:
    """Accept connections forever, one thread per client."""
    router = Router(directory)
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
        server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        server.bind((host, port))
        server.listen(_BACKLOG)
        while True:
            print("Waiting for a client to connect...")
            conn, _ = server.accept()
            print("Client connected")
            threading.Thread(
                target=handle_connection, args=(conn, router), daemon=True
            ).start()


def parse_args(argv: list[str]) -> str:
    """Return the value given after ``--directory``, or an empty string."""
    for flag, value in zip(argv, argv[1:]):
        if flag == "--directory":
            return value
    return ""


def main(argv: list[str] | None = None) -> int:
    """Command entry point."""
    if argv is None:
        argv = sys.argv[1:]
    directory = parse_args(argv)
    print("Logs from your program will appear here!", flush=True)
    try:
        serve(directory)
    except OSError as exc:
        print(f"Failed to bind to port {DEFAULT_PORT}: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())