# tinyhttpd

A small HTTP/1.1 server. Each client connection runs on its own thread and
stays open for further requests until the client sends `Connection: close`
or closes the connection itself.

## Installation

```
pip install .
```

## Running

```
tinyhttpd --directory /path/to/files/
```

The server listens on port 4221 on all interfaces. The `--directory` value is
put directly in front of requested file names, so end it with a path
separator. Without `--directory`, file names are used as given, relative to
the current working directory.

If the port cannot be bound, the command prints an error and exits with
status 1.

## Endpoints

| Request                     | Response                                                    |
|-----------------------------|-------------------------------------------------------------|
| `/` (any method)            | `200 OK`, empty body                                        |
| `/index.html` (any method)  | `200 OK`, empty body                                        |
| `/user-agent` (any method)  | `200 OK`, `text/plain` body holding the `User-Agent` header |
| `GET /echo/<text>`          | `200 OK`, `text/plain` body holding `<text>`                |
| `GET /files/<name>`         | file contents as `application/octet-stream`, or `404`       |
| `POST /files/<name>`        | writes the request body to the file, `201 Created`          |
| anything else               | `404 Not Found`                                             |

Endpoint names are matched without regard to case. A `POST /files/<name>`
request whose name contains `..` is refused with `404 Not Found`.

When a request carries `Connection: close`, the response carries the same
header and the server closes the connection after sending it.

## Example

```
$ curl -i http://localhost:4221/echo/hello
HTTP/1.1 200 OK
Content-Length: 5
Content-Type: text/plain

hello
```

## Using it from Python

```python
from tinyhttpd.request import HttpRequest
from tinyhttpd.server import Router

router = Router("/tmp/")
request = HttpRequest.parse("GET /echo/abc HTTP/1.1\r\nHost: localhost\r\n\r\n")
response = router.dispatch(request)
print(response.serialize())
```

- `tinyhttpd.helpers`: `split(text, delimiters, keep_empty=False)`,
  `http_method(name)` and the `HttpMethod` enum.
- `tinyhttpd.request`: `HttpRequest.parse(raw)` raises `ValueError` for a
  malformed request.
- `tinyhttpd.response`: `HttpResponse` with `serialize()` and `to_bytes()`,
  and `status_line(code)`, which raises `ValueError` for an unknown code.
- `tinyhttpd.server`: `Router`, `handle_connection(conn, router)`,
  `serve(directory, host, port)` and `main(argv)`.

## Limitations

- Each request is read with a single receive of at most 1023 bytes; larger
  requests are not reassembled, and `Content-Length` is not used to read a
  body.
- A request that cannot be parsed closes the connection without a reply.
- There is no TLS, no chunked transfer encoding and no compression.

## Tests

```
pip install .[test]
pytest
```