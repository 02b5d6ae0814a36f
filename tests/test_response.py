import pytest

from tinyhttpd.response import STATUS_CODES, HttpResponse, status_line


def test_status_line_known_codes():
    assert status_line(200) == "200 OK"
    assert status_line(404) == "404 Not Found"
    assert status_line(201) == "201 Created"


def test_status_line_unknown_code_raises():
    with pytest.raises(ValueError):
        status_line(999)


def test_every_status_text_starts_with_its_code():
    for code, text in STATUS_CODES.items():
        assert text.startswith(f"{code} ")


def test_serialize_ok_with_content_length():
    res = HttpResponse(status=status_line(200), headers={"Content-Length": "0"})
    assert res.serialize() == "HTTP/1.1 200 OK\r\nContent-Length: 0\r\n\r\n"


def test_serialize_without_headers():
    res = HttpResponse(status=status_line(201))
    assert res.serialize() == "HTTP/1.1 201 Created\r\n\r\n"


def test_serialize_body_follows_blank_line():
    res = HttpResponse(headers={"Content-Type": "text/plain"}, body="abc")
    text = res.serialize()
    head, _, body = text.partition("\r\n\r\n")
    assert body == "abc"
    assert head.split("\r\n")[1] == "Content-Type: text/plain"


def test_to_bytes_matches_serialize():
    res = HttpResponse(body="\xff\x00x")
    data = res.to_bytes()
    assert data.endswith(b"\xff\x00x")
    assert data.decode("latin-1") == res.serialize()