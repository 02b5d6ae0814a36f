import pytest

from tinyhttpd.helpers import HttpMethod, http_method, split


def test_split_drops_empty_pieces_by_default():
    assert split("a,,b", ",") == ["a", "b"]


def test_split_keeps_empty_pieces_when_asked():
    assert split("a,,b", ",", True) == ["a", "", "b"]


def test_split_trailing_delimiter_with_keep_empty():
    assert split("a,b,", ",", keep_empty=True) == ["a", "b", ""]


def test_split_empty_string():
    assert split("", ",") == []
    assert split("", ",", keep_empty=True) == [""]


def test_split_any_of_several_delimiters():
    assert split("Host: x\r\nAccept: y\r\n", "\r\n") == ["Host: x", "Accept: y"]


def test_split_path():
    assert split("/echo/abc", "/") == ["echo", "abc"]
    assert split("/", "/") == []


def test_split_without_delimiters_returns_whole_text():
    assert split("abc", "") == ["abc"]


@pytest.mark.parametrize("text", ["a,b", ",", "", "x,,y,", ",lead"])
def test_split_keep_empty_round_trip(text):
    assert ",".join(split(text, ",", keep_empty=True)) == text


@pytest.mark.parametrize(
    "name, expected",
    [
        ("get", HttpMethod.GET),
        ("GET", HttpMethod.GET),
        ("Post", HttpMethod.POST),
        ("option", HttpMethod.OPTION),
        ("PUT", HttpMethod.PUT),
        ("delete", HttpMethod.DELETE),
        ("patch", HttpMethod.PATCH),
    ],
)
def test_http_method_known(name, expected):
    assert http_method(name) is expected


@pytest.mark.parametrize("name", ["HEAD", "OPTIONS", "", "got"])
def test_http_method_unknown(name):
    assert http_method(name) is HttpMethod.UNKNOWN