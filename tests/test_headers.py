import pytest

from websock.errors import HttpError
from websock.headers import (
    Extension,
    Headers,
    Origin,
    Parameter,
    WebSocketExtensions,
    WebSocketProtocol,
    WebSocketVersion,
)


def test_header_extensions():
    extensions = WebSocketExtensions.parse_header([b"foo, bar; baz; qux=quux"])
    headers = Headers()
    headers.set(extensions)
    assert str(headers) == "Sec-WebSocket-Extensions: foo, bar; baz; qux=quux\r\n"


def test_extensions_parse_structure():
    extensions = WebSocketExtensions.parse_header([b"foo, bar; baz; qux=quux"])
    assert [e.name for e in extensions] == ["foo", "bar"]
    assert extensions[0].params == []
    assert len(extensions[1].params) == 2
    assert extensions[1].params[0] == Parameter("baz")


def test_extension_display_with_value():
    ext = Extension("foo", [Parameter("a", "1"), Parameter("b")])
    assert str(ext) == "foo; a=1; b"


def test_extension_parse_round_trip():
    ext = Extension.parse("  bar ;  baz ")
    assert ext.name == "bar"
    assert str(ext) == "bar; baz"


def test_header_origin():
    headers = Headers()
    headers.set(Origin("foo bar"))
    assert str(headers) == "Origin: foo bar\r\n"


def test_origin_parse():
    assert Origin.parse_header([b"foobar"]) == Origin("foobar")


@pytest.mark.parametrize("raw", [[], [b""], [b"a", b"b"]])
def test_origin_parse_rejects_bad_raw(raw):
    with pytest.raises(HttpError):
        Origin.parse_header(raw)


def test_header_protocol():
    headers = Headers()
    headers.set(WebSocketProtocol(["foo", "bar"]))
    assert str(headers) == "Sec-WebSocket-Protocol: foo, bar\r\n"


def test_protocol_parse():
    protocol = WebSocketProtocol.parse_header([b"foo, bar"])
    assert protocol.protocols == ["foo", "bar"]
    assert "foo" in protocol


def test_protocol_parse_skips_empty_items():
    protocol = WebSocketProtocol.parse_header([b"foo,, ,bar", b"baz"])
    assert list(protocol) == ["foo", "bar", "baz"]


def test_websocket_version():
    headers = Headers()
    headers.set(WebSocketVersion.WEBSOCKET13)
    assert str(headers) == "Sec-WebSocket-Version: 13\r\n"


def test_version_parse():
    assert WebSocketVersion.parse_header([b"13"]) == WebSocketVersion.WEBSOCKET13
    unknown = WebSocketVersion.parse_header([b"8"])
    assert not unknown.is_websocket13
    assert str(unknown) == "8"


def test_headers_get_parses_raw_case_insensitively():
    headers = Headers()
    headers.set_raw("sec-websocket-protocol", [b"foo, bar"])
    assert headers.has(WebSocketProtocol)
    assert headers.get(WebSocketProtocol) == WebSocketProtocol(["foo", "bar"])


def test_headers_get_missing_and_unparsable():
    headers = Headers()
    assert headers.get(Origin) is None
    headers.set_raw("Origin", [b"a", b"b"])
    assert headers.get(Origin) is None


def test_headers_get_raw_from_typed():
    headers = Headers()
    headers.set(Origin("foobar"))
    assert headers.get_raw("origin") == [b"foobar"]
    assert headers.get_raw("Missing") is None


def test_headers_remove():
    headers = Headers()
    headers.set(Origin("x"))
    assert headers.remove(Origin) is True
    assert not headers.has(Origin)
    assert headers.remove(Origin) is False
    assert len(headers) == 0


def test_headers_set_replaces():
    headers = Headers()
    headers.set_raw("Origin", "first")
    headers.set(Origin("second"))
    assert len(headers) == 1
    assert headers.get(Origin) == Origin("second")
    assert "ORIGIN" in headers