import pytest

from websock.errors import (
    HttpError,
    HyperIntoWsError,
    IoError,
    ProtocolError,
    RequestError,
    ResponseError,
    StatusCodeError,
    UrlError,
    WebSocketError,
    WebSocketUrlError,
    WSUrlErrorKind,
    into_websocket_error,
)


def test_protocol_error_description_is_message():
    err = ProtocolError("Unexpected data frame opcode")
    assert err.description == "Unexpected data frame opcode"
    assert str(err) == "WebSocketError: Unexpected data frame opcode"


@pytest.mark.parametrize(
    "err, description",
    [
        (RequestError("bad"), "WebSocket request error"),
        (ResponseError("bad"), "WebSocket response error"),
        (StatusCodeError(404), "Received unexpected status code"),
        (HttpError(), "HTTP failure"),
        (UrlError(ValueError("x")), "URL failure"),
        (WebSocketUrlError(WSUrlErrorKind.NO_HOST_NAME), "WebSocket URL failure"),
    ],
)
def test_fixed_descriptions(err, description):
    assert err.description == description
    assert str(err) == "WebSocketError: " + description
    assert isinstance(err, WebSocketError)


def test_io_error_uses_cause_text():
    cause = OSError("connection reset")
    err = IoError(cause)
    assert err.description == str(cause)
    assert err.__cause__ is cause


def test_url_error_kind_descriptions():
    assert WSUrlErrorKind.CANNOT_SET_FRAGMENT.description() == "WebSocket URL cannot set fragment"
    assert WSUrlErrorKind.INVALID_SCHEME.description() == "WebSocket URL invalid scheme"
    assert str(WSUrlErrorKind.NO_HOST_NAME) == (
        "WebSocket Url Error: WebSocket URL no host name provided"
    )


@pytest.mark.parametrize("reason", list(HyperIntoWsError))
def test_upgrade_reasons_become_protocol_errors(reason):
    err = into_websocket_error(reason)
    assert isinstance(err, ProtocolError)
    assert err.message == reason.value


def test_method_not_get_message():
    err = into_websocket_error(HyperIntoWsError.METHOD_NOT_GET)
    assert err.message == "Request method must be GET"


def test_conversion_of_other_failures():
    os_err = OSError("boom")
    io = into_websocket_error(os_err)
    assert isinstance(io, IoError) and io.__cause__ is os_err

    url = into_websocket_error(WSUrlErrorKind.INVALID_SCHEME)
    assert isinstance(url, WebSocketUrlError)
    assert url.kind is WSUrlErrorKind.INVALID_SCHEME

    value_err = ValueError("bad url")
    parsed = into_websocket_error(value_err)
    assert isinstance(parsed, UrlError) and parsed.__cause__ is value_err


def test_websocket_error_passes_through():
    err = ProtocolError("x")
    assert into_websocket_error(err) is err


def test_unknown_object_rejected():
    with pytest.raises(TypeError):
        into_websocket_error(object())


def test_status_code_error_keeps_status_and_is_catchable_as_base():
    err = into_websocket_error(StatusCodeError(500))
    assert err.status == 500
    assert err.description == "Received unexpected status code"
    with pytest.raises(WebSocketError) as info:
        raise err
    assert info.value is err