"""Errors raised while speaking the WebSocket protocol."""

from __future__ import annotations

import enum

__all__ = [
    "WebSocketError",
    "ProtocolError",
    "RequestError",
    "ResponseError",
    "StatusCodeError",
    "HttpError",
    "UrlError",
    "IoError",
    "WebSocketUrlError",
    "WSUrlErrorKind",
    "HyperIntoWsError",
    "into_websocket_error",
]


class WebSocketError(Exception):
    """Base class of every error raised by this package."""

    @property
    def description(self) -> str:
        return "WebSocket error"

    def __str__(self) -> str:
        return f"WebSocketError: {self.description}"


class ProtocolError(WebSocketError):
    """The peer broke the WebSocket protocol."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def description(self) -> str:
        return self.message


class RequestError(WebSocketError):
    """An invalid WebSocket handshake request."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def description(self) -> str:
        return "WebSocket request error"


class ResponseError(WebSocketError):
    """An invalid WebSocket handshake response."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def description(self) -> str:
        return "WebSocket response error"


class StatusCodeError(WebSocketError):
    """The server answered with an unexpected HTTP status code."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status

    @property
    def description(self) -> str:
        return "Received unexpected status code"


class HttpError(WebSocketError):
    """HTTP data could not be parsed."""

    def __init__(self, cause: BaseException | None = None) -> None:
        super().__init__(cause)
        self.__cause__ = cause

    @property
    def description(self) -> str:
        return "HTTP failure"


class UrlError(WebSocketError):
    """A URL could not be parsed."""

    def __init__(self, cause: BaseException | None = None) -> None:
        super().__init__(cause)
        self.__cause__ = cause

    @property
    def description(self) -> str:
        return "URL failure"


class IoError(WebSocketError):
    """An input/output operation failed."""

    def __init__(self, cause: OSError) -> None:
        super().__init__(cause)
        self.__cause__ = cause

    @property
    def description(self) -> str:
        return str(self.__cause__)


class WSUrlErrorKind(enum.Enum):
    """Ways in which a URL can be unfit for a WebSocket connection."""

    CANNOT_SET_FRAGMENT = "WebSocket URL cannot set fragment"
    INVALID_SCHEME = "WebSocket URL invalid scheme"
    NO_HOST_NAME = "WebSocket URL no host name provided"

    def description(self) -> str:
        return self.value

    def __str__(self) -> str:
        return f"WebSocket Url Error: {self.value}"


class WebSocketUrlError(WebSocketError):
    """A URL that cannot be used for a WebSocket connection."""

    def __init__(self, kind: WSUrlErrorKind) -> None:
        super().__init__(kind)
        self.kind = kind

    @property
    def description(self) -> str:
        return "WebSocket URL failure"


class HyperIntoWsError(enum.Enum):
    """Reasons an HTTP request cannot be upgraded to a WebSocket."""

    METHOD_NOT_GET = "Request method must be GET"
    UNSUPPORTED_HTTP_VERSION = "Unsupported request HTTP version"
    UNSUPPORTED_WEBSOCKET_VERSION = "Unsupported WebSocket version"
    NO_SEC_WS_KEY_HEADER = "Missing Sec-WebSocket-Key header"
    NO_WS_UPGRADE_HEADER = "Invalid Upgrade WebSocket header"
    NO_UPGRADE_HEADER = "Missing Upgrade WebSocket header"
    NO_WS_CONNECTION_HEADER = "Invalid Connection WebSocket header"
    NO_CONNECTION_HEADER = "Missing Connection WebSocket header"


def into_websocket_error(err: object) -> WebSocketError:
    """Convert a lower-level failure into the matching WebSocketError."""
    if isinstance(err, WebSocketError):
        return err
    if isinstance(err, HyperIntoWsError):
        return ProtocolError(err.value)
    if isinstance(err, WSUrlErrorKind):
        return WebSocketUrlError(err)
    if isinstance(err, OSError):
        return IoError(err)
    if isinstance(err, ValueError):
        return UrlError(err)
    raise TypeError(f"cannot convert {type(err).__name__} into a WebSocketError")