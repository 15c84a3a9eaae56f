"""Encoding and decoding of the HTTP messages of a WebSocket handshake."""

from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus

from .errors import WebSocketError
from .headers import Headers

__all__ = [
    "Request",
    "Response",
    "HttpCodecError",
    "HttpClientCodec",
    "HttpServerCodec",
]

_TERMINATOR = b"\r\n\r\n"
_VERSIONS = ("HTTP/1.0", "HTTP/1.1")
_MAX_HEADERS = 100
_SEPARATORS = set('()<>@,;:\\"/[]?={} \t')


class HttpCodecError(WebSocketError):
    """HTTP data could not be written or parsed."""

    def __init__(self, cause: BaseException | str) -> None:
        if isinstance(cause, str):
            cause = ValueError(cause)
        super().__init__(cause)
        self.cause = cause
        self.__cause__ = cause

    @property
    def description(self) -> str:
        return str(self.cause)

    def __str__(self) -> str:
        return self.description


class _TooLarge(Exception):
    pass


@dataclass
class Request:
    """An HTTP request head."""

    method: str
    target: str
    version: str = "HTTP/1.1"
    headers: Headers = field(default_factory=Headers)


@dataclass
class Response:
    """An HTTP response head."""

    status: int
    version: str = "HTTP/1.1"
    reason: str | None = None
    headers: Headers = field(default_factory=Headers)

    @property
    def canonical_reason(self) -> str:
        try:
            return HTTPStatus(self.status).phrase
        except ValueError:
            return "<unknown status code>"


def _split_off_http(buffer: bytearray) -> bytes | None:
    end = buffer.find(_TERMINATOR)
    if end < 0:
        return None
    chunk = bytes(buffer[: end + len(_TERMINATOR)])
    del buffer[: end + len(_TERMINATOR)]
    return chunk


def _is_token(text: str) -> bool:
    return bool(text) and all(33 <= ord(c) < 127 and c not in _SEPARATORS for c in text)


def _check_version(version: str) -> str:
    if version not in _VERSIONS:
        raise HttpCodecError(f"unsupported HTTP version: {version!r}")
    return version


def _split_head(chunk: bytes) -> tuple[str, Headers]:
    lines = chunk[: -len(_TERMINATOR)].split(b"\r\n")
    try:
        start = lines[0].decode("ascii")
    except UnicodeDecodeError as exc:
        raise HttpCodecError(exc) from exc
    collected: dict[str, tuple[str, list[bytes]]] = {}
    for line in lines[1:]:
        if line[:1] in (b" ", b"\t"):
            raise HttpCodecError("folded header lines are not supported")
        name, sep, value = line.partition(b":")
        try:
            text_name = name.decode("ascii")
        except UnicodeDecodeError as exc:
            raise HttpCodecError(exc) from exc
        if not sep or not _is_token(text_name):
            raise HttpCodecError(f"invalid header line: {line!r}")
        key = text_name.lower()
        collected.setdefault(key, (text_name, []))[1].append(value.strip(b" \t"))
    if sum(len(values) for _, values in collected.values()) > _MAX_HEADERS:
        raise _TooLarge
    headers = Headers()
    for name, values in collected.values():
        headers.set_raw(name, values)
    return start, headers


def _parse_request(chunk: bytes) -> Request:
    start, headers = _split_head(chunk)
    parts = start.split(" ")
    if len(parts) != 3:
        raise HttpCodecError(f"invalid request line: {start!r}")
    method, target, version = parts
    if not _is_token(method) or not target:
        raise HttpCodecError(f"invalid request line: {start!r}")
    return Request(method, target, _check_version(version), headers)


def _parse_response(chunk: bytes) -> Response:
    start, headers = _split_head(chunk)
    version, _, rest = start.partition(" ")
    code, _, reason = rest.partition(" ")
    if len(code) != 3 or not code.isdigit():
        raise HttpCodecError(f"invalid status line: {start!r}")
    return Response(int(code), _check_version(version), reason, headers)


class HttpClientCodec:
    """Writes HTTP requests and reads HTTP responses."""

    def encode(self, request: Request) -> bytes:
        head = f"{request.method} {request.target} {request.version}\r\n{request.headers}\r\n"
        return head.encode("utf-8")

    def decode(self, buffer: bytearray) -> Response | None:
        """Consume one response head from the buffer, or return None if incomplete."""
        chunk = _split_off_http(buffer)
        if chunk is None:
            return None
        try:
            return _parse_response(chunk)
        except _TooLarge:
            return None


class HttpServerCodec:
    """Writes HTTP responses and reads HTTP requests."""

    def encode(self, response: Response) -> bytes:
        reason = response.reason or response.canonical_reason
        head = f"{response.version} {response.status} {reason}\r\n{response.headers}\r\n"
        return head.encode("utf-8")

    def decode(self, buffer: bytearray) -> Request | None:
        """Consume one request head from the buffer, or return None if incomplete."""
        chunk = _split_off_http(buffer)
        if chunk is None:
            return None
        try:
            return _parse_request(chunk)
        except _TooLarge:
            return None