"""The Sec-WebSocket-Key and Sec-WebSocket-Accept handshake headers."""

from __future__ import annotations

import base64
import binascii
import hashlib
import os
from dataclasses import dataclass
from typing import ClassVar

from .errors import HttpError, ProtocolError, WebSocketError
from .headers import _one_raw_str

__all__ = ["WebSocketKey", "WebSocketAccept", "MAGIC_GUID"]

MAGIC_GUID = b"258EAFA5-E914-47DA-95CA-C5AB0DC85B11"

_KEY_LENGTH = 16
_ACCEPT_LENGTH = 20


def _decode_exact(text: str, length: int, what: str) -> bytes:
    try:
        data = base64.b64decode(text.strip(), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ProtocolError(f"Invalid {what}: not valid base64") from exc
    if len(data) != length:
        raise ProtocolError(f"{what} must be {length} bytes")
    return data


@dataclass(frozen=True)
class WebSocketKey:
    """The 16-byte nonce a client sends in its handshake."""

    header_name: ClassVar[str] = "Sec-WebSocket-Key"
    data: bytes

    def __post_init__(self) -> None:
        if len(self.data) != _KEY_LENGTH:
            raise ProtocolError(f"Sec-WebSocket-Key must be {_KEY_LENGTH} bytes")

    @classmethod
    def generate(cls) -> WebSocketKey:
        """Create a new random key."""
        return cls(os.urandom(_KEY_LENGTH))

    @classmethod
    def from_str(cls, text: str) -> WebSocketKey:
        """Parse a base64 key; it must decode to exactly 16 bytes."""
        return cls(_decode_exact(text, _KEY_LENGTH, "Sec-WebSocket-Key"))

    @classmethod
    def from_array(cls, data: bytes | bytearray | list[int]) -> WebSocketKey:
        """Create a key from the given 16 bytes."""
        return cls(bytes(data))

    def serialize(self) -> str:
        return base64.b64encode(self.data).decode("ascii")

    @classmethod
    def parse_header(cls, raw: list[bytes]) -> WebSocketKey:
        try:
            return cls.from_str(_one_raw_str(raw))
        except HttpError:
            raise
        except WebSocketError as exc:
            raise HttpError(exc) from exc

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"WebSocketKey({self.serialize()!r})"


@dataclass(frozen=True)
class WebSocketAccept:
    """The 20-byte digest a server returns to accept a handshake."""

    header_name: ClassVar[str] = "Sec-WebSocket-Accept"
    data: bytes

    def __post_init__(self) -> None:
        if len(self.data) != _ACCEPT_LENGTH:
            raise ProtocolError(
                f"Sec-WebSocket-Accept must be {_ACCEPT_LENGTH} bytes"
            )

    @classmethod
    def from_key(cls, key: WebSocketKey) -> WebSocketAccept:
        """Compute the accept value that answers the given key."""
        digest = hashlib.sha1(key.serialize().encode("ascii") + MAGIC_GUID).digest()
        return cls(digest)

    @classmethod
    def from_str(cls, text: str) -> WebSocketAccept:
        """Parse a base64 accept value; it must decode to exactly 20 bytes."""
        return cls(_decode_exact(text, _ACCEPT_LENGTH, "Sec-WebSocket-Accept"))

    def serialize(self) -> str:
        return base64.b64encode(self.data).decode("ascii")

    @classmethod
    def parse_header(cls, raw: list[bytes]) -> WebSocketAccept:
        try:
            return cls.from_str(_one_raw_str(raw))
        except HttpError:
            raise
        except WebSocketError as exc:
            raise HttpError(exc) from exc

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"WebSocketAccept({self.serialize()!r})"