"""HTTP header collection and the headers used in a WebSocket handshake."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Iterable, Iterator, Protocol, TypeVar

from .errors import HttpError

__all__ = [
    "Headers",
    "Parameter",
    "Extension",
    "WebSocketExtensions",
    "Origin",
    "WebSocketProtocol",
    "WebSocketVersion",
]


class _Header(Protocol):
    header_name: ClassVar[str]

    @classmethod
    def parse_header(cls, raw: list[bytes]): ...


H = TypeVar("H")


def _one_raw_str(raw: list[bytes]) -> str:
    if len(raw) != 1 or raw[0] == b"":
        raise HttpError(ValueError("expected exactly one non-empty header value"))
    try:
        return raw[0].decode("utf-8")
    except UnicodeDecodeError as exc:
        raise HttpError(exc) from exc


def _comma_delimited(raw: list[bytes]) -> Iterator[str]:
    for line in raw:
        try:
            text = line.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise HttpError(exc) from exc
        for item in text.split(","):
            item = item.strip()
            if item:
                yield item


@dataclass
class _Entry:
    name: str
    raw: list[bytes] | None = None
    typed: object | None = None

    def raw_values(self) -> list[bytes]:
        if self.raw is not None:
            return list(self.raw)
        return [str(self.typed).encode("utf-8")]


class Headers:
    """An ordered, case-insensitive collection of HTTP headers."""

    def __init__(self) -> None:
        self._entries: dict[str, _Entry] = {}

    def set(self, header: object) -> None:
        """Store a typed header, replacing any header of the same name."""
        name = type(header).header_name
        self._entries[name.lower()] = _Entry(name=name, typed=header)

    def get(self, header_type: type[H]) -> H | None:
        """Return the header of this type, or None if absent or unparsable."""
        entry = self._entries.get(header_type.header_name.lower())
        if entry is None:
            return None
        if isinstance(entry.typed, header_type):
            return entry.typed
        try:
            value = header_type.parse_header(entry.raw_values())
        except (HttpError, ValueError):
            return None
        entry.typed = value
        return value

    def has(self, header_type: type) -> bool:
        return header_type.header_name.lower() in self._entries

    def remove(self, header_type: type) -> bool:
        """Remove the header of this type; return whether it was present."""
        return self._entries.pop(header_type.header_name.lower(), None) is not None

    def set_raw(self, name: str, value: bytes | str | Iterable[bytes]) -> None:
        """Store raw header lines under the given name."""
        if isinstance(value, str):
            lines = [value.encode("utf-8")]
        elif isinstance(value, (bytes, bytearray)):
            lines = [bytes(value)]
        else:
            lines = [bytes(v) for v in value]
        self._entries[name.lower()] = _Entry(name=name, raw=lines)

    def get_raw(self, name: str) -> list[bytes] | None:
        entry = self._entries.get(name.lower())
        return None if entry is None else entry.raw_values()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        for entry in self._entries.values():
            if entry.raw is None:
                yield entry.name, str(entry.typed)
            else:
                for line in entry.raw:
                    yield entry.name, line.decode("utf-8", errors="replace")

    def __str__(self) -> str:
        return "".join(f"{name}: {value}\r\n" for name, value in self)

    def __repr__(self) -> str:
        return f"Headers({list(self)!r})"


@dataclass
class Parameter:
    """A parameter of a WebSocket extension."""

    name: str
    value: str | None = None

    def __str__(self) -> str:
        return self.name if self.value is None else f"{self.name}={self.value}"


@dataclass
class Extension:
    """A WebSocket extension with its parameters."""

    name: str
    params: list[Parameter] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> Extension:
        name, *rest = (part.strip() for part in text.split(";"))
        # Parameters are kept whole, as written, in the parameter name.
        return cls(name=name, params=[Parameter(part.strip()) for part in rest])

    def __str__(self) -> str:
        return "".join([self.name, *(f"; {p}" for p in self.params)])


@dataclass
class WebSocketExtensions:
    """The Sec-WebSocket-Extensions header."""

    header_name: ClassVar[str] = "Sec-WebSocket-Extensions"
    extensions: list[Extension] = field(default_factory=list)

    @classmethod
    def parse_header(cls, raw: list[bytes]) -> WebSocketExtensions:
        return cls([Extension.parse(item) for item in _comma_delimited(raw)])

    def __iter__(self) -> Iterator[Extension]:
        return iter(self.extensions)

    def __len__(self) -> int:
        return len(self.extensions)

    def __getitem__(self, index: int) -> Extension:
        return self.extensions[index]

    def __str__(self) -> str:
        return ", ".join(str(e) for e in self.extensions)


@dataclass
class Origin:
    """The Origin header."""

    header_name: ClassVar[str] = "Origin"
    value: str

    @classmethod
    def parse_header(cls, raw: list[bytes]) -> Origin:
        return cls(_one_raw_str(raw))

    def __str__(self) -> str:
        return self.value


@dataclass
class WebSocketProtocol:
    """The Sec-WebSocket-Protocol header."""

    header_name: ClassVar[str] = "Sec-WebSocket-Protocol"
    protocols: list[str] = field(default_factory=list)

    @classmethod
    def parse_header(cls, raw: list[bytes]) -> WebSocketProtocol:
        return cls(list(_comma_delimited(raw)))

    def __iter__(self) -> Iterator[str]:
        return iter(self.protocols)

    def __len__(self) -> int:
        return len(self.protocols)

    def __getitem__(self, index: int) -> str:
        return self.protocols[index]

    def __contains__(self, protocol: object) -> bool:
        return protocol in self.protocols

    def __str__(self) -> str:
        return ", ".join(self.protocols)


@dataclass(frozen=True)
class WebSocketVersion:
    """The Sec-WebSocket-Version header; "13" is the RFC 6455 version."""

    header_name: ClassVar[str] = "Sec-WebSocket-Version"
    WEBSOCKET13: ClassVar[WebSocketVersion]
    value: str = "13"

    @property
    def is_websocket13(self) -> bool:
        return self.value == "13"

    @classmethod
    def parse_header(cls, raw: list[bytes]) -> WebSocketVersion:
        return cls(_one_raw_str(raw))

    def __str__(self) -> str:
        return self.value


WebSocketVersion.WEBSOCKET13 = WebSocketVersion("13")