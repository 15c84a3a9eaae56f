"""Reassembly of data frames into whole messages."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Iterator

from .errors import IoError, ProtocolError

__all__ = ["Opcode", "Frame", "Receiver"]


class Opcode(enum.IntEnum):
    """The opcode of a WebSocket data frame."""

    CONTINUATION = 0
    TEXT = 1
    BINARY = 2
    NON_CONTROL1 = 3
    NON_CONTROL2 = 4
    NON_CONTROL3 = 5
    NON_CONTROL4 = 6
    NON_CONTROL5 = 7
    CLOSE = 8
    PING = 9
    PONG = 10
    CONTROL1 = 11
    CONTROL2 = 12
    CONTROL3 = 13
    CONTROL4 = 14
    CONTROL5 = 15

    @property
    def is_control(self) -> bool:
        return self >= Opcode.CLOSE


@dataclass
class Frame:
    """A single WebSocket data frame."""

    opcode: Opcode
    data: bytes = b""
    finished: bool = True


class Receiver:
    """Collects data frames into the frames that make up one message."""

    def __init__(self, mask: bool = False) -> None:
        self.mask = mask
        self._buffer: list[Frame] = []

    def _next(self, frames: Iterator[Frame]) -> Frame:
        try:
            return next(frames)
        except StopIteration:
            raise IoError(ConnectionError("stream ended before a message was complete")) from None

    def recv_message_dataframes(self, frames: Iterable[Frame]) -> list[Frame]:
        """Read frames until one message is complete and return its frames.

        A control frame arriving in the middle of a fragmented message is
        returned alone; the fragments so far are kept for the next call.
        """
        source = iter(frames)
        if not self._buffer:
            first = self._next(source)
            if first.opcode == Opcode.CONTINUATION:
                raise ProtocolError("Unexpected continuation data frame opcode")
            finished = first.finished
            self._buffer.append(first)
        else:
            finished = False

        while not finished:
            frame = self._next(source)
            finished = frame.finished
            if frame.opcode == Opcode.CONTINUATION:
                self._buffer.append(frame)
            elif Opcode(frame.opcode).is_control:
                return [frame]
            else:
                raise ProtocolError("Unexpected data frame opcode")

        message, self._buffer = self._buffer, []
        return message