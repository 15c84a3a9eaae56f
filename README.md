# websock

Building blocks for the WebSocket protocol (RFC 6455), with no dependencies
outside the standard library:

- `websock.headers`: a case-insensitive `Headers` collection and the typed
  handshake headers `Origin`, `WebSocketProtocol`, `WebSocketExtensions`
  (with `Extension` and `Parameter`) and `WebSocketVersion`.
- `websock.keys`: `WebSocketKey` and `WebSocketAccept`, the
  `Sec-WebSocket-Key` / `Sec-WebSocket-Accept` pair.
- `websock.http`: `HttpClientCodec` and `HttpServerCodec`, which turn
  `Request` and `Response` heads into bytes and read them back from a buffer.
- `websock.receiver`: a `Receiver` that groups `Frame` objects into the frames
  of one complete message.
- `websock.errors`: the `WebSocketError` hierarchy raised by all of the above.

## Installation

```
pip install websock
```

The `test` extra installs pytest for running the test suite.

## Headers

```python
from websock.headers import Headers, WebSocketProtocol, WebSocketExtensions

headers = Headers()
headers.set(WebSocketProtocol(["chat", "superchat"]))
headers.set(WebSocketExtensions.parse_header([b"foo, bar; baz; qux=quux"]))
print(repr(str(headers)))
# 'Sec-WebSocket-Protocol: chat, superchat\r\nSec-WebSocket-Extensions: foo, bar; baz; qux=quux\r\n'
```

Each header class has a `header_name` and a `parse_header(raw)` class method
that takes a list of raw byte lines. `Headers.set` replaces any header of the
same name; `get`, `has` and `remove` take the header class. Raw lines can be
stored and read with `set_raw` and `get_raw`; `get` parses raw lines on demand
and returns `None` if the header is absent or cannot be parsed.

`WebSocketVersion.WEBSOCKET13` is the RFC 6455 version; any other value is
kept as written, and `is_websocket13` tells them apart.

## Handshake keys

```python
from websock.keys import WebSocketKey, WebSocketAccept

key = WebSocketKey.from_str("dGhlIHNhbXBsZSBub25jZQ==")
accept = WebSocketAccept.from_key(key)
print(accept.serialize())  # s3pPLMBiTxaQ9kYGzzhZRbK+xOo=
```

`WebSocketKey.generate()` makes a fresh random key, and
`WebSocketKey.from_array(data)` takes 16 bytes as given. A key must be exactly
16 bytes and an accept value exactly 20; anything else raises `ProtocolError`.

## HTTP handshake codecs

```python
from websock.http import HttpServerCodec

codec = HttpServerCodec()
buffer = bytearray(b"GET / HTTP/1.1\r\nHost: example.com\r\n\r\n")
request = codec.decode(buffer)
print(request.method, request.target)  # GET /
```

`decode` returns `None` while the buffer holds no complete head (no blank
line yet). Once it does, the head is taken out of the buffer and anything
after it is left for the caller. A malformed head raises `HttpCodecError`; a
head with more than 100 header lines is dropped and `None` is returned.
Only `HTTP/1.0` and `HTTP/1.1` are accepted.

`HttpClientCodec` does the opposite: it encodes a `Request` and decodes a
`Response`. When a `Response` has no `reason`, the encoder uses the standard
phrase for its status code.

## Reassembling frames

```python
from websock.receiver import Frame, Opcode, Receiver

receiver = Receiver()
frames = [
    Frame(Opcode.TEXT, b"Hel", finished=False),
    Frame(Opcode.CONTINUATION, b"lo", finished=True),
]
message = receiver.recv_message_dataframes(frames)
print(b"".join(f.data for f in message))  # b'Hello'
```

A control frame that arrives in the middle of a fragmented message is
returned on its own, and the fragments gathered so far are kept for the next
call. A continuation frame with no message to continue, or a new data frame
in the middle of one, raises `ProtocolError`; running out of frames before
the message is complete raises `IoError`.

## Errors

Every error derives from `websock.errors.WebSocketError`. `ProtocolError`,
`RequestError`, `ResponseError`, `StatusCodeError`, `HttpError`, `UrlError`,
`IoError` and `WebSocketUrlError` (carrying a `WSUrlErrorKind`) cover the
different failures, and `into_websocket_error` converts an `OSError`, a
`ValueError`, a `WSUrlErrorKind` or a `HyperIntoWsError` into the matching
one.

## What this package does not do

It has no network client or server: it does not open connections, perform a
handshake over a socket, or accept incoming ones. It does not read or write
frames as bytes on the wire, apply masking, or turn frames into text and
binary messages. Those parts are left to the code that uses it.