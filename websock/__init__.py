"""WebSocket handshake headers and keys, HTTP handshake codecs, frame reassembly and errors."""

__version__ = "0.1.0"
__all__ = ["errors", "headers", "keys", "http", "receiver"]