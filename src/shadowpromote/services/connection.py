"""Framed TCP connection to a metadata server admin port."""

import socket
from typing import Optional

from shadowpromote.constants import ANTOAN_NOP, HEADER_SIZE, MAX_PACKET_SIZE
from shadowpromote.errors import ProtocolError, TransportError
from shadowpromote.services.messages import unpack_header


class ServerConnection:
    """Blocking request/response channel bound to one host and port."""

    def __init__(
        self,
        host: str,
        port: int,
        timeout: Optional[float] = None,
        logger=None,
        socket_module=socket,
    ):
        self.host = host
        self.port = port
        self.timeout = timeout
        self.logger = logger
        self.socket = socket_module
        self._sock = None

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def connect(self):
        if self._sock is not None:
            return
        try:
            self._sock = self.socket.create_connection((self.host, self.port), timeout=self.timeout)
        except (OSError, UnicodeError) as exc:
            raise TransportError(f"Cannot connect to {self.host}:{self.port}: {exc}") from exc
        if self.logger:
            self.logger.debug("Connected to %s:%s", self.host, self.port)

    def close(self):
        if self._sock is None:
            return
        try:
            self._sock.close()
        except OSError as exc:
            if self.logger:
                self.logger.warning("Error while closing connection: %s", exc)
        finally:
            self._sock = None

    def send_and_receive(self, request: bytes, expected_type: int) -> bytes:
        """Sends one packet and returns the payload of the matching reply."""
        if self._sock is None:
            raise TransportError("Connection is not open.")

        try:
            self._sock.sendall(request)
        except OSError as exc:
            raise TransportError(f"Failed to send request: {exc}") from exc

        while True:
            message_type, length = unpack_header(self._recv_exactly(HEADER_SIZE))
            if length > MAX_PACKET_SIZE:
                raise ProtocolError(f"Reply packet too large: {length} bytes.")

            payload = self._recv_exactly(length)
            if message_type == ANTOAN_NOP:
                continue
            if message_type != expected_type:
                raise ProtocolError(
                    f"Unexpected reply type {message_type} (expected {expected_type})."
                )
            return payload

    def _recv_exactly(self, size: int) -> bytes:
        chunks = []
        remaining = size
        while remaining > 0:
            try:
                chunk = self._sock.recv(remaining)
            except OSError as exc:
                raise TransportError(f"Failed to read reply: {exc}") from exc
            if not chunk:
                raise TransportError("Connection closed by server.")
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)
