"""Connection to a NUT server and the request/response primitives.

The protocol is strictly half-duplex: every call sends one request and then
reads all the lines that belong to its answer before returning. A Session is
not safe for concurrent use.
"""

import enum
import logging
import socket
from typing import List, Optional, Sequence

from .errors import (
    InvalidResponseError,
    ServerError,
    StreamClosedError,
    TransportError,
)
from .request import Request
from .response import Response

logger = logging.getLogger(__name__)

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 3493


class SessionState(enum.Enum):
    DISCONNECTED = "disconnected"
    CONNECTED = "connected"
    CLOSED = "closed"


class Session:
    """A single connection to a NUT server.

    A closed Session cannot be reopened; create a new one to reconnect.
    """

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        timeout: Optional[float] = None,
    ):
        self.host = host
        self.port = port
        self.timeout = timeout
        self.state = SessionState.DISCONNECTED

        self._sock = None
        self._reader = None
        self._writer = None

    def __enter__(self) -> "Session":
        if self.state is SessionState.DISCONNECTED:
            self.connect()
        return self

    def __exit__(self, *args):
        self.close()

    def connect(self) -> "Session":
        """Open the TCP connection to the server"""
        if self.state is SessionState.CLOSED:
            raise TransportError("Session is closed, create a new one to reconnect")
        if self.state is SessionState.CONNECTED:
            return self

        try:
            self._sock = socket.create_connection(
                (self.host, self.port), timeout=self.timeout
            )
        except OSError as e:
            raise TransportError(
                f"Failed to connect to {self.host}:{self.port}"
            ) from e

        self._reader = self._sock.makefile("r", encoding="utf-8", newline="\n")
        self._writer = self._sock.makefile("w", encoding="utf-8", newline="\n")
        self.state = SessionState.CONNECTED
        logger.debug("Connected to %s:%d", self.host, self.port)
        return self

    def is_connected(self) -> bool:
        """Return the last known connection state.

        No round-trip is made, so a connection closed by the server is only
        noticed on the next request.
        """
        return self.state is SessionState.CONNECTED

    def close(self) -> None:
        """Close the connection. Calling it again has no effect."""
        if self.state is SessionState.CLOSED:
            return
        self.state = SessionState.CLOSED

        for name, stream in (("output", self._writer), ("input", self._reader)):
            if stream is None:
                continue
            try:
                stream.close()
            except OSError:
                # The socket itself is closed below regardless
                logger.debug("Exception while closing %s stream", name, exc_info=True)

        if self._sock is not None:
            self._sock.close()
        self._sock = None
        self._reader = None
        self._writer = None
        logger.debug("Connection to %s:%d closed", self.host, self.port)

    def execute(self, request: Request) -> None:
        """Send a request that is acknowledged with a simple OK"""
        self._send(request)
        response = self._receive()
        if response.column(0) != "OK":
            raise InvalidResponseError("Expected OK or ERR", response.raw)

    def query(self, request: Request) -> Response:
        """Send a request that is answered by a single line.

        The answer echoes the request without its command, and the payload
        columns follow that echo.
        """
        self._send(request)
        echo = request.tokens()[1:]
        response = self._receive()
        if not _matches(response.columns, echo):
            raise InvalidResponseError("Unexpected answer", response.raw)
        return response

    def list(self, request: Request) -> List[Response]:
        """Send a request that is answered by a BEGIN ... END block.

        Returns the lines between the markers in the order they arrived.
        """
        self._send(request)
        tokens = request.tokens()
        echo = tokens[1:]

        response = self._receive()
        if not _matches(response.columns, tokens, "BEGIN"):
            raise InvalidResponseError("BEGIN is missing", response.raw)

        result = []
        response = self._receive()
        while not _matches(response.columns, tokens, "END"):
            if not _matches(response.columns, echo):
                raise InvalidResponseError("Unexpected record type", response.raw)
            result.append(response)
            response = self._receive()
        return result

    def _require_connected(self):
        if self.state is not SessionState.CONNECTED:
            raise TransportError(f"Session is {self.state.value}")

    def _send(self, request: Request) -> None:
        self._require_connected()
        line = request.render()
        if request.command == "PASSWORD":
            logger.debug(" -> PASSWORD ****")
        else:
            logger.debug(" -> %s", line)

        try:
            self._writer.write(line + "\n")
            self._writer.flush()
        except OSError as e:
            self.close()
            raise TransportError("Failed to send request") from e

    def _receive(self) -> Response:
        """Read one line, turning an ERR line into a ServerError"""
        self._require_connected()
        try:
            line = self._reader.readline()
        except (OSError, UnicodeDecodeError) as e:
            self.close()
            raise TransportError("Failed to receive response") from e

        if not line:
            self.close()
            raise StreamClosedError()

        line = line.rstrip("\n").rstrip("\r")
        logger.debug(" <- %s", line)

        response = Response(line)
        if response.column(0) == "ERR":
            raise ServerError(response.columns[1] if len(response) > 1 else "")
        return response


def _matches(columns: Sequence[str], expected: Sequence[str], *prefix: str) -> bool:
    """Check that the columns start with the prefix followed by the expected tokens"""
    head = tuple(prefix) + tuple(expected)
    return tuple(columns[: len(head)]) == head
