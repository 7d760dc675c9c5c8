"""NUT client: connection lifecycle and device lookup"""

import logging
from typing import List, Optional

from .config import NutConfig
from .device import Device
from .request import Request
from .session import Session

logger = logging.getLogger(__name__)


class NutClient:
    """Client for a NUT (Network UPS Tools) server.

    Arguments left unset are taken from the environment, see
    :meth:`NutConfig.from_env`. Login is only performed when both username
    and password are known.
    """

    def __init__(
        self,
        host: Optional[str] = None,
        port: Optional[int] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        config = NutConfig()
        if None in (host, port, username, password, timeout):
            config = NutConfig.from_env()
        self.host = host if host is not None else config.host
        self.port = port if port is not None else config.port
        self.username = username if username is not None else config.username
        self.password = password if password is not None else config.password
        self.timeout = timeout if timeout is not None else config.timeout

        self.session = Session(self.host, self.port, self.timeout)
        self.server: Optional[str] = None
        self.protocol: Optional[str] = None

    def __enter__(self) -> "NutClient":
        return self.connect()

    def __exit__(self, *args):
        self.close()

    def connect(self) -> "NutClient":
        """Connect, log in if credentials are set, and read the server versions"""
        try:
            self.session.connect()
            if self.username is not None and self.password is not None:
                self.session.execute(Request.username().arg(self.username))
                self.session.execute(Request.password().arg(self.password))
            self.server = self.session.query(Request.ver()).raw
            self.protocol = self.session.query(Request.netver()).raw
        except Exception:
            self.session.close()
            raise

        logger.info(
            "Connected to %s:%d, protocol %s, %s",
            self.host,
            self.port,
            self.protocol,
            self.server,
        )
        return self

    def is_connected(self) -> bool:
        """Check if the client is connected.

        A connection closed by the server is not detected until the next request.
        """
        return self.session.is_connected()

    def close(self) -> None:
        """Disconnect from the server. Create a new client to reconnect."""
        was_connected = self.is_connected()
        self.session.close()
        if was_connected:
            logger.info("Disconnected")

    def logout(self) -> None:
        """Log out from the server, then close the connection"""
        if self.is_connected():
            self.session.execute(Request.logout())
            logger.info("Logged out")
            self.close()

    def get_devices(self) -> List[Device]:
        """Return the UPS devices available on the server"""
        return [
            Device(res.column(1), res.column(2), self.session)
            for res in self.session.list(Request.list("UPS"))
        ]

    def get_device_names(self) -> List[str]:
        """Return the names of the UPS devices available on the server"""
        return [device.name for device in self.get_devices()]

    def has_device(self, name: str) -> bool:
        """Check that a device with the given name exists on the server"""
        if not name:
            return False
        return name in self.get_device_names()

    def get_device(self, name: str) -> Device:
        """Return the device with the given name.

        The server is not asked whether such a device exists.
        """
        return Device(name, None, self.session)
