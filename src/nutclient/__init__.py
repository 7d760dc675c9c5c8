"""nutclient - Network UPS Tools client

This is the package initialization file (__init__.py):
- Defines the public API for the package
- Used by pyproject.toml [project.scripts] entry point: nutclient = "nutclient:main"
- Enables 'uv run nutclient' command
"""

__version__ = "0.1.0"

from .cli import main
from .client import NutClient
from .device import Command, Device, Variable
from .errors import (
    ConfigError,
    InvalidResponseError,
    NumericParseError,
    NutError,
    ServerError,
    StreamClosedError,
    TransportError,
)
from .request import Request
from .response import Response
from .session import DEFAULT_PORT, Session
from .tokenizer import quote, split, unquote

__all__ = [
    "main",
    "NutClient",
    "Device",
    "Variable",
    "Command",
    "Request",
    "Response",
    "Session",
    "DEFAULT_PORT",
    "split",
    "quote",
    "unquote",
    "NutError",
    "TransportError",
    "StreamClosedError",
    "ServerError",
    "InvalidResponseError",
    "NumericParseError",
    "ConfigError",
]
