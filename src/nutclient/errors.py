"""Exceptions raised by nutclient"""


class NutError(Exception):
    """Base class for all nutclient errors"""

    pass


class TransportError(NutError):
    """I/O failure on the connection to the NUT server"""

    pass


class StreamClosedError(TransportError):
    """The server closed the stream while a response was expected"""

    def __init__(self, message: str = "Stream was unexpectedly closed"):
        super().__init__(message)


class ServerError(NutError):
    """The server answered with an ERR line"""

    def __init__(self, type: str):
        self.type = type
        super().__init__(f"Server returned error: {type}")


class InvalidResponseError(NutError):
    """The server sent a line that does not match the expected framing"""

    def __init__(self, message: str, response: str):
        self.response = response
        super().__init__(f"{message}: {response}")


class NumericParseError(NutError, ValueError):
    """A column was read as a number but is not a decimal literal"""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Not a decimal number: {value!r}")


class ConfigError(NutError):
    """Invalid configuration value"""

    pass
