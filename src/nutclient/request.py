"""Request builder for NUT protocol commands"""

from typing import Iterable, Optional, Tuple

from .tokenizer import quote


class Request:
    """A NUT command with an optional subcommand and ordered arguments.

    Arguments are sent in the order they were added; the protocol is
    positional, so e.g. the device name must be added before a variable
    name.

    Once rendered, a request does not change any more: adding to it returns
    an extended copy instead.
    """

    def __init__(self, command: str):
        self.command = command
        self.subcommand: Optional[str] = None
        self.arguments = []
        self.frozen = False

    @classmethod
    def get(cls, subcommand: str) -> "Request":
        return cls("GET").sub(subcommand)

    @classmethod
    def list(cls, subcommand: str) -> "Request":
        return cls("LIST").sub(subcommand)

    @classmethod
    def set(cls, subcommand: str) -> "Request":
        return cls("SET").sub(subcommand)

    @classmethod
    def instcmd(cls) -> "Request":
        return cls("INSTCMD")

    @classmethod
    def login(cls) -> "Request":
        return cls("LOGIN")

    @classmethod
    def logout(cls) -> "Request":
        return cls("LOGOUT")

    @classmethod
    def primary(cls) -> "Request":
        return cls("PRIMARY")

    @classmethod
    def fsd(cls) -> "Request":
        return cls("FSD")

    @classmethod
    def username(cls) -> "Request":
        return cls("USERNAME")

    @classmethod
    def password(cls) -> "Request":
        return cls("PASSWORD")

    @classmethod
    def starttls(cls) -> "Request":
        """A STARTTLS request. TLS upgrade itself is not supported."""
        return cls("STARTTLS")

    @classmethod
    def ver(cls) -> "Request":
        return cls("VER")

    @classmethod
    def netver(cls) -> "Request":
        return cls("NETVER")

    @classmethod
    def help(cls) -> "Request":
        return cls("HELP")

    def sub(self, subcommand: str) -> "Request":
        """Set the subcommand"""
        request = self._builder()
        request.subcommand = subcommand
        return request

    def device(self, device) -> "Request":
        """Add a device argument, given as a Device or a plain name"""
        return self.arg(getattr(device, "name", device))

    def arg(self, value: str) -> "Request":
        """Append one argument"""
        request = self._builder()
        request.arguments.append(value)
        return request

    def args(self, values: Iterable[str]) -> "Request":
        """Append several arguments, keeping their order"""
        request = self._builder()
        request.arguments.extend(values)
        return request

    def _builder(self) -> "Request":
        if not self.frozen:
            return self
        request = Request(self.command)
        request.subcommand = self.subcommand
        request.arguments = list(self.arguments)
        return request

    def _freeze(self) -> None:
        if not self.frozen:
            self.arguments = tuple(self.arguments)
            self.frozen = True

    def tokens(self) -> Tuple[str, ...]:
        """Return the unescaped token sequence of this request"""
        self._freeze()
        result = [self.command]
        if self.subcommand is not None:
            result.append(self.subcommand)
        result.extend(self.arguments)
        return tuple(result)

    def render(self) -> str:
        """Return the request line as sent over the wire, without newline"""
        self._freeze()
        return self._wire()

    def _wire(self) -> str:
        parts = [self.command]
        if self.subcommand is not None:
            parts.append(self.subcommand)
        parts.extend(quote(arg) for arg in self.arguments)
        return " ".join(parts)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Request({self._wire()!r})"
