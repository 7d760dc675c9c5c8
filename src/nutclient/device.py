"""UPS devices, their variables and instant commands.

These are thin wrappers around a :class:`~nutclient.session.Session`. Values
fetched from the server are cached on the instance until :meth:`purge` is
called.
"""

from typing import Dict, List, Optional

from .request import Request
from .session import Session


class Device:
    """A UPS device known to the NUT server"""

    def __init__(self, name: str, description: Optional[str], session: Session):
        self.name = name
        self._description = description
        self._session = session

    def get_description(self) -> str:
        """Return the device description. The result is cached."""
        if self._description is None:
            response = self._session.query(Request.get("UPSDESC").device(self))
            self._description = response.column(2)
        return self._description

    def get_variables(self) -> List["Variable"]:
        """Return all variables, read only and read/write"""
        return self._list_variables("VAR")

    def get_rw_variables(self) -> List["Variable"]:
        """Return the read/write variables"""
        return self._list_variables("RW")

    def _list_variables(self, subcommand: str) -> List["Variable"]:
        responses = self._session.list(Request.list(subcommand).device(self))
        return [
            Variable(res.column(2), res.column(3), self, self._session)
            for res in responses
        ]

    def get_variable_values(self) -> Dict[str, str]:
        """Return all variable values by name, in the order the server lists them"""
        return {var.name: var.get_value() for var in self.get_variables()}

    def get_variable(self, name: str) -> "Variable":
        """Return the variable with the given name.

        The server is not asked whether such a variable exists.
        """
        return Variable(name, None, self, self._session)

    def get_commands(self) -> List["Command"]:
        """Return the instant commands supported by the device"""
        responses = self._session.list(Request.list("CMD").device(self))
        return [Command(res.column(2), self, self._session) for res in responses]

    def get_command(self, name: str) -> "Command":
        """Return the command with the given name.

        The server is not asked whether such a command exists.
        """
        return Command(name, self, self._session)

    def get_number_of_logins(self) -> int:
        """Return the current number of logins on the device. Not cached."""
        response = self._session.query(Request.get("NUMLOGINS").device(self))
        return int(response.column_as_number(2))

    def get_clients(self) -> List[str]:
        """Return the addresses of the clients logged into the device"""
        responses = self._session.list(Request.list("CLIENT").device(self))
        return [res.column(2) for res in responses]

    def login(self) -> None:
        """Log into the device, incrementing the server side login counter"""
        self._session.execute(Request.login().device(self))

    def primary(self) -> None:
        """Claim primary mode on the device"""
        self._session.execute(Request.primary().device(self))

    def forced_shutdown(self) -> None:
        """Set the forced shutdown flag on the device"""
        self._session.execute(Request.fsd().device(self))

    def purge(self) -> None:
        """Drop all cached values"""
        self._description = None

    def __str__(self) -> str:
        result = f"Device: {self.name}"
        if self._description is not None:
            result += f" ({self._description})"
        return result


class Variable:
    """A variable of a UPS device"""

    def __init__(
        self, name: str, value: Optional[str], device: Device, session: Session
    ):
        self.name = name
        self.device = device
        self._value = value
        self._description: Optional[str] = None
        self._session = session

    def get_value(self) -> str:
        """Return the value. The result is cached."""
        if self._value is None:
            response = self._session.query(
                Request.get("VAR").device(self.device).arg(self.name)
            )
            self._value = response.column(3)
        return self._value

    def get_description(self) -> str:
        """Return the description. The result is cached."""
        if self._description is None:
            response = self._session.query(
                Request.get("DESC").device(self.device).arg(self.name)
            )
            self._description = response.column(3)
        return self._description

    def get_type(self) -> List[str]:
        """Return the type flags, e.g. ``["RW", "STRING:64"]``"""
        response = self._session.query(
            Request.get("TYPE").device(self.device).arg(self.name)
        )
        return list(response.columns[3:])

    def set_value(self, value: str) -> None:
        """Change the value of a read/write variable and cache it"""
        self._session.execute(
            Request.set("VAR").device(self.device).arg(self.name).arg(value)
        )
        self._value = value

    def purge(self) -> None:
        """Drop all cached values"""
        self._value = None
        self._description = None

    def __str__(self) -> str:
        result = f"Variable: {self.name}"
        if self._value is not None:
            result += f' = "{self._value}"'
        if self._description is not None:
            result += f" ({self._description})"
        return result


class Command:
    """An instant command of a UPS device"""

    def __init__(self, name: str, device: Device, session: Session):
        self.name = name
        self.device = device
        self._description: Optional[str] = None
        self._session = session

    def get_description(self) -> str:
        """Return the description. The result is cached."""
        if self._description is None:
            response = self._session.query(
                Request.get("CMDDESC").device(self.device).arg(self.name)
            )
            self._description = response.column(3)
        return self._description

    def execute(self, *args: str) -> None:
        """Run the command, passing optional arguments"""
        self._session.execute(
            Request.instcmd().device(self.device).arg(self.name).args(args)
        )

    def purge(self) -> None:
        """Drop all cached values"""
        self._description = None

    def __str__(self) -> str:
        result = f"Command: {self.name}"
        if self._description is not None:
            result += f" ({self._description})"
        return result
