"""A single response line received from the NUT server"""

import re
from decimal import Decimal
from typing import Tuple

from .errors import InvalidResponseError, NumericParseError
from .tokenizer import split

DECIMAL_LITERAL = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


class Response:
    """One received line, split into unescaped columns"""

    def __init__(self, line: str):
        self.raw = line
        self.columns: Tuple[str, ...] = tuple(split(line))
        if not self.columns:
            raise InvalidResponseError("Server returned an empty line", line)

    def column(self, index: int) -> str:
        """Return the column at the given zero-based index"""
        if index < 0 or index >= len(self.columns):
            raise InvalidResponseError(f"Missing response column {index}", self.raw)
        return self.columns[index]

    def column_as_number(self, index: int) -> Decimal:
        """Return the column at the given index as exact decimal"""
        value = self.column(index)
        if not DECIMAL_LITERAL.fullmatch(value):
            raise NumericParseError(value)
        return Decimal(value)

    def __len__(self) -> int:
        return len(self.columns)

    def __str__(self) -> str:
        return self.raw

    def __repr__(self) -> str:
        return f"Response({self.raw!r})"
