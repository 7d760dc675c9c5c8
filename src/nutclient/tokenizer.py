"""Splitting, quoting and unquoting of NUT protocol lines"""

import re
from typing import List

# One column: a quoted run up to the first unescaped quote, or a bare run
TOKEN = re.compile(r'\s*("(?:\\.|[^"\\])*"|[^\s"]\S*)')
QUOTABLE_CHARS = re.compile(r'[\s"\\]')
QUOTED_TEXT = re.compile(r'"(.*)"', re.DOTALL)
ESCAPE = re.compile(r'\\(["\\])')


def split(line: str) -> List[str]:
    """Split a line into columns.

    Columns in double quotes are unquoted and unescaped. An unterminated
    quoted run ends tokenizing, so the dangling fragment yields no column.
    """
    columns = []
    pos = 0
    while True:
        match = TOKEN.match(line, pos)
        if match is None:
            break
        columns.append(unquote(match.group(1)))
        pos = match.end()
    return columns


def quote(value: str) -> str:
    """Quote a value if it contains whitespace, a double quote or a backslash"""
    if QUOTABLE_CHARS.search(value):
        return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'
    return value


def unquote(token: str) -> str:
    """Strip enclosing double quotes from a token and unescape its content"""
    match = QUOTED_TEXT.fullmatch(token)
    if match:
        return ESCAPE.sub(r"\1", match.group(1))
    return token
