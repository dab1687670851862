"""Fixed-width field readers for WORDS report columns.

Each reader consumes one column from the front of the remaining line and
returns a ``Field`` holding the decoded value (or None), the raw text that
was consumed and the rest of the line. Readers never raise: a value that
does not decode is simply absent, and the caller decides whether that
absence means the line does not match.

A column holds at most ``width`` characters and, with the single blank that
separates it from the next column, is consumed whole even when it is blank.
When the next field already starts inside the column (compacted padding),
the column ends at the first blank after its content instead:

    >>> from latin_words.enums import Tense
    >>> read_code(Tense, "FUT  ACTIVE").value
    <Tense.FUTURE: 'FUT'>
    >>> read_code(Tense, "FUT  ACTIVE").rest
    'ACTIVE'
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from latin_words.enums import Category

T = TypeVar("T")
C = TypeVar("C", bound=Category)


@dataclass(frozen=True)
class Field(Generic[T]):
    """Result of reading one column."""

    value: T | None
    raw: str  # text consumed from the line, padding excluded
    rest: str  # remainder of the line after the column and its separator

    @property
    def present(self) -> bool:
        return self.value is not None


def take(line: str, width: int) -> tuple[str, str]:
    """Split off one column of at most ``width`` characters.

    Returns (column text, remainder). Leading blanks inside the column are
    part of the column text; a blank column yields "". At most one separator
    blank after the column is skipped.
    """
    chunk = line[:width]
    start = len(chunk) - len(chunk.lstrip())
    end = start
    while end < len(chunk) and not chunk[end].isspace():
        end += 1

    text = chunk[:end] if end > start else ""
    consumed = end if chunk[end:].strip() else len(chunk)
    rest = line[consumed:]
    if rest[:1].isspace():
        rest = rest[1:]
    return text, rest


def read_code(category: type[C], line: str) -> Field[C]:
    """Read a category code occupying the category's column width."""
    chunk, rest = take(line, category.width())
    return Field(category.from_code(chunk), chunk, rest)


def read_digit(line: str) -> Field[int]:
    """Read a single ASCII digit (the variety column)."""
    chunk, rest = take(line, 1)
    value = int(chunk) if chunk.isascii() and chunk.isdigit() else None
    return Field(value, chunk, rest)


def read_literal(line: str, literal: str, width: int | None = None) -> Field[str]:
    """Read a column that must hold exactly ``literal``.

    ``width`` defaults to the literal's length; tag columns are wider than
    the tags they hold.
    """
    chunk, rest = take(line, width or len(literal))
    return Field(literal if chunk.strip() == literal else None, chunk, rest)
