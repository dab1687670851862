"""Group the lines of a WORDS report into definitions.

A report block lists, for each dictionary entry that matches the looked-up
form, the possibilities (candidate inflections), one header line (the
expansion) and one or more lines of meaning. A line holding only ``*``
means the engine left out further, less likely possibilities.

Usage:
    from latin_words.definitions import parse_definitions

    definitions, truncated = parse_definitions(report)

The parser is a pure function of its input: every call builds its own state,
so it can be used from several threads at once.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import NamedTuple

from latin_words.models import Definition, Expansion, Possibility
from latin_words.parsers import parse_expansion, parse_possibility

logger = logging.getLogger(__name__)

TRUNCATION_MARKER = "*"
LINE_BREAK = re.compile(r"\r\n|\r|\n")


class ReportFormatError(ValueError):
    """Raised when a report line cannot be classified before any header."""

    def __init__(self, line_number: int, line: str) -> None:
        self.line_number = line_number
        self.line = line
        msg = f"Unexpected line {line_number} in report: {line!r}"
        super().__init__(msg)


class ParseResult(NamedTuple):
    """Definitions in report order and whether truncation was reported."""

    definitions: list[Definition]
    truncated: bool


@dataclass
class _Assembler:
    """Pending state for the definition currently being read."""

    possibilities: list[Possibility] = field(default_factory=lambda: list[Possibility]())
    expansion: Expansion | None = None
    meaning: str | None = None
    truncated: bool = False

    definitions: list[Definition] = field(default_factory=lambda: list[Definition]())
    saw_truncation: bool = False

    def flush(self) -> None:
        """Emit the pending definition if it has both a header and a meaning."""
        if self.expansion is None or self.meaning is None:
            return

        self.definitions.append(
            Definition(
                possibilities=self.possibilities,
                expansion=self.expansion,
                meaning=self.meaning,
                truncated=self.truncated,
            )
        )
        self._reset()

    def _reset(self) -> None:
        self.possibilities = []
        self.expansion = None
        self.meaning = None
        self.truncated = False

    def on_possibility(self, possibility: Possibility) -> None:
        self.flush()
        self.possibilities.append(possibility)

    def on_expansion(self, expansion: Expansion) -> None:
        if self.expansion is None:
            self.expansion = expansion
            return

        if self.meaning is None:
            logger.debug("Dropping header without meaning: %s", self.expansion.principal_parts)
        self.flush()
        self._reset()
        self.expansion = expansion

    def on_meaning(self, line: str) -> None:
        if line == TRUNCATION_MARKER:
            self.truncated = True
            self.saw_truncation = True
        elif self.meaning is None:
            self.meaning = line
        else:
            self.meaning += "\n" + line

    def finish(self) -> ParseResult:
        if self.expansion is not None and self.meaning is None:
            logger.debug("Dropping header without meaning: %s", self.expansion.principal_parts)
        self.flush()
        return ParseResult(self.definitions, self.saw_truncation)


def parse_definitions(text: str) -> ParseResult:
    """Parse a WORDS report block into definitions.

    Each line is tried as a possibility, then as a header; once a header has
    been read, any other line is meaning text (or the truncation marker).

    Args:
        text: Report block, lines separated by CR, LF or CRLF

    Returns:
        ParseResult with the completed definitions and the truncation flag

    Raises:
        ReportFormatError: If a line is neither a possibility nor a header
            and no header has been read yet
    """
    state = _Assembler()

    # Blank lines carry nothing
    for line_number, line in enumerate(LINE_BREAK.split(text), start=1):
        if not line:
            continue

        possibility = parse_possibility(line)
        if possibility is not None:
            state.on_possibility(possibility)
            continue

        expansion = parse_expansion(line)
        if expansion is not None:
            state.on_expansion(expansion)
            continue

        if state.expansion is None:
            logger.debug("Unclassifiable line %d: %r", line_number, line)
            raise ReportFormatError(line_number, line)

        logger.debug("Line %d treated as meaning: %r", line_number, line)
        state.on_meaning(line)

    return state.finish()
