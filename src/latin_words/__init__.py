"""Parse Whitaker's WORDS morphological reports into structured definitions."""

from latin_words.definitions import ParseResult, ReportFormatError, parse_definitions
from latin_words.models import (
    Adjective,
    AdjectiveExpansion,
    Adverb,
    AdverbExpansion,
    Definition,
    Expansion,
    Noun,
    NounExpansion,
    Possibility,
    Verb,
    VerbExpansion,
)

__all__ = [
    "Adjective",
    "AdjectiveExpansion",
    "Adverb",
    "AdverbExpansion",
    "Definition",
    "Expansion",
    "Noun",
    "NounExpansion",
    "ParseResult",
    "Possibility",
    "ReportFormatError",
    "Verb",
    "VerbExpansion",
    "parse_definitions",
]
