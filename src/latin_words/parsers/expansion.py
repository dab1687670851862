"""Parse WORDS dictionary header lines ("expansions").

Header lines give the principal parts, two blanks, then the part of speech
and any class information:

    puella, puellae  N (1st) F   [XXXAX]
    amo, amare, amavi, amatus  V (1st)   [XXXAO]
    bonus, bona -um, melior -or -us, optimus -a -um  ADJ   [XXXAX]
    bene, melius, optime  ADV   [XXXAX]

Only the class digit and the gender are decoded; the ordinal suffix
("st", "nd", ...) and everything after the class group is ignored.
"""

from collections.abc import Callable

from latin_words.enums import Conjugation, Declension, Gender, PartOfSpeech
from latin_words.models import (
    AdjectiveExpansion,
    AdverbExpansion,
    Expansion,
    NounExpansion,
    VerbExpansion,
)

PRINCIPAL_PARTS_SEPARATOR = "  "
CLASS_GROUP_OPEN = " ("
CLASS_GROUP_CLOSE = ") "


def _read_class_group(suffix: str) -> tuple[str, str] | None:
    """Read `` (<digit><2 chars>) `` returning (digit, rest), or None if absent."""
    if not suffix.startswith(CLASS_GROUP_OPEN):
        return None

    start = len(CLASS_GROUP_OPEN)
    digit = suffix[start : start + 1]
    ordinal = suffix[start + 1 : start + 3]
    close = suffix[start + 3 : start + 3 + len(CLASS_GROUP_CLOSE)]
    if not digit or len(ordinal) != 2 or close != CLASS_GROUP_CLOSE:
        return None

    return digit, suffix[start + 3 + len(CLASS_GROUP_CLOSE) :]


def _noun(principal_parts: str, suffix: str) -> NounExpansion | None:
    group = _read_class_group(suffix)
    if group is None:
        return None
    digit, rest = group

    declension = Declension.from_code(digit)
    gender = Gender.from_code(rest[:1])
    if declension is None or gender is None:
        return None

    return NounExpansion(principal_parts, declension, gender)


def _adjective(principal_parts: str, suffix: str) -> AdjectiveExpansion:
    return AdjectiveExpansion(principal_parts)


def _adverb(principal_parts: str, suffix: str) -> AdverbExpansion:
    return AdverbExpansion(principal_parts)


def _verb(principal_parts: str, suffix: str) -> VerbExpansion:
    group = _read_class_group(suffix)
    if group is None:
        return VerbExpansion(principal_parts, None)

    digit, _rest = group
    return VerbExpansion(principal_parts, Conjugation.from_code(digit))


# Tried in order against the text after the principal parts
EXPANSION_PARSERS: tuple[
    tuple[PartOfSpeech, Callable[[str, str], Expansion | None]], ...
] = (
    (PartOfSpeech.NOUN, _noun),
    (PartOfSpeech.ADJECTIVE, _adjective),
    (PartOfSpeech.ADVERB, _adverb),
    (PartOfSpeech.VERB, _verb),
)


def parse_expansion(line: str) -> Expansion | None:
    """Parse a header line, returning None if the line is not one.

    Examples:
        >>> parse_expansion("puella, puellae  N (1st) F   [XXXAX]").gender
        <Gender.FEMININE: 'F'>
        >>> parse_expansion("cum  PREP  ABL   [XXXAX]") is None
        True
    """
    principal_parts, separator, tail = line.partition(PRINCIPAL_PARTS_SEPARATOR)
    if not separator:
        return None

    for pos, parser in EXPANSION_PARSERS:
        if not tail.startswith(pos.value):
            continue
        result = parser(principal_parts, tail[len(pos.value) :])
        if result is not None:
            return result
    return None
