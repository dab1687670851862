"""Grammatical categories reported by the WORDS morphological engine.

Every category is a StrEnum whose members are declared as ``(code, display)``
pairs: the code is what the engine prints in its fixed-width columns, the
display string is the abbreviation shown to readers. Keeping both in one
declaration means the decoding table and the display table cannot drift apart.

Examples:
    >>> Case.from_code("NOM")
    <Case.NOMINATIVE: 'NOM'>
    >>> Case.NOMINATIVE.display
    'nom.'
    >>> Tense.from_code("FUTP ").display
    'fut. perf.'
    >>> Case.from_code("XYZ") is None
    True
"""

from enum import StrEnum
from typing import Self


class Category(StrEnum):
    """Base for closed categories decoded from an engine code."""

    display: str

    def __new__(cls, code: str, display: str) -> Self:
        member = str.__new__(cls, code)
        member._value_ = code
        member.display = display
        return member

    @classmethod
    def width(cls) -> int:
        """Return the column width of the category (its longest code)."""
        return max(len(member.value) for member in cls)

    @classmethod
    def from_code(cls, code: str) -> Self | None:
        """Decode a (possibly padded) code, returning None if it is unknown."""
        try:
            return cls(code.strip())
        except ValueError:
            return None

    @classmethod
    def table(cls) -> list[tuple[str, str]]:
        """Return the (code, display) pairs in declaration order."""
        return [(member.value, member.display) for member in cls]


class OrdinalCategory(Category):
    """Category whose code is a single digit naming its position."""

    @property
    def ordinal(self) -> int:
        return int(self.value)


class PartOfSpeech(Category):
    """Part of speech of a possibility or dictionary entry."""

    NOUN = "N", "n."
    VERB = "V", "v."
    ADJECTIVE = "ADJ", "adj."
    ADVERB = "ADV", "adv."

    @property
    def plural(self) -> str:
        """Return the plural form for display (e.g., 'verbs')."""
        return {
            PartOfSpeech.NOUN: "nouns",
            PartOfSpeech.VERB: "verbs",
            PartOfSpeech.ADJECTIVE: "adjectives",
            PartOfSpeech.ADVERB: "adverbs",
        }[self]


class Gender(Category):
    MASCULINE = "M", "masc."
    FEMININE = "F", "fem."
    NEUTER = "N", "neut."


class Declension(OrdinalCategory):
    FIRST = "1", "1st decl."
    SECOND = "2", "2nd decl."
    THIRD = "3", "3rd decl."
    FOURTH = "4", "4th decl."
    FIFTH = "5", "5th decl."


class Conjugation(OrdinalCategory):
    """Verb conjugation.

    WORDS numbers irregular and deponent-like paradigms past the classical
    four, so five and six are valid codes.
    """

    FIRST = "1", "1st conj."
    SECOND = "2", "2nd conj."
    THIRD = "3", "3rd conj."
    FOURTH = "4", "4th conj."
    FIFTH = "5", "5th conj."
    SIXTH = "6", "6th conj."


class Case(Category):
    NOMINATIVE = "NOM", "nom."
    ACCUSATIVE = "ACC", "acc."
    ABLATIVE = "ABL", "abl."
    DATIVE = "DAT", "dat."
    GENITIVE = "GEN", "gen."
    LOCATIVE = "LOC", "loc."
    VOCATIVE = "VOC", "voc."


class Number(Category):
    SINGULAR = "S", "sing."
    PLURAL = "P", "pl."


class Degree(Category):
    POSITIVE = "POS", "pos."
    COMPARATIVE = "COMP", "comp."
    SUPERLATIVE = "SUPER", "super."


class Tense(Category):
    PRESENT = "PRES", "pres."
    IMPERFECT = "IMPF", "impf."
    FUTURE = "FUT", "fut."
    PERFECT = "PERF", "perf."
    PLUPERFECT = "PLUP", "plup."
    FUTURE_PERFECT = "FUTP", "fut. perf."


class Voice(Category):
    ACTIVE = "ACTIVE", "active"
    PASSIVE = "PASSIVE", "passive"
    MIDDLE = "MIDDLE", "middle"


class Mood(Category):
    INDICATIVE = "IND", "ind."
    INFINITIVE = "INF", "inf."
    SUBJUNCTIVE = "SUB", "sub."
    IMPERATIVE = "IMP", "imp."


class Person(OrdinalCategory):
    FIRST = "1", "1st person"
    SECOND = "2", "2nd person"
    THIRD = "3", "3rd person"


# Every category, keyed by the name used on the command line
CATEGORIES: dict[str, type[Category]] = {
    "pos": PartOfSpeech,
    "gender": Gender,
    "declension": Declension,
    "conjugation": Conjugation,
    "case": Case,
    "number": Number,
    "degree": Degree,
    "tense": Tense,
    "voice": Voice,
    "mood": Mood,
    "person": Person,
}
