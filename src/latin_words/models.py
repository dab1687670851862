"""Records produced by parsing a WORDS report.

Possibilities are fully inflected candidate parses of the looked-up form;
expansions are dictionary headers (principal parts plus coarse morphology).
A Definition groups one expansion with the possibilities listed before it
and the gloss that follows it.
"""

from dataclasses import dataclass

from latin_words.enums import (
    Case,
    Category,
    Conjugation,
    Declension,
    Degree,
    Gender,
    Mood,
    Number,
    PartOfSpeech,
    Person,
    Tense,
    Voice,
)


def _join(*parts: Category | None) -> str:
    """Join display strings of the given categories, skipping absent ones."""
    return " ".join(part.display for part in parts if part is not None)


# ============================================================================
# Possibilities
# ============================================================================


@dataclass(frozen=True)
class Noun:
    """A fully declined instance of a noun."""

    text: str
    declension: Declension
    variety: int
    case: Case
    number: Number
    gender: Gender

    pos = PartOfSpeech.NOUN

    @property
    def display(self) -> str:
        return _join(self.case, self.number)

    def __str__(self) -> str:
        return self.display


@dataclass(frozen=True)
class Adjective:
    """A fully declined instance of an adjective.

    The engine prints ``X`` in the gender column for forms shared by all
    genders, which decodes to None.
    """

    text: str
    declension: Declension
    variety: int
    case: Case
    number: Number
    gender: Gender | None
    degree: Degree

    pos = PartOfSpeech.ADJECTIVE

    @property
    def display(self) -> str:
        return _join(self.declension, self.case, self.number, self.gender, self.degree)

    def __str__(self) -> str:
        return self.display


@dataclass(frozen=True)
class Adverb:
    text: str
    degree: Degree

    pos = PartOfSpeech.ADVERB

    @property
    def display(self) -> str:
        return self.degree.display

    def __str__(self) -> str:
        return self.display


@dataclass(frozen=True)
class Verb:
    """A fully conjugated instance of a verb.

    Person and number are absent for non-finite forms (infinitives are
    reported as ``INF 0 X``).
    """

    text: str
    conjugation: Conjugation
    variety: int
    tense: Tense
    voice: Voice
    mood: Mood
    person: Person | None = None
    number: Number | None = None

    pos = PartOfSpeech.VERB

    @property
    def display(self) -> str:
        return _join(
            self.conjugation, self.tense, self.voice, self.mood, self.person, self.number
        )

    def __str__(self) -> str:
        return self.display


Possibility = Noun | Adjective | Adverb | Verb


# ============================================================================
# Expansions
# ============================================================================


@dataclass(frozen=True)
class NounExpansion:
    principal_parts: str
    declension: Declension
    gender: Gender

    pos = PartOfSpeech.NOUN


@dataclass(frozen=True)
class AdjectiveExpansion:
    principal_parts: str

    pos = PartOfSpeech.ADJECTIVE


@dataclass(frozen=True)
class AdverbExpansion:
    principal_parts: str

    pos = PartOfSpeech.ADVERB


@dataclass(frozen=True)
class VerbExpansion:
    principal_parts: str
    conjugation: Conjugation | None = None

    pos = PartOfSpeech.VERB


Expansion = NounExpansion | AdjectiveExpansion | AdverbExpansion | VerbExpansion


# ============================================================================
# Definitions
# ============================================================================


@dataclass(frozen=True)
class Definition:
    """One dictionary entry matched by the looked-up form."""

    possibilities: list[Possibility]
    expansion: Expansion
    meaning: str
    # Whether extra unlikely possibilities were left out of the report
    truncated: bool = False

    @property
    def identifier(self) -> str:
        """Key for reusing views of the same entry (not guaranteed unique)."""
        return self.expansion.principal_parts + self.expansion.pos.display

