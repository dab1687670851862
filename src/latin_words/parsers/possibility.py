"""Parse WORDS possibility lines into inflected-word records.

A possibility line lists one candidate inflection of the looked-up form:

    ambulav.issem        V      1 1 PLUP ACTIVE  SUB 1 S
    puell.ae             N      1 1 GEN S F
    bon.i                ADJ    1 1 GEN S M POS
    bene                 ADV    POS

The first 21 columns hold the word (stem and ending separated by a dot),
followed by a 7-column part-of-speech tag and the tag's own fields.
"""

from collections.abc import Callable

from latin_words.enums import (
    Case,
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
from latin_words.fields import read_code, read_digit, read_literal
from latin_words.models import Adjective, Adverb, Noun, Possibility, Verb

WORD_WIDTH = 21
TAG_WIDTH = 7


def _split_word_column(line: str) -> tuple[str, str] | None:
    """Split off the word column, returning (word, rest) or None.

    The column holds a single word. When padding has been compacted the tag
    may start inside the column, but then it must end exactly at the column
    edge with only blanks between it and the word.
    """
    column = line[:WORD_WIDTH]
    tokens = column.split()
    if len(tokens) == 1:
        return tokens[0], line[WORD_WIDTH:]

    if len(tokens) == 2 and not column[0].isspace() and not column[-1].isspace():
        return tokens[0], line[WORD_WIDTH - len(tokens[1]) :]
    return None


def _read_head(line: str, pos: PartOfSpeech) -> tuple[str, str] | None:
    """Read the word and tag columns, returning (word, rest) if the tag is ``pos``."""
    if len(line) < WORD_WIDTH:
        return None

    word = _split_word_column(line)
    if word is None:
        return None
    text, rest = word

    tag = read_literal(rest, pos.value, TAG_WIDTH)
    if not tag.present:
        return None

    return text, tag.rest


def parse_noun(line: str) -> Noun | None:
    """Parse ``<word> N <decl> <variety> <case> <number> <gender>``."""
    head = _read_head(line, PartOfSpeech.NOUN)
    if head is None:
        return None
    text, rest = head

    declension = read_code(Declension, rest)
    variety = read_digit(declension.rest)
    case = read_code(Case, variety.rest)
    number = read_code(Number, case.rest)
    gender = read_code(Gender, number.rest)

    if (
        declension.value is None
        or variety.value is None
        or case.value is None
        or number.value is None
        or gender.value is None
    ):
        return None

    return Noun(
        text=text,
        declension=declension.value,
        variety=variety.value,
        case=case.value,
        number=number.value,
        gender=gender.value,
    )


def parse_adjective(line: str) -> Adjective | None:
    """Parse ``<word> ADJ <decl> <variety> <case> <number> <gender?> <degree>``."""
    head = _read_head(line, PartOfSpeech.ADJECTIVE)
    if head is None:
        return None
    text, rest = head

    declension = read_code(Declension, rest)
    variety = read_digit(declension.rest)
    case = read_code(Case, variety.rest)
    number = read_code(Number, case.rest)
    # Optional: "X" (any gender) decodes to None but still fills the column
    gender = read_code(Gender, number.rest)
    degree = read_code(Degree, gender.rest)

    if (
        declension.value is None
        or variety.value is None
        or case.value is None
        or number.value is None
        or degree.value is None
    ):
        return None

    return Adjective(
        text=text,
        declension=declension.value,
        variety=variety.value,
        case=case.value,
        number=number.value,
        gender=gender.value,
        degree=degree.value,
    )


def parse_adverb(line: str) -> Adverb | None:
    """Parse ``<word> ADV <degree>``."""
    head = _read_head(line, PartOfSpeech.ADVERB)
    if head is None:
        return None
    text, rest = head

    degree = read_code(Degree, rest)
    if degree.value is None:
        return None

    return Adverb(text=text, degree=degree.value)


def parse_verb(line: str) -> Verb | None:
    """Parse ``<word> V <conj> <variety> <tense> <voice> <mood> <person?> <number?>``."""
    head = _read_head(line, PartOfSpeech.VERB)
    if head is None:
        return None
    text, rest = head

    conjugation = read_code(Conjugation, rest)
    variety = read_digit(conjugation.rest)
    tense = read_code(Tense, variety.rest)
    voice = read_code(Voice, tense.rest)
    mood = read_code(Mood, voice.rest)
    # Optional: non-finite forms report "0 X"
    person = read_code(Person, mood.rest)
    number = read_code(Number, person.rest)

    if (
        conjugation.value is None
        or variety.value is None
        or tense.value is None
        or voice.value is None
        or mood.value is None
    ):
        return None

    return Verb(
        text=text,
        conjugation=conjugation.value,
        variety=variety.value,
        tense=tense.value,
        voice=voice.value,
        mood=mood.value,
        person=person.value,
        number=number.value,
    )


# Tried in order; tags are disjoint, so at most one matches
POSSIBILITY_PARSERS: tuple[Callable[[str], Possibility | None], ...] = (
    parse_noun,
    parse_adjective,
    parse_adverb,
    parse_verb,
)


def parse_possibility(line: str) -> Possibility | None:
    """Parse a possibility line, returning None if the line is not one.

    Examples:
        >>> parse_possibility("bene                 ADV    POS")
        Adverb(text='bene', degree=<Degree.POSITIVE: 'POS'>)
        >>> parse_possibility("love, like; be fond of") is None
        True
    """
    for parser in POSSIBILITY_PARSERS:
        result = parser(line)
        if result is not None:
            return result
    return None
