"""Tests for possibility line parsing."""

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
from latin_words.models import Adjective, Adverb, Noun, Verb
from latin_words.parsers.possibility import (
    parse_adjective,
    parse_adverb,
    parse_noun,
    parse_possibility,
    parse_verb,
)


def _line(word: str, tag: str, fields: str) -> str:
    """Build a possibility line with the engine's column padding."""
    return f"{word:<21}{tag:<7}{fields}"


class TestParseVerb:
    """Tests for verb possibility lines."""

    def test_finite_verb(self) -> None:
        result = parse_possibility(_line("am.abit", "V", "1 1 FUT  ACTIVE  IND 3 S"))
        assert result == Verb(
            text="am.abit",
            conjugation=Conjugation.FIRST,
            variety=1,
            tense=Tense.FUTURE,
            voice=Voice.ACTIVE,
            mood=Mood.INDICATIVE,
            person=Person.THIRD,
            number=Number.SINGULAR,
        )

    def test_compacted_line(self) -> None:
        """Lines whose padding has been collapsed still parse."""
        result = parse_possibility("amabit              V      1 1 FUT  ACTIVE IND 3 S")
        assert result == Verb(
            text="amabit",
            conjugation=Conjugation.FIRST,
            variety=1,
            tense=Tense.FUTURE,
            voice=Voice.ACTIVE,
            mood=Mood.INDICATIVE,
            person=Person.THIRD,
            number=Number.SINGULAR,
        )

    def test_pluperfect_subjunctive(self) -> None:
        result = parse_verb(_line("ambulav.issem", "V", "1 1 PLUP ACTIVE  SUB 1 S"))
        assert result is not None
        assert result.tense is Tense.PLUPERFECT
        assert result.mood is Mood.SUBJUNCTIVE
        assert result.person is Person.FIRST

    def test_passive_fills_voice_column(self) -> None:
        result = parse_verb(_line("am.atur", "V", "1 1 PRES PASSIVE IND 3 S"))
        assert result is not None
        assert result.voice is Voice.PASSIVE
        assert result.mood is Mood.INDICATIVE

    def test_infinitive_has_no_person_or_number(self) -> None:
        result = parse_verb(_line("am.are", "V", "1 1 PRES ACTIVE  INF 0 X"))
        assert result is not None
        assert result.mood is Mood.INFINITIVE
        assert result.person is None
        assert result.number is None

    def test_missing_optional_columns(self) -> None:
        result = parse_verb(_line("am.are", "V", "1 1 PRES ACTIVE  INF"))
        assert result is not None
        assert result.person is None
        assert result.number is None

    def test_blank_person_column(self) -> None:
        """Imperatives leave the person column blank; number is still read."""
        result = parse_verb(_line("am.ate", "V", "1 1 PRES ACTIVE  IMP   P"))
        assert result is not None
        assert result.mood is Mood.IMPERATIVE
        assert result.person is None
        assert result.number is Number.PLURAL

    def test_unknown_tense_is_not_a_verb(self) -> None:
        assert parse_verb(_line("am.abit", "V", "1 1 XXX  ACTIVE  IND 3 S")) is None

    def test_unknown_conjugation_is_not_a_verb(self) -> None:
        assert parse_verb(_line("am.abit", "V", "7 1 FUT  ACTIVE  IND 3 S")) is None

    def test_display(self) -> None:
        result = parse_possibility(_line("am.abit", "V", "1 1 FUT  ACTIVE  IND 3 S"))
        assert result is not None
        assert result.display == "1st conj. fut. active ind. 3rd person sing."
        assert str(result) == result.display

    def test_display_skips_absent_parts(self) -> None:
        result = parse_possibility(_line("am.are", "V", "1 1 PRES ACTIVE  INF 0 X"))
        assert result is not None
        assert result.display == "1st conj. pres. active inf."


class TestParseNoun:
    """Tests for noun possibility lines."""

    def test_noun(self) -> None:
        result = parse_possibility(_line("puell.ae", "N", "1 1 GEN S F"))
        assert result == Noun(
            text="puell.ae",
            declension=Declension.FIRST,
            variety=1,
            case=Case.GENITIVE,
            number=Number.SINGULAR,
            gender=Gender.FEMININE,
        )
        assert result.pos is PartOfSpeech.NOUN

    def test_gender_is_required(self) -> None:
        assert parse_noun(_line("civ.is", "N", "3 1 GEN S X")) is None
        assert parse_possibility(_line("civ.is", "N", "3 1 GEN S X")) is None

    def test_variety_must_be_digit(self) -> None:
        assert parse_noun(_line("puell.ae", "N", "1 A GEN S F")) is None

    def test_trailing_text_ignored(self) -> None:
        result = parse_noun(_line("puell.ae", "N", "1 1 GEN S F   extra"))
        assert result is not None
        assert result.gender is Gender.FEMININE

    def test_display(self) -> None:
        result = parse_noun(_line("puell.ae", "N", "1 1 GEN S F"))
        assert result is not None
        assert result.display == "gen. sing."


class TestParseAdjective:
    """Tests for adjective possibility lines."""

    def test_adjective(self) -> None:
        result = parse_possibility(_line("bon.i", "ADJ", "1 1 GEN S M POS"))
        assert result == Adjective(
            text="bon.i",
            declension=Declension.FIRST,
            variety=1,
            case=Case.GENITIVE,
            number=Number.SINGULAR,
            gender=Gender.MASCULINE,
            degree=Degree.POSITIVE,
        )

    def test_any_gender_decodes_to_none(self) -> None:
        result = parse_adjective(_line("ingens", "ADJ", "3 1 NOM S X POS"))
        assert result is not None
        assert result.gender is None
        assert result.degree is Degree.POSITIVE

    def test_blank_gender_column(self) -> None:
        result = parse_adjective(_line("bon.i", "ADJ", "1 1 GEN S   POS"))
        assert result is not None
        assert result.gender is None
        assert result.degree is Degree.POSITIVE

    def test_superlative(self) -> None:
        result = parse_adjective(_line("optim.us", "ADJ", "1 1 NOM S M SUPER"))
        assert result is not None
        assert result.degree is Degree.SUPERLATIVE

    def test_degree_is_required(self) -> None:
        assert parse_adjective(_line("bon.i", "ADJ", "1 1 GEN S M")) is None

    def test_display(self) -> None:
        with_gender = parse_adjective(_line("bon.i", "ADJ", "1 1 GEN S M POS"))
        without_gender = parse_adjective(_line("ingens", "ADJ", "3 1 NOM S X POS"))
        assert with_gender is not None
        assert without_gender is not None
        assert with_gender.display == "1st decl. gen. sing. masc. pos."
        assert without_gender.display == "3rd decl. nom. sing. pos."


class TestParseAdverb:
    def test_adverb(self) -> None:
        result = parse_possibility(_line("bene", "ADV", "POS"))
        assert result == Adverb(text="bene", degree=Degree.POSITIVE)
        assert result.display == "pos."

    def test_comparative(self) -> None:
        result = parse_adverb(_line("melius", "ADV", "COMP"))
        assert result is not None
        assert result.degree is Degree.COMPARATIVE


class TestNotAPossibility:
    """Lines that are not possibilities parse to None."""

    def test_short_line(self) -> None:
        assert parse_possibility("bene ADV POS") is None

    def test_unknown_tag(self) -> None:
        assert parse_possibility(_line("cum", "PREP", "ABL")) is None

    def test_meaning_line(self) -> None:
        assert parse_possibility("love, like; fall in love with; be fond of;") is None

    def test_gloss_with_tag_as_second_word(self) -> None:
        assert parse_possibility("also ADV POS (as bene);") is None
        assert parse_possibility("also                 ADV    POS") is not None

    def test_tag_inside_word_column_must_reach_its_edge(self) -> None:
        assert parse_possibility("amabit         V      1 1 FUT  ACTIVE  IND 3 S") is None

    def test_header_line(self) -> None:
        assert parse_possibility("puella, puellae  N (1st) F   [XXXAX]") is None

    def test_tags_are_disjoint(self) -> None:
        line = _line("bon.i", "ADJ", "1 1 GEN S M POS")
        assert parse_noun(line) is None
        assert parse_adverb(line) is None
        assert parse_verb(line) is None
