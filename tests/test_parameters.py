"""Tests for the static lookup tables in linguistic.parameters."""

import pytest

from linguistic.errors import UnknownCodeError
from linguistic.parameters import (
    Flag,
    Format,
    Language,
    LanguagePair,
    Option,
    ResponseFormat,
    SpellingMistake,
    Version,
)


@pytest.mark.unit
class TestLanguage:
    """Tests for Language codes and lookups."""

    def test_by_code_round_trips_every_member(self):
        for language in Language:
            assert Language.by_code(language.code) is language

    def test_codes_are_unique(self):
        codes = [language.code for language in Language]
        assert len(codes) == len(set(codes))

    def test_autodetect_has_empty_code(self):
        assert Language.AUTODETECT.code == ""
        assert Language.by_code("") is Language.AUTODETECT

    def test_str_is_wire_code(self):
        assert str(Language.RUSSIAN) == "ru"

    def test_unknown_code_raises(self):
        with pytest.raises(UnknownCodeError) as exc_info:
            Language.by_code("xx")
        assert exc_info.value.code == "xx"
        assert str(exc_info.value) == "Unknown language code: xx"

    def test_unknown_code_is_a_lookup_error(self):
        with pytest.raises(LookupError):
            Language.by_code("zz")


@pytest.mark.unit
class TestLanguagePair:
    """Tests for LanguagePair derivation."""

    def test_pair_knows_its_languages(self):
        pair = LanguagePair.by_code("ru-en")
        assert pair is LanguagePair.RUSSIAN_ENGLISH
        assert pair.source is Language.RUSSIAN
        assert pair.target is Language.ENGLISH

    def test_code_matches_languages(self):
        for pair in LanguagePair:
            assert pair.code == f"{pair.source.code}-{pair.target.code}"

    def test_by_languages(self):
        pair = LanguagePair.by_languages(Language.ENGLISH, Language.GERMAN)
        assert pair is LanguagePair.ENGLISH_GERMAN

    def test_by_languages_unknown_pair(self):
        with pytest.raises(UnknownCodeError):
            LanguagePair.by_languages(Language.GERMAN, Language.FRENCH)

    def test_unknown_code_raises(self):
        with pytest.raises(UnknownCodeError):
            LanguagePair.by_code("en-xx")


@pytest.mark.unit
class TestVersionAndFormat:
    """Tests for Version and ResponseFormat tags."""

    def test_latest_aliases_concrete_version(self):
        assert Version.DICTIONARY_LATEST is Version.DICTIONARY_V1
        assert Version.TRANSLATE_LATEST is Version.TRANSLATE_V1_5

    def test_version_tags(self):
        assert Version.TRANSLATE_LATEST.tag == "v1.5"
        assert Version.PREDICTOR_LATEST.service == "predictor"

    def test_version_by_code_within_service(self):
        assert Version.by_code("v1", service="predictor") is Version.PREDICTOR_V1
        assert Version.by_code("v1", service="dictionary") is Version.DICTIONARY_V1
        assert Version.by_code("v1.5", service="translator") is Version.TRANSLATE_V1_5

    def test_version_by_code_without_service_takes_first(self):
        assert Version.by_code("v1") is Version.DICTIONARY_V1

    def test_version_tag_of_another_service(self):
        with pytest.raises(UnknownCodeError):
            Version.by_code("v1.5", service="dictionary")

    def test_json_formats(self):
        assert ResponseFormat.TRANSLATE_JSON.tag == "tr.json"
        assert ResponseFormat.SPELLER_JSON.is_json
        assert not ResponseFormat.DICTIONARY_XML.is_json

    def test_format_by_code(self):
        assert ResponseFormat.by_code("dicservice.json") is ResponseFormat.DICTIONARY_JSON
        assert Format.by_code("html") is Format.HTML


@pytest.mark.unit
class TestFlagsAndOptions:
    """Tests for Flag and Option values."""

    def test_flags_are_single_bits(self):
        for flag in Flag:
            assert flag.bitmask & (flag.bitmask - 1) == 0

    def test_flag_values(self):
        assert [flag.bitmask for flag in Flag] == [1, 2, 4, 8]

    def test_option_values(self):
        assert Option.INCLUDE_AUTODETECT.value == 1
        assert Option.IGNORE_CAPITALIZATION.value == 512
        assert Option.by_code(8) is Option.FIND_REPEAT_WORDS

    def test_unknown_flag(self):
        with pytest.raises(UnknownCodeError):
            Flag.by_code(16)


@pytest.mark.unit
def test_spelling_mistake_table():
    assert SpellingMistake.by_code(1) is SpellingMistake.ERROR_UNKNOWN_WORD
    assert SpellingMistake.ERROR_REPEAT_WORD.description == "The repetition of the word"
    with pytest.raises(UnknownCodeError):
        SpellingMistake.by_code(9)
