import pytest

from ghost_note.phonetics.phonemes import (
    ARPABET_CONSONANTS,
    ARPABET_VOWELS,
    Phoneme,
    extract_consonants,
    extract_vowels,
    get_phoneme_stress,
    is_consonant,
    is_vowel,
    parse_phonemes,
    parse_pronunciation,
    strip_all_stress,
    stress_pattern,
)


def test_inventory_sizes():
    assert len(ARPABET_VOWELS) == 15
    assert len(ARPABET_CONSONANTS) == 24
    assert not set(ARPABET_VOWELS) & set(ARPABET_CONSONANTS)


@pytest.mark.parametrize("vowel", ARPABET_VOWELS)
def test_vowels_are_classified_with_and_without_stress(vowel):
    for token in (vowel, f"{vowel}0", f"{vowel}1", f"{vowel}2"):
        assert is_vowel(token)
        assert not is_consonant(token)


@pytest.mark.parametrize("consonant", ARPABET_CONSONANTS)
def test_consonants_are_exclusive_of_vowels(consonant):
    assert is_consonant(consonant)
    assert not is_vowel(consonant)


def test_unknown_tokens_are_neither():
    for token in ("", "XX", "AH3", "b", "T1"):
        assert not is_vowel(token)
        assert not is_consonant(token)


def test_get_phoneme_stress():
    assert get_phoneme_stress("AA1") == "1"
    assert get_phoneme_stress("IY0") == "0"
    assert get_phoneme_stress("ER2") == "2"
    assert get_phoneme_stress("AH") is None
    assert get_phoneme_stress("K") is None


def test_parse_pronunciation_discards_empty_tokens():
    assert parse_pronunciation("HH  AH0 L OW1 ") == ["HH", "AH0", "L", "OW1"]
    assert parse_pronunciation("") == []


def test_stress_pattern_and_extractors():
    phones = ["B", "Y", "UW1", "T", "AH0", "F", "AH0", "L"]

    assert stress_pattern(phones) == "100"
    assert extract_vowels(phones) == ["UW1", "AH0", "AH0"]
    assert extract_consonants(phones) == ["B", "Y", "T", "F", "L"]


def test_strip_all_stress():
    assert strip_all_stress(["AE1", "T"]) == ("AE", "T")


def test_phoneme_parse_tags_vowels_and_consonants():
    vowel, consonant = parse_phonemes(["OW1", "SH"])

    assert vowel == Phoneme("OW", "1")
    assert vowel.is_vowel and not vowel.is_consonant
    assert consonant == Phoneme("SH")
    assert consonant.stress is None
    assert consonant.is_consonant
    assert str(vowel) == "OW1"
