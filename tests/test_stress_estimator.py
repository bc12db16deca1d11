import pytest

from ghost_note.phonetics import (
    analyze_unknown_word,
    estimate_stress_pattern,
    estimate_stress_with_confidence,
    estimate_syllable_count,
)
from ghost_note.phonetics.stress_estimator import (
    STRESS_SHIFTING_SUFFIXES,
    detect_stress_shifting_suffix,
    detect_unstressed_prefix,
    detect_unstressed_suffix,
)
from ghost_note.phonetics.types import ESTIMATION_METHODS


@pytest.mark.parametrize(
    "word, expected",
    [
        ("beautiful", 3),
        ("wanted", 2),
        ("ended", 2),
        ("walked", 1),
        ("table", 2),
        ("boxes", 2),
        ("kisses", 2),
        ("buzzes", 2),
        ("wishes", 2),
        ("churches", 2),
        ("pages", 2),
        ("places", 2),
        ("makes", 1),
        ("day", 1),
        ("happy", 2),
        ("mystery", 3),
        ("playing", 2),
        ("played", 1),
        ("university", 5),
        ("international", 5),
        ("understanding", 4),
        ("coffee", 2),
        ("letter", 2),
        ("bottle", 2),
        ("gym", 1),
        ("python", 2),
    ],
)
def test_estimate_syllable_count(word, expected):
    assert estimate_syllable_count(word) == expected


def test_syllable_count_ignores_case_and_whitespace():
    assert estimate_syllable_count("  BEAUTIFUL ") == 3


def test_syllable_count_edge_cases():
    assert estimate_syllable_count("") == 0
    assert estimate_syllable_count("   ") == 0
    assert estimate_syllable_count("a") == 1
    assert estimate_syllable_count("y") == 1
    assert estimate_syllable_count("x") == 0
    # Anything longer than one character floors at one syllable.
    assert estimate_syllable_count("!!!") == 1
    assert estimate_syllable_count("123") == 1


@pytest.mark.parametrize(
    "word, expected",
    [
        ("nation", "10"),
        ("station", "10"),
        ("mission", "10"),
        ("vision", "10"),
        ("magic", "10"),
        ("tragic", "10"),
        ("machine", "01"),
        ("bamboo", "01"),
        ("degree", "01"),
        ("education", "0010"),
        ("example", "010"),
        ("unhappy", "010"),
        ("cat", "1"),
    ],
)
def test_estimate_stress_pattern(word, expected):
    assert estimate_stress_pattern(word) == expected


@pytest.mark.parametrize(
    "word, expected",
    [
        # Stress lands on the syllable before an unstressed suffix.
        pytest.param("wonderful", "010", id="unstressed-suffix"),
        # "able" would put stress on "un", so it moves past the prefix.
        pytest.param("unable", "010", id="suffix-blocked-by-prefix"),
        pytest.param("cinema", "100", id="antepenultimate"),
        pytest.param("interest", "010", id="after-prefix"),
        # "super" spans two of three syllables, leaving the penultimate.
        pytest.param("supermen", "010", id="penultimate"),
    ],
)
def test_default_rules_for_longer_words(word, expected):
    assert estimate_syllable_count(word) == 3
    assert estimate_stress_pattern(word) == expected


@pytest.mark.parametrize(
    "word",
    [
        "",
        "   ",
        "x",
        "!!!",
        "123",
        "hello123",
        "supercalifragilisticexpialidocious",
        "antidisestablishmentarianism",
        "rhythm",
        "queueing",
        "ography",
        "tion",
    ],
)
def test_estimates_are_well_formed_for_any_input(word):
    count = estimate_syllable_count(word)
    pattern = estimate_stress_pattern(word)

    assert count >= 0
    assert len(pattern) == count
    assert set(pattern) <= {"0", "1"}
    if count:
        assert pattern.count("1") == 1
    else:
        assert pattern == ""


def test_suffix_tables_are_checked_in_order():
    assert detect_stress_shifting_suffix("education").suffix == "tion"
    assert detect_stress_shifting_suffix("musical").suffix == "ical"
    assert detect_stress_shifting_suffix("hello") is None
    assert STRESS_SHIFTING_SUFFIXES[0].suffix == "tion"


def test_unstressed_suffix_and_prefix_detection():
    assert detect_unstressed_suffix("running").suffix == "ing"
    assert detect_unstressed_suffix("quickly").syllables == 1
    assert detect_unstressed_suffix("hello") is None
    assert detect_unstressed_prefix("unhappy") == "un"
    # A bare prefix is not a prefixed word.
    assert detect_unstressed_prefix("un") is None


@pytest.mark.parametrize(
    "word, confidence, method, suffix",
    [
        ("cat", 1.0, "single_syllable", None),
        ("nation", 0.9, "suffix_rule", "tion"),
        ("quickly", 0.8, "suffix_rule", "ly"),
        ("hello", 0.6, "default_rule", None),
        ("example", 0.6, "default_rule", None),
    ],
)
def test_estimate_stress_with_confidence(word, confidence, method, suffix):
    estimation = estimate_stress_with_confidence(word)

    assert estimation.word == word
    assert estimation.confidence == confidence
    assert estimation.method == method
    assert estimation.detected_suffix == suffix
    assert estimation.method in ESTIMATION_METHODS
    assert estimation.stress_pattern == estimate_stress_pattern(word)
    assert estimation.syllable_count == estimate_syllable_count(word)


def test_estimation_as_dict_reports_suffix_only_when_found():
    assert estimate_stress_with_confidence("nation").as_dict() == {
        "word": "nation",
        "syllableCount": 2,
        "stressPattern": "10",
        "confidence": 0.9,
        "method": "suffix_rule",
        "detectedSuffix": "tion",
    }
    assert "detectedSuffix" not in estimate_stress_with_confidence("hello").as_dict()


def test_analyze_unknown_word():
    analysis = analyze_unknown_word("Flobnation")

    assert analysis.word == "Flobnation"
    assert analysis.phonemes == []
    assert analysis.in_dictionary is False
    assert analysis.alternative_pronunciations is None
    assert analysis.syllable_count == 3
    assert analysis.stress_pattern == "010"
