"""Heuristic syllable and stress estimation for words missing from the dictionary.

The estimator is purely orthographic. It counts vowel groups, corrects for
silent ``e`` and non-syllabic ``-ed``/``-es`` endings, then places a single
primary stress using ordered suffix and prefix tables. It never raises and
never emits secondary stress; only dictionary data can surface ``"2"``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ghost_note.utils.observability import get_logger

from .types import PhoneticAnalysis, StressEstimation

_logger = get_logger(__name__).bind(component="stress_estimator")

_VOWELS = "aeiou"
_VOWELS_WITH_Y = "aeiouy"


@dataclass(frozen=True)
class StressShiftingSuffix:
    """Suffix that pulls primary stress onto an earlier syllable.

    Stress lands ``stress_before`` syllables ahead of the suffix's own
    ``syllables``.
    """

    suffix: str
    syllables: int
    stress_before: int


@dataclass(frozen=True)
class UnstressedSuffix:
    suffix: str
    syllables: int


# Checked in order; the first suffix that matches wins.
STRESS_SHIFTING_SUFFIXES: Tuple[StressShiftingSuffix, ...] = (
    StressShiftingSuffix("tion", 1, 1),
    StressShiftingSuffix("sion", 1, 1),
    StressShiftingSuffix("cian", 1, 1),
    StressShiftingSuffix("tian", 1, 1),
    StressShiftingSuffix("ical", 2, 2),
    StressShiftingSuffix("ic", 1, 1),
    StressShiftingSuffix("ity", 2, 1),
    StressShiftingSuffix("ety", 2, 1),
    StressShiftingSuffix("ious", 2, 1),
    StressShiftingSuffix("eous", 2, 1),
    StressShiftingSuffix("ian", 1, 1),
    StressShiftingSuffix("ual", 2, 1),
    StressShiftingSuffix("ology", 3, 2),
    StressShiftingSuffix("ography", 3, 2),
    StressShiftingSuffix("ation", 2, 1),
)

# Inflections first, then derivational endings. Zero-syllable entries are
# recognised for confidence reporting but never place stress.
UNSTRESSED_SUFFIXES: Tuple[UnstressedSuffix, ...] = (
    UnstressedSuffix("ing", 1),
    UnstressedSuffix("ed", 0),
    UnstressedSuffix("es", 0),
    UnstressedSuffix("s", 0),
    UnstressedSuffix("ly", 1),
    UnstressedSuffix("ful", 1),
    UnstressedSuffix("less", 1),
    UnstressedSuffix("ness", 1),
    UnstressedSuffix("ment", 1),
    UnstressedSuffix("able", 2),
    UnstressedSuffix("ible", 2),
    UnstressedSuffix("ous", 1),
    UnstressedSuffix("ive", 1),
    UnstressedSuffix("er", 1),
    UnstressedSuffix("or", 1),
    UnstressedSuffix("en", 1),
    UnstressedSuffix("al", 1),
    UnstressedSuffix("ary", 2),
    UnstressedSuffix("ery", 2),
    UnstressedSuffix("ory", 2),
)

UNSTRESSED_PREFIXES: Tuple[str, ...] = (
    "un", "re", "de", "dis", "mis", "pre", "pro", "in", "im", "il", "ir",
    "en", "em", "non", "sub", "super", "anti", "auto", "bi", "co", "ex",
    "inter", "multi", "out", "over", "post", "semi", "trans", "under",
)

# Two-syllable endings that usually carry final stress (bamboo, degree,
# machine, parade, complete, pollute, unique).
FINAL_STRESS_ENDINGS: Tuple[str, ...] = ("oo", "ee", "ine", "ade", "ete", "ute", "ique")

_SYLLABIC_ES_AFTER = ("s", "z", "x")
_SYLLABIC_ES_ENDINGS = ("shes", "ches", "ges", "ces")


def _normalize(word: str) -> str:
    return word.lower().strip()


def _is_consonant_letter(char: str) -> bool:
    return char.isalpha() and char not in _VOWELS_WITH_Y


def _count_vowel_groups(word: str) -> int:
    groups = 0
    index = 0
    length = len(word)
    while index < length:
        char = word[index]
        nxt = word[index + 1] if index + 1 < length else ""

        if char in _VOWELS:
            groups += 1
            index += 1
            while index < length and word[index] in _VOWELS:
                index += 1
            # A trailing y closes the group ("day", "boy") unless a vowel follows it.
            if index < length and word[index] == "y":
                after_y = word[index + 1] if index + 1 < length else ""
                if not after_y or after_y not in _VOWELS_WITH_Y:
                    index += 1
            continue

        if char == "y" and index > 0 and (not nxt or nxt not in _VOWELS_WITH_Y):
            groups += 1
        index += 1
    return groups


def estimate_syllable_count(word: str) -> int:
    """Estimate the number of syllables in ``word``.

    >>> estimate_syllable_count("beautiful")
    3
    >>> estimate_syllable_count("walked")
    1
    """

    normalized = _normalize(word)
    length = len(normalized)

    if length == 0:
        return 0
    if length == 1:
        return 1 if normalized in _VOWELS_WITH_Y else 0

    syllables = _count_vowel_groups(normalized)

    # Silent final e ("make"), except consonant + "le" ("table", "little").
    if length > 2 and normalized.endswith("e") and _is_consonant_letter(normalized[-2]):
        syllabic_le = (
            length > 3
            and normalized.endswith("le")
            and _is_consonant_letter(normalized[-3])
        )
        if not syllabic_le and syllables > 1:
            syllables -= 1

    # -ed is only syllabic after t or d ("wanted", "ended").
    if length > 2 and normalized.endswith("ed") and normalized[-3] not in ("t", "d"):
        if syllables > 1:
            syllables -= 1

    # -es is only syllabic after sibilants ("boxes", "wishes", "pages").
    if length > 2 and normalized.endswith("es"):
        syllabic_es = normalized[-3] in _SYLLABIC_ES_AFTER or normalized.endswith(
            _SYLLABIC_ES_ENDINGS
        )
        if not syllabic_es and syllables > 1:
            syllables -= 1

    syllables = max(1, syllables)
    _logger.debug(
        "Estimated syllable count", context={"word": word, "syllables": syllables}
    )
    return syllables


def detect_stress_shifting_suffix(word: str) -> Optional[StressShiftingSuffix]:
    normalized = _normalize(word)
    for rule in STRESS_SHIFTING_SUFFIXES:
        if normalized.endswith(rule.suffix):
            return rule
    return None


def detect_unstressed_suffix(word: str) -> Optional[UnstressedSuffix]:
    normalized = _normalize(word)
    for rule in UNSTRESSED_SUFFIXES:
        if normalized.endswith(rule.suffix):
            return rule
    return None


def detect_unstressed_prefix(word: str) -> Optional[str]:
    normalized = _normalize(word)
    for prefix in UNSTRESSED_PREFIXES:
        if normalized.startswith(prefix) and len(normalized) > len(prefix):
            return prefix
    return None


def _apply_default_rules(word: str, syllable_count: int, stress: List[str]) -> str:
    if syllable_count == 2:
        if word.endswith(FINAL_STRESS_ENDINGS):
            stress[1] = "1"
        else:
            stress[0] = "1"
        return "".join(stress)

    prefix = detect_unstressed_prefix(word)
    prefix_span = estimate_syllable_count(prefix) if prefix else 0

    suffix = detect_unstressed_suffix(word)
    if suffix is not None and suffix.syllables > 0:
        position = syllable_count - suffix.syllables - 1
        if position >= 0 and position >= prefix_span:
            stress[position] = "1"
            return "".join(stress)

    # Antepenultimate rule, pushed past an unstressed prefix when needed.
    antepenult = syllable_count - 3
    if antepenult >= prefix_span:
        stress[antepenult] = "1"
    elif prefix_span < syllable_count - 1:
        stress[prefix_span] = "1"
    else:
        stress[syllable_count - 2] = "1"
    return "".join(stress)


def estimate_stress_pattern(word: str) -> str:
    """Estimate a stress pattern with exactly one primary stress.

    >>> estimate_stress_pattern("nation")
    '10'
    >>> estimate_stress_pattern("machine")
    '01'
    """

    normalized = _normalize(word)
    syllable_count = estimate_syllable_count(normalized)

    if syllable_count == 0:
        return ""
    if syllable_count == 1:
        return "1"

    stress = ["0"] * syllable_count

    shifting = detect_stress_shifting_suffix(normalized)
    if shifting is not None:
        position = syllable_count - shifting.syllables - shifting.stress_before
        if position >= 0:
            stress[position] = "1"
            pattern = "".join(stress)
            _logger.debug(
                "Stress-shifting suffix placed stress",
                context={"word": word, "suffix": shifting.suffix, "pattern": pattern},
            )
            return pattern

    pattern = _apply_default_rules(normalized, syllable_count, stress)
    _logger.debug("Estimated stress pattern", context={"word": word, "pattern": pattern})
    return pattern


def estimate_stress_with_confidence(word: str) -> StressEstimation:
    """Estimate stress and report how the estimate was reached.

    Confidence is ``1.0`` for single syllables, ``0.9`` when a stress-shifting
    suffix is present, ``0.8`` when only an unstressed suffix is present and
    ``0.6`` otherwise.
    """

    normalized = _normalize(word)
    syllable_count = estimate_syllable_count(normalized)
    pattern = estimate_stress_pattern(normalized)

    detected_suffix: Optional[str] = None
    shifting = detect_stress_shifting_suffix(normalized)
    unstressed = detect_unstressed_suffix(normalized)

    if syllable_count == 1:
        confidence, method = 1.0, "single_syllable"
    elif shifting is not None:
        confidence, method = 0.9, "suffix_rule"
        detected_suffix = shifting.suffix
    elif unstressed is not None:
        confidence, method = 0.8, "suffix_rule"
        detected_suffix = unstressed.suffix
    else:
        confidence, method = 0.6, "default_rule"

    return StressEstimation(
        word=word,
        syllable_count=syllable_count,
        stress_pattern=pattern,
        confidence=confidence,
        method=method,
        detected_suffix=detected_suffix,
    )


def analyze_unknown_word(word: str) -> PhoneticAnalysis:
    """Build a dictionary-shaped analysis from estimated values."""

    estimation = estimate_stress_with_confidence(word)
    return PhoneticAnalysis(
        word=word,
        phonemes=[],
        syllable_count=estimation.syllable_count,
        stress_pattern=estimation.stress_pattern,
        in_dictionary=False,
    )


__all__ = [
    "FINAL_STRESS_ENDINGS",
    "STRESS_SHIFTING_SUFFIXES",
    "StressShiftingSuffix",
    "UNSTRESSED_PREFIXES",
    "UNSTRESSED_SUFFIXES",
    "UnstressedSuffix",
    "analyze_unknown_word",
    "detect_stress_shifting_suffix",
    "detect_unstressed_prefix",
    "detect_unstressed_suffix",
    "estimate_stress_pattern",
    "estimate_stress_with_confidence",
    "estimate_syllable_count",
]
