"""Dictionary-first answers that fall back to the stress estimator."""

from __future__ import annotations

from typing import Optional

from ghost_note.utils.observability import create_counter, get_logger

from .cmu_dict import DEFAULT_DICTIONARY, PronouncingDictionary
from .stress_estimator import (
    analyze_unknown_word,
    estimate_stress_pattern,
    estimate_syllable_count,
)
from .types import PhoneticAnalysis

_logger = get_logger(__name__).bind(component="phonetic_fallback")
_FALLBACK_COUNTER = create_counter(
    "ghost_note_estimator_fallbacks_total",
    "Answers computed by the stress estimator because the dictionary had no entry",
    ["kind"],
)


def get_stress_with_fallback(word: str, cmu_stress: Optional[str]) -> str:
    """Return ``cmu_stress`` unchanged when given, otherwise estimate it.

    >>> get_stress_with_fallback("hello", "01")
    '01'
    """

    if cmu_stress is not None:
        return cmu_stress

    _FALLBACK_COUNTER.labels(kind="stress").inc()
    estimated = estimate_stress_pattern(word)
    _logger.debug(
        "Using estimated stress", context={"word": word, "pattern": estimated}
    )
    return estimated


def get_syllable_count_with_fallback(word: str, cmu_syllables: Optional[int]) -> int:
    if cmu_syllables is not None:
        return cmu_syllables

    _FALLBACK_COUNTER.labels(kind="syllables").inc()
    estimated = estimate_syllable_count(word)
    _logger.debug(
        "Using estimated syllable count",
        context={"word": word, "syllables": estimated},
    )
    return estimated


def analyze_word_with_fallback(
    word: str,
    dictionary: Optional[PronouncingDictionary] = None,
) -> PhoneticAnalysis:
    """Analyse ``word`` from the dictionary, estimating when it has no entry."""

    source = dictionary if dictionary is not None else DEFAULT_DICTIONARY
    analysis = source.analyze_word(word)
    if analysis.in_dictionary:
        return analysis

    _FALLBACK_COUNTER.labels(kind="analysis").inc()
    return analyze_unknown_word(word)


__all__ = [
    "analyze_word_with_fallback",
    "get_stress_with_fallback",
    "get_syllable_count_with_fallback",
]
