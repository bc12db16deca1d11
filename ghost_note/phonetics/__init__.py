"""Phonetic analysis for Ghost Note.

CMU dictionary lookups, heuristic stress estimation for unknown words, and
the fallback helpers that combine the two.
"""

from .cmu_dict import (
    DEFAULT_DICTIONARY,
    PronouncingDictionary,
    analyze_word,
    do_words_rhyme,
    ensure_loaded,
    ensure_loaded_sync,
    get_rhyming_part,
    get_stress,
    get_syllable_count,
    has_word,
    is_loaded,
    lookup_all_pronunciations,
    lookup_all_pronunciations_async,
    lookup_word,
    lookup_word_async,
    normalize_word,
    preload_dictionary,
)
from .fallback import (
    analyze_word_with_fallback,
    get_stress_with_fallback,
    get_syllable_count_with_fallback,
)
from .phonemes import (
    ARPABET_CONSONANTS,
    ARPABET_VOWELS,
    Phoneme,
    extract_consonants,
    extract_vowels,
    get_phoneme_stress,
    is_consonant,
    is_vowel,
)
from .prosody import LineProsody, analyze_line, extract_stress_from_phonemes, tokenize_line
from .sources import (
    CmudictFileSource,
    DictionaryLoadError,
    MappingSource,
    bundled_cmudict,
)
from .stress_estimator import (
    analyze_unknown_word,
    estimate_stress_pattern,
    estimate_stress_with_confidence,
    estimate_syllable_count,
)
from .types import LookupResult, PhoneticAnalysis, StressEstimation

__all__ = [
    "ARPABET_CONSONANTS",
    "ARPABET_VOWELS",
    "CmudictFileSource",
    "DEFAULT_DICTIONARY",
    "DictionaryLoadError",
    "LineProsody",
    "LookupResult",
    "MappingSource",
    "Phoneme",
    "PhoneticAnalysis",
    "PronouncingDictionary",
    "StressEstimation",
    "analyze_line",
    "analyze_unknown_word",
    "analyze_word",
    "analyze_word_with_fallback",
    "bundled_cmudict",
    "do_words_rhyme",
    "ensure_loaded",
    "ensure_loaded_sync",
    "estimate_stress_pattern",
    "estimate_stress_with_confidence",
    "estimate_syllable_count",
    "extract_consonants",
    "extract_stress_from_phonemes",
    "extract_vowels",
    "get_phoneme_stress",
    "get_rhyming_part",
    "get_stress",
    "get_stress_with_fallback",
    "get_syllable_count",
    "get_syllable_count_with_fallback",
    "has_word",
    "is_consonant",
    "is_loaded",
    "is_vowel",
    "lookup_all_pronunciations",
    "lookup_all_pronunciations_async",
    "lookup_word",
    "lookup_word_async",
    "normalize_word",
    "preload_dictionary",
    "tokenize_line",
]
