"""Line-level stress and syllable aggregation.

A line is analysed word by word; each token goes through
:func:`analyze_word_with_fallback`, so dictionary words keep their recorded
stress (including secondary ``"2"``) and unknown words get an estimate.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional, Sequence, Tuple

from .cmu_dict import PronouncingDictionary
from .fallback import analyze_word_with_fallback
from .phonemes import stress_pattern
from .types import PhoneticAnalysis

TOKEN_PATTERN = re.compile(r"[A-Za-z']+")


def extract_stress_from_phonemes(phonemes: Sequence[str]) -> str:
    """Return the stress digits of ``phonemes`` (``"01"`` for ``HH AH0 L OW1``)."""

    if not phonemes:
        return ""
    return stress_pattern(phonemes)


@lru_cache(maxsize=2048)
def _tokenize(text: str) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    tokens = tuple(
        match.group(0).strip("'") for match in TOKEN_PATTERN.finditer(text)
    )
    tokens = tuple(token for token in tokens if token)
    return tokens, tuple(token.lower() for token in tokens)


def tokenize_line(text: str) -> Tuple[List[str], List[str]]:
    """Split ``text`` into display tokens and their lower-cased forms.

    Apostrophes inside a word are kept ("don't"); quote marks around a word
    are dropped.
    """

    tokens, normalized = _tokenize(text or "")
    return list(tokens), list(normalized)


@dataclass
class LineProsody:
    """Stress summary for one line of a poem."""

    text: str
    words: List[PhoneticAnalysis] = field(default_factory=list)

    @property
    def stress_pattern(self) -> str:
        return "".join(word.stress_pattern for word in self.words)

    @property
    def syllable_count(self) -> int:
        return sum(word.syllable_count for word in self.words)

    @property
    def unknown_words(self) -> List[str]:
        return [word.word for word in self.words if not word.in_dictionary]

    @property
    def word_boundaries(self) -> List[int]:
        """Syllable offset at which each word starts."""

        offsets: List[int] = []
        position = 0
        for word in self.words:
            offsets.append(position)
            position += word.syllable_count
        return offsets


def analyze_line(
    text: str,
    dictionary: Optional[PronouncingDictionary] = None,
) -> LineProsody:
    """Analyse every word of ``text`` and collect the line's stress pattern."""

    tokens, _ = tokenize_line(text)
    return LineProsody(
        text=text,
        words=[analyze_word_with_fallback(token, dictionary) for token in tokens],
    )


__all__ = [
    "LineProsody",
    "TOKEN_PATTERN",
    "analyze_line",
    "extract_stress_from_phonemes",
    "tokenize_line",
]
