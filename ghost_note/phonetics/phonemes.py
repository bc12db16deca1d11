"""ARPAbet phoneme inventory and classification helpers.

The CMU dictionary writes vowels with a trailing stress digit:

* ``0`` - unstressed
* ``1`` - primary stress
* ``2`` - secondary stress

Every vowel phoneme in a pronunciation is one syllable. Consonants never carry
a stress digit.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional, Sequence

ARPABET_VOWELS: tuple[str, ...] = (
    "AA",  # odd, father
    "AE",  # at, bat
    "AH",  # hut, but
    "AO",  # bought, caught
    "AW",  # cow, how
    "AY",  # hide, my
    "EH",  # ed, bed
    "ER",  # hurt, bird
    "EY",  # ate, say
    "IH",  # it, bit
    "IY",  # eat, see
    "OW",  # oat, go
    "OY",  # toy, boy
    "UH",  # hood, could
    "UW",  # two, you
)

ARPABET_CONSONANTS: tuple[str, ...] = (
    "B", "CH", "D", "DH", "F", "G", "HH", "JH", "K", "L", "M", "N",
    "NG", "P", "R", "S", "SH", "T", "TH", "V", "W", "Y", "Z", "ZH",
)

STRESS_LEVELS: tuple[str, ...] = ("0", "1", "2")

VOWEL_PHONEMES: FrozenSet[str] = frozenset(ARPABET_VOWELS)
CONSONANT_PHONEMES: FrozenSet[str] = frozenset(ARPABET_CONSONANTS)

_TRAILING_STRESS = re.compile(r"[012]$")
_ANY_STRESS = re.compile(r"[012]")


def strip_stress(phoneme: str) -> str:
    """Return ``phoneme`` without a single trailing stress digit."""

    return _TRAILING_STRESS.sub("", phoneme)


def is_vowel(phoneme: str) -> bool:
    """Return ``True`` when ``phoneme`` is a vowel, with or without stress digit."""

    return strip_stress(phoneme) in VOWEL_PHONEMES


def is_consonant(phoneme: str) -> bool:
    """Return ``True`` when ``phoneme`` is exactly one of the 24 consonants."""

    return phoneme in CONSONANT_PHONEMES


def get_phoneme_stress(phoneme: str) -> Optional[str]:
    """Return the stress level of a vowel phoneme.

    ``None`` is returned for consonants and for vowels written without a
    stress digit (``"AH"``).
    """

    if not is_vowel(phoneme):
        return None
    match = _TRAILING_STRESS.search(phoneme)
    return match.group(0) if match else None


def extract_vowels(phonemes: Iterable[str]) -> List[str]:
    return [phoneme for phoneme in phonemes if is_vowel(phoneme)]


def extract_consonants(phonemes: Iterable[str]) -> List[str]:
    return [phoneme for phoneme in phonemes if is_consonant(phoneme)]


def parse_pronunciation(pronunciation: str) -> List[str]:
    """Split a space-delimited pronunciation (``"HH AH0 L OW1"``) into phonemes."""

    return [token for token in pronunciation.split() if token]


def stress_pattern(phonemes: Sequence[str]) -> str:
    """Concatenate the stress digits of every stressed vowel in ``phonemes``."""

    digits: List[str] = []
    for phoneme in phonemes:
        stress = get_phoneme_stress(phoneme)
        if stress is not None:
            digits.append(stress)
    return "".join(digits)


def count_vowels(phonemes: Sequence[str]) -> int:
    return sum(1 for phoneme in phonemes if is_vowel(phoneme))


def strip_all_stress(phonemes: Iterable[str]) -> tuple[str, ...]:
    """Drop stress digits from every phoneme, for stress-blind comparisons."""

    return tuple(_ANY_STRESS.sub("", phoneme) for phoneme in phonemes)


@dataclass(frozen=True)
class Phoneme:
    """Typed view of an ARPAbet token.

    ``stress`` is only ever set on vowels. Tokens outside the inventory parse
    with ``is_vowel`` and ``is_consonant`` both false.
    """

    base: str
    stress: Optional[str] = None

    @classmethod
    def parse(cls, token: str) -> "Phoneme":
        if is_vowel(token):
            return cls(strip_stress(token), get_phoneme_stress(token))
        return cls(token)

    @property
    def is_vowel(self) -> bool:
        return self.base in VOWEL_PHONEMES

    @property
    def is_consonant(self) -> bool:
        return self.base in CONSONANT_PHONEMES

    def __str__(self) -> str:
        return f"{self.base}{self.stress or ''}"


def parse_phonemes(tokens: Iterable[str]) -> List[Phoneme]:
    return [Phoneme.parse(token) for token in tokens]


__all__ = [
    "ARPABET_CONSONANTS",
    "ARPABET_VOWELS",
    "CONSONANT_PHONEMES",
    "Phoneme",
    "STRESS_LEVELS",
    "VOWEL_PHONEMES",
    "count_vowels",
    "extract_consonants",
    "extract_vowels",
    "get_phoneme_stress",
    "is_consonant",
    "is_vowel",
    "parse_phonemes",
    "parse_pronunciation",
    "strip_all_stress",
    "strip_stress",
    "stress_pattern",
]
