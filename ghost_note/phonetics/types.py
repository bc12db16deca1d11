"""Value objects returned by the dictionary and the stress estimator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

ESTIMATION_METHODS = ("single_syllable", "suffix_rule", "default_rule")


@dataclass
class LookupResult:
    """All pronunciations found for a word.

    ``found`` is true exactly when ``pronunciations`` is non-empty.
    """

    word: str
    normalized: str
    pronunciations: List[List[str]] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.pronunciations)

    @property
    def primary(self) -> Optional[List[str]]:
        return list(self.pronunciations[0]) if self.pronunciations else None


@dataclass
class PhoneticAnalysis:
    """Unified per-word descriptor produced by the dictionary and the estimator."""

    word: str
    phonemes: List[str]
    syllable_count: int
    stress_pattern: str
    in_dictionary: bool
    alternative_pronunciations: Optional[List[List[str]]] = None

    def as_dict(self) -> Dict[str, Any]:
        """Render the analysis with the camelCase keys the front end reads."""

        payload: Dict[str, Any] = {
            "word": self.word,
            "phonemes": list(self.phonemes),
            "syllableCount": self.syllable_count,
            "stressPattern": self.stress_pattern,
            "inDictionary": self.in_dictionary,
        }
        if self.alternative_pronunciations:
            payload["alternativePronunciations"] = [
                list(entry) for entry in self.alternative_pronunciations
            ]
        return payload


@dataclass
class StressEstimation:
    word: str
    syllable_count: int
    stress_pattern: str
    confidence: float
    method: str
    detected_suffix: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "word": self.word,
            "syllableCount": self.syllable_count,
            "stressPattern": self.stress_pattern,
            "confidence": self.confidence,
            "method": self.method,
        }
        if self.detected_suffix is not None:
            payload["detectedSuffix"] = self.detected_suffix
        return payload


__all__ = [
    "ESTIMATION_METHODS",
    "LookupResult",
    "PhoneticAnalysis",
    "StressEstimation",
]
