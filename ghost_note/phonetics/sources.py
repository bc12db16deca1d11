"""Pronunciation table sources for :class:`PronouncingDictionary`.

A source is any zero-argument callable returning a mapping of lowercase word to
either one space-delimited ARPAbet string (``"hello" -> "HH AH0 L OW1"``) or a
sequence of such strings when the word has several pronunciations. Sources run
on a background thread, so they may block on disk I/O.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

import pronouncing

RawEntry = Union[str, Sequence[str]]
RawTable = Mapping[str, RawEntry]
PronunciationTable = Mapping[str, Tuple[Tuple[str, ...], ...]]
TableSource = Callable[[], RawTable]

_WORD_VARIANT_PATTERN = re.compile(r"\(\d+\)$")


class DictionaryLoadError(RuntimeError):
    """Raised when a pronunciation table cannot be fetched or parsed."""


def _strip_variant(word: str) -> str:
    return _WORD_VARIANT_PATTERN.sub("", word).strip().lower()


def build_table(raw: RawTable) -> Dict[str, Tuple[Tuple[str, ...], ...]]:
    """Normalise a raw source mapping into the immutable lookup table.

    Keys are lower-cased and stripped; each pronunciation string is split on
    whitespace with empty tokens dropped. Entries without any phoneme are
    skipped so a present key always has at least one pronunciation.
    """

    if not isinstance(raw, Mapping):
        raise DictionaryLoadError(
            f"Pronunciation source returned {type(raw).__name__}, expected a mapping"
        )

    grouped: Dict[str, List[Tuple[str, ...]]] = {}
    for raw_word, entry in raw.items():
        word = str(raw_word).strip().lower()
        if not word:
            continue
        variants = [entry] if isinstance(entry, str) else list(entry)
        for variant in variants:
            phones = tuple(token for token in str(variant).split() if token)
            if phones:
                grouped.setdefault(word, []).append(phones)

    return {word: tuple(entries) for word, entries in grouped.items()}


def bundled_cmudict() -> Dict[str, List[str]]:
    """Return the CMU dictionary shipped with :mod:`pronouncing`.

    Every pronunciation variant is kept, in dictionary order.
    """

    pronouncing.init_cmu()
    table: Dict[str, List[str]] = {}
    for word, phones in pronouncing.pronunciations:
        table.setdefault(word, []).append(phones)
    return table


class CmudictFileSource:
    """Read a ``cmudict.7b`` style file (``WORD  P1 P2 ...`` per line)."""

    def __init__(self, dict_path: Union[Path, str]) -> None:
        self.dict_path = Path(dict_path)

    def __call__(self) -> Dict[str, List[str]]:
        table: Dict[str, List[str]] = {}
        try:
            with self.dict_path.open("r", encoding="utf-8") as handle:
                for line in handle:
                    entry = line.strip()
                    if not entry or entry.startswith(";;;"):
                        continue

                    parts = entry.split()
                    if len(parts) < 2:
                        continue

                    raw_word, *phones = parts
                    word = _strip_variant(raw_word)
                    if not word:
                        continue
                    table.setdefault(word, []).append(" ".join(phones))
        except (OSError, UnicodeDecodeError) as exc:
            raise DictionaryLoadError(
                f"Unable to read pronunciation dictionary at {self.dict_path}"
            ) from exc
        return table

    def __repr__(self) -> str:
        return f"CmudictFileSource({str(self.dict_path)!r})"


class MappingSource:
    """Serve an already-resident table through the loader contract."""

    def __init__(self, mapping: RawTable) -> None:
        self._mapping = mapping

    def __call__(self) -> RawTable:
        return self._mapping

    def __repr__(self) -> str:
        return f"MappingSource({len(self._mapping)} words)"


def resolve_source(
    source: Optional[Union[TableSource, RawTable]] = None,
    *,
    dict_path: Optional[Union[Path, str]] = None,
) -> TableSource:
    """Pick the source a dictionary should load from.

    An explicit ``source`` wins (a plain mapping is wrapped in
    :class:`MappingSource`), then ``dict_path``, then the bundled CMU data.
    """

    if source is not None:
        if isinstance(source, Mapping):
            return MappingSource(source)
        return source
    if dict_path is not None:
        return CmudictFileSource(dict_path)
    return bundled_cmudict


__all__ = [
    "CmudictFileSource",
    "DictionaryLoadError",
    "MappingSource",
    "PronunciationTable",
    "RawTable",
    "TableSource",
    "build_table",
    "bundled_cmudict",
    "resolve_source",
]
