"""Dictionary lookups over the CMU Pronouncing Dictionary.

The pronunciation table is loaded at most once per :class:`PronouncingDictionary`
and then treated as read-only. Loading happens on a background thread and is
shared by every caller that asks for it while it is in flight:

* :meth:`PronouncingDictionary.preload_dictionary` starts a load and returns
  immediately; failures are logged, never raised.
* :meth:`PronouncingDictionary.ensure_loaded` (async) and
  :meth:`PronouncingDictionary.ensure_loaded_sync` wait for the table and raise
  :class:`DictionaryLoadError` when that attempt fails. The next call retries.
* The synchronous lookups never wait. Until the table is published they report
  every word as unknown.

Module-level functions delegate to :data:`DEFAULT_DICTIONARY`, which reads the
CMU data bundled with :mod:`pronouncing` unless ``GHOST_NOTE_CMUDICT_PATH``
points at a ``cmudict.7b`` file.
"""

from __future__ import annotations

import asyncio
import inspect
import threading
import time
from concurrent.futures import Future
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Tuple, Union

from ghost_note.config import PhoneticsSettings, load_settings
from ghost_note.utils.observability import (
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)

from .phonemes import (
    count_vowels,
    parse_phonemes,
    strip_all_stress,
    stress_pattern,
)
from .sources import (
    DictionaryLoadError,
    PronunciationTable,
    RawTable,
    TableSource,
    build_table,
    resolve_source,
)
from .types import LookupResult, PhoneticAnalysis

_LOAD_COUNTER = create_counter(
    "ghost_note_dictionary_loads_total",
    "Pronunciation dictionary load attempts by outcome",
    ["outcome"],
)
_LOAD_SECONDS = create_histogram(
    "ghost_note_dictionary_load_seconds",
    "Time spent loading the pronunciation dictionary",
)
_LOOKUP_COUNTER = create_counter(
    "ghost_note_dictionary_lookups_total",
    "Dictionary lookups by result",
    ["result"],
)


def normalize_word(word: str) -> str:
    """Lower-case and trim ``word``; every lookup keys on this form."""

    return word.lower().strip()


async def _await_result(awaitable: Any) -> Any:
    return await awaitable


class PronouncingDictionary:
    """Cached word to pronunciation lookups with single-flight lazy loading."""

    def __init__(
        self,
        source: Optional[Union[TableSource, RawTable]] = None,
        *,
        settings: Optional[PhoneticsSettings] = None,
        preload: Optional[bool] = None,
    ) -> None:
        self.settings = settings or load_settings()
        self.source: TableSource = resolve_source(
            source, dict_path=self.settings.cmudict_path
        )
        self._table: Optional[PronunciationTable] = None
        self._pending: Optional[Future] = None
        self._lock = threading.Lock()
        self._attempts = 0
        self._logger = get_logger(__name__).bind(component="cmu_dictionary")

        should_preload = self.settings.preload if preload is None else preload
        if should_preload:
            self.preload_dictionary()

    # Loading ---------------------------------------------------------------
    def is_loaded(self) -> bool:
        return self._table is not None

    @property
    def load_attempts(self) -> int:
        """Number of load attempts started so far (successful or not)."""

        return self._attempts

    def _start_load(self) -> Tuple[Future, bool]:
        """Return the in-flight load future, starting one when none exists.

        The second element is ``True`` only for the caller that started it.
        """

        with self._lock:
            if self._table is not None:
                done: Future = Future()
                done.set_result(self._table)
                return done, False
            if self._pending is not None:
                return self._pending, False

            future: Future = Future()
            # A running future cannot be cancelled by one impatient awaiter.
            future.set_running_or_notify_cancel()
            self._pending = future
            self._attempts += 1
            attempt = self._attempts

        worker = threading.Thread(
            target=self._run_load,
            args=(future, attempt),
            name=f"ghost-note-dictionary-load-{attempt}",
            daemon=True,
        )
        worker.start()
        return future, True

    def _read_table(self) -> PronunciationTable:
        try:
            raw = self.source()
            if inspect.isawaitable(raw):
                raw = asyncio.run(_await_result(raw))
            return MappingProxyType(build_table(raw))
        except DictionaryLoadError:
            raise
        except Exception as exc:
            raise DictionaryLoadError(
                f"Pronunciation source {self.source!r} failed: {exc}"
            ) from exc

    def _load_attempt(self, attempt: int) -> PronunciationTable:
        self._logger.info(
            "Loading pronunciation dictionary",
            context={"source": repr(self.source), "attempt": attempt},
        )
        started = time.perf_counter()

        with start_span("ghost_note.dictionary.load", {"dictionary.attempt": attempt}) as span:
            try:
                table = self._read_table()
            except BaseException as error:
                record_exception(span, error)
                raise

        elapsed = time.perf_counter() - started
        _LOAD_SECONDS.observe(elapsed)
        self._logger.info(
            "Pronunciation dictionary loaded",
            context={"attempt": attempt, "words": len(table), "seconds": round(elapsed, 3)},
        )
        return table

    def _run_load(self, future: Future, attempt: int) -> None:
        try:
            table = self._load_attempt(attempt)
        except BaseException as exc:
            if isinstance(exc, DictionaryLoadError):
                error = exc
            else:
                error = DictionaryLoadError(
                    f"Pronunciation dictionary load attempt {attempt} failed: {exc!r}"
                )
                error.__cause__ = exc
            _LOAD_COUNTER.labels(outcome="failure").inc()
            self._logger.error(
                "Pronunciation dictionary load failed",
                context={"attempt": attempt, "error": str(error)},
            )
            # Clear the guard before resolving so awaiters can retry at once.
            with self._lock:
                self._pending = None
            future.set_exception(error)
            return

        with self._lock:
            self._table = table
            self._pending = None

        _LOAD_COUNTER.labels(outcome="success").inc()
        future.set_result(table)

    def _log_preload_outcome(self, future: Future) -> None:
        error = future.exception()
        if error is not None:
            self._logger.warning(
                "Background dictionary preload failed; lookups stay unavailable until a retry",
                context={"error": str(error)},
            )

    def preload_dictionary(self) -> None:
        """Start loading the table in the background without waiting for it."""

        if self._table is not None:
            return
        future, started = self._start_load()
        if started:
            future.add_done_callback(self._log_preload_outcome)

    async def ensure_loaded(self) -> PronunciationTable:
        """Wait until the table is loaded and return it.

        Raises:
            DictionaryLoadError: when the attempt this call joined fails.
        """

        table = self._table
        if table is not None:
            return table
        future, _ = self._start_load()
        return await asyncio.wrap_future(future)

    def ensure_loaded_sync(self, timeout: Optional[float] = None) -> PronunciationTable:
        """Blocking counterpart of :meth:`ensure_loaded` for synchronous callers."""

        table = self._table
        if table is not None:
            return table
        future, _ = self._start_load()
        return future.result(timeout=timeout)

    # Lookups ---------------------------------------------------------------
    def _entries(self, word: str) -> Tuple[Tuple[str, ...], ...]:
        table = self._table
        if table is None:
            _LOOKUP_COUNTER.labels(result="not_loaded").inc()
            self._logger.debug(
                "Dictionary not loaded yet; treating word as unknown",
                context={"word": word},
            )
            return ()

        entries = table.get(normalize_word(word), ())
        _LOOKUP_COUNTER.labels(result="hit" if entries else "miss").inc()
        if not entries:
            self._logger.debug("Word not found", context={"word": word})
        return entries

    def lookup_word(self, word: str) -> Optional[List[str]]:
        """Return the primary pronunciation of ``word`` or ``None``.

        >>> DEFAULT_DICTIONARY.lookup_word("hello")  # doctest: +SKIP
        ['HH', 'AH0', 'L', 'OW1']
        """

        entries = self._entries(word)
        if not entries:
            return None
        return list(entries[0])

    def lookup_all_pronunciations(self, word: str) -> LookupResult:
        entries = self._entries(word)
        return LookupResult(
            word=word,
            normalized=normalize_word(word),
            pronunciations=[list(entry) for entry in entries],
        )

    async def lookup_word_async(self, word: str) -> Optional[List[str]]:
        await self.ensure_loaded()
        return self.lookup_word(word)

    async def lookup_all_pronunciations_async(self, word: str) -> LookupResult:
        await self.ensure_loaded()
        return self.lookup_all_pronunciations(word)

    def has_word(self, word: str) -> bool:
        table = self._table
        return table is not None and normalize_word(word) in table

    def get_stress(self, word: str) -> Optional[str]:
        """Return the stress digits of the primary pronunciation (``"01"`` for hello)."""

        phonemes = self.lookup_word(word)
        if phonemes is None:
            return None
        return stress_pattern(phonemes)

    def get_syllable_count(self, word: str) -> Optional[int]:
        phonemes = self.lookup_word(word)
        if phonemes is None:
            return None
        return count_vowels(phonemes)

    def analyze_word(self, word: str) -> PhoneticAnalysis:
        """Return the full analysis of ``word``; unknown words are not an error."""

        result = self.lookup_all_pronunciations(word)
        if not result.found:
            return PhoneticAnalysis(
                word=word,
                phonemes=[],
                syllable_count=0,
                stress_pattern="",
                in_dictionary=False,
            )

        primary = result.pronunciations[0]
        alternatives = result.pronunciations[1:] or None
        return PhoneticAnalysis(
            word=word,
            phonemes=primary,
            syllable_count=count_vowels(primary),
            stress_pattern=stress_pattern(primary),
            in_dictionary=True,
            alternative_pronunciations=alternatives,
        )

    def get_rhyming_part(self, word: str) -> Optional[List[str]]:
        """Return the phonemes from the last primary-stressed vowel to the end.

        Without a primary stress the last vowel of any stress level starts the
        rhyming part. ``None`` for unknown or vowel-less words.
        """

        phonemes = self.lookup_word(word)
        if phonemes is None:
            return None

        parsed = parse_phonemes(phonemes)
        start: Optional[int] = None
        for index in range(len(parsed) - 1, -1, -1):
            if parsed[index].stress == "1":
                start = index
                break

        if start is None:
            for index in range(len(parsed) - 1, -1, -1):
                if parsed[index].is_vowel:
                    start = index
                    break

        if start is None:
            return None
        return phonemes[start:]

    def do_words_rhyme(self, first: str, second: str) -> bool:
        """Perfect-rhyme test that ignores stress levels.

        Unknown words never rhyme, not even with themselves.
        """

        first_part = self.get_rhyming_part(first)
        second_part = self.get_rhyming_part(second)
        if not first_part or not second_part:
            return False

        match = strip_all_stress(first_part) == strip_all_stress(second_part)
        self._logger.debug(
            "Rhyme comparison",
            context={"first": first, "second": second, "rhymes": match},
        )
        return match

    def __repr__(self) -> str:
        state = "loaded" if self.is_loaded() else "unloaded"
        return f"PronouncingDictionary(source={self.source!r}, {state})"


DEFAULT_DICTIONARY = PronouncingDictionary()


def lookup_word(word: str) -> Optional[List[str]]:
    return DEFAULT_DICTIONARY.lookup_word(word)


def lookup_all_pronunciations(word: str) -> LookupResult:
    return DEFAULT_DICTIONARY.lookup_all_pronunciations(word)


async def lookup_word_async(word: str) -> Optional[List[str]]:
    return await DEFAULT_DICTIONARY.lookup_word_async(word)


async def lookup_all_pronunciations_async(word: str) -> LookupResult:
    return await DEFAULT_DICTIONARY.lookup_all_pronunciations_async(word)


def has_word(word: str) -> bool:
    return DEFAULT_DICTIONARY.has_word(word)


def get_stress(word: str) -> Optional[str]:
    return DEFAULT_DICTIONARY.get_stress(word)


def get_syllable_count(word: str) -> Optional[int]:
    return DEFAULT_DICTIONARY.get_syllable_count(word)


def analyze_word(word: str) -> PhoneticAnalysis:
    return DEFAULT_DICTIONARY.analyze_word(word)


def get_rhyming_part(word: str) -> Optional[List[str]]:
    return DEFAULT_DICTIONARY.get_rhyming_part(word)


def do_words_rhyme(first: str, second: str) -> bool:
    return DEFAULT_DICTIONARY.do_words_rhyme(first, second)


def preload_dictionary() -> None:
    DEFAULT_DICTIONARY.preload_dictionary()


async def ensure_loaded() -> Mapping[str, Tuple[Tuple[str, ...], ...]]:
    return await DEFAULT_DICTIONARY.ensure_loaded()


def ensure_loaded_sync(timeout: Optional[float] = None) -> PronunciationTable:
    return DEFAULT_DICTIONARY.ensure_loaded_sync(timeout)


def is_loaded() -> bool:
    return DEFAULT_DICTIONARY.is_loaded()


__all__ = [
    "DEFAULT_DICTIONARY",
    "DictionaryLoadError",
    "PronouncingDictionary",
    "analyze_word",
    "do_words_rhyme",
    "ensure_loaded",
    "ensure_loaded_sync",
    "get_rhyming_part",
    "get_stress",
    "get_syllable_count",
    "has_word",
    "is_loaded",
    "lookup_all_pronunciations",
    "lookup_all_pronunciations_async",
    "lookup_word",
    "lookup_word_async",
    "normalize_word",
    "preload_dictionary",
]
