import sys
import threading
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ghost_note.config import PhoneticsSettings
from ghost_note.phonetics import PronouncingDictionary


# Pronunciations copied from CMUdict 0.7b.
SAMPLE_TABLE = {
    "hello": ["HH AH0 L OW1", "HH EH0 L OW1"],
    "cat": "K AE1 T",
    "hat": "HH AE1 T",
    "bat": "B AE1 T",
    "mat": "M AE1 T",
    "dog": "D AO1 G",
    "day": "D EY1",
    "say": "S EY1",
    "night": "N AY1 T",
    "light": "L AY1 T",
    "time": "T AY1 M",
    "rhyme": "R AY1 M",
    "beautiful": "B Y UW1 T AH0 F AH0 L",
    "understand": "AH2 N D ER0 S T AE1 N D",
    "river": "R IH1 V ER0",
    "nation": "N EY1 SH AH0 N",
    "station": "S T EY1 SH AH0 N",
    "the": "DH AH0",
    "hmm": "HH M",
    "permit": ["P ER0 M IH1 T", "P ER1 M IH2 T"],
}


class CountingSource:
    """Table source that counts calls and can be held open with an event."""

    def __init__(self, table=None, gate=None, failures=0, error=None):
        self.table = SAMPLE_TABLE if table is None else table
        self.gate = gate
        self.failures = failures
        self.error = error or OSError("dictionary storage unavailable")
        self.calls = 0
        self._lock = threading.Lock()

    def __call__(self):
        with self._lock:
            self.calls += 1
            call_number = self.calls
        if self.gate is not None:
            self.gate.wait(timeout=5)
        if call_number <= self.failures:
            raise self.error
        return self.table


@pytest.fixture
def settings():
    """Settings that never preload and never read a dictionary path from the env."""

    return PhoneticsSettings()


@pytest.fixture
def sample_dictionary(settings):
    dictionary = PronouncingDictionary(SAMPLE_TABLE, settings=settings)
    dictionary.ensure_loaded_sync(timeout=5)
    return dictionary


@pytest.fixture
def counting_source():
    return CountingSource
