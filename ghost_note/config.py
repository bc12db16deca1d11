"""Runtime configuration for the phonetics engine.

Settings come from environment variables so deployments can point the engine
at a different dictionary file or warm it up at import time without code
changes. Every setting defaults to the bundled CMU data loaded on demand.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

LOG_LEVEL_ENV = "GHOST_NOTE_LOG_LEVEL"
CMUDICT_PATH_ENV = "GHOST_NOTE_CMUDICT_PATH"
PRELOAD_ENV = "GHOST_NOTE_PRELOAD"


def _env_bool(environ: Mapping[str, str], name: str, default: str = "0") -> bool:
    return environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class PhoneticsSettings:
    """Resolved settings for a dictionary instance."""

    log_level: str = "INFO"
    cmudict_path: Optional[Path] = None
    preload: bool = False


def load_settings(environ: Optional[Mapping[str, str]] = None) -> PhoneticsSettings:
    """Build :class:`PhoneticsSettings` from ``environ`` (defaults to ``os.environ``)."""

    env = os.environ if environ is None else environ
    raw_path = env.get(CMUDICT_PATH_ENV, "").strip()
    return PhoneticsSettings(
        log_level=env.get(LOG_LEVEL_ENV, "INFO").strip().upper() or "INFO",
        cmudict_path=Path(raw_path).expanduser() if raw_path else None,
        preload=_env_bool(env, PRELOAD_ENV),
    )


__all__ = [
    "CMUDICT_PATH_ENV",
    "LOG_LEVEL_ENV",
    "PRELOAD_ENV",
    "PhoneticsSettings",
    "load_settings",
]
