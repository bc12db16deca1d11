"""Helpers for configuring consistent project logging output."""

from __future__ import annotations

import logging
from typing import Optional

from ghost_note.config import LOG_LEVEL_ENV, PhoneticsSettings, load_settings

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_CONFIGURED = False


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    try:
        return int(level)
    except (TypeError, ValueError):
        normalized = str(level).strip().upper()
        resolved = getattr(logging, normalized, logging.INFO)
        return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
    level: Optional[str | int] = None,
    *,
    settings: Optional[PhoneticsSettings] = None,
    force: bool = False,
) -> int:
    """Initialise root logging handlers for the phonetics engine.

    Without an explicit ``level`` the one in ``settings`` applies, and without
    settings the level comes from :func:`load_settings` (``GHOST_NOTE_LOG_LEVEL``,
    then ``INFO``). Dictionary lookups and stress estimation log at ``DEBUG``.
    Returns the level that was applied.
    """

    global _CONFIGURED

    if level is None:
        level = (settings or load_settings()).log_level
    resolved_level = _resolve_level(level)

    if _CONFIGURED and not force:
        return resolved_level

    logging.basicConfig(level=resolved_level, format=_DEFAULT_FORMAT, force=force)
    logging.getLogger("ghost_note").setLevel(resolved_level)
    _CONFIGURED = True
    return resolved_level


__all__ = ["LOG_LEVEL_ENV", "configure_logging"]
