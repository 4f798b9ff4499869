"""
Encode and decode the persisted parts of the navigation state.

visited -> JSON array of section ids, in first-visit order
theme   -> the literal string "light" or "dark"

Reads never raise: unreadable or malformed values fall back to the defaults
(empty visited set, dark theme). Writes raise StorageError and leave the
decision to the caller.
"""

from __future__ import annotations

import json
import logging
from typing import Iterable

from studyguide.navigation.state import DEFAULT_THEME, Theme
from studyguide.storage.base import KeyValueStore, StorageError

logger = logging.getLogger(__name__)


def _read(store: KeyValueStore, key: str) -> str | None:
    try:
        return store.get(key)
    except StorageError as exc:
        logger.warning("Could not read %r from storage, using default: %s", key, exc)
        return None


def decode_visited(raw: str | None) -> list[str]:
    if raw is None:
        return []
    try:
        loaded = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Ignoring visited state that is not valid JSON: %r", raw[:80])
        return []

    if not isinstance(loaded, list) or not all(isinstance(item, str) for item in loaded):
        logger.warning("Ignoring visited state that is not a list of ids: %r", raw[:80])
        return []

    # Collapse duplicates, keep first occurrence.
    return list(dict.fromkeys(loaded))


def encode_visited(visited: Iterable[str]) -> str:
    return json.dumps(list(visited))


def decode_theme(raw: str | None) -> Theme:
    if raw == Theme.LIGHT.value:
        return Theme.LIGHT
    if raw == Theme.DARK.value:
        return Theme.DARK
    if raw is not None:
        logger.warning("Ignoring unknown theme %r, using %s", raw, DEFAULT_THEME.value)
    return DEFAULT_THEME


def load_visited(store: KeyValueStore, key: str) -> list[str]:
    return decode_visited(_read(store, key))


def load_theme(store: KeyValueStore, key: str) -> Theme:
    return decode_theme(_read(store, key))


def save_visited(store: KeyValueStore, key: str, visited: Iterable[str]) -> None:
    store.set(key, encode_visited(visited))


def save_theme(store: KeyValueStore, key: str, theme: Theme) -> None:
    store.set(key, theme.value)
