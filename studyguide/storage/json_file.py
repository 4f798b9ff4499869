"""Durable key-value store holding all keys in a single JSON object on disk."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from studyguide.errors import StorageError

logger = logging.getLogger(__name__)


def _coerce_values(raw: dict[str, Any]) -> dict[str, str]:
    # Values written by other tools may not be strings; keep only what we can serve.
    return {str(key): value for key, value in raw.items() if isinstance(value, str)}


class JsonFileStore:
    """
    Store backed by one JSON file.

    A missing file reads as an empty store. Every `set` rewrites the whole
    file through a temporary sibling so a crash never leaves half a document.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path).expanduser()

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            raw_text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Cannot read state file {self.path}: {exc}") from exc

        if not raw_text.strip():
            return {}
        try:
            loaded = json.loads(raw_text)
        except json.JSONDecodeError as exc:
            raise StorageError(f"State file {self.path} is not valid JSON: {exc}") from exc
        if not isinstance(loaded, dict):
            raise StorageError(f"State file {self.path} does not hold a JSON object")
        return _coerce_values(loaded)

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except StorageError as exc:
            logger.warning("Discarding unreadable state file: %s", exc)
            data = {}
        data[key] = value

        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as exc:
            raise StorageError(f"Cannot write state file {self.path}: {exc}") from exc
