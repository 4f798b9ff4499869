"""Acquire the raw study guide text from a local file or an http(s) URL."""

from __future__ import annotations

import logging
from pathlib import Path

import requests

from studyguide.errors import DocumentLoadError

logger = logging.getLogger(__name__)

REQUEST_HEADERS = {
    "User-Agent": "studyguide-viewer/0.1",
    "Accept": "text/markdown, text/plain;q=0.9, */*;q=0.5",
}


def is_remote(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def _fetch_remote(url: str, timeout: float) -> str:
    try:
        response = requests.get(url, headers=REQUEST_HEADERS, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise DocumentLoadError(f"Could not fetch {url}: {exc}") from exc

    # requests assumes latin-1 for text/* without a charset; guides are UTF-8.
    if "charset" not in response.headers.get("Content-Type", "").lower():
        response.encoding = "utf-8"
    return response.text


def _read_local(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentLoadError(f"Could not read {path}: {exc}") from exc


def load_document(source: str | Path, timeout: float = 30.0) -> str:
    """Return the document text; raises DocumentLoadError on any failure."""
    source_text = str(source)
    if is_remote(source_text):
        logger.debug("Fetching study guide from %s", source_text)
        return _fetch_remote(source_text, timeout)

    logger.debug("Reading study guide from %s", source_text)
    return _read_local(Path(source_text).expanduser())
