"""Runtime configuration for the study guide viewer."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_DOCUMENT = PROJECT_ROOT / "frontend" / "data" / "study_guide.md"
DEFAULT_STATE_PATH = Path.home() / ".studyguide" / "state.json"


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "")
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass
class ViewerConfig:
    """
    Configuration for the viewer and its persisted state.
    """
    document_source: str = str(DEFAULT_DOCUMENT)
    state_path: Path = field(default_factory=lambda: DEFAULT_STATE_PATH)
    # Storage keys kept compatible with the browser build of the guide.
    visited_key: str = "interview-prep-visited"
    theme_key: str = "interview-prep-theme"
    app_title: str = "Senior SWE Interview Prep"
    request_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "ViewerConfig":
        defaults = cls()
        state_path = os.environ.get("STUDYGUIDE_STATE_PATH")
        return cls(
            document_source=os.environ.get("STUDYGUIDE_DOCUMENT") or defaults.document_source,
            state_path=Path(state_path).expanduser() if state_path else defaults.state_path,
            visited_key=os.environ.get("STUDYGUIDE_VISITED_KEY") or defaults.visited_key,
            theme_key=os.environ.get("STUDYGUIDE_THEME_KEY") or defaults.theme_key,
            app_title=os.environ.get("STUDYGUIDE_TITLE") or defaults.app_title,
            request_timeout=_env_float("STUDYGUIDE_REQUEST_TIMEOUT", defaults.request_timeout),
        )
