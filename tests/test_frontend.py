import sys
from pathlib import Path

FRONTEND_DIR = Path(__file__).resolve().parents[1] / "frontend"
sys.path.insert(0, str(FRONTEND_DIR))

from state import read_sections
from studyguide.config import ViewerConfig
from ui.shortcuts import _KEY_BINDINGS


def test_failed_document_load_is_retried_after_recovery(tmp_path):
    path = tmp_path / "guide.md"
    config = ViewerConfig(document_source=str(path))

    sections, error = read_sections(config)
    assert sections == []
    assert error

    path.write_text("## 1. A\nbody", encoding="utf-8")
    sections, error = read_sections(config)

    assert [section.id for section in sections] == ["section-1"]
    assert error == ""


def test_shortcuts_skip_text_fields_by_tag_name():
    # The listener runs on the parent document, so iframe constructors never match.
    assert "instanceof" not in _KEY_BINDINGS
    guard = _KEY_BINDINGS.index('tag === "INPUT" || tag === "TEXTAREA"')
    assert "isContentEditable" in _KEY_BINDINGS
    assert guard < _KEY_BINDINGS.index("event.preventDefault()")
