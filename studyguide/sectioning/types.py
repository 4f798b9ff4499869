from __future__ import annotations

from dataclasses import dataclass

INTRO_ID = "intro"
INTRO_TITLE = "Overview"
QUICK_REFERENCE_ID = "quick-ref"
SECTION_ID_PREFIX = "section-"


@dataclass(frozen=True)
class Section:
    """
    One addressable unit of the study guide.

    `id` depends only on the heading number (or the fixed intro/quick-ref
    ids), so re-parsing the same document yields the same ids.
    """
    id: str
    title: str
    content: str


def numbered_section_id(number: str) -> str:
    return f"{SECTION_ID_PREFIX}{number}"
