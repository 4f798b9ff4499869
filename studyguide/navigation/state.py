from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Theme(str, Enum):
    DARK = "dark"
    LIGHT = "light"

    def toggled(self) -> "Theme":
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK


class Direction(str, Enum):
    NEXT = "next"
    PREVIOUS = "previous"


DEFAULT_THEME = Theme.DARK


@dataclass
class NavigationState:
    """
    Mutable session state owned by NavigationController.

    `visited` keeps first-visit order so it serializes as an ordered list;
    ids are unique and never removed.
    """
    active_id: str = ""
    visited: list[str] = field(default_factory=list)
    search_query: str = ""
    theme: Theme = DEFAULT_THEME
    focus_search_requested: bool = False
