"""Sectioning and navigation core for the study guide viewer."""

from studyguide.config import ViewerConfig
from studyguide.navigation import Direction, NavigationController, Theme
from studyguide.sectioning import Section, parse_sections

__all__ = [
    "Direction",
    "NavigationController",
    "Section",
    "Theme",
    "ViewerConfig",
    "parse_sections",
]
