from studyguide.navigation.controller import NavigationController
from studyguide.navigation.state import DEFAULT_THEME, Direction, NavigationState, Theme

__all__ = [
    "DEFAULT_THEME",
    "Direction",
    "NavigationController",
    "NavigationState",
    "Theme",
]
