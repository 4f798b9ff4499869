"""
Navigation, search and visited-state tracking over a parsed study guide.

The controller is the only writer of NavigationState. Presentation code
calls its event methods (select, navigate, search, toggle theme, request
search focus) and renders its derivations (filtered list, active section,
progress). Persistence is best-effort: a failing store is logged and the
in-memory transition still happens.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from studyguide.config import ViewerConfig
from studyguide.navigation import persistence
from studyguide.navigation.state import Direction, NavigationState, Theme
from studyguide.sectioning.types import Section
from studyguide.storage.base import KeyValueStore, StorageError

logger = logging.getLogger(__name__)


class NavigationController:
    def __init__(
        self,
        sections: Sequence[Section],
        store: KeyValueStore,
        config: ViewerConfig | None = None,
        select_first: bool = True,
    ) -> None:
        self._sections: tuple[Section, ...] = tuple(sections)
        self._section_ids = frozenset(section.id for section in self._sections)
        self._store = store
        self._config = config or ViewerConfig()

        self._state = NavigationState(
            visited=persistence.load_visited(store, self._config.visited_key),
            theme=persistence.load_theme(store, self._config.theme_key),
        )

        # Opening the guide counts as selecting its first section.
        if select_first and self._sections:
            self.select_section(self._sections[0].id)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def sections(self) -> tuple[Section, ...]:
        return self._sections

    @property
    def active_id(self) -> str:
        return self._state.active_id

    @property
    def search_query(self) -> str:
        return self._state.search_query

    @property
    def theme(self) -> Theme:
        return self._state.theme

    @property
    def visited(self) -> frozenset[str]:
        return frozenset(self._state.visited)

    @property
    def visited_order(self) -> tuple[str, ...]:
        return tuple(self._state.visited)

    # ------------------------------------------------------------------
    # Derivations
    # ------------------------------------------------------------------

    def filtered_sections(self) -> list[Section]:
        """Sections whose title or content contains the trimmed query, any case."""
        query = self._state.search_query.strip()
        if not query:
            return list(self._sections)

        needle = query.casefold()
        return [
            section
            for section in self._sections
            if needle in section.title.casefold() or needle in section.content.casefold()
        ]

    def active_section(self) -> Section | None:
        # Looked up in the full list so a search never hides the open section.
        for section in self._sections:
            if section.id == self._state.active_id:
                return section
        return None

    def visited_count(self) -> int:
        return sum(1 for section_id in self._state.visited if section_id in self._section_ids)

    def progress(self) -> int:
        """Share of sections visited, as a 0-100 integer rounded half up."""
        total = len(self._sections)
        if total == 0:
            return 0
        return int(math.floor(100 * self.visited_count() / total + 0.5))

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def set_search_query(self, query: str) -> None:
        self._state.search_query = query

    def select_section(self, section_id: str) -> None:
        """
        Make `section_id` the active section and mark it visited.

        Ids unknown to the document are accepted as-is: the active section
        then derives to None and the presentation shows its empty state.
        """
        self._state.active_id = section_id
        if not section_id or section_id in self._state.visited:
            return

        self._state.visited.append(section_id)
        try:
            persistence.save_visited(self._store, self._config.visited_key, self._state.visited)
        except StorageError as exc:
            logger.warning("Visited state not persisted: %s", exc)

    def navigate(self, direction: Direction | str) -> Section | None:
        """
        Move one step through the filtered list; returns the newly active
        section, or None when there is no neighbour in that direction.
        """
        direction = Direction(direction)
        filtered = self.filtered_sections()
        ids = [section.id for section in filtered]
        current = ids.index(self._state.active_id) if self._state.active_id in ids else -1

        target = current + 1 if direction is Direction.NEXT else current - 1
        if target < 0 or target >= len(filtered):
            return None

        neighbour = filtered[target]
        self.select_section(neighbour.id)
        return neighbour

    def toggle_theme(self) -> Theme:
        self._state.theme = self._state.theme.toggled()
        try:
            persistence.save_theme(self._store, self._config.theme_key, self._state.theme)
        except StorageError as exc:
            logger.warning("Theme not persisted: %s", exc)
        return self._state.theme

    def request_search_focus(self) -> None:
        self._state.focus_search_requested = True

    def consume_search_focus(self) -> bool:
        """Return True once per focus request, then clear it."""
        requested = self._state.focus_search_requested
        self._state.focus_search_requested = False
        return requested
