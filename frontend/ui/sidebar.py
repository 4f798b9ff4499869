"""Sidebar: search box, progress and the list of (filtered) sections."""

from __future__ import annotations

import streamlit as st

from studyguide.navigation import NavigationController

SEARCH_KEY = "search_query"
SEARCH_LABEL = "Search topics"
VISITED_MARK = "✓"
UNVISITED_MARK = "○"


def _on_search_change(controller: NavigationController) -> None:
    controller.set_search_query(st.session_state[SEARCH_KEY])


def _on_select(controller: NavigationController, section_id: str) -> None:
    controller.select_section(section_id)


def render_sidebar(controller: NavigationController) -> None:
    with st.sidebar:
        st.markdown("## Study Guide")

        st.text_input(
            SEARCH_LABEL,
            value=controller.search_query,
            key=SEARCH_KEY,
            placeholder="Search topics...",
            label_visibility="collapsed",
            on_change=_on_search_change,
            args=(controller,),
        )

        total = len(controller.sections)
        st.progress(controller.progress() / 100)
        st.caption(f"{controller.visited_count()}/{total} sections reviewed")

        filtered = controller.filtered_sections()
        if controller.search_query.strip():
            if filtered:
                st.caption(f"{len(filtered)} match(es)")
            else:
                st.caption("No matches")

        st.markdown("---")

        visited = controller.visited
        for section in filtered:
            mark = VISITED_MARK if section.id in visited else UNVISITED_MARK
            st.button(
                f"{mark}  {section.title}",
                key=f"section_nav_{section.id}",
                use_container_width=True,
                type="primary" if section.id == controller.active_id else "secondary",
                on_click=_on_select,
                args=(controller, section.id),
            )
