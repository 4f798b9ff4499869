"""Study guide reader: sectioned, searchable Markdown with visited tracking."""

from __future__ import annotations

import html

import streamlit as st

from state import get_config, get_load_error, init_session_state
from studyguide.navigation import NavigationController, Theme
from ui.content import render_empty_state, render_section
from ui.shortcuts import (
    install_key_bindings,
    render_navigation_buttons,
    render_search_focus_button,
)
from ui.sidebar import SEARCH_LABEL, render_sidebar
from utils.shared_styles import render_nav_pills, render_page_footer, render_page_styles

st.set_page_config(
    page_title="Study Guide",
    layout="wide",
    initial_sidebar_state="expanded",
)


def _render_header(controller: NavigationController, title: str) -> None:
    title_col, search_col, theme_col = st.columns([0.8, 0.1, 0.1])
    with title_col:
        st.markdown(f"## {html.escape(title)}")
        st.markdown(
            '<span class="kbd-hint"><kbd>/</kbd> search &middot; '
            "<kbd>j</kbd>/<kbd>k</kbd> navigate</span>",
            unsafe_allow_html=True,
        )
    with search_col:
        render_search_focus_button(controller)
    with theme_col:
        icon = "☀️" if controller.theme is Theme.DARK else "\U0001F319"
        st.button(icon, key="theme_toggle", help="Toggle theme", on_click=controller.toggle_theme)


def _render_reader() -> None:
    controller = init_session_state()
    config = get_config()

    render_page_styles(controller.theme)
    render_sidebar(controller)
    _render_header(controller, config.app_title)
    render_nav_pills("reader")

    load_error = get_load_error()
    if load_error:
        st.warning(f"Could not load the study guide: {load_error}")

    if not controller.sections:
        render_empty_state("No sections found in this study guide")
    else:
        render_section(controller.active_section())
        st.markdown("---")
        render_navigation_buttons(controller)

    install_key_bindings(controller, SEARCH_LABEL)
    render_page_footer()


reader_page = st.Page(
    page=_render_reader,
    title="Study Guide",
    icon=":material/menu_book:",
    default=True,
)
about_page = st.Page(
    page="pages/02_About.py",
    title="About",
    icon=":material/info:",
    url_path="about",
)

current_page = st.navigation(
    pages=[reader_page, about_page],
    position="hidden",
)
current_page.run()
