"""Main content area: the active section or the empty state."""

from __future__ import annotations

import html

import streamlit as st

from studyguide.rendering import CODE, split_blocks
from studyguide.sectioning import Section


def render_empty_state(message: str = "Select a section to start studying") -> None:
    st.markdown(
        f'<div class="content-empty"><h2>{html.escape(message)}</h2></div>',
        unsafe_allow_html=True,
    )


def render_section(section: Section | None) -> None:
    if section is None:
        render_empty_state()
        return

    st.markdown(
        f'<h1 class="content-title">{html.escape(section.title)}</h1>',
        unsafe_allow_html=True,
    )

    for block in split_blocks(section.content):
        if block.kind == CODE:
            st.markdown(
                f'<p class="code-block-lang">{html.escape(block.language)}</p>',
                unsafe_allow_html=True,
            )
            st.code(block.text, language=block.language)
        else:
            st.markdown(block.text)
