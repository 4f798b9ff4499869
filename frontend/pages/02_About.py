import streamlit as st

from state import init_session_state
from utils.shared_styles import (
    render_page_styles,
    render_nav_pills,
    render_page_header,
    render_page_footer,
)

controller = init_session_state()

# Render consistent styles and navigation
render_page_styles(controller.theme)
render_page_header(
    "About",
    "How the study guide is organised and how your progress is tracked.",
)
render_nav_pills("about")

st.markdown(
    """
The study guide is a single Markdown document split into sections at every
numbered `## N. Title` heading. A `## Quick Reference` heading gets its own
section, and any introduction above the first numbered heading is shown as
**Overview**.

### Keyboard shortcuts

| Key | Action |
|---|---|
| `j` or `↓` | Next section in the current list |
| `k` or `↑` | Previous section in the current list |
| `/` | Focus the search box |

Shortcuts follow the *filtered* list while a search is active and stop at
its first and last entries.

### Progress

A section counts as reviewed the first time it is opened. Progress is the
share of the guide's sections you have reviewed, and it never goes down
during a session. Reviewed sections and the light/dark theme are saved on
this machine and restored the next time the guide is opened.
"""
)

st.caption(f"{controller.visited_count()} of {len(controller.sections)} sections reviewed")

render_page_footer()
