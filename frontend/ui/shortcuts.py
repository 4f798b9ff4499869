"""
Keyboard bridge between the browser and the navigation controller.

j / ArrowDown -> next section, k / ArrowUp -> previous section,
/ -> focus the search box. Keys typed into inputs are ignored. The
script only clicks the matching Streamlit buttons, so every shortcut goes
through the same controller operation as a mouse click.
"""

from __future__ import annotations

import streamlit as st
import streamlit.components.v1 as components

from studyguide.navigation import Direction, NavigationController

NEXT_KEY = "nav_next"
PREVIOUS_KEY = "nav_previous"
FOCUS_SEARCH_KEY = "nav_focus_search"

_KEY_BINDINGS = f"""
<script>
const doc = window.parent.document;
if (!doc.__studyGuideShortcuts) {{
  doc.__studyGuideShortcuts = true;
  const click = (key) => {{
    const button = doc.querySelector(".st-key-" + key + " button");
    if (button) {{ button.click(); }}
  }};
  doc.addEventListener("keydown", (event) => {{
    const target = event.target;
    // Compare tag names: the event comes from the parent document, not this iframe.
    const tag = target && target.tagName;
    if (tag === "INPUT" || tag === "TEXTAREA" || (target && target.isContentEditable)) {{
      return;
    }}
    if (event.key === "ArrowDown" || event.key === "j") {{
      event.preventDefault();
      click("{NEXT_KEY}");
    }} else if (event.key === "ArrowUp" || event.key === "k") {{
      event.preventDefault();
      click("{PREVIOUS_KEY}");
    }} else if (event.key === "/" && !event.metaKey && !event.ctrlKey) {{
      event.preventDefault();
      click("{FOCUS_SEARCH_KEY}");
    }}
  }});
}}
</script>
"""

_FOCUS_SEARCH = """
<script>
const input = window.parent.document.querySelector('input[aria-label="{label}"]');
if (input) {{ input.focus(); input.select(); }}
</script>
"""


def _on_navigate(controller: NavigationController, direction: Direction) -> None:
    controller.navigate(direction)


def render_navigation_buttons(controller: NavigationController) -> None:
    previous_col, _, next_col = st.columns([0.3, 0.4, 0.3])
    with previous_col:
        st.button(
            "← Previous",
            key=PREVIOUS_KEY,
            use_container_width=True,
            on_click=_on_navigate,
            args=(controller, Direction.PREVIOUS),
        )
    with next_col:
        st.button(
            "Next →",
            key=NEXT_KEY,
            use_container_width=True,
            on_click=_on_navigate,
            args=(controller, Direction.NEXT),
        )


def render_search_focus_button(controller: NavigationController) -> None:
    st.button(
        "\U0001F50D",
        key=FOCUS_SEARCH_KEY,
        help="Search (/)",
        on_click=controller.request_search_focus,
    )


def install_key_bindings(controller: NavigationController, search_label: str) -> None:
    components.html(_KEY_BINDINGS, height=0)
    if controller.consume_search_focus():
        components.html(_FOCUS_SEARCH.format(label=search_label), height=0)
