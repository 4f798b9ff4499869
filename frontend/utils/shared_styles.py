"""Shared styles and navigation components for consistent page design."""

from __future__ import annotations

import html

import streamlit as st

from studyguide.navigation import Theme

# Route constants
ROUTES = {
    "reader": "/",
    "about": "/about",
}

# Navigation labels
NAV_LABELS = {
    "reader": "Study Guide",
    "about": "About",
}

PALETTES = {
    Theme.DARK: {
        "text-ink": "#e6edf3",
        "text-subtle": "#8b949e",
        "surface": "#0d1117",
        "surface-soft": "#161b22",
        "line": "#30363d",
        "primary": "#58a6ff",
        "primary-strong": "#79c0ff",
        "visited": "#3fb950",
        "code-bg": "#1f2428",
    },
    Theme.LIGHT: {
        "text-ink": "#1f2328",
        "text-subtle": "#59636e",
        "surface": "#ffffff",
        "surface-soft": "#f6f8fa",
        "line": "#d1d9e0",
        "primary": "#0969da",
        "primary-strong": "#0550ae",
        "visited": "#1a7f37",
        "code-bg": "#f6f8fa",
    },
}


def _css_variables(theme: Theme) -> str:
    palette = PALETTES[theme]
    return "\n".join(f"  --{name}: {value};" for name, value in palette.items())


def render_page_styles(theme: Theme) -> None:
    """Render page styles for the given light/dark theme."""
    st.markdown(
        f"""
<style>
:root {{
  --space-1: 0.5rem;
  --space-2: 1rem;
  --space-3: 1.5rem;
  --space-4: 2rem;
{_css_variables(theme)}
}}

[data-testid="stAppViewContainer"],
[data-testid="stHeader"] {{
  background: var(--surface);
  color: var(--text-ink);
}}

[data-testid="stSidebar"] {{
  background: var(--surface-soft);
  border-right: 1px solid var(--line);
}}

[data-testid="stSidebar"] *,
[data-testid="stMainBlockContainer"] p,
[data-testid="stMainBlockContainer"] li,
[data-testid="stMainBlockContainer"] td,
[data-testid="stMainBlockContainer"] th {{
  color: var(--text-ink);
}}

h1, h2, h3, h4 {{
  color: var(--text-ink) !important;
  letter-spacing: -0.01em;
}}

[data-testid="stMainBlockContainer"] {{
  max-width: 900px;
  padding-top: var(--space-3);
}}

a, a:visited {{
  color: var(--primary) !important;
}}

a:hover {{
  color: var(--primary-strong) !important;
}}

/* Sidebar section buttons */
[data-testid="stSidebar"] .stButton > button {{
  justify-content: flex-start;
  text-align: left;
  border-radius: 8px;
  border-color: transparent;
  background: transparent;
  transition: all 150ms ease;
}}

[data-testid="stSidebar"] .stButton > button:hover {{
  border-color: var(--primary);
}}

[data-testid="stSidebar"] .stButton > button[kind="primary"] {{
  background: var(--primary);
  border-color: var(--primary);
}}

[data-testid="stSidebar"] .stButton > button[kind="primary"] * {{
  color: #ffffff;
}}

[data-testid="stSidebar"] .stProgress > div > div > div {{
  background: var(--visited);
}}

/* Content */
.content-title {{
  margin: 0 0 var(--space-3) 0;
  padding-bottom: var(--space-2);
  border-bottom: 1px solid var(--line);
}}

.content-empty {{
  margin-top: 20vh;
  text-align: center;
  color: var(--text-subtle);
}}

[data-testid="stMarkdownContainer"] code {{
  background: var(--code-bg);
  border-radius: 4px;
  padding: 0.1rem 0.3rem;
}}

[data-testid="stMarkdownContainer"] table {{
  display: block;
  overflow-x: auto;
  max-width: 100%;
}}

.code-block-lang {{
  margin: var(--space-1) 0 -0.6rem 0;
  font-size: 0.75rem;
  font-weight: 600;
  text-transform: uppercase;
  letter-spacing: 0.06em;
  color: var(--text-subtle);
}}

.kbd-hint {{
  color: var(--text-subtle);
  font-size: 0.85rem;
}}

.kbd-hint kbd {{
  border: 1px solid var(--line);
  border-radius: 4px;
  padding: 0 0.3rem;
  background: var(--surface-soft);
}}

/* Navigation pills */
.nav-pills {{
  display: flex;
  gap: 0.5rem;
  margin-bottom: var(--space-3);
}}

.nav-pill {{
  display: inline-flex;
  align-items: center;
  padding: 0.35rem 0.9rem;
  border: 1px solid var(--line);
  border-radius: 999px;
  color: var(--text-ink) !important;
  font-weight: 600;
  font-size: 0.85rem;
  text-decoration: none !important;
}}

.nav-pill.active {{
  background: var(--primary);
  border-color: var(--primary);
  color: #ffffff !important;
}}

/* Footer */
.page-footer {{
  margin-top: 3rem;
  padding-top: 1.5rem;
  border-top: 1px solid var(--line);
  text-align: center;
  color: var(--text-subtle);
  font-size: 0.9rem;
}}
</style>
""",
        unsafe_allow_html=True,
    )


def render_nav_pills(current_page: str) -> None:
    """Render navigation pills with the current page highlighted.

    Args:
        current_page: Key from NAV_LABELS to mark as active (e.g., "reader", "about")
    """
    pills = []
    for key in ["reader", "about"]:
        active_class = " active" if key == current_page else ""
        pills.append(
            f'<a class="nav-pill{active_class}" href="{ROUTES[key]}" target="_self">{NAV_LABELS[key]}</a>'
        )

    st.markdown(
        f'<div class="nav-pills">{"".join(pills)}</div>',
        unsafe_allow_html=True,
    )


def render_page_header(title: str, description: str) -> None:
    st.markdown(
        f"""
<div class="page-header">
  <h1>{html.escape(title)}</h1>
  <p class="kbd-hint">{description}</p>
</div>
""",
        unsafe_allow_html=True,
    )


def render_page_footer() -> None:
    """Render a consistent page footer."""
    st.markdown(
        """
<div class="page-footer">
  Built with Streamlit | Progress is stored locally on this machine
</div>
""",
        unsafe_allow_html=True,
    )
