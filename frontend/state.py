"""Session state helpers for Streamlit pages."""

from __future__ import annotations

import logging

import streamlit as st

from studyguide.config import ViewerConfig
from studyguide.errors import DocumentLoadError
from studyguide.navigation import NavigationController
from studyguide.sectioning import Section, parse_sections
from studyguide.storage import JsonFileStore
from studyguide.utils import configure_logging, load_document

logger = logging.getLogger("studyguide.frontend")

CONTROLLER_KEY = "navigation_controller"
LOAD_ERROR_KEY = "document_load_error"


@st.cache_data(show_spinner=False)
def _load_sections(source: str, timeout: float) -> list[Section]:
    # Raises on failure so the error is not cached; a recovered source is read again.
    return parse_sections(load_document(source, timeout=timeout))


def read_sections(config: ViewerConfig) -> tuple[list[Section], str]:
    """Return the parsed sections, or no sections and the load error message."""
    try:
        return _load_sections(config.document_source, config.request_timeout), ""
    except DocumentLoadError as exc:
        logger.warning("%s", exc)
        return [], str(exc)


def get_config() -> ViewerConfig:
    if "viewer_config" not in st.session_state:
        st.session_state.viewer_config = ViewerConfig.from_env()
    return st.session_state.viewer_config


def init_session_state() -> NavigationController:
    """Create the navigation controller once per browser session."""
    if CONTROLLER_KEY not in st.session_state:
        configure_logging()
        config = get_config()
        sections, load_error = read_sections(config)
        st.session_state[CONTROLLER_KEY] = NavigationController(
            sections=sections,
            store=JsonFileStore(config.state_path),
            config=config,
        )
        st.session_state[LOAD_ERROR_KEY] = load_error
    return st.session_state[CONTROLLER_KEY]


def get_load_error() -> str:
    return st.session_state.get(LOAD_ERROR_KEY, "")
