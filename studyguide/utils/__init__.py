"""Helpers shared by the viewer core and the Streamlit frontend."""

from studyguide.utils.debug import configure_logging, debug_enabled
from studyguide.utils.document_loader import is_remote, load_document

__all__ = [
    "configure_logging",
    "debug_enabled",
    "is_remote",
    "load_document",
]
