from studyguide.sectioning.sectioner import parse_sections
from studyguide.sectioning.types import (
    INTRO_ID,
    INTRO_TITLE,
    QUICK_REFERENCE_ID,
    Section,
    numbered_section_id,
)

__all__ = [
    "INTRO_ID",
    "INTRO_TITLE",
    "QUICK_REFERENCE_ID",
    "Section",
    "numbered_section_id",
    "parse_sections",
]
