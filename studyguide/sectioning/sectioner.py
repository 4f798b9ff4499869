"""Split one flat Markdown study guide into ordered, addressable sections."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from studyguide.sectioning import headings
from studyguide.sectioning.types import (
    INTRO_ID,
    INTRO_TITLE,
    QUICK_REFERENCE_ID,
    Section,
    numbered_section_id,
)

logger = logging.getLogger(__name__)

_LEADING = "leading"
_NUMBERED = "numbered"
_QUICK_REFERENCE = "quick_reference"


@dataclass
class _Segment:
    kind: str
    heading: headings.NumberedHeading | None = None
    # Body lines only; the boundary line itself is never stored.
    lines: list[str] = field(default_factory=list)


def _normalize_newlines(document: str) -> str:
    return document.replace("\r\n", "\n").replace("\r", "\n")


def _skip_blank(lines: list[str], start: int) -> int:
    index = start
    while index < len(lines) and not lines[index].strip():
        index += 1
    return index


def _split_segments(lines: list[str]) -> list[_Segment]:
    segments = [_Segment(kind=_LEADING)]
    open_fence: str | None = None
    quick_reference_seen = False

    for line in lines:
        if open_fence is not None:
            if headings.closes_fence(open_fence, line):
                open_fence = None
            segments[-1].lines.append(line)
            continue

        numbered = headings.match_numbered(line)
        if numbered is not None:
            segments.append(_Segment(kind=_NUMBERED, heading=numbered))
            continue

        if not quick_reference_seen and headings.is_quick_reference(line):
            quick_reference_seen = True
            segments.append(_Segment(kind=_QUICK_REFERENCE))
            continue

        token = headings.fence_token(line)
        if token is not None:
            open_fence = token
        segments[-1].lines.append(line)

    return segments


def _numbered_section(segment: _Segment) -> Section | None:
    lines = segment.lines
    first = _skip_blank(lines, 0)
    if first < len(lines) and headings.is_rule(lines[first]):
        lines = lines[first + 1:]

    content = "\n".join(lines).strip()
    if not content:
        return None

    heading = segment.heading
    return Section(
        id=numbered_section_id(heading.number),
        title=f"{heading.number}. {heading.title}",
        content=content,
    )


def _quick_reference_section(segment: _Segment) -> Section | None:
    content = "\n".join(segment.lines).strip()
    if not content:
        return None
    return Section(id=QUICK_REFERENCE_ID, title=headings.QUICK_REFERENCE_TITLE, content=content)


def _intro_section(segment: _Segment) -> Section | None:
    lines = segment.lines
    first = _skip_blank(lines, 0)
    if first >= len(lines) or not headings.is_title(lines[first]):
        return None

    rest = first + 1
    following = _skip_blank(lines, rest)
    if following < len(lines) and headings.is_secondary(lines[following]):
        rest = following + 1

    content = "\n".join(lines[rest:]).strip()
    if not content:
        return None
    return Section(id=INTRO_ID, title=INTRO_TITLE, content=content)


def parse_sections(document: str) -> list[Section]:
    """
    Turn a Markdown document into its ordered list of sections.

    Sections keep the physical order of their headings; headings are never
    re-sorted by number. The intro block, when present, is always first.
    Text that matches no heading stays in the segment that owns it, so a
    malformed document produces fewer sections instead of an error.
    """
    if not document or not document.strip():
        return []

    segments = _split_segments(_normalize_newlines(document).split("\n"))

    sections: list[Section] = []
    for segment in segments[1:]:
        if segment.kind == _NUMBERED:
            section = _numbered_section(segment)
        else:
            section = _quick_reference_section(segment)
        if section is not None:
            sections.append(section)

    intro = _intro_section(segments[0])
    if intro is not None:
        sections.insert(0, intro)

    logger.debug("Parsed %d section(s) from %d segment(s)", len(sections), len(segments))
    return sections
