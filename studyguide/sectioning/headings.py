"""
Line grammar for the Markdown headings that delimit study guide sections.

Boundaries:
    '## 7. Caching'        -> numbered heading (number '7', title 'Caching')
    '## Quick Reference'   -> quick reference heading

Intro detection only:
    '# Interview Prep'     -> title heading
    '### How to use this'  -> secondary heading
"""

from __future__ import annotations

import re
from dataclasses import dataclass

QUICK_REFERENCE_TITLE = "Quick Reference"

_NUMBERED_RE = re.compile(r"^## (\d+)\.\s+(.+)$")
_QUICK_REFERENCE_RE = re.compile(r"^## Quick Reference\s*$")
_TITLE_RE = re.compile(r"^# (.+)$")
_SECONDARY_RE = re.compile(r"^###")
_RULE_RE = re.compile(r"^\s*-{3,}\s*$")
_FENCE_RE = re.compile(r"^\s*(`{3,}|~{3,})")


@dataclass(frozen=True)
class NumberedHeading:
    number: str
    title: str


def match_numbered(line: str) -> NumberedHeading | None:
    match = _NUMBERED_RE.match(line)
    if not match:
        return None
    title = match.group(2).strip()
    if not title:
        return None
    return NumberedHeading(number=match.group(1), title=title)


def is_quick_reference(line: str) -> bool:
    return bool(_QUICK_REFERENCE_RE.match(line))


def is_title(line: str) -> bool:
    return bool(_TITLE_RE.match(line))


def is_secondary(line: str) -> bool:
    return bool(_SECONDARY_RE.match(line))


def is_rule(line: str) -> bool:
    return bool(_RULE_RE.match(line))


def fence_token(line: str) -> str | None:
    """Return the fence characters opening or closing a code block, if any."""
    match = _FENCE_RE.match(line)
    return match.group(1) if match else None


def closes_fence(opening: str, line: str) -> bool:
    token = fence_token(line)
    if token is None or token[0] != opening[0] or len(token) < len(opening):
        return False
    # A closing fence carries no info string.
    return not line.strip()[len(token):].strip()
