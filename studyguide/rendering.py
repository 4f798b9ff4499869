"""
Split section Markdown into prose and fenced code blocks.

The Streamlit Markdown renderer handles prose, tables and links itself;
code blocks are handed to a dedicated widget that shows the language and a
copy button.
"""

from __future__ import annotations

from dataclasses import dataclass

from studyguide.sectioning import headings

PROSE = "prose"
CODE = "code"
DEFAULT_LANGUAGE = "text"


@dataclass(frozen=True)
class ContentBlock:
    kind: str
    text: str
    language: str = ""


def _fence_language(line: str, token: str) -> str:
    info = line.strip()[len(token):].strip()
    if not info:
        return DEFAULT_LANGUAGE
    return info.split()[0]


def split_blocks(content: str) -> list[ContentBlock]:
    blocks: list[ContentBlock] = []
    prose: list[str] = []
    code: list[str] = []
    fence: str | None = None
    language = DEFAULT_LANGUAGE

    def flush_prose() -> None:
        text = "\n".join(prose).strip()
        if text:
            blocks.append(ContentBlock(kind=PROSE, text=text))
        prose.clear()

    def flush_code() -> None:
        blocks.append(ContentBlock(kind=CODE, text="\n".join(code).rstrip("\n"), language=language))
        code.clear()

    for line in content.replace("\r\n", "\n").split("\n"):
        if fence is None:
            token = headings.fence_token(line)
            if token is None:
                prose.append(line)
                continue
            flush_prose()
            fence = token
            language = _fence_language(line, token)
            continue

        if headings.closes_fence(fence, line):
            flush_code()
            fence = None
            continue
        code.append(line)

    if fence is not None:
        # Unterminated fence runs to the end of the content.
        flush_code()
    flush_prose()
    return blocks
