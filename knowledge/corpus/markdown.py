"""Markdown structure helpers shared by loader, analyzer and synthesizer."""

import re
from collections.abc import Iterator

from knowledge.constants import CODE_FENCE, EXCERPT_LENGTH

HEADING_PATTERN = re.compile(r"^#{1,6}\s", re.MULTILINE)
H1_PATTERN = re.compile(r"^#[ \t]+(.+?)[ \t]*$")
LINK_PATTERN = re.compile(r"\[.*?\]\(.*?\)")
INTERNAL_LINK_PATTERN = re.compile(r"\[.*?\]\((?!http).*?\)")


def is_fence(line: str) -> bool:
    return line.startswith(CODE_FENCE)


def iter_prose_lines(body: str) -> Iterator[str]:
    """Yield body lines outside fenced code blocks, fences excluded."""
    in_code = False
    for line in body.split("\n"):
        if is_fence(line):
            in_code = not in_code
            continue
        if not in_code:
            yield line


def first_heading(body: str) -> str | None:
    """Text of the first level-1 heading, if any."""
    for line in iter_prose_lines(body):
        match = H1_PATTERN.match(line)
        if match:
            return match.group(1).strip()
    return None


def derive_excerpt(body: str, length: int = EXCERPT_LENGTH) -> str:
    """First non-empty, non-heading line of the body, truncated."""
    for line in iter_prose_lines(body):
        text = line.strip()
        if text and not text.startswith("#"):
            return text[:length]
    return ""


__all__ = [
    "HEADING_PATTERN",
    "LINK_PATTERN",
    "INTERNAL_LINK_PATTERN",
    "derive_excerpt",
    "first_heading",
    "is_fence",
    "iter_prose_lines",
]
