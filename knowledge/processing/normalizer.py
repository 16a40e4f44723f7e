"""Markdown normalization - rewrite a body into canonical form.

Steps run in a fixed order and the whole pipeline is idempotent:
normalize(normalize(text)) == normalize(text).
"""

import re
from collections.abc import Callable

from knowledge.corpus.markdown import is_fence

_BLANK_RUN = re.compile(r"\n(?:[ \t]*\n){2,}")
_HEADING_LINE = re.compile(r"^#{1,6}(?:[ \t]|$)")
_HEADING_SPACE = re.compile(r"^(#{1,6})[ \t]+")

TEXT, HEADING, CODE, FENCE_OPEN, FENCE_CLOSE = range(5)


def _classify(lines: list[str]) -> list[int]:
    """Kind of every line; lines inside fenced blocks are never headings."""
    kinds: list[int] = []
    in_code = False
    for line in lines:
        if is_fence(line):
            kinds.append(FENCE_CLOSE if in_code else FENCE_OPEN)
            in_code = not in_code
        elif in_code:
            kinds.append(CODE)
        elif _HEADING_LINE.match(line):
            kinds.append(HEADING)
        else:
            kinds.append(TEXT)
    return kinds


def _is_blank(line: str) -> bool:
    return not line.strip()


def _pad(text: str, before: set[int], after: set[int]) -> str:
    """Surround lines of the given kinds with exactly one blank line."""
    lines = text.split("\n")
    padded: list[str] = []

    for line, kind in zip(lines, _classify(lines)):
        if kind in before and padded and not _is_blank(padded[-1]):
            padded.append("")
        padded.append(line)
        if kind in after:
            padded.append("")

    # Drop blank lines the padding doubled up
    result: list[str] = []
    for line in padded:
        if result and _is_blank(line) and _is_blank(result[-1]):
            continue
        result.append(line)
    return "\n".join(result)


def normalize_line_endings(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def collapse_blank_lines(text: str) -> str:
    return _BLANK_RUN.sub("\n\n", text)


def normalize_heading_markers(text: str) -> str:
    lines = text.split("\n")
    return "\n".join(
        _HEADING_SPACE.sub(r"\1 ", line) if kind == HEADING else line
        for line, kind in zip(lines, _classify(lines))
    )


def pad_headings(text: str) -> str:
    return _pad(text, before={HEADING}, after={HEADING})


def pad_code_blocks(text: str) -> str:
    return _pad(text, before={FENCE_OPEN}, after={FENCE_CLOSE})


def strip_trailing_whitespace(text: str) -> str:
    return "\n".join(line.rstrip() for line in text.split("\n"))


def finalize(text: str) -> str:
    # Leading blank lines only: indentation of the first line is content
    return text.lstrip("\n").rstrip() + "\n"


NORMALIZATION_STEPS: tuple[Callable[[str], str], ...] = (
    normalize_line_endings,
    collapse_blank_lines,
    normalize_heading_markers,
    pad_headings,
    pad_code_blocks,
    strip_trailing_whitespace,
    finalize,
)


def normalize(text: str) -> str:
    """Rewrite a markdown body into canonical whitespace and spacing."""
    for step in NORMALIZATION_STEPS:
        text = step(text)
    return text


__all__ = ["NORMALIZATION_STEPS", "normalize"]
