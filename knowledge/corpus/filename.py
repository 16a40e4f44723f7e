"""Filename parsing - identifiers and fallback titles."""

import re
from dataclasses import dataclass

from knowledge.constants import DOCUMENT_EXTENSION

# Lower-to-upper boundary inside a CamelCase token: ReactHooks -> React Hooks
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


@dataclass(frozen=True)
class ParsedFilename:
    identifier: str
    title: str
    filename: str


def strip_extension(filename: str, extension: str = DOCUMENT_EXTENSION) -> str:
    """Remove a trailing document extension if present."""
    if extension and filename.endswith(extension):
        return filename[: -len(extension)]
    return filename


def parse_filename(filename: str) -> ParsedFilename:
    """
    Derive identifier and fallback title from a filename.

    Format: 00-Topic-Version.md -> identifier "00-topic-version",
    title "Topic Version". Numeric tokens are ordering prefixes and are
    dropped from the title but kept in the identifier. CamelCase tokens
    are split into words (00-ReactHooks.md -> "React Hooks").
    """
    stem = strip_extension(filename)
    parts = [part for part in stem.split("-") if not (part.isascii() and part.isdigit())]
    title = _CAMEL_BOUNDARY.sub(" ", " ".join(parts))

    return ParsedFilename(
        identifier=re.sub(r"\s+", "-", stem.lower()),
        title=" ".join(title.split()),
        filename=filename,
    )


__all__ = ["ParsedFilename", "parse_filename", "strip_extension"]
