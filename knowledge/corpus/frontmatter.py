"""YAML frontmatter codec - split and rebuild the header block of a document."""

import json
import re
from datetime import date
from typing import Any

import yaml

from knowledge.constants import FRONTMATTER_MARKER

# Pattern: starts with ---, then YAML content, then --- on its own line
_FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)


class FrontmatterError(ValueError):
    """Raised when a frontmatter block is present but cannot be parsed."""


def decode(content: str) -> tuple[dict[str, Any], str]:
    """
    Split markdown content into frontmatter mapping and body.

    Content without a frontmatter block yields an empty mapping and the
    content unchanged.

    Raises:
        FrontmatterError: If the block is not valid YAML or not a mapping.
    """
    content = content.removeprefix("\ufeff")
    match = _FRONTMATTER_PATTERN.match(content)

    if not match:
        return {}, content

    try:
        header = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        raise FrontmatterError(f"invalid YAML: {e}") from e

    if header is None:
        header = {}
    if not isinstance(header, dict):
        raise FrontmatterError(
            f"frontmatter must be a mapping, got {type(header).__name__}"
        )

    return {str(k): v for k, v in header.items()}, content[match.end() :]


def _format_scalar(value: Any) -> str:
    # Dates stay unquoted YAML timestamps
    if isinstance(value, date):
        return value.isoformat()
    return json.dumps(value, ensure_ascii=False, default=str)


def encode(header: dict[str, Any]) -> str:
    """
    Serialize a mapping into a frontmatter block, delimiters included.

    Scalars are written as `key: value` (JSON-quoted, dates bare ISO), lists
    as a key line followed by indented `- item` lines.
    """
    lines = [FRONTMATTER_MARKER]

    for key, value in header.items():
        if isinstance(value, (list, tuple)):
            if not value:
                lines.append(f"{key}: []")
                continue
            lines.append(f"{key}:")
            lines.extend(f"  - {_format_scalar(item)}" for item in value)
        else:
            lines.append(f"{key}: {_format_scalar(value)}")

    lines.append(FRONTMATTER_MARKER)
    return "\n".join(lines) + "\n"


def render_document(header: dict[str, Any], body: str) -> str:
    """Canonical on-disk form: header block, blank line, body."""
    return f"{encode(header)}\n{body}"


__all__ = ["FrontmatterError", "decode", "encode", "render_document"]
