"""Heuristic quality analysis of knowledge base documents."""

import re
from typing import Any

from knowledge.constants import CODE_FENCE, LONG_LINE_LENGTH, LONG_LINE_LIMIT
from knowledge.contracts.analysis import AnalysisReport, DocumentStats
from knowledge.corpus.loader import DocumentLoader
from knowledge.corpus.markdown import (
    HEADING_PATTERN,
    INTERNAL_LINK_PATTERN,
    LINK_PATTERN,
    first_heading,
    is_fence,
)
from knowledge.corpus.topics import detect_topics

_HEADING_LEVEL = re.compile(r"^(#{1,6})\s")


def compute_stats(content: str, body: str) -> DocumentStats:
    """Line count of the raw content, everything else over the body."""
    return DocumentStats(
        lines=len(content.split("\n")),
        words=len(body.split()),
        headings=len(HEADING_PATTERN.findall(body)),
        code_blocks=body.count(CODE_FENCE) // 2,
        links=len(LINK_PATTERN.findall(body)),
    )


def suggest_filename(body: str, extension: str) -> str | None:
    """Filename derived from the first H1 heading."""
    heading = first_heading(body)
    if heading is None:
        return None

    slug = re.sub(r"[^\w\s-]", "", heading)
    slug = re.sub(r"\s+", "-", slug).lower()
    if not slug:
        return None
    return f"{slug}{extension}"


def count_unlabeled_fences(body: str) -> int:
    """Code blocks whose opening fence carries no language."""
    count = 0
    in_code = False
    for line in body.split("\n"):
        if not is_fence(line):
            continue
        if not in_code and not line[len(CODE_FENCE) :].strip():
            count += 1
        in_code = not in_code
    return count


def _check_metadata(metadata: dict[str, Any], issues: list[str], suggestions: list[str]) -> None:
    if not metadata.get("title"):
        issues.append("Missing frontmatter title")
        suggestions.append("Add a title in frontmatter for better SEO")

    if not metadata.get("tags"):
        issues.append("No tags defined")
        suggestions.append("Add tags to improve searchability")

    if not metadata.get("description") and not metadata.get("excerpt"):
        issues.append("No description or excerpt")
        suggestions.append("Add a description for search results")


def _check_structure(body: str, issues: list[str], suggestions: list[str]) -> None:
    lines = body.split("\n")

    levels = [len(m.group(1)) for m in map(_HEADING_LEVEL.match, lines) if m]
    if levels and 1 not in levels:
        issues.append("No H1 heading found")
        suggestions.append("Add a main H1 heading at the top")

    unlabeled = count_unlabeled_fences(body)
    if unlabeled:
        issues.append(f"{unlabeled} code blocks without language specified")
        suggestions.append(
            "Add language identifiers to code blocks (e.g., ```python)"
        )

    if INTERNAL_LINK_PATTERN.search(body):
        suggestions.append("Review internal links to ensure they point to correct files")

    long_lines = [
        line for line in lines if len(line) > LONG_LINE_LENGTH and not is_fence(line)
    ]
    if len(long_lines) > LONG_LINE_LIMIT:
        suggestions.append("Consider breaking long lines for better readability")


class Analyzer:
    """
    Inspect a document and report issues and suggestions.

    Checks:
    - frontmatter completeness (title, tags, description)
    - heading structure and code block languages
    - internal links and long lines (advisory)
    - vocabulary topics as candidate tags
    """

    def __init__(self, loader: DocumentLoader):
        self.loader = loader

    def analyze_content(self, filename: str, content: str) -> AnalysisReport:
        """
        Analyze already-read document content.

        Raises:
            MalformedDocumentError: If the frontmatter cannot be decoded.
        """
        metadata, body = self.loader.split(filename, content)

        issues: list[str] = []
        suggestions: list[str] = []
        _check_metadata(metadata, issues, suggestions)
        _check_structure(body, issues, suggestions)

        topics = detect_topics(body)
        if topics:
            suggestions.append(
                f"Detected topics: {', '.join(topics)}. Consider adding these as tags."
            )

        return AnalysisReport(
            filename=filename,
            suggested_filename=suggest_filename(body, self.loader.extension),
            metadata=metadata,
            issues=issues,
            suggestions=suggestions,
            stats=compute_stats(content, body),
            detected_topics=topics or None,
        )

    def analyze(self, ref: str) -> AnalysisReport:
        """
        Analyze a stored document by filename or identifier.

        Raises:
            ValidationError: If ref is empty.
            DocumentNotFoundError: If ref does not resolve.
            MalformedDocumentError: If the document cannot be decoded.
            StorageError: If the file cannot be read.
        """
        filename = self.loader.resolve(ref)
        return self.analyze_content(filename, self.loader.read_raw(filename))


__all__ = ["Analyzer", "compute_stats", "count_unlabeled_fences", "suggest_filename"]
