"""Metadata synthesis - complete, canonical frontmatter for a document."""

from collections.abc import Callable
from datetime import date, datetime, timezone
from typing import Any

from knowledge.constants import LAST_UPDATED_KEY
from knowledge.contracts.analysis import AnalysisReport
from knowledge.corpus.filename import strip_extension
from knowledge.corpus.loader import normalize_tags
from knowledge.corpus.markdown import derive_excerpt, first_heading

Clock = Callable[[], date]

# Keys computed here; everything else in the existing frontmatter is carried over.
SYNTHESIZED_KEYS = ("title", "description", "tags", "date", LAST_UPDATED_KEY)


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def merge_tags(existing: list[str], detected: list[str]) -> list[str]:
    """Existing tags then detected ones, case-insensitive duplicates dropped."""
    seen: set[str] = set()
    merged: list[str] = []
    for tag in [*existing, *detected]:
        key = tag.lower()
        if key not in seen:
            seen.add(key)
            merged.append(tag)
    return merged


class MetadataSynthesizer:
    """
    Derive frontmatter from existing metadata and an analysis report.

    Existing values win for title, description, tags and date; the
    last-updated date is always rewritten from the clock.
    """

    def __init__(self, clock: Clock = utc_today):
        self.clock = clock

    def synthesize(
        self, filename: str, body: str, report: AnalysisReport
    ) -> dict[str, Any]:
        existing = report.metadata
        today = self.clock().isoformat()

        title = existing.get("title")
        if not title:
            title = first_heading(body) or strip_extension(filename)

        description = existing.get("description") or existing.get("excerpt")
        if not description:
            description = derive_excerpt(body)

        tags = merge_tags(
            normalize_tags(existing.get("tags")),
            report.detected_topics or [],
        )

        synthesized: dict[str, Any] = {
            "title": title,
            "description": description,
            "tags": tags,
            "date": existing.get("date") or today,
            LAST_UPDATED_KEY: today,
        }

        for key, value in existing.items():
            if key not in SYNTHESIZED_KEYS:
                synthesized[key] = value

        return synthesized


__all__ = ["Clock", "MetadataSynthesizer", "merge_tags", "utc_today"]
