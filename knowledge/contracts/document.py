"""Document contracts - corpus entries as loaded from storage."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class Document(BaseModel):
    """A markdown document from the knowledge base."""

    identifier: str = Field(description="Slug derived from the filename")
    title: str = Field(description="Display title")
    description: str | None = Field(
        default=None, description="Explicit description from frontmatter"
    )
    excerpt: str = Field(
        default="", description="Frontmatter excerpt or first body paragraph line"
    )
    tags: list[str] = Field(default_factory=list, description="Tags, source order")
    date: datetime = Field(description="Effective date used for ordering")
    modified: datetime = Field(description="File modification time")
    filename: str = Field(description="Stored filename")
    content: str = Field(default="", description="Markdown body without frontmatter")
    metadata: dict[str, Any] = Field(
        default_factory=dict, description="Full frontmatter mapping, passthrough"
    )

    @property
    def extra(self) -> dict[str, Any]:
        """Frontmatter fields the loader does not interpret."""
        known = {"title", "description", "excerpt", "tags", "date"}
        return {k: v for k, v in self.metadata.items() if k not in known}


class DocumentFile(BaseModel):
    """A raw file entry in the knowledge base directory."""

    filename: str
    size: int = Field(ge=0)
    modified: datetime


class ScoredMatch(BaseModel):
    """A document with its relevance score for one search call."""

    document: Document
    score: int = Field(ge=0)

    def percent(self, top_score: int) -> int:
        """Score as a percentage of the best score in the result set."""
        if top_score <= 0:
            return 0
        return round(min(self.score / top_score, 1.0) * 100)
