"""Analysis and processing result contracts."""

from typing import Any

from pydantic import BaseModel, Field


class DocumentStats(BaseModel):
    """Structural statistics of a document."""

    lines: int = Field(ge=0, description="Raw line count including frontmatter")
    words: int = Field(ge=0, description="Whitespace-separated words in the body")
    headings: int = Field(ge=0, description="ATX heading lines")
    code_blocks: int = Field(ge=0, description="Fenced code blocks")
    links: int = Field(ge=0, description="Inline markdown links")


class AnalysisReport(BaseModel):
    """Quality report for a single document."""

    filename: str = Field(description="Analyzed filename")
    suggested_filename: str | None = Field(
        default=None, description="Filename derived from the first H1 heading"
    )
    metadata: dict[str, Any] = Field(
        default_factory=dict, description="Frontmatter at analysis time"
    )
    issues: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    stats: DocumentStats
    detected_topics: list[str] | None = Field(
        default=None, description="Candidate tags found in the body (at most 5)"
    )


class ProcessResult(BaseModel):
    """Result of processing and saving a document."""

    filename: str = Field(description="Filename the document was written to")
    analysis: AnalysisReport
    metadata: dict[str, Any] = Field(description="Synthesized frontmatter")

    @property
    def renamed(self) -> bool:
        return self.analysis.filename != self.filename
