from __future__ import annotations

from datetime import date

from knowledge.contracts.analysis import AnalysisReport, DocumentStats
from knowledge.processing.synthesizer import MetadataSynthesizer, merge_tags

from .conftest import FIXED_DAY

STATS = DocumentStats(lines=1, words=1, headings=0, code_blocks=0, links=0)


def make_report(metadata: dict, topics: list[str] | None = None) -> AnalysisReport:
    return AnalysisReport(filename="note.md", metadata=metadata, stats=STATS, detected_topics=topics)


def test_tags_union_existing_first(synthesizer: MetadataSynthesizer) -> None:
    report = make_report({"tags": ["go"]}, ["docker"])
    assert synthesizer.synthesize("note.md", "", report)["tags"] == ["go", "docker"]


def test_tags_union_has_no_duplicates_regardless_of_order(synthesizer: MetadataSynthesizer) -> None:
    report = make_report({"tags": ["go"]}, ["docker", "go"])
    tags = synthesizer.synthesize("note.md", "", report)["tags"]
    assert sorted(tags) == ["docker", "go"]


def test_defaults_from_body_and_clock(synthesizer: MetadataSynthesizer) -> None:
    body = "\n# Heading Title\n\nFirst paragraph line.\n"
    result = synthesizer.synthesize("note.md", body, make_report({}))
    assert result == {
        "title": "Heading Title",
        "description": "First paragraph line.",
        "tags": [],
        "date": FIXED_DAY.isoformat(),
        "lastUpdated": FIXED_DAY.isoformat(),
    }


def test_title_falls_back_to_filename(synthesizer: MetadataSynthesizer) -> None:
    result = synthesizer.synthesize("00-Some-Note.md", "no heading", make_report({}))
    assert result["title"] == "00-Some-Note"


def test_existing_fields_win_and_extras_are_kept(synthesizer: MetadataSynthesizer) -> None:
    existing = {
        "author": "kim",
        "title": "Kept",
        "excerpt": "From excerpt",
        "date": date(2020, 2, 2),
        "lastUpdated": "1999-01-01",
        "draft": True,
    }
    result = synthesizer.synthesize("note.md", "# Other\n\nbody", make_report(existing))

    assert list(result) == ["title", "description", "tags", "date", "lastUpdated", "author", "excerpt", "draft"]
    assert result["title"] == "Kept"
    assert result["description"] == "From excerpt"
    assert result["date"] == date(2020, 2, 2)
    assert result["lastUpdated"] == FIXED_DAY.isoformat()
    assert result["author"] == "kim"
    assert result["draft"] is True


def test_merge_tags_is_case_insensitive() -> None:
    assert merge_tags(["Python"], ["python", "docker"]) == ["Python", "docker"]
