from __future__ import annotations

import pytest

from knowledge.corpus.loader import DocumentLoader
from knowledge.corpus.search import SearchEngine, tokenize

from .conftest import WriteDoc


@pytest.fixture()
def engine(loader: DocumentLoader) -> SearchEngine:
    return SearchEngine(loader)


def test_title_match_outranks_tag_match(engine: SearchEngine, write_doc: WriteDoc) -> None:
    write_doc("b.md", "---\ntitle: Frontend State\ntags: [react]\ndate: 2024-05-01\n---\nState management notes.\n")
    write_doc("a.md", "---\ntitle: React Hooks\ndate: 2023-01-01\n---\nNotes on useEffect.\n")

    matches = engine.rank("react hooks")

    assert [m.document.filename for m in matches] == ["a.md", "b.md"]
    assert matches[0].score >= 20
    assert matches[1].score == 7
    assert [d.filename for d in engine.search("react hooks")] == ["a.md", "b.md"]


@pytest.mark.parametrize("query", ["", "   ", "\t\n", "a b c"])
def test_empty_queries_return_nothing(engine: SearchEngine, write_doc: WriteDoc, query: str) -> None:
    write_doc("a.md", "---\ntitle: a b c\n---\nabc\n")
    assert engine.search(query) == []


def test_field_weights(engine: SearchEngine, write_doc: WriteDoc) -> None:
    write_doc("d.md", "---\ntitle: Other\ndescription: About kubernetes\n---\nkubernetes everywhere\n")
    [match] = engine.rank("KUBERNETES")
    assert match.score == 5 + 3


def test_zero_scores_dropped_and_ties_keep_date_order(engine: SearchEngine, write_doc: WriteDoc) -> None:
    write_doc("older.md", "---\ntitle: Python tips\ndate: 2020-01-01\n---\nx\n")
    write_doc("newer.md", "---\ntitle: Python tricks\ndate: 2022-01-01\n---\nx\n")
    write_doc("unrelated.md", "---\ntitle: Cooking\n---\nbread\n")

    assert [d.filename for d in engine.search("python")] == ["newer.md", "older.md"]


def test_percent_relative_to_top(engine: SearchEngine, write_doc: WriteDoc) -> None:
    write_doc("a.md", "---\ntitle: git guide\ntags: [git]\n---\nabout git\n")
    write_doc("b.md", "---\ntitle: misc\ntags: [git]\n---\nnothing\n")
    top, other = engine.rank("git")
    assert top.percent(top.score) == 100
    assert other.percent(top.score) == round(7 / 20 * 100)


def test_tokenize_drops_single_characters() -> None:
    assert tokenize("A react  x Hooks") == ["react", "hooks"]
