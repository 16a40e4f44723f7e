from __future__ import annotations

import pytest

from knowledge.corpus.filename import parse_filename, strip_extension


def test_numeric_prefix_dropped_from_title_kept_in_identifier() -> None:
    parsed = parse_filename("00-React-Hooks.md")
    assert parsed.title == "React Hooks"
    assert parsed.identifier == "00-react-hooks"
    assert parsed.filename == "00-React-Hooks.md"


def test_whitespace_becomes_hyphen_in_identifier() -> None:
    parsed = parse_filename("My Notes  on Git.md")
    assert parsed.identifier == "my-notes-on-git"
    assert parsed.title == "My Notes on Git"


def test_degenerate_filename() -> None:
    parsed = parse_filename(".md")
    assert parsed.identifier == ""
    assert parsed.title == ""


def test_only_numeric_tokens() -> None:
    parsed = parse_filename("01-02.md")
    assert parsed.title == ""
    assert parsed.identifier == "01-02"


def test_strip_extension_leaves_other_names() -> None:
    assert strip_extension("notes.md") == "notes"
    assert strip_extension("notes.txt") == "notes.txt"


@pytest.mark.parametrize(
    ("filename", "title"),
    [
        ("00-ReactHooks.md", "React Hooks"),
        ("01-Docker-ComposeV2.md", "Docker Compose V2"),
        ("02-REST-API.md", "REST API"),
        ("03-Python3Tips.md", "Python3 Tips"),
    ],
)
def test_camel_case_split_in_title(filename: str, title: str) -> None:
    parsed = parse_filename(filename)
    assert parsed.title == title
    assert parsed.identifier == filename[:-3].lower()
