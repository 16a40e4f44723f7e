from __future__ import annotations

import pytest

from knowledge.processing.normalizer import normalize

SAMPLES = [
    "",
    "   \n\n\t\n",
    "plain text",
    "#  Title\r\nIntro text\n\n\n\nMore   \n##   Sub\nbody\n```js\nx = 1\n```\nafter",
    "# a\n# b\n## c",
    "text\r\rmore\r\n\r\n\r\nend",
    "  # indented first line\nnext",
    "```\nunclosed block\n# not a heading\n\n\n\nstill code",
    "```bash\n#   comment\n```\n```\nsecond\n```",
    "para\n \t \n  \n\t\npara two  \n#\n#     \n####### seven",
    "#hashtag stays\n#\tTabbed heading\ntext",
    "\n\n\n# Leading blank lines\n\n\n",
]


def test_canonical_form() -> None:
    text = "#  Title\r\nIntro text\n\n\n\nMore   \n##   Sub\nbody\n```js\nx = 1\n```\nafter"
    assert normalize(text) == (
        "# Title\n\nIntro text\n\nMore\n\n## Sub\n\nbody\n\n```js\nx = 1\n```\n\nafter\n"
    )


def test_code_block_contents_untouched() -> None:
    assert normalize("```bash\n#   comment\n```") == "```bash\n#   comment\n```\n"


def test_hashtags_are_not_headings() -> None:
    assert normalize("#hashtag\ntext") == "#hashtag\ntext\n"


def test_empty_document() -> None:
    assert normalize("") == "\n"
    assert normalize(" \n\t\n") == "\n"


def test_consecutive_headings_get_one_blank_line() -> None:
    assert normalize("# a\n# b\n\n\n\n## c\ntext") == "# a\n\n# b\n\n## c\n\ntext\n"


def test_ends_with_single_newline() -> None:
    assert normalize("text\n\n\n\n").endswith("text\n")


@pytest.mark.parametrize("text", SAMPLES)
def test_idempotent(text: str) -> None:
    once = normalize(text)
    assert normalize(once) == once


@pytest.mark.parametrize("text", SAMPLES)
def test_no_trailing_whitespace_or_blank_runs(text: str) -> None:
    result = normalize(text)
    assert "\r" not in result
    assert "\n\n\n" not in result
    assert all(line == line.rstrip() for line in result.split("\n"))
