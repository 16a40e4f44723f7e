"""Shared pytest fixtures: throwaway knowledge base directories."""

from __future__ import annotations

import os
from collections.abc import Callable
from datetime import date
from pathlib import Path

import pytest

from knowledge.corpus.loader import DocumentLoader
from knowledge.corpus.storage import DocumentStorage
from knowledge.processing.synthesizer import MetadataSynthesizer

FIXED_DAY = date(2024, 3, 15)

WriteDoc = Callable[..., Path]


@pytest.fixture()
def kb_dir(tmp_path: Path) -> Path:
    root = tmp_path / "knowledgeBase"
    root.mkdir()
    return root


@pytest.fixture()
def write_doc(kb_dir: Path) -> WriteDoc:
    """Write a document; mtime (epoch seconds) pins the fallback date."""

    def _write(name: str, content: str, mtime: float | None = None) -> Path:
        path = kb_dir / name
        path.write_text(content, encoding="utf-8")
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path

    return _write


@pytest.fixture()
def storage(kb_dir: Path) -> DocumentStorage:
    return DocumentStorage(kb_dir)


@pytest.fixture()
def loader(storage: DocumentStorage) -> DocumentLoader:
    return DocumentLoader(storage)


@pytest.fixture()
def synthesizer() -> MetadataSynthesizer:
    return MetadataSynthesizer(clock=lambda: FIXED_DAY)
