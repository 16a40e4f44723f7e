"""Corpus management - storage, loading, topic detection and search."""

from knowledge.corpus.filename import ParsedFilename, parse_filename
from knowledge.corpus.loader import DocumentLoader
from knowledge.corpus.search import SearchEngine
from knowledge.corpus.storage import DocumentStorage, FileStat
from knowledge.corpus.topics import detect_topics

__all__ = [
    "DocumentLoader",
    "DocumentStorage",
    "FileStat",
    "ParsedFilename",
    "SearchEngine",
    "detect_topics",
    "parse_filename",
]
