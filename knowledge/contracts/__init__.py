"""Data contracts for the knowledge base."""

from knowledge.contracts.analysis import AnalysisReport, DocumentStats, ProcessResult
from knowledge.contracts.document import Document, DocumentFile, ScoredMatch

__all__ = [
    # Documents
    "Document",
    "DocumentFile",
    "ScoredMatch",
    # Analysis
    "AnalysisReport",
    "DocumentStats",
    "ProcessResult",
]
