"""Error taxonomy for knowledge base operations."""


class KnowledgeBaseError(Exception):
    """Base class for all knowledge base errors."""


class ValidationError(KnowledgeBaseError):
    """Raised when an input is rejected before any I/O happens."""


class DocumentNotFoundError(KnowledgeBaseError):
    """Raised when a filename or identifier does not resolve to a document."""

    def __init__(self, ref: str):
        super().__init__(f"Document not found: {ref}")
        self.ref = ref


class MalformedDocumentError(KnowledgeBaseError):
    """Raised when a document's frontmatter or encoding cannot be decoded."""

    def __init__(self, filename: str, reason: str):
        super().__init__(f"Malformed document {filename}: {reason}")
        self.filename = filename
        self.reason = reason


class StorageError(KnowledgeBaseError):
    """Raised when a storage read, write or delete fails."""

    def __init__(self, operation: str, filename: str, reason: str):
        super().__init__(f"Storage {operation} failed for {filename}: {reason}")
        self.operation = operation
        self.filename = filename
        self.reason = reason


__all__ = [
    "KnowledgeBaseError",
    "ValidationError",
    "DocumentNotFoundError",
    "MalformedDocumentError",
    "StorageError",
]
