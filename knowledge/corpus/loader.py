"""Document loader for the knowledge base."""

import logging
from datetime import date, datetime, timezone
from typing import Any

from kungfu import Error, Ok, Result

from knowledge.constants import DOCUMENT_EXTENSION
from knowledge.contracts.document import Document, DocumentFile
from knowledge.corpus.filename import parse_filename
from knowledge.corpus.frontmatter import FrontmatterError, decode
from knowledge.corpus.markdown import derive_excerpt
from knowledge.corpus.storage import DocumentStorage
from knowledge.errors import DocumentNotFoundError, MalformedDocumentError, ValidationError

logger = logging.getLogger(__name__)


def resolve_date(value: Any, fallback: datetime) -> datetime:
    """Interpret a frontmatter date, falling back when missing or unparsable."""
    if isinstance(value, datetime):
        resolved = value
    elif isinstance(value, date):
        resolved = datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        try:
            resolved = datetime.fromisoformat(value.strip())
        except ValueError:
            return fallback
    else:
        return fallback

    if resolved.tzinfo is None:
        resolved = resolved.replace(tzinfo=timezone.utc)
    return resolved


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float, date))


def normalize_tags(value: Any) -> list[str]:
    """
    Frontmatter tags as a de-duplicated list, source order kept.

    Nested mappings or lists are not tags and are dropped.
    """
    if value is None:
        return []
    if isinstance(value, str):
        items: list[Any] = value.split(",")
    elif isinstance(value, (list, tuple)):
        items = list(value)
    elif _is_scalar(value):
        items = [value]
    else:
        logger.warning("Ignoring tags of type %s", type(value).__name__)
        return []

    tags: dict[str, None] = {}
    for item in items:
        if not _is_scalar(item):
            continue
        tag = str(item).strip()
        if tag:
            tags.setdefault(tag, None)
    return list(tags)


class DocumentLoader:
    """
    Load documents from the knowledge base directory.

    Nothing is cached: every call rescans storage.
    """

    def __init__(
        self,
        storage: DocumentStorage,
        extension: str = DOCUMENT_EXTENSION,
    ):
        self.storage = storage
        self.extension = extension

    def _find_documents(self) -> list[str]:
        return self.storage.list(self.extension)

    def read_raw(self, filename: str) -> str:
        """
        Read a document as text.

        Raises:
            StorageError: If the file cannot be read.
            MalformedDocumentError: If the file is not valid UTF-8.
        """
        data = self.storage.read(filename)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedDocumentError(filename, f"not valid UTF-8: {e}") from e

    def split(self, filename: str, content: str) -> tuple[dict[str, Any], str]:
        """Decode frontmatter, attributing failures to filename."""
        try:
            return decode(content)
        except FrontmatterError as e:
            raise MalformedDocumentError(filename, str(e)) from e

    def load_document(self, filename: str) -> Document:
        """
        Load a single document with resolved title, excerpt, tags and date.

        Raises:
            MalformedDocumentError: If frontmatter or encoding is invalid.
            StorageError: If the file cannot be read.
        """
        metadata, body = self.split(filename, self.read_raw(filename))
        parsed = parse_filename(filename)
        modified = self.storage.stat(filename).modified

        description = metadata.get("description")
        excerpt = metadata.get("excerpt")

        return Document(
            identifier=parsed.identifier,
            title=str(metadata.get("title") or parsed.title),
            description=str(description) if description else None,
            excerpt=str(excerpt) if excerpt else derive_excerpt(body),
            tags=normalize_tags(metadata.get("tags")),
            date=resolve_date(metadata.get("date"), modified),
            modified=modified,
            filename=filename,
            content=body,
            metadata=metadata,
        )

    def _load_entry(self, filename: str) -> Result[Document, str]:
        try:
            return Ok(self.load_document(filename))
        except MalformedDocumentError as e:
            return Error(e.reason)

    def list_all(self) -> list[Document]:
        """
        Load every document, most recent first.

        Malformed documents are logged and skipped; storage failures
        propagate.
        """
        documents: list[Document] = []
        skipped: list[tuple[str, str]] = []

        for filename in self._find_documents():
            match self._load_entry(filename):
                case Ok(doc):
                    documents.append(doc)
                case Error(reason):
                    skipped.append((filename, reason))

        for filename, reason in skipped:
            logger.warning("Skipping malformed document %s: %s", filename, reason)

        logger.debug("Loaded %d documents, skipped %d", len(documents), len(skipped))
        return sorted(documents, key=lambda d: d.date, reverse=True)

    def _find_by_identifier(self, identifier: str) -> str | None:
        for filename in self._find_documents():
            if parse_filename(filename).identifier == identifier:
                return filename
        return None

    def get_by_identifier(self, identifier: str) -> Document | None:
        """
        Load a document by slug, or None when no filename maps to it.

        Raises:
            ValidationError: If identifier is empty.
        """
        if not (identifier or "").strip():
            raise ValidationError("Document identifier is required")
        filename = self._find_by_identifier(identifier)
        if filename is None:
            return None
        return self.load_document(filename)

    def resolve(self, ref: str) -> str:
        """
        Resolve a filename or identifier to a stored filename.

        Raises:
            ValidationError: If ref is empty or contains a path.
            DocumentNotFoundError: If nothing matches.
        """
        ref = (ref or "").strip()
        if not ref:
            raise ValidationError("Document filename or identifier is required")
        if "/" in ref or "\\" in ref:
            raise ValidationError(f"Path separators are not allowed: {ref}")

        if ref.endswith(self.extension) and self.storage.exists(ref):
            return ref

        filename = self._find_by_identifier(ref)
        if filename is None:
            raise DocumentNotFoundError(ref)
        return filename

    def list_files(self) -> list[DocumentFile]:
        """Raw file listing with size and modification time."""
        files: list[DocumentFile] = []
        for filename in self._find_documents():
            stat = self.storage.stat(filename)
            files.append(
                DocumentFile(filename=filename, size=stat.size, modified=stat.modified)
            )
        return files

    def all_tags(self) -> list[str]:
        """Unique tags across the corpus, sorted."""
        tags: set[str] = set()
        for doc in self.list_all():
            tags.update(doc.tags)
        return sorted(tags)


__all__ = ["DocumentLoader", "normalize_tags", "resolve_date"]
