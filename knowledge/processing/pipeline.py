"""Process pipeline - analyze, synthesize metadata, normalize and save."""

import logging

from knowledge.contracts.analysis import ProcessResult
from knowledge.corpus.frontmatter import render_document
from knowledge.corpus.loader import DocumentLoader
from knowledge.errors import ValidationError
from knowledge.processing.analyzer import Analyzer
from knowledge.processing.normalizer import normalize
from knowledge.processing.synthesizer import MetadataSynthesizer

logger = logging.getLogger(__name__)


class ProcessPipeline:
    """
    The single mutating operation on the knowledge base.

    Reads a document, rewrites it with synthesized frontmatter and a
    normalized body, and saves it in place or under a new filename.
    Every step fails fast; on rename the original is deleted only after
    the new file has been written. No locking is done: two runs on the
    same document race and the last write wins.
    """

    def __init__(
        self,
        loader: DocumentLoader,
        analyzer: Analyzer | None = None,
        synthesizer: MetadataSynthesizer | None = None,
    ):
        self.loader = loader
        self.storage = loader.storage
        self.analyzer = analyzer or Analyzer(loader)
        self.synthesizer = synthesizer or MetadataSynthesizer()

    def _validate_target(self, new_filename: str | None) -> str | None:
        if new_filename is None:
            return None

        new_filename = new_filename.strip()
        if not new_filename:
            return None
        if "/" in new_filename or "\\" in new_filename:
            raise ValidationError(f"Path separators are not allowed: {new_filename}")
        if not new_filename.endswith(self.loader.extension):
            raise ValidationError(
                f"New filename must end with {self.loader.extension}: {new_filename}"
            )
        if new_filename == self.loader.extension:
            raise ValidationError("New filename has an empty name")
        return new_filename

    def process(self, ref: str, new_filename: str | None = None) -> ProcessResult:
        """
        Process a document and write the result.

        Args:
            ref: Filename or identifier of an existing document
            new_filename: Target filename (optional, renames the document)

        Raises:
            ValidationError: If ref or new_filename is invalid.
            DocumentNotFoundError: If ref does not resolve.
            MalformedDocumentError: If the frontmatter cannot be decoded.
            StorageError: If reading, writing or deleting fails.
        """
        target = self._validate_target(new_filename)
        filename = self.loader.resolve(ref)

        content = self.loader.read_raw(filename)
        analysis = self.analyzer.analyze_content(filename, content)
        _, body = self.loader.split(filename, content)

        metadata = self.synthesizer.synthesize(filename, body, analysis)
        output = render_document(metadata, normalize(body))

        target = target or filename
        if target != filename and self.storage.exists(target):
            logger.warning("Overwriting existing document %s", target)

        self.storage.write(target, output.encode("utf-8"))
        logger.info("Wrote %s", target)

        if target != filename:
            self.storage.delete(filename)
            logger.info("Renamed %s -> %s", filename, target)

        return ProcessResult(filename=target, analysis=analysis, metadata=metadata)


__all__ = ["ProcessPipeline"]
