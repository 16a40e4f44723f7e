"""Directory-backed storage for knowledge base documents."""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from knowledge.errors import StorageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileStat:
    size: int
    modified: datetime


class DocumentStorage:
    """
    Flat directory of document files.

    Every failing operation raises StorageError naming the operation and
    filename. There is no locking: concurrent writers race and the last
    write wins.
    """

    def __init__(self, root: Path | str):
        self.root = Path(root)

    def _path(self, name: str) -> Path:
        return self.root / name

    def list(self, extension: str) -> list[str]:
        """List filenames ending with extension, sorted by name."""
        if not self.root.is_dir():
            logger.debug("Knowledge base directory %s does not exist", self.root)
            return []

        try:
            return sorted(
                p.name
                for p in self.root.iterdir()
                if p.is_file() and p.name.endswith(extension)
            )
        except OSError as e:
            raise StorageError("list", str(self.root), str(e)) from e

    def read(self, name: str) -> bytes:
        try:
            return self._path(name).read_bytes()
        except OSError as e:
            raise StorageError("read", name, str(e)) from e

    def write(self, name: str, data: bytes) -> None:
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            self._path(name).write_bytes(data)
        except OSError as e:
            raise StorageError("write", name, str(e)) from e

    def delete(self, name: str) -> None:
        try:
            self._path(name).unlink()
        except OSError as e:
            raise StorageError("delete", name, str(e)) from e

    def stat(self, name: str) -> FileStat:
        try:
            st = self._path(name).stat()
        except OSError as e:
            raise StorageError("stat", name, str(e)) from e

        return FileStat(
            size=st.st_size,
            modified=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
        )

    def exists(self, name: str) -> bool:
        return self._path(name).is_file()


__all__ = ["DocumentStorage", "FileStat"]
