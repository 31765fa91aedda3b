"""
Namespace exposing the internal tree of a zip archive.
"""

import logging
import posixpath
import zipfile
from pathlib import Path
from typing import Optional

from typing_extensions import override

from filetree.entities.Entry import Entry
from filetree.ports.files.namespace_port import NamespacePort


class ZipArchiveNamespace(NamespacePort):
    """Zip archive implementation of the namespace port, backed by ``zipfile.Path``."""

    def __init__(self, archive_path: Path, logger: logging.Logger | None = None):
        """
        Open the archive and expose its root.

        Args:
            archive_path: On-disk path of the zip archive
            logger: Logger instance to use for logging

        Raises:
            zipfile.BadZipFile: If the file is not a readable zip archive
            OSError: If the file cannot be opened
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._archive_path = archive_path
        self._zip_file = zipfile.ZipFile(archive_path)
        self._root = Entry(self, zipfile.Path(self._zip_file))
        self._logger.debug(f"Opened zip namespace {archive_path}")

    @property
    @override
    def root(self) -> Entry:
        return self._root

    @override
    def join(self, parent: Entry, segment: str) -> Entry:
        return Entry(self, parent.location / segment)

    @override
    def exists(self, entry: Entry) -> bool:
        # The archive root has no member of its own.
        return not entry.location.at or entry.location.exists()

    @override
    def contains(self, entry: Entry) -> bool:
        member = entry.location.at
        if not member:
            return True
        if posixpath.isabs(member):
            return False
        normalized = posixpath.normpath(member)
        return normalized != ".." and not normalized.startswith("../")

    @override
    def local_path(self, entry: Entry) -> Optional[Path]:
        return None

    @override
    def close(self) -> None:
        self._zip_file.close()
        self._logger.debug(f"Closed zip namespace {self._archive_path}")
