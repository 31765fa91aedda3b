"""
Local file system namespace rooted at the configured base directory.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from typing_extensions import override

from filetree.entities.Entry import Entry
from filetree.ports.files.namespace_port import NamespacePort


class LocalFileSystemNamespace(NamespacePort):
    """Local file system implementation of the namespace port."""

    def __init__(self, base_dir: str, logger: logging.Logger | None = None):
        """
        Initialize the namespace on a base directory.

        Args:
            base_dir: Directory acting as the namespace root
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._base = Path(os.path.abspath(base_dir))
        self._root = Entry(self, self._base)

    @property
    @override
    def root(self) -> Entry:
        return self._root

    @override
    def join(self, parent: Entry, segment: str) -> Entry:
        return Entry(self, parent.location / segment)

    @override
    def exists(self, entry: Entry) -> bool:
        try:
            return entry.location.exists()
        except OSError as e:
            # e.g. ENAMETOOLONG, which pathlib does not treat as missing
            self._logger.debug(f"Could not stat {entry.location}: {e}")
            return False

    @override
    def contains(self, entry: Entry) -> bool:
        """
        Check the entry against the base both lexically and after resolving symlinks.

        Args:
            entry: Entry built by join

        Returns:
            True if both forms of the path stay under the base directory
        """
        normalized = Path(os.path.normpath(entry.location))
        if not normalized.is_relative_to(self._base):
            return False
        try:
            resolved = entry.location.resolve()
            base = self._base.resolve()
        except (OSError, RuntimeError) as e:
            self._logger.warning(f"Could not resolve {entry.location}: {e}")
            return False
        return resolved.is_relative_to(base)

    @override
    def local_path(self, entry: Entry) -> Optional[Path]:
        return entry.location
