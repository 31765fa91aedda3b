"""
Namespace port interface defining the contract for a directory-like root.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from filetree.entities.Entry import Entry


class NamespacePort(ABC):
    """Port interface for a mounted namespace (local directory or opened container)."""

    @property
    @abstractmethod
    def root(self) -> Entry:
        """Entry for the root of the namespace."""
        pass

    @abstractmethod
    def join(self, parent: Entry, segment: str) -> Entry:
        """
        Build the candidate entry reached by one segment from a parent entry.

        Args:
            parent: Current position inside this namespace
            segment: User-facing path segment

        Returns:
            Candidate entry, which may not exist
        """
        pass

    @abstractmethod
    def exists(self, entry: Entry) -> bool:
        """Check if an entry exists in this namespace."""
        pass

    @abstractmethod
    def contains(self, entry: Entry) -> bool:
        """
        Check that an entry, once normalized, stays inside the namespace root.

        Args:
            entry: Entry built by join

        Returns:
            True if the entry is inside the root, False otherwise
        """
        pass

    @abstractmethod
    def local_path(self, entry: Entry) -> Optional[Path]:
        """On-disk path of an entry, or None if it is not a real file."""
        pass

    def close(self) -> None:
        """Release the resources held by the namespace."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
