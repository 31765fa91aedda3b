"""
File tree port interface defining the contract for path listing.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from filetree.entities.FileData import FileData


class FileTreePort(ABC):
    """Port interface for listing locations of an archive-aware file tree."""

    @abstractmethod
    def list(self, path_segments: list[str]) -> list[FileData]:
        """
        List the location specified by path segments.

        Args:
            path_segments: Path to the location represented as a list of its
                segments; an empty list means the base directory

        Returns:
            List of FileData, one per child of the location

        Raises:
            NotFoundError: If a segment does not exist
            InvalidPathError: If a segment escapes the current namespace
            UnsupportedContainerError: If a container cannot be expanded
            NotExpandableError: If the location is a plain file
        """
        pass
