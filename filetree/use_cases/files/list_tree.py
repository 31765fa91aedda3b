"""
Use case for listing a location of the archive-aware file tree.
"""

import logging
from typing import Optional

from filetree.entities.FileData import FileData
from filetree.exceptions import FileTreeError
from filetree.ports.files.file_tree_port import FileTreePort


class ListTreeUseCase:
    """Use case for listing the children of a location given as path segments."""

    def __init__(
        self,
        file_tree: FileTreePort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_tree: File tree to list locations from
            logger: Logger instance to use for logging
        """
        self._file_tree = file_tree
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path_segments: list[str]) -> list[FileData]:
        """
        List the location specified by path segments.

        Args:
            path_segments: Segments of the requested path, empty for the root

        Returns:
            List of FileData entities

        Raises:
            FileTreeError: If listing fails
        """
        location = "/".join(path_segments) or "/"
        try:
            self._logger.info(f"Listing location: {location}")
            files = self._file_tree.list(path_segments)
            self._logger.info(f"Found {len(files)} entries")
            return files
        except FileTreeError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing location: {e}")
            raise FileTreeError(f"Failed to list {location}: {str(e)}")
