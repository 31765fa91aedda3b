"""
Segment walker port interface, re-entered by container handlers.
"""

from abc import ABC, abstractmethod
from typing import Iterator

from filetree.entities.FileData import FileData
from filetree.ports.files.namespace_port import NamespacePort


class SegmentWalkerPort(ABC):
    """Port interface for walking path segments through a namespace."""

    @abstractmethod
    def walk(
        self, origin: str, namespace: NamespacePort, segments: Iterator[str]
    ) -> list[FileData]:
        """
        Walk the remaining segments from the namespace root and list the result.

        Args:
            origin: Logical path of the originally requested location
            namespace: Namespace to walk through
            segments: Iterator of not yet visited segments

        Returns:
            List of FileData for the children of the resolved location

        Raises:
            FileTreeError: If the walk or the listing fails
        """
        pass
