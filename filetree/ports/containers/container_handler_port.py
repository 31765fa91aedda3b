"""
Container handler port interface defining how a container is expanded.
"""

from abc import ABC, abstractmethod
from typing import Iterator

from filetree.entities.Entry import Entry
from filetree.entities.FileData import FileData
from filetree.ports.files.segment_walker_port import SegmentWalkerPort


class ContainerHandlerPort(ABC):
    """Port interface for opening a container and walking inside it."""

    @abstractmethod
    def expand(
        self,
        origin: str,
        container: Entry,
        segments: Iterator[str],
        walker: SegmentWalkerPort,
    ) -> list[FileData]:
        """
        Mount the container as a namespace and resume the walk inside it.

        Args:
            origin: Logical path of the originally requested location
            container: Entry of the container file
            segments: Iterator of not yet visited segments
            walker: Walker to re-enter with the container namespace

        Returns:
            List of FileData produced by the walker

        Raises:
            UnsupportedContainerError: If the container cannot be expanded
        """
        pass
