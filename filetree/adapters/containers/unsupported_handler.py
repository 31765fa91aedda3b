"""
Placeholder handler for container formats that are recognized but not implemented.
"""

from typing import Iterator

from typing_extensions import override

from filetree.entities.Entry import Entry
from filetree.entities.FileData import FileData
from filetree.exceptions import UnsupportedContainerError
from filetree.ports.containers.container_handler_port import ContainerHandlerPort
from filetree.ports.files.segment_walker_port import SegmentWalkerPort


class UnsupportedContainerHandler(ContainerHandlerPort):
    """Always refuses to expand, while keeping the format listed as expandable."""

    def __init__(self, format_name: str):
        self._format_name = format_name

    @override
    def expand(
        self,
        origin: str,
        container: Entry,
        segments: Iterator[str],
        walker: SegmentWalkerPort,
    ) -> list[FileData]:
        # TODO: open RAR archives once a rarfile-backed namespace exists
        raise UnsupportedContainerError(
            f"This type of archives is not supported yet: {self._format_name}"
        )
