"""
Container handler listing directories inside zip archives.
"""

import logging
import zipfile
from typing import Iterator, Optional

from typing_extensions import override

from filetree.adapters.files.zip_namespace import ZipArchiveNamespace
from filetree.entities.Entry import Entry
from filetree.entities.FileData import FileData
from filetree.exceptions import UnsupportedContainerError
from filetree.ports.containers.container_handler_port import ContainerHandlerPort
from filetree.ports.files.segment_walker_port import SegmentWalkerPort


class ZipContainerHandler(ContainerHandlerPort):
    """
    Switches to a zip namespace for the not visited segments and walks again.

    Only archives stored on disk can be opened; an archive nested inside
    another archive has no local path and is reported as unsupported.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    @override
    def expand(
        self,
        origin: str,
        container: Entry,
        segments: Iterator[str],
        walker: SegmentWalkerPort,
    ) -> list[FileData]:
        archive_path = container.local_path
        if archive_path is None:
            raise UnsupportedContainerError(
                f"Nested zip archives are not supported: {container.name}"
            )

        try:
            namespace = ZipArchiveNamespace(archive_path, self._logger)
        except zipfile.BadZipFile as e:
            raise UnsupportedContainerError(
                f"Cannot open {container.name} as a zip archive: {e}"
            ) from e

        with namespace:
            return walker.walk(origin, namespace, segments)
