"""
Mapping from content type to the handler able to expand such containers.
"""

import logging
from types import MappingProxyType
from typing import Mapping, Optional

from filetree.adapters.containers.unsupported_handler import UnsupportedContainerHandler
from filetree.adapters.containers.zip_handler import ZipContainerHandler
from filetree.ports.containers.container_handler_port import ContainerHandlerPort

ZIP_MIME_TYPES = (
    "application/zip",
    "application/x-zip-compressed",
    "application/java-archive",
    "application/x-java-archive",
)

RAR_MIME_TYPES = (
    "application/x-rar",
    "application/x-rar-compressed",
    "application/vnd.rar",
)


class ContainerDispatchTable:
    """
    Read-only registry of container handlers keyed by MIME type.

    Membership decides whether an entry is advertised as expandable; whether
    the handler can actually expand it is a separate matter.
    """

    def __init__(self, handlers: Mapping[str, ContainerHandlerPort]):
        self._handlers = MappingProxyType(dict(handlers))

    def is_container(self, file_type: str) -> bool:
        return file_type in self._handlers

    def handler_for(self, file_type: str) -> Optional[ContainerHandlerPort]:
        """
        Get the handler registered for a content type.

        Args:
            file_type: Type string produced by the classifier

        Returns:
            The registered handler, or None if the type is not a container
        """
        return self._handlers.get(file_type)


def create_default_dispatch_table(
    logger: Optional[logging.Logger] = None,
) -> ContainerDispatchTable:
    """Build the table with the zip family and the not yet supported RAR family."""
    zip_handler = ZipContainerHandler(logger)
    rar_handler = UnsupportedContainerHandler("rar")

    handlers: dict[str, ContainerHandlerPort] = {}
    handlers.update({mime_type: zip_handler for mime_type in ZIP_MIME_TYPES})
    handlers.update({mime_type: rar_handler for mime_type in RAR_MIME_TYPES})
    return ContainerDispatchTable(handlers)
