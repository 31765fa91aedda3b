"""
Entry domain entity.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, BinaryIO, Iterator, Optional

if TYPE_CHECKING:
    from filetree.ports.files.namespace_port import NamespacePort


class Entry:
    """
    Node of a namespace tree met while walking segments or listing children.

    The location is a ``pathlib.Path`` on the local filesystem or a
    ``zipfile.Path`` inside an opened archive. Both share the traversal
    methods used here; what differs between them is answered by the owning
    namespace.
    """

    def __init__(self, namespace: NamespacePort, location: Any):
        self.namespace = namespace
        self.location = location

    @property
    def name(self) -> str:
        """Display name of the entry."""
        return self.location.name

    @property
    def local_path(self) -> Optional[Path]:
        """On-disk path of the entry, None when it lives inside a container."""
        return self.namespace.local_path(self)

    def exists(self) -> bool:
        return self.namespace.exists(self)

    def is_dir(self) -> bool:
        return self.location.is_dir()

    def is_file(self) -> bool:
        return self.location.is_file()

    def iterdir(self) -> Iterator[Entry]:
        for child in self.location.iterdir():
            yield Entry(self.namespace, child)

    def open(self) -> BinaryIO:
        """Open the entry content for binary reading."""
        return self.location.open("rb")

    def __repr__(self) -> str:
        return f"Entry(location={self.location!r})"
