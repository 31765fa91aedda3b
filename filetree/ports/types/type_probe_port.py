"""
Type probe port interface, one layer of content type detection.
"""

from abc import ABC, abstractmethod
from typing import Optional

from filetree.entities.Entry import Entry


class TypeProbePort(ABC):
    """Port interface for a single content type detection strategy."""

    @abstractmethod
    def probe(self, entry: Entry) -> Optional[str]:
        """
        Try to determine the MIME type of a file entry.

        Args:
            entry: Non-directory entry to inspect

        Returns:
            MIME type string, or None to let the next probe try
        """
        pass
