"""
FileData domain entity.
"""

from typing import Any

from filetree.exceptions import FileTreeError


class FileData:
    """
    Listing record describing one child of a resolved location.
    """

    def __init__(self, path: str, name: str, file_type: str, is_expandable: bool):
        """
        Initialize the FileData entity.

        Args:
            path: Logical path built from the requested segments and the entry name
            name: Display name of the entry
            file_type: "directory", a MIME type or "<unknown_type>"
            is_expandable: Whether the entry can be listed in turn

        Raises:
            FileTreeError: If name or path is empty
        """
        if not name or not isinstance(name, str):
            raise FileTreeError("Name must be a non-empty string")

        if not path or not isinstance(path, str):
            raise FileTreeError("Path must be a non-empty string")

        self.path = path
        self.name = name
        self.file_type = file_type
        self.is_expandable = bool(is_expandable)

    def get_details(self) -> dict[str, Any]:
        """
        Get the wire representation of the entry.

        Returns:
            Dictionary with path, name, type and isExpandable keys
        """
        return {
            "path": self.path,
            "name": self.name,
            "type": self.file_type,
            "isExpandable": self.is_expandable,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileData):
            return NotImplemented
        return self.get_details() == other.get_details()

    def __hash__(self) -> int:
        return hash((self.path, self.name, self.file_type, self.is_expandable))

    def __str__(self) -> str:
        """String representation of the FileData."""
        marker = "+" if self.is_expandable else " "
        return f"{marker} {self.path} ({self.file_type})"

    def __repr__(self) -> str:
        """Detailed string representation of the FileData."""
        return (
            f"FileData(path='{self.path}', type='{self.file_type}', "
            f"is_expandable={self.is_expandable})"
        )
