"""
Archive-aware file tree adapter working on top of a local base directory.
"""

from __future__ import annotations

import logging

from typing_extensions import override

from filetree.adapters.containers.dispatch_table import ContainerDispatchTable
from filetree.adapters.files.local_namespace import LocalFileSystemNamespace
from filetree.adapters.files.segment_walker import SegmentWalker
from filetree.adapters.types.type_classifier import TypeClassifier
from filetree.entities.FileData import FileData
from filetree.exceptions import InvalidPathError
from filetree.ports.files.file_tree_port import FileTreePort


class LocalFileTreeAdapter(FileTreePort):
    """Lists locations under a base directory, entering archives on the way."""

    def __init__(
        self,
        base_dir: str,
        classifier: TypeClassifier,
        dispatch_table: ContainerDispatchTable,
        logger: logging.Logger | None = None,
    ):
        """
        Initialize the adapter.

        Args:
            base_dir: Directory all requested paths are relative to
            classifier: Classifier giving the content type of entries
            dispatch_table: Mapping from content type to container handler
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._base_dir = base_dir
        self._walker = SegmentWalker(classifier, dispatch_table, self._logger)

    @property
    def base_dir(self) -> str:
        return self._base_dir

    @override
    def list(self, path_segments: list[str]) -> list[FileData]:
        if not all(isinstance(segment, str) for segment in path_segments):
            raise InvalidPathError("Path segments must be strings")

        origin = "/".join(path_segments)
        with LocalFileSystemNamespace(self._base_dir, self._logger) as namespace:
            return self._walker.walk(origin, namespace, iter(path_segments))
