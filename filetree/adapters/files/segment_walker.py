"""
Segment walker resolving path segments across nested namespaces.
"""

import logging
import posixpath
from typing import Iterator, Optional

from typing_extensions import override

from filetree.adapters.containers.dispatch_table import ContainerDispatchTable
from filetree.adapters.types.type_classifier import DIRECTORY_TYPE, TypeClassifier
from filetree.entities.Entry import Entry
from filetree.entities.FileData import FileData
from filetree.exceptions import InvalidPathError, NotExpandableError, NotFoundError
from filetree.ports.files.namespace_port import NamespacePort
from filetree.ports.files.segment_walker_port import SegmentWalkerPort


class SegmentWalker(SegmentWalkerPort):
    """
    Walks segments through a namespace, handing over to container handlers.

    A handler opens the container as a new namespace and calls ``walk`` again
    with the same segment iterator, so nesting is resolved by indirect
    recursion and the output paths always come from the original segments.
    """

    def __init__(
        self,
        classifier: TypeClassifier,
        dispatch_table: ContainerDispatchTable,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the walker.

        Args:
            classifier: Classifier giving the content type of entries
            dispatch_table: Mapping from content type to container handler
            logger: Logger instance to use for logging
        """
        self._classifier = classifier
        self._dispatch_table = dispatch_table
        self._logger = logger or logging.getLogger(__name__)

    @override
    def walk(
        self, origin: str, namespace: NamespacePort, segments: Iterator[str]
    ) -> list[FileData]:
        position = namespace.root
        for segment in segments:
            candidate = namespace.join(position, segment)
            if not candidate.exists():
                raise NotFoundError(f"File doesn't exist: {origin}")
            if not namespace.contains(candidate):
                raise InvalidPathError(
                    f"Segment '{segment}' leads outside of the current root"
                )

            file_type = self._classifier.classify(candidate)
            handler = self._dispatch_table.handler_for(file_type)
            if handler is not None:
                self._logger.debug(
                    f"Entering {file_type} container at segment '{segment}'"
                )
                return handler.expand(origin, candidate, segments, self)
            position = candidate

        return self._list_children(origin, position)

    def is_expandable(self, file_type: str) -> bool:
        """Check if entries of a given type can be listed."""
        return file_type == DIRECTORY_TYPE or self._dispatch_table.is_container(
            file_type
        )

    def _list_children(self, origin: str, position: Entry) -> list[FileData]:
        if not position.exists():
            raise NotFoundError(f"File doesn't exist: {origin}")
        if not position.is_dir():
            raise NotExpandableError(f"Not a directory: {origin}")

        # Archives may store the same member name more than once
        seen: set[str] = set()
        children = []
        for child in position.iterdir():
            if child.name in seen:
                continue
            seen.add(child.name)
            children.append(self._to_file_data(origin, child))
        return children

    def _to_file_data(self, origin: str, child: Entry) -> FileData:
        file_type = self._classifier.classify(child)
        return FileData(
            path=posixpath.join(origin, child.name),
            name=child.name,
            file_type=file_type,
            is_expandable=self.is_expandable(file_type),
        )
