"""
Dependency injection container for managing application dependencies.
"""

import logging
import os

from filetree.adapters.containers.dispatch_table import (
    ContainerDispatchTable,
    create_default_dispatch_table,
)
from filetree.adapters.files.file_tree_adapter import LocalFileTreeAdapter
from filetree.adapters.types.type_classifier import (
    TypeClassifier,
    create_default_classifier,
)
from filetree.config.settings import settings
from filetree.exceptions import ConfigurationError
from filetree.ports.files.file_tree_port import FileTreePort
from filetree.use_cases.files.list_tree import ListTreeUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_type_classifier(self) -> TypeClassifier:
        """
        Get the layered type classifier.

        Returns:
            TypeClassifier with extension and signature probes
        """
        if "type_classifier" not in self._instances:
            self._instances["type_classifier"] = create_default_classifier(
                settings.sniff_bytes, self._logger
            )
        return self._instances["type_classifier"]

    def get_dispatch_table(self) -> ContainerDispatchTable:
        """
        Get the container dispatch table.

        Returns:
            ContainerDispatchTable with the zip and rar families registered
        """
        if "dispatch_table" not in self._instances:
            self._instances["dispatch_table"] = create_default_dispatch_table(
                self._logger
            )
        return self._instances["dispatch_table"]

    def get_file_tree(self) -> FileTreePort:
        """
        Get file tree adapter instance.

        Returns:
            FileTreePort implementation rooted at the configured base directory

        Raises:
            ConfigurationError: If the base directory does not exist
        """
        if "file_tree" not in self._instances:
            base_dir = settings.base_dir
            if not os.path.isdir(base_dir):
                raise ConfigurationError(
                    f"FILETREE_BASE_DIR is not a directory: {base_dir}"
                )
            self._instances["file_tree"] = LocalFileTreeAdapter(
                base_dir,
                self.get_type_classifier(),
                self.get_dispatch_table(),
                self._logger,
            )
        return self._instances["file_tree"]

    def get_list_tree_use_case(self) -> ListTreeUseCase:
        """
        Get list tree use case with injected dependencies.

        Returns:
            Configured ListTreeUseCase
        """
        if "list_tree_use_case" not in self._instances:
            file_tree = self.get_file_tree()
            self._instances["list_tree_use_case"] = ListTreeUseCase(
                file_tree, self._logger
            )
        return self._instances["list_tree_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
