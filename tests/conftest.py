"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
import zipfile
from unittest.mock import MagicMock

import pytest

from filetree.adapters.containers.dispatch_table import create_default_dispatch_table
from filetree.adapters.files.file_tree_adapter import LocalFileTreeAdapter
from filetree.adapters.types.type_classifier import create_default_classifier
from filetree.container import DependencyContainer

JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01" + b"\x00" * 32
RAR_BYTES = b"Rar!\x1a\x07\x00" + b"\x00" * 32


def write_zip(path: str, members: dict[str, bytes]) -> None:
    """Write a zip archive holding the given members."""
    with zipfile.ZipFile(path, "w") as zf:
        for name, data in members.items():
            zf.writestr(name, data)


@pytest.fixture
def tree_directory():
    """
    Create the reference tree used by the listing tests.

    Layout:
        Inner directory/test-txt
        test-zip.zip  (one entry: "Inner directory/")
        test-image.jpg
        rar-archive.rar

    Returns:
        Path to the temporary base directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        inner = os.path.join(temp_dir, "Inner directory")
        os.makedirs(inner)
        with open(os.path.join(inner, "test-txt"), "w") as f:
            f.write("This is a test file.")

        write_zip(os.path.join(temp_dir, "test-zip.zip"), {"Inner directory/": b""})

        with open(os.path.join(temp_dir, "test-image.jpg"), "wb") as f:
            f.write(JPEG_BYTES)

        with open(os.path.join(temp_dir, "rar-archive.rar"), "wb") as f:
            f.write(RAR_BYTES)

        yield temp_dir


@pytest.fixture
def nested_tree_directory(tree_directory):
    """
    Extend the reference tree with archives holding deeper content.

    Adds:
        zip-with-inner-zip.zip  (test-zip.zip, docs/readme.md)
        deep.zip  (Inner directory/Second level/data, Inner directory/notes.txt)
    """
    with open(os.path.join(tree_directory, "test-zip.zip"), "rb") as f:
        inner_zip = f.read()
    write_zip(
        os.path.join(tree_directory, "zip-with-inner-zip.zip"),
        {"test-zip.zip": inner_zip, "docs/readme.md": b"# Readme\n"},
    )
    write_zip(
        os.path.join(tree_directory, "deep.zip"),
        {
            "Inner directory/Second level/data": b"\x00\x01\x02\x03",
            "Inner directory/notes.txt": b"notes",
        },
    )
    return tree_directory


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def file_tree(nested_tree_directory, mock_logger):
    """
    Create a file tree adapter over the extended reference tree.

    Returns:
        LocalFileTreeAdapter with the default classifier and dispatch table
    """
    return LocalFileTreeAdapter(
        nested_tree_directory,
        create_default_classifier(logger=mock_logger),
        create_default_dispatch_table(mock_logger),
        mock_logger,
    )


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
