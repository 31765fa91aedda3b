"""
Tests for the ContainerDispatchTable.
"""

from unittest.mock import MagicMock

import pytest

from filetree.adapters.containers.dispatch_table import (
    RAR_MIME_TYPES,
    ZIP_MIME_TYPES,
    ContainerDispatchTable,
    create_default_dispatch_table,
)
from filetree.adapters.containers.unsupported_handler import UnsupportedContainerHandler
from filetree.adapters.containers.zip_handler import ZipContainerHandler
from filetree.ports.containers.container_handler_port import ContainerHandlerPort


class TestContainerDispatchTable:
    """Test cases for the ContainerDispatchTable."""

    @pytest.mark.parametrize("mime_type", ZIP_MIME_TYPES)
    def test_zip_family_registered(self, mime_type):
        """Test that every zip family type maps to the zip handler."""
        table = create_default_dispatch_table()

        assert table.is_container(mime_type) is True
        assert isinstance(table.handler_for(mime_type), ZipContainerHandler)

    @pytest.mark.parametrize("mime_type", RAR_MIME_TYPES)
    def test_rar_family_registered(self, mime_type):
        """Test that rar types are registered with the placeholder handler."""
        table = create_default_dispatch_table()

        assert table.is_container(mime_type) is True
        assert isinstance(table.handler_for(mime_type), UnsupportedContainerHandler)

    @pytest.mark.parametrize(
        "file_type", ["directory", "image/jpeg", "text/plain", "<unknown_type>"]
    )
    def test_non_container_types(self, file_type):
        """Test types without a handler."""
        table = create_default_dispatch_table()

        assert table.is_container(file_type) is False
        assert table.handler_for(file_type) is None

    def test_handlers_shared_per_family(self):
        """Test that one handler instance serves a whole family."""
        table = create_default_dispatch_table()

        handlers = {id(table.handler_for(t)) for t in ZIP_MIME_TYPES}
        assert len(handlers) == 1

    def test_table_not_affected_by_source_mapping(self):
        """Test that changing the construction mapping does not change the table."""
        handler = MagicMock(spec=ContainerHandlerPort)
        handlers = {"application/x-custom": handler}
        table = ContainerDispatchTable(handlers)

        handlers["application/x-other"] = handler

        assert table.handler_for("application/x-custom") is handler
        assert table.is_container("application/x-other") is False
