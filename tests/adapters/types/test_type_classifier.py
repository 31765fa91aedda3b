"""
Tests for the TypeClassifier.
"""

from unittest.mock import MagicMock

from filetree.adapters.types.extension_probe import ExtensionTypeProbe
from filetree.adapters.types.signature_probe import SignatureTypeProbe
from filetree.adapters.types.type_classifier import (
    DIRECTORY_TYPE,
    UNKNOWN_TYPE,
    TypeClassifier,
    create_default_classifier,
)
from filetree.entities.Entry import Entry
from filetree.ports.types.type_probe_port import TypeProbePort


def _file_entry(name="file"):
    entry = MagicMock(spec=Entry)
    entry.name = name
    entry.is_dir.return_value = False
    return entry


class TestTypeClassifier:
    """Test cases for the TypeClassifier."""

    def test_directory_skips_probes(self, mock_logger):
        """Test that directories are never passed to a probe."""
        probe = MagicMock(spec=TypeProbePort)
        entry = MagicMock(spec=Entry)
        entry.is_dir.return_value = True

        result = TypeClassifier([probe], mock_logger).classify(entry)

        assert result == DIRECTORY_TYPE
        probe.probe.assert_not_called()

    def test_first_answer_wins(self, mock_logger):
        """Test that later probes are not tried once one answers."""
        first = MagicMock(spec=TypeProbePort)
        first.probe.return_value = "application/zip"
        second = MagicMock(spec=TypeProbePort)

        result = TypeClassifier([first, second], mock_logger).classify(_file_entry())

        assert result == "application/zip"
        second.probe.assert_not_called()

    def test_falls_through_to_next_probe(self, mock_logger):
        """Test that an undetermined probe lets the next one try."""
        first = MagicMock(spec=TypeProbePort)
        first.probe.return_value = None
        second = MagicMock(spec=TypeProbePort)
        second.probe.return_value = "text/plain"
        entry = _file_entry()

        result = TypeClassifier([first, second], mock_logger).classify(entry)

        assert result == "text/plain"
        first.probe.assert_called_once_with(entry)
        second.probe.assert_called_once_with(entry)

    def test_unknown_when_no_probe_answers(self, mock_logger):
        """Test the sentinel type when every probe gives up."""
        probe = MagicMock(spec=TypeProbePort)
        probe.probe.return_value = None

        assert TypeClassifier([probe], mock_logger).classify(_file_entry()) == UNKNOWN_TYPE

    def test_unknown_without_probes(self, mock_logger):
        """Test a classifier with no probe at all."""
        assert TypeClassifier([], mock_logger).classify(_file_entry()) == UNKNOWN_TYPE

    def test_default_classifier_layers(self, mock_logger):
        """Test that the default classifier tries the cheap probe first."""
        classifier = create_default_classifier(512, mock_logger)

        assert [type(p) for p in classifier.probes] == [
            ExtensionTypeProbe,
            SignatureTypeProbe,
        ]
