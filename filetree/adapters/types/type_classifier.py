"""
Layered content type classification of namespace entries.
"""

import logging
from typing import Optional, Sequence

from filetree.adapters.types.extension_probe import ExtensionTypeProbe
from filetree.adapters.types.signature_probe import SignatureTypeProbe
from filetree.entities.Entry import Entry
from filetree.ports.types.type_probe_port import TypeProbePort

DIRECTORY_TYPE = "directory"
UNKNOWN_TYPE = "<unknown_type>"


class TypeClassifier:
    """
    Classifies entries by trying an ordered list of probes.

    Directories short-circuit to ``DIRECTORY_TYPE`` and never reach a probe;
    when every probe gives up the entry is ``UNKNOWN_TYPE``.
    """

    def __init__(
        self,
        probes: Sequence[TypeProbePort],
        logger: Optional[logging.Logger] = None,
    ):
        self._probes = tuple(probes)
        self._logger = logger or logging.getLogger(__name__)

    @property
    def probes(self) -> tuple[TypeProbePort, ...]:
        return self._probes

    def classify(self, entry: Entry) -> str:
        """
        Get the content type of an entry.

        Args:
            entry: Entry to classify

        Returns:
            "directory", a MIME type string or "<unknown_type>"
        """
        if entry.is_dir():
            return DIRECTORY_TYPE

        for probe in self._probes:
            file_type = probe.probe(entry)
            if file_type:
                return file_type

        self._logger.debug(f"No probe recognized {entry.name}")
        return UNKNOWN_TYPE


def create_default_classifier(
    sniff_bytes: int = 2048, logger: Optional[logging.Logger] = None
) -> TypeClassifier:
    """Extension lookup first, content sniffing as the fallback."""
    return TypeClassifier(
        [ExtensionTypeProbe(), SignatureTypeProbe(sniff_bytes, logger)],
        logger,
    )
