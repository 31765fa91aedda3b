"""
Content sniffing type probe reading a bounded prefix of the file.
"""

import codecs
import logging
from typing import Optional

from typing_extensions import override

from filetree.entities.Entry import Entry
from filetree.ports.types.type_probe_port import TypeProbePort

SIGNATURES = (
    (b"PK\x03\x04", "application/zip"),
    (b"PK\x05\x06", "application/zip"),
    (b"Rar!\x1a\x07", "application/x-rar-compressed"),
    (b"7z\xbc\xaf\x27\x1c", "application/x-7z-compressed"),
    (b"\x1f\x8b", "application/gzip"),
    (b"%PDF-", "application/pdf"),
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
)

TEXT_TYPE = "text/plain"


class SignatureTypeProbe(TypeProbePort):
    """
    Detects the MIME type from magic numbers, then from a text heuristic.

    Resolution order:
    1. known signature at the start of the sample
    2. NUL-free sample decoding as UTF-8 -> text/plain
    Only regular files are read. Read failures are logged and reported as
    undetermined.
    """

    def __init__(self, sniff_bytes: int = 2048, logger: Optional[logging.Logger] = None):
        self._sniff_bytes = sniff_bytes
        self._logger = logger or logging.getLogger(__name__)

    @override
    def probe(self, entry: Entry) -> Optional[str]:
        # Pipes, sockets and device nodes can block on open
        if not entry.is_file():
            return None
        try:
            with entry.open() as handle:
                sample = handle.read(self._sniff_bytes)
        except Exception as e:
            self._logger.debug(f"Could not read {entry.name} for type detection: {e}")
            return None

        for signature, mime_type in SIGNATURES:
            if sample.startswith(signature):
                return mime_type

        if sample and self._looks_like_text(sample):
            return TEXT_TYPE
        return None

    @staticmethod
    def _looks_like_text(sample: bytes) -> bool:
        if b"\x00" in sample:
            return False
        # Incremental decoding tolerates a multibyte sequence cut by the read limit
        decoder = codecs.getincrementaldecoder("utf-8")()
        try:
            decoder.decode(sample, final=False)
        except UnicodeDecodeError:
            return False
        return True
