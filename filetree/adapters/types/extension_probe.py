"""
Metadata-only type probe based on the entry name.
"""

import mimetypes
from typing import Mapping, Optional

from typing_extensions import override

from filetree.entities.Entry import Entry
from filetree.ports.types.type_probe_port import TypeProbePort

# Archive extensions missing from the default mimetypes table
EXTRA_TYPES = {
    ".rar": "application/x-rar-compressed",
    ".jar": "application/java-archive",
    ".7z": "application/x-7z-compressed",
}


class ExtensionTypeProbe(TypeProbePort):
    """Guesses the MIME type from the file extension without reading content."""

    def __init__(self, extra_types: Optional[Mapping[str, str]] = None):
        # Own table so results do not depend on the host's mime.types files
        self._mime_types = mimetypes.MimeTypes()
        types = EXTRA_TYPES if extra_types is None else extra_types
        for extension, mime_type in types.items():
            self._mime_types.add_type(mime_type, extension)

    @override
    def probe(self, entry: Entry) -> Optional[str]:
        mime_type, _ = self._mime_types.guess_type(entry.name, strict=False)
        return mime_type
