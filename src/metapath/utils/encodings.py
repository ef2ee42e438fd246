"""
Decoding of metadata file bytes.

Metadata files are usually UTF-8, but hand-edited ones turn up with a BOM
or in a legacy Windows code page. A BOM wins; otherwise the configured
encodings are tried in order.
"""

import logging
from typing import List, Optional, Tuple


DEFAULT_ENCODINGS = ['utf-8', 'utf-8-sig', 'latin-1', 'cp1252']

# Longest marks first so UTF-32 LE is not mistaken for UTF-16 LE
BOMS = [
    (b'\xff\xfe\x00\x00', 'utf-32-le'),
    (b'\x00\x00\xfe\xff', 'utf-32-be'),
    (b'\xef\xbb\xbf', 'utf-8-sig'),
    (b'\xff\xfe', 'utf-16-le'),
    (b'\xfe\xff', 'utf-16-be'),
]

logger = logging.getLogger(__name__)


class EncodingDetector:
    """Turns metadata bytes into text."""

    def __init__(self, fallback_encodings: Optional[List[str]] = None):
        self.encodings = fallback_encodings or DEFAULT_ENCODINGS

    def decode(self, content: bytes) -> Tuple[str, str]:
        """
        Decode metadata bytes.

        Returns:
            Tuple of (text, encoding_used). Any BOM is removed from the text.

        Raises:
            UnicodeError: If neither the BOM nor any fallback encoding fits.
        """
        candidates = list(self.encodings)
        bom_encoding = self.detect_bom(content)
        if bom_encoding:
            candidates.insert(0, bom_encoding)

        for encoding in candidates:
            try:
                text = content.decode(encoding)
            except UnicodeDecodeError:
                continue
            except LookupError:
                logger.warning(f"Skipping unknown encoding {encoding!r}")
                continue
            return text.lstrip('\ufeff'), encoding

        raise UnicodeError(f"no encoding out of {', '.join(candidates)} fits")

    @staticmethod
    def detect_bom(content: bytes) -> Optional[str]:
        """Return the encoding named by a leading byte order mark, if any."""
        for bom, encoding in BOMS:
            if content.startswith(bom):
                return encoding
        return None
