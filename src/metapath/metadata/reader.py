"""
Base metadata reader interface.

A reader turns the text of a metadata document into a mapping of
normalized path to metadata record. Reading from disk is shared by every
format; only parsing differs.
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import Optional, Union

from ..core.models import Config, MetaTarget, PathMetaListing
from ..exceptions import MetaParseError, MetaReadError
from ..utils.encodings import EncodingDetector

logger = logging.getLogger(__name__)


class MetaReader(ABC):
    """
    Abstract base class for metadata readers.

    Subclasses implement from_str(); from_file() wraps it with file I/O
    and keeps read failures apart from parse failures.
    """

    def __init__(self, config: Optional[Config] = None):
        """Initialize reader with configuration."""
        self.config = config or Config()
        self.encoding_detector = EncodingDetector(self.config.encoding_fallbacks)

    @abstractmethod
    def from_str(self, text: str, target: MetaTarget) -> PathMetaListing:
        """
        Parse metadata text.

        Args:
            text: Full document text.
            target: What the document describes.

        Returns:
            Mapping of normalized path to metadata record.

        Raises:
            MetaParseError: If the text cannot be interpreted.
        """
        pass

    def from_file(self, file_path: Union[str, os.PathLike], target: MetaTarget) -> PathMetaListing:
        """
        Read and parse a metadata file.

        Args:
            file_path: Location of the metadata file.
            target: What the document describes.

        Returns:
            Mapping of normalized path to metadata record.

        Raises:
            MetaReadError: If the file cannot be read or decoded.
            MetaParseError: If the contents cannot be interpreted.
        """
        file_path = os.fspath(file_path)
        text = self.read_text(file_path)

        try:
            return self.from_str(text, target)
        except MetaParseError as e:
            logger.info(f"Failed to parse {file_path}: {e}")
            raise MetaParseError(f"unable to parse text: {file_path}") from e

    def read_text(self, file_path: str) -> str:
        """
        Read a file and decode it to text.

        Raises:
            MetaReadError: On any I/O or decoding failure.
        """
        try:
            file_size = os.path.getsize(file_path)
            if file_size > self.config.max_file_size:
                raise MetaReadError(f"File too large ({file_size:,} bytes): {file_path}", file_path)

            with open(file_path, 'rb') as f:
                raw_content = f.read()
        except FileNotFoundError as e:
            raise MetaReadError(f"File not found: {file_path}", file_path) from e
        except PermissionError as e:
            raise MetaReadError(f"Permission denied: {file_path}", file_path) from e
        except OSError as e:
            raise MetaReadError(f"Error reading file {file_path}: {e}", file_path) from e

        try:
            text, encoding = self.encoding_detector.decode(raw_content)
        except UnicodeError as e:
            raise MetaReadError(f"Unable to decode {file_path}: {e}", file_path) from e

        logger.debug(f"Read {file_path} ({len(raw_content)} bytes, {encoding})")
        return text
