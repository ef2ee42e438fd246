"""
Core data models for metapath.

This module contains the configuration object and the data structures
produced by the metadata readers.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Literal, Optional, Union
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


Flavour = Literal['posix', 'windows', 'native']

# A metadata value is a string, null, a sequence or a mapping of further values
MetaValue = Union[None, str, List['MetaValue'], Dict[str, 'MetaValue']]

# A single metadata record: field name -> value
Metadata = Dict[str, MetaValue]

# Normalized path -> metadata record
PathMetaListing = Dict[str, Metadata]


class MetaTarget(str, Enum):
    """What a metadata document describes."""
    CONTAINS = "contains"   # the directory holding the document
    SIBLINGS = "siblings"   # items next to the document, keyed by path


@dataclass
class Config:
    """Configuration settings for metapath."""

    flavour: Flavour = field(default_factory=lambda: os.getenv('METAPATH_FLAVOUR', 'native'))
    max_file_size: int = field(
        default_factory=lambda: int(os.getenv('METAPATH_MAX_FILE_SIZE', str(1024 * 1024)))
    )

    # Encoding fallbacks for metadata files
    encoding_fallbacks: List[str] = field(default_factory=lambda: [
        'utf-8', 'utf-8-sig', 'latin-1', 'cp1252'
    ])

    # Conventional metadata file names
    self_meta_file_name: str = 'taggu_self.yml'
    item_meta_file_name: str = 'taggu_item.yml'

    def __post_init__(self):
        """Validate values that may come from the environment."""
        if self.flavour not in ('posix', 'windows', 'native'):
            raise ValueError(f"Unknown path flavour: {self.flavour!r}")
        if self.max_file_size <= 0:
            raise ValueError("max_file_size must be positive")

    def target_for_file(self, file_name: str) -> Optional[MetaTarget]:
        """
        Map a metadata file name to the target it describes.

        Args:
            file_name: Base name of the file (not full path).

        Returns:
            The matching MetaTarget, or None for unrecognised names.
        """
        if file_name == self.self_meta_file_name:
            return MetaTarget.CONTAINS
        if file_name == self.item_meta_file_name:
            return MetaTarget.SIBLINGS
        return None
