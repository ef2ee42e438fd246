"""Utility modules for metapath."""

from .encodings import EncodingDetector
from .console import make_console, THEMES

__all__ = ["EncodingDetector", "make_console", "THEMES"]
