"""Metadata readers for metapath."""

from .reader import MetaReader
from .yaml_reader import YamlMetaReader, to_meta_value

__all__ = ["MetaReader", "YamlMetaReader", "to_meta_value"]
