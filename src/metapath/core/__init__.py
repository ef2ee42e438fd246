"""Core components for metapath."""

from .models import Config, MetaTarget, Metadata, MetaValue, PathMetaListing
from .components import ComponentClassifier, ComponentKind, PathComponent, split_components
from .normalizer import PathNormalizer, normalize

__all__ = [
    "Config",
    "MetaTarget",
    "Metadata",
    "MetaValue",
    "PathMetaListing",
    "ComponentClassifier",
    "ComponentKind",
    "PathComponent",
    "split_components",
    "PathNormalizer",
    "normalize",
]
