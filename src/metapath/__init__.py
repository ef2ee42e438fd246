"""Lexical path normalization and path-keyed metadata reading."""

from .core import (
    ComponentClassifier,
    ComponentKind,
    Config,
    MetaTarget,
    PathComponent,
    PathNormalizer,
    normalize,
    split_components,
)
from .exceptions import InvariantViolation, MetaParseError, MetaReadError, MetapathError

__version__ = "0.1.0"

__all__ = [
    "ComponentClassifier",
    "ComponentKind",
    "Config",
    "MetaTarget",
    "PathComponent",
    "PathNormalizer",
    "normalize",
    "split_components",
    "InvariantViolation",
    "MetaParseError",
    "MetaReadError",
    "MetapathError",
]
