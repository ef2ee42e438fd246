"""
Path component classification.

Splits a raw path into an ordered sequence of typed components. Redundant
separators and interior "." segments are folded by pathlib before
classification, so the only CUR_DIR ever reported is a single leading "."
of a relative path.
"""

import os
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import List, Optional, Type, Union

PathInput = Union[str, os.PathLike]

CUR_DIR = '.'
PARENT_DIR = '..'

_FLAVOURS = {
    'posix': PurePosixPath,
    'windows': PureWindowsPath,
    'native': PureWindowsPath if os.name == 'nt' else PurePosixPath,
}

_SEPARATORS = {
    PurePosixPath: re.compile(r'/'),
    PureWindowsPath: re.compile(r'[\\/]'),
}

_ROOT_SEPARATOR = {
    PurePosixPath: '/',
    PureWindowsPath: '\\',
}


class ComponentKind(Enum):
    """The five kinds of path component."""
    PREFIX = "prefix"
    ROOT_DIR = "root_dir"
    CUR_DIR = "cur_dir"
    PARENT_DIR = "parent_dir"
    NORMAL = "normal"


@dataclass(frozen=True)
class PathComponent:
    """A classified unit of a path."""

    kind: ComponentKind
    text: str

    def __str__(self) -> str:
        return self.text


def resolve_flavour(flavour: Optional[str] = None, path: Optional[PathInput] = None) -> Type[PurePath]:
    """
    Pick the pure path class used to interpret a path.

    A pure path argument fixes the flavour, otherwise the flavour name is
    looked up ('native' when omitted).
    """
    if isinstance(path, PureWindowsPath):
        return PureWindowsPath
    if isinstance(path, PurePosixPath):
        return PurePosixPath
    try:
        return _FLAVOURS[flavour or 'native']
    except KeyError:
        raise ValueError(f"Unknown path flavour: {flavour!r}") from None


class ComponentClassifier:
    """Decomposes raw paths into PathComponent sequences."""

    def __init__(self, flavour: Optional[str] = None):
        self.flavour = flavour

    def classify(self, path: PathInput) -> List[PathComponent]:
        """
        Classify a path into components.

        Args:
            path: A string, os.PathLike or pure path.

        Returns:
            Components in path order.
        """
        pure_cls = resolve_flavour(self.flavour, path)
        raw = os.fsdecode(os.fspath(path))
        pure = pure_cls(raw)

        components = []
        if pure.drive:
            components.append(PathComponent(ComponentKind.PREFIX, pure.drive))
        if pure.root:
            components.append(PathComponent(ComponentKind.ROOT_DIR, _ROOT_SEPARATOR[pure_cls]))

        segments = pure.parts[1:] if pure.anchor else pure.parts

        # pathlib swallows a leading "."; report it the way a component iterator would
        if not pure.anchor and _SEPARATORS[pure_cls].split(raw, maxsplit=1)[0] == CUR_DIR:
            components.append(PathComponent(ComponentKind.CUR_DIR, CUR_DIR))

        for segment in segments:
            if segment == PARENT_DIR:
                components.append(PathComponent(ComponentKind.PARENT_DIR, PARENT_DIR))
            else:
                components.append(PathComponent(ComponentKind.NORMAL, segment))

        return components


def split_components(path: PathInput, flavour: Optional[str] = None) -> List[PathComponent]:
    """Classify a path with a throwaway ComponentClassifier."""
    return ComponentClassifier(flavour).classify(path)
