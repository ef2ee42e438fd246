"""
Lexical path normalization.

Simplifies a path using only its text: redundant separators and "." segments
disappear and ".." cancels the named segment before it. The file system is
never consulted, so symlinks are not followed and the result need not exist.
"""

import logging
from pathlib import PurePath
from typing import List, Optional, Sequence, TypeVar

from ..exceptions import InvariantViolation
from .components import (
    CUR_DIR,
    ComponentClassifier,
    ComponentKind,
    PathComponent,
    PathInput,
    resolve_flavour,
)

logger = logging.getLogger(__name__)

P = TypeVar('P', str, PurePath)


class PathNormalizer:
    """Stack-based lexical normalizer for a single path flavour."""

    def __init__(self, flavour: Optional[str] = None):
        """
        Initialize the normalizer.

        Args:
            flavour: 'posix', 'windows' or 'native'. Pure path inputs
                     override it with their own flavour.
        """
        self.flavour = flavour
        self.classifier = ComponentClassifier(flavour)

    def normalize(self, path: P) -> P:
        """
        Normalize a path lexically.

        Args:
            path: A string, os.PathLike or pure path.

        Returns:
            The normalized path, of the same type as the input. Never empty:
            a path that reduces to nothing becomes ".".
        """
        pure_cls = resolve_flavour(self.flavour, path)
        stack = self.reduce(self.classifier.classify(path))
        result = self.assemble(stack, pure_cls)

        logger.debug(f"Normalized {path!s} -> {result}")

        if isinstance(path, PurePath):
            return type(path)(result)
        return result

    @classmethod
    def reduce(cls, components: Sequence[PathComponent]) -> List[PathComponent]:
        """
        Reduce classified components to the retained ones.

        Args:
            components: Components in path order.

        Returns:
            The normalization stack after a single left-to-right pass.
        """
        stack: List[PathComponent] = []
        for component in components:
            if component.kind is ComponentKind.CUR_DIR:
                continue
            if component.kind is ComponentKind.PARENT_DIR:
                cls.resolve_parent(stack, component)
            else:
                stack.append(component)
        return stack

    @staticmethod
    def resolve_parent(stack: List[PathComponent], component: PathComponent) -> None:
        """Apply a PARENT_DIR component to the stack in place."""
        if not stack:
            # Leading ".." of a relative path is kept
            stack.append(component)
            return

        top = stack[-1].kind
        if top is ComponentKind.PREFIX:
            stack.append(component)
        elif top is ComponentKind.ROOT_DIR:
            # The parent of the root is the root
            pass
        elif top is ComponentKind.CUR_DIR:
            raise InvariantViolation("CUR_DIR component found on the normalization stack")
        elif top is ComponentKind.PARENT_DIR:
            stack.append(component)
        elif top is ComponentKind.NORMAL:
            stack.pop()
        else:
            raise InvariantViolation(f"Unhandled component kind: {top!r}")

    @staticmethod
    def assemble(stack: Sequence[PathComponent], pure_cls=PurePath) -> str:
        """
        Join retained components back into a path string.

        Args:
            stack: Components as left by reduce().
            pure_cls: Pure path class providing the join convention.

        Returns:
            The joined path, or "." for an empty stack.
        """
        if not stack:
            return CUR_DIR

        anchor = ''.join(
            c.text for c in stack
            if c.kind in (ComponentKind.PREFIX, ComponentKind.ROOT_DIR)
        )
        names = [
            c.text for c in stack
            if c.kind not in (ComponentKind.PREFIX, ComponentKind.ROOT_DIR)
        ]
        return str(pure_cls(anchor, *names))


def normalize(path: P, flavour: Optional[str] = None) -> P:
    """Normalize a path lexically; see PathNormalizer.normalize."""
    return PathNormalizer(flavour).normalize(path)
