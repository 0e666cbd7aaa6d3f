"""
Lazy Sierpinski subdivision tree.

The tree is a cache that lives across frames. A node grows its four
children the first time its side exceeds the leaf threshold and drops
its whole subtree as soon as the side falls back to or below it.
"""
from __future__ import annotations

import logging
import weakref
from typing import TYPE_CHECKING, Iterator, Optional, Sequence

import numpy as np

from tetrix.model.pyramid import Pyramid
from tetrix.model.vector import as_point

if TYPE_CHECKING:
    import numpy.typing as npt
    from tetrix.model.surface import DrawingSurface

logger = logging.getLogger(__name__)

N_CHILDREN = 4


class TreeNode:
    """
    One node of the subdivision tree. Holds either no children (leaf) or
    exactly four.
    """
    def __init__(self, tree: Tree, parent: Optional[TreeNode] = None) -> None:
        self.tree = tree
        self._parent = weakref.ref(parent) if parent is not None else None
        self.depth: int = parent.depth + 1 if parent is not None else 0
        self.children: list[TreeNode] = []

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(depth={self.depth}, children={len(self.children)})"

    @property
    def parent(self) -> Optional[TreeNode]:
        return self._parent() if self._parent is not None else None

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def draw(
        self,
        surface: DrawingSurface,
        side: float,
        pyramid_centre: Sequence[float] | npt.NDArray[np.float64],
        rotation_centre: Sequence[float] | npt.NDArray[np.float64],
        rotation: Sequence[float] | npt.NDArray[np.float64],
    ) -> int:
        """
        Draw this node's region of the fractal.

        Returns:
            Number of leaf pyramids rasterized.
        """
        if side > self.tree.min_side:
            half = side / 2
            sub_centres = Pyramid(half, pyramid_centre).centres()
            self.reproduce()
            return sum(
                child.draw(surface, half, centre, rotation_centre, rotation)
                for child, centre in zip(self.children, sub_centres)
            )

        self.remove_children()
        (Pyramid(side, pyramid_centre)
            .move_centre_to(rotation_centre)
            .rotate(rotation)
            .rasterize(surface, self.tree.colour))
        return 1

    def reproduce(self) -> None:
        """Materialize the four children unless they already exist."""
        if not self.children:
            self.children = [TreeNode(self.tree, parent=self) for _ in range(N_CHILDREN)]

    def remove_children(self) -> None:
        """Collapse the whole subtree below this node."""
        for child in self.children:
            child.remove_children()
        self.children = []

    def iter_nodes(self) -> Iterator[TreeNode]:
        """Depth-first walk over this node and all its descendants."""
        yield self
        for child in self.children:
            yield from child.iter_nodes()

    def height(self) -> int:
        """Number of levels below this node."""
        if not self.children:
            return 0
        return 1 + max(child.height() for child in self.children)

    def leaf_count(self) -> int:
        return sum(1 for node in self.iter_nodes() if node.is_leaf)


class Tree:
    """
    Owns the root node, the accumulated rotation and the fill colour of one
    camera's fractal.
    """
    def __init__(
        self,
        colour: str,
        min_side: float,
        initial_rotation: Sequence[float] = (0.0, 0.0, 0.0),
    ) -> None:
        self.colour = colour
        self.min_side = min_side
        self.rotation: npt.NDArray[np.float64] = as_point(initial_rotation)
        self.root = TreeNode(self)
        self.last_leaf_count: int = 0

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(colour={self.colour!r}, min_side={self.min_side}, "
                f"rotation={self.rotation.tolist()})")

    def draw(
        self,
        surface: DrawingSurface,
        side: float,
        pyramid_centre: Sequence[float] | npt.NDArray[np.float64],
        delta_rotation: Sequence[float] | npt.NDArray[np.float64],
    ) -> int:
        """
        Add `delta_rotation` to the accumulated angles and redraw the whole
        fractal from its unrotated pose with the total rotation.

        The pivot is always `pyramid_centre`, whatever the recursion depth.
        """
        self.rotation += as_point(delta_rotation)
        centre = as_point(pyramid_centre)
        self.last_leaf_count = self.root.draw(surface, side, centre, centre, self.rotation)
        logger.debug(f"Drew {self.last_leaf_count} leaf pyramids, rotation={self.rotation.tolist()}")
        return self.last_leaf_count
