"""Node building blocks for a red-black tree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Color(IntEnum):
    """Colour of a red-black tree node."""

    BLACK = 0
    RED = 1

    @property
    def opposite(self) -> Color:
        return Color.RED if self is Color.BLACK else Color.BLACK


@dataclass(eq=False)
class RBNode:
    """A red-black tree node with parent link and cached height."""

    value: int
    left: RBNode | None = None
    right: RBNode | None = None
    parent: RBNode | None = None
    height: int = 0
    color: Color = Color.RED

    def flip_colors(self) -> None:
        """Invert the colour of this node and of each child it has."""
        self.color = self.color.opposite
        for child in (self.left, self.right):
            if child is not None:
                child.color = child.color.opposite


def node_color(node: RBNode | None) -> Color:
    """Colour of ``node``; missing nodes count as black."""
    return Color.BLACK if node is None else node.color


def node_height(node: RBNode | None) -> int:
    """Height of ``node``, or -1 for a missing node."""
    return -1 if node is None else node.height