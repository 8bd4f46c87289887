"""Sorting algorithms, a linked list, an AVL tree, red-black nodes and ticket registries."""

__version__ = "0.1.0"

__all__ = ["avl", "box_office", "events", "linked", "redblack", "sorting"]