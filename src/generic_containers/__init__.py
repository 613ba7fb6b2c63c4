"""Generic containers - an immutable binary tree, a stack, and optional-value helpers."""

from .components.stack import Stack
from .components.tree import BinaryTree, Leaf, Node, singleton
from .core.config import PlaygroundConfig
from .core.errors import (
    ContainerError,
    EmptyStackError,
    StackOverflowError,
    TreeLoadError,
    TreeShapeError,
)
from .core.loader import load_tree

__all__ = [
    "Stack",
    "BinaryTree",
    "Leaf",
    "Node",
    "singleton",
    "PlaygroundConfig",
    "ContainerError",
    "EmptyStackError",
    "StackOverflowError",
    "TreeLoadError",
    "TreeShapeError",
    "load_tree",
]
