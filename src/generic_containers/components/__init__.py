"""Container implementations."""

from .stack import Stack
from .tree import BinaryTree, Leaf, Node, singleton

__all__ = ["Stack", "BinaryTree", "Leaf", "Node", "singleton"]
