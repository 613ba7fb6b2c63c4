"""Exception hierarchy for generic containers.

Defines all custom exceptions used throughout the implementation.
"""

from __future__ import annotations


class ContainerError(Exception):
    """Base exception for all container errors."""
    pass


class TreeShapeError(ContainerError):
    """Raised when a tree is built from something that is not a tree."""
    pass


class TreeLoadError(ContainerError):
    """Raised when a tree file cannot be read or parsed."""
    pass


class EmptyStackError(ContainerError, IndexError):
    """Raised when popping or peeking an empty stack."""
    pass


class StackOverflowError(ContainerError):
    """Raised when pushing onto a stack that is at its max size."""
    pass
