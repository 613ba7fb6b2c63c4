"""Core definitions shared by all containers."""

from .config import PlaygroundConfig
from .errors import (
    ContainerError,
    EmptyStackError,
    StackOverflowError,
    TreeLoadError,
    TreeShapeError,
)

__all__ = [
    "PlaygroundConfig",
    "ContainerError",
    "EmptyStackError",
    "StackOverflowError",
    "TreeLoadError",
    "TreeShapeError",
]
