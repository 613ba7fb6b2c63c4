"""
Load a tree file (TOML) into a BinaryTree and its display options.

A tree file holds the root node in a [tree] table, children nested as
[tree.left], [tree.right], [tree.left.left] and so on, plus an optional
[options] table read into PlaygroundConfig.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import tomllib  # Python 3.11+

from ..components.tree import BinaryTree
from .config import PlaygroundConfig
from .errors import TreeLoadError

logger = logging.getLogger(__name__)


def load_toml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise TreeLoadError(f"Input file not found: {path}")
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TreeLoadError(f"Cannot read {path}: {e}") from e
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as e:
        raise TreeLoadError(f"Invalid TOML in {path}: {e}") from e
    return data


def load_tree(path: Path) -> tuple[BinaryTree[Any], PlaygroundConfig]:
    """Returns the tree and options stored in the file at path.

    A file without a [tree] table yields an empty tree.
    """
    data = load_toml(path)
    options = data.get("options", {})
    if not isinstance(options, dict):
        raise TreeLoadError(f"'options' in {path} must be a table, got {type(options).__name__}")
    tree = BinaryTree.from_nested(data.get("tree"))
    config = PlaygroundConfig.from_dict(options)
    logger.debug(f"Loaded tree with {tree.size()} nodes from {path}")
    return tree, config
