"""Configuration for the tree playground CLI.

Defines the options that can be set in the [options] table of a tree file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

ORDERS = ("inorder", "preorder", "postorder")


@dataclass
class PlaygroundConfig:
    """Options controlling how a loaded tree is displayed.

    Attributes:
        order: Traversal used to flatten the tree for output
        render: Whether to print the box drawing of the tree
        log_level: Name of the logging level for the CLI, e.g. "DEBUG"
    """

    order: str = "inorder"
    render: bool = False
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.order not in ORDERS:
            raise ValueError(f"Unknown traversal order {self.order!r}, expected one of {ORDERS}")
        if not isinstance(self.render, bool):
            raise ValueError(f"render must be true or false, got {self.render!r}")
        # getLevelName maps known names to ints and anything else to a string
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level {self.log_level!r}")

    @property
    def level(self) -> int:
        """The numeric logging level for log_level."""
        return logging.getLevelName(self.log_level)

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "PlaygroundConfig":
        return PlaygroundConfig(
            order=d.get("order", "inorder"),
            render=d.get("render", False),
            log_level=str(d.get("log_level", "WARNING")).upper(),
        )
