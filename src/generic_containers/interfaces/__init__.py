"""Protocols describing the container contracts."""

from .stack import SupportsStack

__all__ = ["SupportsStack"]
