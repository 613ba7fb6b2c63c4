"""Protocol definition for Stack."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterator


class SupportsStack[T](Protocol):
    """Last-in, first-out container."""

    def push(self, item: T) -> None:
        """Place item on top of the stack."""
        ...

    def pop(self) -> T:
        """Remove and return the top item.

        Raises EmptyStackError if the stack is empty.
        """
        ...

    def peek(self) -> T:
        """Return the top item without removing it."""
        ...

    def is_empty(self) -> bool:
        """Return True if the stack holds no items."""
        ...

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[T]:
        """Iterate items from top to bottom."""
        ...
