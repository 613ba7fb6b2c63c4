"""
A generic stack backed by a Python list.

Time Complexity:
Push/Pop/Peek: O(1) amortized
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..core.errors import EmptyStackError, StackOverflowError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)


class Stack[T]:
    """
    Stack implements a last-in, first-out container of items of type T.

    If max_size is given, pushing onto a full stack raises StackOverflowError.
    """

    __slots__ = ("_items", "_max_size")

    def __init__(self, items: Iterable[T] = (), max_size: int | None = None) -> None:
        if max_size is not None and max_size < 0:
            raise ValueError(f"max_size must be non-negative, got {max_size}")
        self._items: list[T] = []
        self._max_size = max_size
        for item in items:
            self.push(item)

    @property
    def max_size(self) -> int | None:
        return self._max_size

    def push(self, item: T) -> None:
        if self._max_size is not None and len(self._items) >= self._max_size:
            logger.debug(f"Rejected push onto full stack (max_size={self._max_size})")
            raise StackOverflowError(f"Stack is full ({self._max_size} items)")
        self._items.append(item)

    def pop(self) -> T:
        if not self._items:
            raise EmptyStackError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> T:
        if not self._items:
            raise EmptyStackError("peek at empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return reversed(self._items)

    def __repr__(self) -> str:
        # bottom to top, top on the right
        return f"Stack({self._items!r})"
