"""
HELPERS FOR OPTIONAL VALUES
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence


# NOTE: an optional value is written as `T | None` throughout.
# None means "no value", so these helpers cannot wrap None itself
# as a present value.


def first_index[T](items: Sequence[T], element: T) -> int | None:
    """
    Returns the index of the first item equal to element,
    otherwise returns None instead of a sentinel like -1.
    """
    for i, item in enumerate(items):
        if item == element:
            return i
    return None


def guarded[T](items: Sequence[T], index: int) -> T | None:
    """
    Returns the item at index, or None if the index is out of range.
    Negative indices count as out of range.
    """
    if 0 <= index < len(items):
        return items[index]
    return None


def map_optional[T, U](value: T | None, transform: Callable[[T], U]) -> U | None:
    """Applies transform to a present value. None stays None."""
    if value is None:
        return None
    return transform(value)


def flat_map_optional[T, U](
    value: T | None, transform: Callable[[T], U | None]
) -> U | None:
    """
    Like map_optional, but transform may itself return None.
    The result is never a nested optional.
    """
    if value is None:
        return None
    return transform(value)


def chain[T](value: T | None, *steps: Callable[[T], T | None]) -> T | None:
    """
    Applies each step in order, stopping at the first None.
    chain(10, half, half, half) == 1
    """
    for step in steps:
        if value is None:
            return None
        value = step(value)
    return value


def coalesce[T](*values: T | None, default: T | None = None) -> T | None:
    """Returns the first value that is not None, otherwise default."""
    for value in values:
        if value is not None:
            return value
    return default


def compact[T](items: Iterable[T | None]) -> list[T]:
    """Drops the None entries, keeping the order of the rest."""
    return [item for item in items if item is not None]


def compact_map[T, U](items: Iterable[T], transform: Callable[[T], U | None]) -> list[U]:
    """Maps every item, then drops the None results."""
    return compact(transform(item) for item in items)


def file_extension(name: str) -> str | None:
    """Returns the text after the last '.', or None if there is no '.'."""
    period = name.rfind(".")
    if period == -1:
        return None
    return name[period + 1 :]


def half(number: int) -> int | None:
    """Returns half of number truncated toward zero, or None for -1, 0 and 1."""
    if -1 <= number <= 1:
        return None
    quotient = abs(number) // 2
    return quotient if number > 0 else -quotient
