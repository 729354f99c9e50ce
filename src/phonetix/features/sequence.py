"""Bounds-checked positional access shared by tones and syllables."""

from __future__ import annotations

from phonetix.errors import IndexOutOfRange


def resolve_index(index: int, length: int) -> int:
    """Map a possibly negative index onto ``0..length-1``.

    Raises:
        IndexOutOfRange: If ``index`` addresses no element.
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"Indices must be integers, not {type(index).__name__}")
    resolved = index + length if index < 0 else index
    if not 0 <= resolved < length:
        raise IndexOutOfRange(f"Index {index} out of range for length {length}")
    return resolved


def resolve_insertion(position: int, length: int) -> int:
    """Map an insertion position onto ``0..length``.

    Non-negative positions insert before the element at that index, or
    append when equal to ``length``. Negative positions count from the
    end, so ``-1`` appends and ``-(length + 1)`` prepends.

    Raises:
        IndexOutOfRange: If ``position`` is outside ``-(length+1)..length``.
    """
    if isinstance(position, bool) or not isinstance(position, int):
        raise TypeError(f"Positions must be integers, not {type(position).__name__}")
    resolved = position + length + 1 if position < 0 else position
    if not 0 <= resolved <= length:
        raise IndexOutOfRange(
            f"Insertion position {position} out of range for length {length}"
        )
    return resolved
