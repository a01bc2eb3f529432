"""Helper operations for ordered playlist sequences."""

from __future__ import annotations

from typing import List, TypeVar

T = TypeVar("T")


def relocate(items: List[T], from_index: int, to_index: int) -> None:
    """Move the element at ``from_index`` so it ends up at ``to_index``.

    Elements between the two positions shift by one towards ``from_index``.
    Indices are not validated here; an out-of-range ``from_index`` raises
    ``IndexError`` from the underlying list.
    """

    if from_index == to_index:
        return
    item = items.pop(from_index)
    items.insert(to_index, item)


def check_index(index: int, size: int, *, allow_end: bool = False) -> int:
    """Return ``index`` when it addresses ``size`` elements, else raise ``ValueError``.

    With ``allow_end`` the one-past-the-end position is accepted, which is
    what insertion needs.
    """

    if isinstance(index, bool) or not isinstance(index, int):
        raise ValueError(f"Index must be an integer, got {index!r}")
    upper = size if allow_end else size - 1
    if index < 0 or index > upper:
        raise ValueError("Index out of range")
    return index
