"""A fixed-size tree in which every slot records the index of its parent."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class _Slot:
    data: int
    parent: int | None


class ParentPointerTree:
    """Array-backed tree; a slot with parent ``None`` is a root."""

    def __init__(self, size: int = 10) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._slots: list[_Slot | None] = [None] * size

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._slots):
            raise IndexError(f"index {index} out of range")

    def insert(self, data: int, index: int, parent: int | None = None) -> None:
        """Store ``data`` at ``index`` with the given parent index (``None`` for a root)."""
        self._check(index)
        if parent is not None:
            self._check(parent)
        self._slots[index] = _Slot(data, parent)

    def path_from_root(self, index: int) -> list[int]:
        """Values from just below the root down to ``index``.

        The root's own value is not part of the path; the walk also stops at
        an empty slot.
        """
        path: list[int] = []
        seen: set[int] = set()
        current = index
        while True:
            self._check(current)
            slot = self._slots[current]
            if slot is None or slot.parent is None:
                break
            if current in seen:
                raise ValueError("parent links form a cycle")
            seen.add(current)
            path.append(slot.data)
            current = slot.parent
        path.reverse()
        return path