"""Array-backed binary min-heap with an item index for in-place priority updates."""

from __future__ import annotations

from itertools import count
from typing import Callable, Dict, Generic, Hashable, List, TypeVar

Item = TypeVar("Item", bound=Hashable)
ScoreFunction = Callable[[Item], float]


class HeapCorruptionError(AssertionError):
    """Raised when the heap array and its item index disagree."""


def _parent(index: int) -> int:
    return (index - 1) // 2


def _left(index: int) -> int:
    return 2 * index + 1


def _right(index: int) -> int:
    return 2 * index + 2


class IndexedMinHeap(Generic[Item]):
    """Priority queue keyed by a live scoring function.

    ``score`` is consulted on every comparison, so an item's priority may
    change while it sits in the heap. After lowering the score of a
    queued item call :meth:`upsert` to move it into place; calling
    :meth:`insert` for an item that is already queued would leave two
    copies behind and break the index.

    With ``stable=True`` equal scores are ordered by insertion sequence,
    otherwise the relative order of ties depends on the heap layout.
    ``check_invariants=True`` validates the whole structure after every
    mutation and is intended for tests and debugging only.
    """

    def __init__(
        self,
        score: ScoreFunction,
        *,
        stable: bool = False,
        check_invariants: bool = False,
    ) -> None:
        self._score = score
        self._items: List[Item] = []
        self._positions: Dict[Item, int] = {}
        self._stable = stable
        self._seqs: List[int] = []
        self._counter = count()
        self._check = check_invariants

    # --------- Public API ---------

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._positions

    def contains(self, item: Item) -> bool:
        """Return ``True`` when ``item`` is currently queued."""

        return item in self._positions

    def insert(self, item: Item) -> None:
        """Append ``item`` and sift it toward the root."""

        self._items.append(item)
        index = len(self._items) - 1
        self._positions[item] = index
        if self._stable:
            self._seqs.append(next(self._counter))
        self._sift_up(index)
        if self._check:
            self.check_invariants()

    def upsert(self, item: Item) -> None:
        """Reposition ``item`` after a score change, or insert it if absent."""

        index = self._positions.get(item)
        if index is None:
            self.insert(item)
            return
        index = self._sift_up(index)
        self._sift_down(index)
        if self._check:
            self.check_invariants()

    def remove_minimum(self) -> Item | None:
        """Remove and return the lowest scored item, or ``None`` when empty."""

        items = self._items
        if not items:
            return None
        if len(items) == 1:
            root = items.pop()
            if self._stable:
                self._seqs.pop()
            self._forget(root, 0)
            return root

        root = items[0]
        self._forget(root, 0)

        # move the last item into the root slot and restore the invariant
        last = items.pop()
        items[0] = last
        self._positions[last] = 0
        if self._stable:
            self._seqs[0] = self._seqs.pop()
        self._sift_down(0)
        if self._check:
            self.check_invariants()
        return root

    def check_invariants(self) -> None:
        """Raise :class:`HeapCorruptionError` if the heap is inconsistent."""

        items = self._items
        if len(self._positions) != len(items):
            raise HeapCorruptionError(
                f"index tracks {len(self._positions)} items but heap holds {len(items)}"
            )
        for index, item in enumerate(items):
            if self._positions.get(item) != index:
                raise HeapCorruptionError(
                    f"{item!r} stored at {index} but indexed at {self._positions.get(item)}"
                )
            for child in (_left(index), _right(index)):
                if child < len(items) and self._less(child, index):
                    raise HeapCorruptionError(
                        f"child {items[child]!r} at {child} scores below parent {item!r}"
                    )

    # --------- Internal helpers ---------

    def _key(self, index: int) -> float | tuple[float, int]:
        item = self._items[index]
        if self._stable:
            return (self._score(item), self._seqs[index])
        return self._score(item)

    def _less(self, first: int, second: int) -> bool:
        return self._key(first) < self._key(second)

    def _forget(self, item: Item, index: int) -> None:
        # a duplicate insert leaves the index pointing at the newest copy
        if self._positions.get(item) == index:
            del self._positions[item]

    def _swap(self, first: int, second: int) -> None:
        items, positions = self._items, self._positions
        first_item = items[first]
        second_item = items[second]
        items[first], items[second] = second_item, first_item
        positions[first_item], positions[second_item] = second, first
        if self._stable:
            seqs = self._seqs
            seqs[first], seqs[second] = seqs[second], seqs[first]

    def _sift_up(self, index: int) -> int:
        while index > 0:
            parent = _parent(index)
            if not self._less(index, parent):
                break
            self._swap(index, parent)
            index = parent
        return index

    def _sift_down(self, index: int) -> int:
        size = len(self._items)
        while True:
            left = _left(index)
            right = _right(index)
            smallest = index
            if left < size and self._less(left, index):
                smallest = left
            if right < size and self._less(right, smallest):
                smallest = right
            if smallest == index:
                return index
            self._swap(index, smallest)
            index = smallest


__all__ = ["HeapCorruptionError", "IndexedMinHeap"]
