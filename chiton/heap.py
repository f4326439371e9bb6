from typing import Dict, Hashable, List, Tuple


class IndexedMinHeap:
    """
    Binary min-heap of (priority, item) entries with a position index, so an
    item's priority can be lowered in place in O(log n).
    Each item appears at most once.
    """

    def __init__(self):
        self._heap: List[Tuple[int, Hashable]] = []
        self._pos: Dict[Hashable, int] = {}

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, item: Hashable) -> bool:
        return item in self._pos

    def priority(self, item: Hashable) -> int:
        return self._heap[self._pos[item]][0]

    def push(self, item: Hashable, priority: int):
        if item in self._pos:
            raise ValueError(f"{item!r} is already queued")
        self._heap.append((priority, item))
        self._pos[item] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)

    def pop(self) -> Tuple[Hashable, int]:
        """Remove and return the (item, priority) pair with the lowest priority."""
        if not self._heap:
            raise IndexError("pop from empty heap")
        priority, item = self._heap[0]
        last = self._heap.pop()
        del self._pos[item]
        if self._heap:
            self._heap[0] = last
            self._pos[last[1]] = 0
            self._sift_down(0)
        return item, priority

    def decrease_key(self, item: Hashable, priority: int):
        i = self._pos[item]  # KeyError if not queued
        if priority > self._heap[i][0]:
            raise ValueError(f"cannot raise priority of {item!r} from {self._heap[i][0]} to {priority}")
        self._heap[i] = (priority, item)
        self._sift_up(i)

    # ------------------------------
    # sifting
    # ------------------------------
    def _swap(self, i: int, j: int):
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._pos[heap[i][1]] = i
        self._pos[heap[j][1]] = j

    def _sift_up(self, i: int):
        while i > 0:
            parent = (i - 1) // 2
            if self._heap[parent][0] <= self._heap[i][0]:
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int):
        n = len(self._heap)
        while True:
            smallest = i
            left, right = 2 * i + 1, 2 * i + 2
            if left < n and self._heap[left][0] < self._heap[smallest][0]:
                smallest = left
            if right < n and self._heap[right][0] < self._heap[smallest][0]:
                smallest = right
            if smallest == i:
                return
            self._swap(i, smallest)
            i = smallest
