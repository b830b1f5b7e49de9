from __future__ import annotations

from typing import Generic, Optional, TypeVar, List

T = TypeVar("T")


class ArrayQueue(Generic[T]):
    """
    単一の list で実装した Queue（FIFO）
    enqueue: O(1) amortized
    dequeue: O(n)  （残りの要素を1つずつ前に詰める）

    StackPairQueue との比較用のベースライン（要素数が少ない時だけ向く）
    """

    def __init__(self) -> None:
        self._storage: List[T] = []

    def enqueue(self, element: T) -> bool:
        self._storage.append(element)
        return True

    def dequeue(self) -> Optional[T]:
        if not self._storage:
            return None
        return self._storage.pop(0)

    def peek(self) -> Optional[T]:
        return self._storage[0] if self._storage else None

    def size(self) -> int:
        return len(self._storage)

    def is_empty(self) -> bool:
        return self.size() == 0

    def items(self) -> List[T]:
        return list(self._storage)
