from __future__ import annotations

from typing import Generic, Optional, TypeVar, List

T = TypeVar("T")


class StackPairQueue(Generic[T]):
    """
    2本の list をスタックとして使う Queue（FIFO）
    enqueue: O(1) amortized
    dequeue: O(1) amortized

    - incoming: enqueue された要素（末尾が最新）
    - outgoing: 取り出し待ちの要素（末尾が先頭）

    outgoing が空の時だけ incoming を丸ごと移す（順序が反転する）。
    各要素が移動するのは生涯で1回だけなので、n 回の操作で移動は合計 n 回以下。
    """

    def __init__(self) -> None:
        self._incoming: List[T] = []
        self._outgoing: List[T] = []
        self._transfers: int = 0

    def enqueue(self, element: T) -> bool:
        self._incoming.append(element)
        return True

    def dequeue(self) -> Optional[T]:
        self._refill()
        if not self._outgoing:
            return None
        return self._outgoing.pop()

    def peek(self) -> Optional[T]:
        self._refill()
        if not self._outgoing:
            return None
        return self._outgoing[-1]

    def size(self) -> int:
        return len(self._incoming) + len(self._outgoing)

    def is_empty(self) -> bool:
        return not self._incoming and not self._outgoing

    @property
    def transfers(self) -> int:
        """incoming から outgoing へ移動した要素数の累計"""
        return self._transfers

    def incoming_items(self) -> List[T]:
        return list(self._incoming)

    def outgoing_items(self) -> List[T]:
        return list(self._outgoing)

    def items(self) -> List[T]:
        """
        先頭から末尾の順（outgoing を反転 + incoming）
        """
        return self._outgoing[::-1] + self._incoming

    # -------------------------
    # 内部
    # -------------------------
    def _refill(self) -> None:
        if self._outgoing:
            return
        self._outgoing.extend(reversed(self._incoming))
        self._transfers += len(self._incoming)
        self._incoming.clear()
