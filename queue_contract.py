from __future__ import annotations

from typing import Optional, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Queue(Protocol[T]):
    """
    Queue（FIFO）の共通インターフェース
    ArrayQueue / StackPairQueue のどちらも満たす（継承はしない）

    ※ 空の時 dequeue/peek は例外ではなく None を返す。
      None 自体を要素として入れる場合は is_empty() で確認すること。
    """

    def enqueue(self, element: T) -> bool: ...

    def dequeue(self) -> Optional[T]: ...

    def peek(self) -> Optional[T]: ...

    def is_empty(self) -> bool: ...

    def size(self) -> int: ...
