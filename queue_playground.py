from __future__ import annotations

import logging
from typing import Any, Optional

from array_queue import ArrayQueue
from models import OpType, QueueKind, StepRecord
from queue_contract import Queue
from stack_pair_queue import StackPairQueue

logger = logging.getLogger(__name__)


def make_queue(kind: QueueKind) -> Queue:
    """
    呼び出し側が生成時に実装を選ぶ
    """
    if kind == QueueKind.ARRAY:
        return ArrayQueue()
    if kind == QueueKind.STACK_PAIR:
        return StackPairQueue()
    raise ValueError(f"unknown queue kind: {kind!r}")


class QueuePlayground:
    """
    2つの Queue 実装を同じ操作で並行に動かす

    - ArrayQueue: list 1本（dequeue O(n)）
    - StackPairQueue: list 2本をスタックとして使う（dequeue O(1) amortized）

    各操作の戻り値と is_empty() を StepRecord として記録し、食い違いを検出する。
    """

    def __init__(self) -> None:
        self.array_queue: ArrayQueue[str] = make_queue(QueueKind.ARRAY)
        self.stack_pair_queue: StackPairQueue[str] = make_queue(QueueKind.STACK_PAIR)
        self._history: list[StepRecord] = []

    # -------------------------
    # 初期化
    # -------------------------
    def reset(self) -> None:
        self.array_queue = make_queue(QueueKind.ARRAY)
        self.stack_pair_queue = make_queue(QueueKind.STACK_PAIR)
        self._history = []
        logger.info("playground reset")

    # -------------------------
    # 操作
    # -------------------------
    def enqueue(self, value: str) -> StepRecord:
        return self._apply(OpType.ENQUEUE, value, lambda q: q.enqueue(value))

    def dequeue(self) -> StepRecord:
        return self._apply(OpType.DEQUEUE, None, lambda q: q.dequeue())

    def peek(self) -> StepRecord:
        return self._apply(OpType.PEEK, None, lambda q: q.peek())

    # -------------------------
    # 表示用
    # -------------------------
    def history(self) -> list[StepRecord]:
        return list(self._history)

    def mismatches(self) -> list[StepRecord]:
        return [r for r in self._history if not r.matches]

    def size(self) -> int:
        return self.array_queue.size()

    def snapshot(self) -> dict[str, Any]:
        spq = self.stack_pair_queue
        return {
            "size": self.size(),
            "steps": len(self._history),
            "array": self.array_queue.items(),
            "stack_pair": {
                "items": spq.items(),
                "incoming": spq.incoming_items(),
                "outgoing": spq.outgoing_items(),
                "transfers": spq.transfers,
            },
        }

    # -------------------------
    # 内部
    # -------------------------
    def _apply(self, op: OpType, argument: Optional[str], action) -> StepRecord:
        before = self.stack_pair_queue.transfers

        array_result = action(self.array_queue)
        stack_pair_result = action(self.stack_pair_queue)

        record = StepRecord(
            step=len(self._history) + 1,
            op=op,
            argument=argument,
            array_result=array_result,
            stack_pair_result=stack_pair_result,
            array_empty=self.array_queue.is_empty(),
            stack_pair_empty=self.stack_pair_queue.is_empty(),
            transferred=self.stack_pair_queue.transfers - before,
        )
        self._history.append(record)

        if record.matches:
            logger.info(
                "step %d %s(%r) -> %r (transferred=%d)",
                record.step, op.value, argument, array_result, record.transferred,
            )
        else:
            logger.warning(
                "step %d %s(%r) diverged: array=%r stack_pair=%r",
                record.step, op.value, argument, array_result, stack_pair_result,
            )
        return record
