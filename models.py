from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Optional


class QueueKind(Enum):
    ARRAY = "ARRAY"
    STACK_PAIR = "STACK_PAIR"


class OpType(Enum):
    ENQUEUE = "ENQUEUE"
    DEQUEUE = "DEQUEUE"
    PEEK = "PEEK"


@dataclass
class StepRecord:
    """
    Playground の1操作分の記録（両方の Queue に同じ操作を適用した結果）
    """
    step: int
    op: OpType
    argument: Optional[str]
    array_result: Any           # enqueue は bool、dequeue/peek は値 or None
    stack_pair_result: Any
    array_empty: bool
    stack_pair_empty: bool
    transferred: int = 0        # この操作で incoming -> outgoing に移動した数

    @property
    def matches(self) -> bool:
        return (
            self.array_result == self.stack_pair_result
            and self.array_empty == self.stack_pair_empty
        )

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["op"] = self.op.value
        d["matches"] = self.matches
        return d
