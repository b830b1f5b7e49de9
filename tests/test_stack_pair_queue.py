import random

from stack_pair_queue import StackPairQueue


def test_transfer_happens_only_when_outgoing_is_empty():
    q = StackPairQueue()
    q.enqueue("A")
    q.enqueue("B")
    assert q.incoming_items() == ["A", "B"]
    assert q.outgoing_items() == []
    assert q.transfers == 0

    # peek moves the block, reversing it (A ends up on top)
    assert q.peek() == "A"
    assert q.incoming_items() == []
    assert q.outgoing_items() == ["B", "A"]
    assert q.transfers == 2

    # no second transfer
    assert q.peek() == "A"
    assert q.transfers == 2

    assert q.dequeue() == "A"
    assert q.outgoing_items() == ["B"]

    q.enqueue("C")
    assert q.incoming_items() == ["C"]

    assert q.dequeue() == "B"
    assert q.outgoing_items() == []
    assert q.incoming_items() == ["C"]
    assert q.transfers == 2

    assert q.dequeue() == "C"
    assert q.transfers == 3
    assert q.is_empty()


def test_items_is_outgoing_reversed_then_incoming():
    q = StackPairQueue()
    for x in [1, 2, 3]:
        q.enqueue(x)
    q.dequeue()
    q.enqueue(4)
    q.enqueue(5)
    assert q.outgoing_items() == [3, 2]
    assert q.incoming_items() == [4, 5]
    assert q.items() == [2, 3, 4, 5]
    assert q.size() == 4


def test_peek_on_empty_does_not_transfer():
    q = StackPairQueue()
    assert q.peek() is None
    assert q.dequeue() is None
    assert q.transfers == 0


def test_transfers_bounded_by_operation_count():
    rng = random.Random(1234)
    q = StackPairQueue()
    calls = 0
    for _ in range(5000):
        r = rng.random()
        if r < 0.5:
            q.enqueue(rng.randint(0, 100))
            calls += 1
        elif r < 0.85:
            q.dequeue()
            calls += 1
        else:
            q.peek()
        assert q.transfers <= calls


def test_each_element_moves_once():
    q = StackPairQueue()
    n = 300
    for i in range(n):
        q.enqueue(i)
        if i % 3 == 0:
            q.dequeue()
    while not q.is_empty():
        q.dequeue()
    assert q.transfers == n


def test_block_transfer_keeps_none_elements():
    q = StackPairQueue()
    q.enqueue(None)
    q.enqueue("x")
    q.enqueue(None)
    assert q.peek() is None
    assert q.outgoing_items() == [None, "x", None]
    assert q.incoming_items() == []
    assert q.transfers == 3
    assert q.dequeue() is None
    assert q.dequeue() == "x"
    assert q.dequeue() is None
    assert q.is_empty()


def test_internal_lists_are_not_exposed():
    q = StackPairQueue()
    q.enqueue(1)
    q.incoming_items().append(2)
    q.items().append(3)
    assert q.size() == 1
    q.peek()
    q.outgoing_items().clear()
    assert q.dequeue() == 1
