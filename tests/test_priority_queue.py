import pytest

from algorithms.priority_queue import PriorityQueue


def test_dequeues_smallest_priority_first():
    q = PriorityQueue()
    q.enqueue("a", 3)
    q.enqueue("b", 1)
    q.enqueue("c", 2)
    assert [q.dequeue(), q.dequeue(), q.dequeue()] == ["b", "c", "a"]
    assert q.is_empty()


def test_ties_come_out_in_insertion_order():
    q = PriorityQueue()
    for item in ("x", "y", "z"):
        q.enqueue(item, 1)
    assert [q.dequeue() for _ in range(3)] == ["x", "y", "z"]


def test_duplicate_items_are_kept():
    q = PriorityQueue()
    q.enqueue("n", 4)
    q.enqueue("n", 2)
    q.enqueue("m", 3)
    assert len(q) == 3
    assert [q.dequeue() for _ in range(3)] == ["n", "m", "n"]


def test_dequeue_empty_raises():
    with pytest.raises(IndexError):
        PriorityQueue().dequeue()
