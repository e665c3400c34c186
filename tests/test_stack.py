import threading

import pytest

from safecontainers.stack import EmptyStackError, Stack


def test_new_stack_is_empty():
    s = Stack()
    assert s.size() == 0
    assert s.empty()


def test_size_with_elements():
    s = Stack()
    s.push(10)
    s.push(20)
    assert s.size() == 2
    assert len(s) == 2
    assert not s.empty()


def test_size_after_push_and_pop():
    s = Stack()
    s.push(10)
    s.pop()
    assert s.size() == 0


def test_push_one():
    s = Stack()
    s.push(10)
    assert s.size() == 1
    assert s.pop() == 10


def test_push_multiple():
    s = Stack()
    for value in (10, 20, 30):
        s.push(value)
    assert s.size() == 3
    assert s.pop() == 30


def test_push_string():
    s = Stack()
    s.push("hello")
    assert s.pop() == "hello"


def test_pop_empty_raises():
    with pytest.raises(EmptyStackError):
        Stack().pop()


def test_empty_stack_error_is_index_error():
    with pytest.raises(IndexError):
        Stack().pop()


def test_pop_multiple():
    s = Stack()
    s.push(10)
    s.push(20)
    assert s.pop() == 20
    assert s.size() == 1
    assert s.pop() == 10
    assert s.size() == 0


def test_pop_all_then_fail():
    s = Stack()
    for value in (1, 2, 3):
        s.push(value)
    assert [s.pop(), s.pop(), s.pop()] == [3, 2, 1]
    with pytest.raises(EmptyStackError):
        s.pop()


def _run_case(initial, pushed, pop_count):
    s = Stack()
    for value in initial:
        s.push(value)
    for value in pushed:
        s.push(value)
    last, ok = None, True
    for _ in range(pop_count):
        try:
            last, ok = s.pop(), True
        except EmptyStackError:
            last, ok = None, False
    return s, last, ok


@pytest.mark.parametrize(
    "initial, pushed, pop_count, size, popped, ok",
    [
        ([], [], 1, 0, None, False),
        ([], [1], 1, 0, 1, True),
        ([], [1, 2, 3], 1, 2, 3, True),
        ([], [1, 2, 3], 3, 0, 1, True),
        ([], [1, 2], 3, 0, None, False),
        ([1, 2, 3], [], 1, 2, 3, True),
        ([], ["hello", "world"], 1, 1, "world", True),
        ([], [], 1, 0, None, False),
    ],
)
def test_stack_table(initial, pushed, pop_count, size, popped, ok):
    s, last, succeeded = _run_case(initial, pushed, pop_count)
    assert s.size() == size
    assert succeeded is ok
    assert last == popped


def test_concurrent_push_pop():
    s = Stack()
    routines, operations = 20, 500

    def worker():
        for j in range(operations):
            s.push(j)
            s.pop()

    threads = [threading.Thread(target=worker) for _ in range(routines)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert s.size() == 0
    assert s.empty()


def test_concurrent_pushes_counted():
    s = Stack()

    def worker(base):
        for j in range(100):
            s.push(base + j)

    threads = [threading.Thread(target=worker, args=(n * 100,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert s.size() == 800
    popped = sorted(s.pop() for _ in range(800))
    assert popped == list(range(800))