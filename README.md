# safecontainers

Thread-safe container types for Python:

- `Deque` (in `safecontainers.deque`): a double-ended queue guarded by a lock. It supports pushing and popping at both ends, peeking, indexed access, in-place reversal, rotation, counting with a custom equality function and iteration.
- `Stack` (in `safecontainers.stack`): a LIFO stack guarded by a lock.

## Installation

```
pip install safecontainers
```

## Deque

```python
from safecontainers.deque import Deque, EmptyQueueError

dq = Deque()
dq.push_front(1, 2, 3)   # [1, 2, 3]  (the values keep their given order at the front)
dq.push_back(4, 5)       # [1, 2, 3, 4, 5]
len(dq)                  # 5

dq.pop_front()           # 1
dq.pop_back()            # 5
dq.front(), dq.back()    # (2, 4)

dq.rotate(1)             # rotate right: [4, 2, 3]
dq.rotate(-1)            # rotate left:  [2, 3, 4]
dq.reverse()             # [4, 3, 2]

dq.get(10)               # out of range -> None
dq.get(-1, "missing")    # negative indices are out of range -> "missing"
dq.count(3, lambda a, b: a == b)  # 1 (equality defaults to ==)

for index, value in dq.iterator():
    print(index, value)

dq.to_list()             # [4, 3, 2]
dq.clear()               # returns the number of removed items: 3

try:
    dq.pop_front()
except EmptyQueueError as exc:
    print("Error:", exc)  # Error: pop_front: queue is empty
```

`pop_front`, `pop_back`, `front` and `back` raise `EmptyQueueError` (a subclass of
`IndexError`) when the deque is empty.

`iterator()` and `descending_iterator()` both yield `(index, value)` pairs over a
snapshot of the contents; note that `descending_iterator()` also runs from front to
back. Iterating a `Deque` directly yields its values front to back.

## Stack

```python
from safecontainers.stack import Stack, EmptyStackError

s = Stack()
s.push(1)
s.push(2)
s.size()      # 2 (same as len(s))
s.pop()       # 2
s.empty()     # False
s.pop()       # 1

try:
    s.pop()
except EmptyStackError:
    print("stack is empty")
```

`pop` raises `EmptyStackError` (a subclass of `IndexError`) when the stack is empty.

## What this package does not include

The package is a library only: it installs no command-line program and has no
runnable demonstrations. Use the classes from your own code as shown above.

## Running the tests

```
pip install "safecontainers[test]"
pytest
```