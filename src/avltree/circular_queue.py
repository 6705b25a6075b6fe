"""Growable ring buffer used as the FIFO for breadth-first traversal."""
from typing import Generic, List, Optional, TypeVar, cast

T = TypeVar('T')


class Queue(Generic[T]):
    def __init__(self) -> None:
        self._capacity: int = 4
        self._data: List[Optional[T]] = [None] * self._capacity
        self._head: int = 0
        self._size: int = 0

    def enqueue(self, value: T) -> None:
        if self._size == self._capacity:
            self._grow()
        tail = (self._head + self._size) % self._capacity
        self._data[tail] = value
        self._size += 1

    def dequeue(self) -> T:
        if self._size == 0:
            raise IndexError("dequeue from empty queue")
        value = cast(T, self._data[self._head])
        self._data[self._head] = None
        self._head = (self._head + 1) % self._capacity
        self._size -= 1
        return value

    def _grow(self) -> None:
        # unroll so the oldest element lands at index 0
        ordered = [self._data[(self._head + i) % self._capacity] for i in range(self._size)]
        self._capacity *= 2
        self._data = ordered + [None] * (self._capacity - self._size)
        self._head = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0
