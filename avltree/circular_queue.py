"""Circular FIFO queue backing breadth-first walks of the tree."""

from typing import TypeVar, Generic, List, Optional

T = TypeVar('T')


class CircularQueue(Generic[T]):
    def __init__(self, capacity: int = 4) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._data: List[Optional[T]] = [None] * capacity
        self._head: int = 0
        self._tail: int = 0
        self._size: int = 0
        self._capacity: int = capacity

    def enqueue(self, value: T) -> None:
        if self._size == self._capacity:
            self._grow()
        self._data[self._tail] = value
        self._tail = (self._tail + 1) % self._capacity
        self._size += 1

    def dequeue(self) -> T:
        if self._size == 0:
            raise IndexError("dequeue from empty queue")
        value = self._data[self._head]
        self._data[self._head] = None
        self._head = (self._head + 1) % self._capacity
        self._size -= 1
        return value  # type: ignore[return-value]

    def front(self) -> T:
        if self._size == 0:
            raise IndexError("front from empty queue")
        return self._data[self._head]  # type: ignore[return-value]

    def back(self) -> T:
        if self._size == 0:
            raise IndexError("back from empty queue")
        return self._data[(self._tail - 1) % self._capacity]  # type: ignore[return-value]

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._data = [None] * self._capacity
        self._head = 0
        self._tail = 0
        self._size = 0

    def _grow(self) -> None:
        # unwrap so the oldest element lands at index 0
        new_capacity = self._capacity * 2
        new_data: List[Optional[T]] = [None] * new_capacity
        for i in range(self._size):
            new_data[i] = self._data[(self._head + i) % self._capacity]
        self._data = new_data
        self._head = 0
        self._tail = self._size
        self._capacity = new_capacity

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0
