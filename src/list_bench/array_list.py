"""Contiguous-buffer list implementation"""
import logging
from typing import Any, Iterable, Iterator, Optional

import numpy as np

from list_bench.base import SequenceContainer, check_index
from list_bench.invariants import InvariantError
from list_bench.logging_config import get_logger

logger = get_logger("ArrayList")


class ArrayList(SequenceContainer):
    """
    A list backed by one flat, resizable buffer.

    Values live in a numpy array of ``dtype=object`` whose length is the
    current capacity. Only the first ``size`` slots are occupied; the rest
    hold None. When the buffer is full it is reallocated at roughly 1.5x
    its capacity and the occupied prefix is copied over.
    """
    __slots__ = ("_data", "_size")

    DISPLAY_NAME = "ArrayList"

    # May be overridden by factory-created subclasses
    INITIAL_CAPACITY: int = 10

    def __init__(self, values: Optional[Iterable[Any]] = None):
        self._data = np.empty(self.__class__.INITIAL_CAPACITY, dtype=object)
        self._size = 0
        if values is not None:
            self.extend(values)

    def capacity(self) -> int:
        """Returns the number of slots in the current buffer."""
        return len(self._data)

    def _ensure_capacity(self, min_capacity: int) -> None:
        capacity = len(self._data)
        if min_capacity <= capacity:
            return
        new_capacity = max(min_capacity, capacity * 3 // 2 + 1)
        data = np.empty(new_capacity, dtype=object)
        data[:self._size] = self._data[:self._size]
        self._data = data
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Grew buffer from %d to %d slots", capacity, new_capacity)

    def append(self, value: Any) -> None:
        size = self._size
        if size == len(self._data):
            self._ensure_capacity(size + 1)
        self._data[size] = value
        self._size = size + 1

    def insert_at(self, index: int, value: Any) -> None:
        size = self._size
        check_index(index, size, allow_end=True)
        if size == len(self._data):
            self._ensure_capacity(size + 1)
        data = self._data
        if index < size:
            # Shift the tail one slot to the right
            data[index + 1:size + 1] = data[index:size]
        data[index] = value
        self._size = size + 1

    def get_at(self, index: int) -> Any:
        check_index(index, self._size)
        return self._data[index]

    def remove_at(self, index: int) -> Any:
        size = self._size
        check_index(index, size)
        data = self._data
        value = data[index]
        if index < size - 1:
            data[index:size - 1] = data[index + 1:size]
        data[size - 1] = None
        self._size = size - 1
        return value

    def remove_first(self) -> Any:
        if self._size == 0:
            raise IndexError("remove_first() from empty ArrayList")
        return self.remove_at(0)

    def remove_last(self) -> Any:
        if self._size == 0:
            raise IndexError("remove_last() from empty ArrayList")
        return self.remove_at(self._size - 1)

    def size(self) -> int:
        return self._size

    def clear(self) -> None:
        """Drops all references but keeps the allocated capacity."""
        self._data[:self._size] = None
        self._size = 0

    def contains(self, value: Any) -> bool:
        for stored in self._data[:self._size]:
            if stored == value:
                return True
        return False

    def __iter__(self) -> Iterator[Any]:
        data = self._data
        for i in range(self._size):
            yield data[i]

    def check_invariant(self) -> None:
        """
        Verifies that:
          1) 0 <= size <= capacity.
          2) Every slot past size is empty (None).

        Raises:
            InvariantError: if any of these conditions fails.
        """
        size = self._size
        capacity = len(self._data)
        if not 0 <= size <= capacity:
            raise InvariantError(
                f"Invariant violated: size {size} outside [0, {capacity}]"
            )
        for i in range(size, capacity):
            if self._data[i] is not None:
                raise InvariantError(
                    f"Invariant violated: slot {i} past size {size} holds {self._data[i]!r}"
                )
