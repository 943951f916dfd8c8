from abc import ABC, abstractmethod
from numbers import Integral
from typing import Any, Iterable, Iterator, List


class SequenceContainer(ABC):
    """
    Abstract base class for an index-addressable sequence of values.

    Both benchmarked containers implement this interface, so the runner can
    drive any registered container kind through the same calls.
    """
    __slots__ = ()

    # Name used for this container in benchmark reports
    DISPLAY_NAME: str = "Sequence"

    @abstractmethod
    def append(self, value: Any) -> None:
        """
        Append a value at the end of the sequence.

        Parameters:
            value (Any): The value to append.
        """
        pass

    @abstractmethod
    def insert_at(self, index: int, value: Any) -> None:
        """
        Insert a value so that it ends up at position ``index``.

        Parameters:
            index (int): Target position, 0 <= index <= size().
            value (Any): The value to insert.

        Raises:
            IndexError: If index is out of range.
        """
        pass

    @abstractmethod
    def get_at(self, index: int) -> Any:
        """
        Return the value at position ``index``.

        Parameters:
            index (int): Position, 0 <= index < size().

        Raises:
            IndexError: If index is out of range.
        """
        pass

    @abstractmethod
    def remove_at(self, index: int) -> Any:
        """
        Remove and return the value at position ``index``.

        Parameters:
            index (int): Position, 0 <= index < size().

        Raises:
            IndexError: If index is out of range.
        """
        pass

    @abstractmethod
    def remove_first(self) -> Any:
        """Remove and return the first value. Raises IndexError when empty."""
        pass

    @abstractmethod
    def remove_last(self) -> Any:
        """Remove and return the last value. Raises IndexError when empty."""
        pass

    @abstractmethod
    def size(self) -> int:
        """Return the number of stored values."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove all values."""
        pass

    @abstractmethod
    def contains(self, value: Any) -> bool:
        """Return True if some stored value compares equal to ``value``."""
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Yield the stored values front to back without indexed reads."""
        pass

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        # return False when empty, True when non-empty
        return not self.is_empty()

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def is_empty(self) -> bool:
        return self.size() == 0

    def extend(self, values: Iterable[Any]) -> None:
        for value in values:
            self.append(value)

    def to_list(self) -> List[Any]:
        return list(iter(self))

    def check_invariant(self) -> None:
        """Verify structural invariants. Containers override this as needed."""
        return None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self.size()})"


def check_index(index: int, size: int, allow_end: bool = False) -> None:
    """
    Validate a position argument against the current size.

    Parameters:
        index (int): The position to validate.
        size (int): Current number of values.
        allow_end (bool): Accept ``index == size`` (insert positions).

    Raises:
        TypeError: If index is not an int.
        IndexError: If index is out of range.
    """
    if not isinstance(index, Integral) or isinstance(index, bool):
        raise TypeError(f"index must be int, got {type(index).__name__}")
    upper = size if allow_end else size - 1
    if index < 0 or index > upper:
        raise IndexError(f"index {index} out of range for size {size}")
