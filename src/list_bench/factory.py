"""Container factory module."""

from typing import Dict, Type

from list_bench.array_list import ArrayList
from list_bench.base import SequenceContainer
from list_bench.linked_list import LinkedList

CONTAINER_TYPES: Dict[str, Type[SequenceContainer]] = {
    "array": ArrayList,
    "linked": LinkedList,
}


def register_container(kind: str, cls: Type[SequenceContainer]) -> None:
    """
    Register a new container kind so it can be created by name.

    Args:
        kind: Registry key, e.g. "array"
        cls: A SequenceContainer subclass

    Raises:
        TypeError: If cls is not a SequenceContainer subclass
        ValueError: If kind is already registered
    """
    if not (isinstance(cls, type) and issubclass(cls, SequenceContainer)):
        raise TypeError(f"register_container(): expected SequenceContainer subclass, got {cls!r}")
    if kind in CONTAINER_TYPES:
        raise ValueError(f"Container kind {kind!r} is already registered")
    CONTAINER_TYPES[kind] = cls


def create_container(kind: str) -> SequenceContainer:
    """
    Create a new empty container of a registered kind.

    Args:
        kind: Registry key

    Returns:
        A new empty container
    """
    try:
        cls = CONTAINER_TYPES[kind]
    except KeyError:
        known = ", ".join(sorted(CONTAINER_TYPES))
        raise ValueError(f"Unknown container kind {kind!r} (known: {known})") from None
    return cls()


def make_array_list_class(capacity: int) -> Type[ArrayList]:
    """
    Factory function to generate an ArrayList class with a given initial capacity.

    Args:
        capacity: Number of slots allocated by a fresh instance

    Returns:
        ArrayList_C{capacity}: Subclass of ArrayList with INITIAL_CAPACITY=capacity
    """
    if capacity < 1:
        raise ValueError(f"capacity must be >= 1, got {capacity}")

    return type(
        f"ArrayList_C{capacity}",
        (ArrayList,),
        {
            "INITIAL_CAPACITY": capacity,
            "__slots__": (),
        },
    )
