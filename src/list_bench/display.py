"""Pretty-printing utilities for sequence containers."""

from __future__ import annotations

from list_bench.base import SequenceContainer
from list_bench.linked_list import LinkedList

# Containers longer than this are shown with the middle elided
MAX_SHOWN = 10


def print_pretty(container: SequenceContainer | None, max_shown: int = MAX_SHOWN) -> str:
    """
    Render a container for debugging output:
      • ``(ArrayList): [0, 1, 2]`` for buffer-backed containers,
      • ``(LinkedList): 0 <-> 1 <-> 2`` for linked containers,
      • ``(Name): Empty`` when there is nothing to show.
    """
    if container is None:
        return f"{type(container).__name__}: None"

    if not isinstance(container, SequenceContainer):
        raise TypeError(f"print_pretty() expects SequenceContainer, got {type(container).__name__}")

    name = type(container).__name__
    if container.is_empty():
        return f"({name}): Empty"

    values = [repr(v) for v in container]
    if len(values) > max_shown:
        half = max_shown // 2
        values = values[:half] + ["..."] + values[-half:]

    if isinstance(container, LinkedList):
        return f"({name}): " + " <-> ".join(values)
    return f"({name}): [" + ", ".join(values) + "]"
