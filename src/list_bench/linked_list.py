"""Doubly linked list implementation"""
from typing import Any, Iterable, Iterator, Optional

from list_bench.base import SequenceContainer, check_index
from list_bench.invariants import InvariantError
from list_bench.logging_config import get_logger

logger = get_logger("LinkedList")


class LinkedListNode:
    """A node in the linked list holding one value and links to both neighbours."""
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any):
        self.value = value
        self.prev: Optional['LinkedListNode'] = None
        self.next: Optional['LinkedListNode'] = None

    def __repr__(self) -> str:
        return f"LinkedListNode({self.value!r})"


class LinkedList(SequenceContainer):
    """
    A list implemented as a chain of individually allocated nodes.

    Appending, prepending and removing at either end relink a constant number
    of nodes. Indexed access walks from whichever end is closer to the index.
    """
    __slots__ = ("head", "tail", "_size")

    DISPLAY_NAME = "LinkedList"

    def __init__(self, values: Optional[Iterable[Any]] = None):
        self.head: Optional[LinkedListNode] = None
        self.tail: Optional[LinkedListNode] = None
        self._size = 0
        if values is not None:
            self.extend(values)

    def _node_at(self, index: int) -> LinkedListNode:
        """Return the node at ``index``. Caller guarantees 0 <= index < size."""
        size = self._size
        if index < (size >> 1):
            node = self.head
            for _ in range(index):
                node = node.next
        else:
            node = self.tail
            for _ in range(size - 1 - index):
                node = node.prev
        return node

    def _link_before(self, value: Any, succ: LinkedListNode) -> None:
        node = LinkedListNode(value)
        pred = succ.prev
        node.prev = pred
        node.next = succ
        succ.prev = node
        if pred is None:
            self.head = node
        else:
            pred.next = node
        self._size += 1

    def _unlink(self, node: LinkedListNode) -> Any:
        pred, succ = node.prev, node.next
        if pred is None:
            self.head = succ
        else:
            pred.next = succ
        if succ is None:
            self.tail = pred
        else:
            succ.prev = pred
        node.prev = node.next = None
        self._size -= 1
        return node.value

    def append(self, value: Any) -> None:
        node = LinkedListNode(value)
        tail = self.tail
        if tail is None:
            self.head = self.tail = node
        else:
            node.prev = tail
            tail.next = node
            self.tail = node
        self._size += 1

    def prepend(self, value: Any) -> None:
        node = LinkedListNode(value)
        head = self.head
        if head is None:
            self.head = self.tail = node
        else:
            node.next = head
            head.prev = node
            self.head = node
        self._size += 1

    def insert_at(self, index: int, value: Any) -> None:
        check_index(index, self._size, allow_end=True)
        if index == self._size:
            self.append(value)
        elif index == 0:
            self.prepend(value)
        else:
            self._link_before(value, self._node_at(index))

    def get_at(self, index: int) -> Any:
        check_index(index, self._size)
        return self._node_at(index).value

    def remove_at(self, index: int) -> Any:
        check_index(index, self._size)
        return self._unlink(self._node_at(index))

    def remove_first(self) -> Any:
        if self.head is None:
            raise IndexError("remove_first() from empty LinkedList")
        return self._unlink(self.head)

    def remove_last(self) -> Any:
        if self.tail is None:
            raise IndexError("remove_last() from empty LinkedList")
        return self._unlink(self.tail)

    def size(self) -> int:
        return self._size

    def clear(self) -> None:
        """Unlinks every node, then resets head and tail."""
        node = self.head
        while node is not None:
            succ = node.next
            node.value = None
            node.prev = node.next = None
            node = succ
        self.head = self.tail = None
        self._size = 0

    def contains(self, value: Any) -> bool:
        node = self.head
        while node is not None:
            if node.value == value:
                return True
            node = node.next
        return False

    def __iter__(self) -> Iterator[Any]:
        """
        Yields each value in order by following ``next`` links.
        """
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def check_invariant(self) -> None:
        """
        Verifies that:
          1) head and tail are both None or both set, with no outer links.
          2) Every node's next.prev points back at the node.
          3) The number of reachable nodes equals the cached size.

        Raises:
            InvariantError: if any of these conditions fails.
        """
        if (self.head is None) != (self.tail is None):
            raise InvariantError("Invariant violated: head and tail must be both set or both None")
        if self.head is not None and self.head.prev is not None:
            raise InvariantError("Invariant violated: head has a predecessor")
        if self.tail is not None and self.tail.next is not None:
            raise InvariantError("Invariant violated: tail must reference the final node")

        count = 0
        prev = None
        node = self.head
        while node is not None:
            if node.prev is not prev:
                raise InvariantError(
                    f"Invariant violated: broken back-link at position {count}"
                )
            count += 1
            if count > self._size:
                raise InvariantError(
                    f"Invariant violated: more than {self._size} reachable nodes"
                )
            prev, node = node, node.next

        if prev is not self.tail:
            raise InvariantError("Invariant violated: forward walk does not end at tail")
        if count != self._size:
            raise InvariantError(
                f"Invariant violated: {count} reachable nodes but size is {self._size}"
            )
        logger.debug("LinkedList invariants hold for %d nodes", count)
