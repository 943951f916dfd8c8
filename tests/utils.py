"""Container doubles used to observe what the runner does."""

from list_bench.array_list import ArrayList
from list_bench.linked_list import LinkedList


class ProbeRecordingMixin:
    """Records every value passed to ``contains``."""

    def __init__(self, *args, **kwargs):
        self.probes = []
        super().__init__(*args, **kwargs)

    def contains(self, value):
        self.probes.append(value)
        return super().contains(value)


# The base classes use __slots__; these subclasses get a __dict__ for ``probes``.
class RecordingArrayList(ProbeRecordingMixin, ArrayList):
    pass


class RecordingLinkedList(ProbeRecordingMixin, LinkedList):
    pass
