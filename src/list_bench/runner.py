"""Core benchmark runner comparing a contiguous-buffer list with a linked list."""

import gc
import logging
import time
from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional, Tuple, Union

from tqdm import tqdm

from list_bench.array_list import ArrayList
from list_bench.base import SequenceContainer
from list_bench.config import BenchmarkConfig
from list_bench.linked_list import LinkedList
from list_bench.logging_config import get_logger
from list_bench.records import MeasurementRecord
from list_bench.report import format_report

logger = get_logger(__name__)

# No tqdm monitor thread: timed windows run with the main thread alone
tqdm.monitor_interval = 0

ContainerFactory = Callable[[], SequenceContainer]
ScenarioResult = Union[MeasurementRecord, Tuple[MeasurementRecord, ...]]


def fill_lists(list_a: SequenceContainer, list_b: SequenceContainer, count: int) -> None:
    """Clear both containers, then append 0..count-1 to each."""
    list_a.clear()
    list_b.clear()
    append_a = list_a.append
    append_b = list_b.append
    for i in range(count):
        append_a(i)
        append_b(i)


def display_name(factory: ContainerFactory) -> str:
    """Name shown for a container factory in reports."""
    name = getattr(factory, "DISPLAY_NAME", None)
    if name:
        return name
    return getattr(factory, "__name__", type(factory).__name__)


class ListBenchmarkRunner:
    """
    Runs the fixed scenario catalog against two containers.

    Every scenario sets up its own starting state, times container A, then
    times container B on the same workload, and returns its record(s).
    Setup (filling, clearing) is never inside a timed window.
    """

    def __init__(
        self,
        config: Optional[BenchmarkConfig] = None,
        container_a: ContainerFactory = ArrayList,
        container_b: ContainerFactory = LinkedList,
    ):
        """
        Initialize benchmark runner.

        Args:
            config: Benchmark configuration (default: BenchmarkConfig())
            container_a: Factory for container A (default: ArrayList)
            container_b: Factory for container B (default: LinkedList)
        """
        self.config = config if config is not None else BenchmarkConfig()
        self.container_a = container_a
        self.container_b = container_b
        self.name_a = display_name(container_a)
        self.name_b = display_name(container_b)
        self._check_logging_level()

    def _check_logging_level(self) -> None:
        """Warn if verbose logging is enabled during measurement."""
        current_level = logging.getLogger("list_bench").getEffectiveLevel()
        if current_level < logging.INFO:
            logger.warning(
                "Verbose logging (%s) is enabled. This may affect benchmark timing! "
                "Set log level to INFO or higher for accurate measurements.",
                logging.getLevelName(current_level),
            )

    @contextmanager
    def _gc_paused(self) -> Iterator[None]:
        """Collect garbage, then keep the collector off for the timed block."""
        if not self.config.disable_gc:
            yield
            return
        gc.collect()
        was_enabled = gc.isenabled()
        gc.disable()
        try:
            yield
        finally:
            if was_enabled:
                gc.enable()

    def _measure(self, body: Callable[[SequenceContainer], None], container: SequenceContainer) -> int:
        """Run ``body(container)`` once and return the elapsed nanoseconds."""
        with self._gc_paused():
            start = time.perf_counter_ns()
            body(container)
            return time.perf_counter_ns() - start

    @property
    def operation_count(self) -> int:
        return self.config.operation_count

    def middle_insert_count(self) -> int:
        return max(1, self.operation_count // 10)

    def middle_remove_count(self) -> int:
        return max(1, self.operation_count // 20)

    def contains_probes(self) -> Tuple[int, int, int, int]:
        """First, middle, last and one absent value."""
        n = self.operation_count
        return 0, n // 2, n - 1, n + 1000

    # --- Scenarios -------------------------------------------------------

    def add_to_end(self, list_a: SequenceContainer, list_b: SequenceContainer) -> MeasurementRecord:
        n = self.operation_count
        list_a.clear()
        list_b.clear()

        def run(container):
            append = container.append
            for i in range(n):
                append(i)

        time_a = self._measure(run, list_a)
        time_b = self._measure(run, list_b)
        return MeasurementRecord("add", "add to end", n, time_a, time_b)

    def add_to_start(self, list_a: SequenceContainer, list_b: SequenceContainer) -> MeasurementRecord:
        n = self.operation_count
        list_a.clear()
        list_b.clear()

        def run(container):
            insert_at = container.insert_at
            for i in range(n):
                insert_at(0, i)

        time_a = self._measure(run, list_a)
        time_b = self._measure(run, list_b)
        return MeasurementRecord("add", "add to start", n, time_a, time_b)

    def add_to_middle(self, list_a: SequenceContainer, list_b: SequenceContainer) -> MeasurementRecord:
        count = self.middle_insert_count()
        prefill = self.config.middle_prefill

        def run(container):
            insert_at = container.insert_at
            size = container.size
            for i in range(count):
                insert_at(size() // 2, i)

        fill_lists(list_a, list_b, prefill)
        time_a = self._measure(run, list_a)
        fill_lists(list_a, list_b, prefill)
        time_b = self._measure(run, list_b)
        return MeasurementRecord("add", "add to middle", count, time_a, time_b)

    def get_by_index(self, list_a: SequenceContainer, list_b: SequenceContainer) -> MeasurementRecord:
        n = self.operation_count
        fill_lists(list_a, list_b, n)

        def run(container):
            get_at = container.get_at
            for i in range(n):
                get_at(i)

        time_a = self._measure(run, list_a)
        time_b = self._measure(run, list_b)
        return MeasurementRecord("get", "get by index", n, time_a, time_b)

    def remove_from_end(self, list_a: SequenceContainer, list_b: SequenceContainer) -> MeasurementRecord:
        n = self.operation_count

        def run(container):
            remove_at = container.remove_at
            for i in range(n - 1, -1, -1):
                remove_at(i)

        fill_lists(list_a, list_b, n)
        time_a = self._measure(run, list_a)
        fill_lists(list_a, list_b, n)
        time_b = self._measure(run, list_b)
        return MeasurementRecord("remove", "remove from end", n, time_a, time_b)

    def remove_from_start(self, list_a: SequenceContainer, list_b: SequenceContainer) -> MeasurementRecord:
        n = self.operation_count

        def run(container):
            remove_at = container.remove_at
            for _ in range(n):
                remove_at(0)

        fill_lists(list_a, list_b, n)
        time_a = self._measure(run, list_a)
        fill_lists(list_a, list_b, n)
        time_b = self._measure(run, list_b)
        return MeasurementRecord("remove", "remove from start", n, time_a, time_b)

    def remove_from_middle(self, list_a: SequenceContainer, list_b: SequenceContainer) -> MeasurementRecord:
        prefill = self.operation_count // 2
        count = self.middle_remove_count()

        def run(container):
            remove_at = container.remove_at
            size = container.size
            is_empty = container.is_empty
            for _ in range(count):
                if not is_empty():
                    remove_at(size() // 2)

        fill_lists(list_a, list_b, prefill)
        time_a = self._measure(run, list_a)
        fill_lists(list_a, list_b, prefill)
        time_b = self._measure(run, list_b)
        return MeasurementRecord("remove", "remove from middle", count, time_a, time_b)

    def iteration(
        self, list_a: SequenceContainer, list_b: SequenceContainer
    ) -> Tuple[MeasurementRecord, MeasurementRecord]:
        """
        Indexed traversal of both containers plus cursor traversal of B.

        Both records carry the same indexed-traversal time for A.
        """
        n = self.operation_count
        fill_lists(list_a, list_b, n)

        def run_indexed(container):
            get_at = container.get_at
            for i in range(container.size()):
                get_at(i)

        def run_cursor(container):
            for _ in container:
                pass

        time_a = self._measure(run_indexed, list_a)
        time_b_indexed = self._measure(run_indexed, list_b)
        time_b_cursor = self._measure(run_cursor, list_b)
        return (
            MeasurementRecord("iterate", "for-loop", n, time_a, time_b_indexed),
            MeasurementRecord("iterate", "iterator", n, time_a, time_b_cursor),
        )

    def contains(self, list_a: SequenceContainer, list_b: SequenceContainer) -> MeasurementRecord:
        fill_lists(list_a, list_b, self.operation_count)
        probes = self.contains_probes()

        def run(container):
            contains = container.contains
            for value in probes:
                contains(value)

        time_a = self._measure(run, list_a)
        time_b = self._measure(run, list_b)
        return MeasurementRecord("contains", "various positions", len(probes), time_a, time_b)

    def clear(self, list_a: SequenceContainer, list_b: SequenceContainer) -> MeasurementRecord:
        n = self.operation_count

        def run(container):
            container.clear()

        fill_lists(list_a, list_b, n)
        time_a = self._measure(run, list_a)
        fill_lists(list_a, list_b, n)
        time_b = self._measure(run, list_b)
        return MeasurementRecord("clear", "all elements", n, time_a, time_b)

    # --- Orchestration ---------------------------------------------------

    def scenarios(self) -> List[Tuple[str, Callable[[SequenceContainer, SequenceContainer], ScenarioResult]]]:
        """The scenario catalog in execution order."""
        return [
            ("add to end", self.add_to_end),
            ("add to start", self.add_to_start),
            ("add to middle", self.add_to_middle),
            ("get by index", self.get_by_index),
            ("remove from end", self.remove_from_end),
            ("remove from start", self.remove_from_start),
            ("remove from middle", self.remove_from_middle),
            ("iterate", self.iteration),
            ("contains", self.contains),
            ("clear", self.clear),
        ]

    def run_scenarios(self) -> List[MeasurementRecord]:
        """
        Run every scenario once, sequentially, on one fresh pair of containers.

        Returns:
            A new list of records in catalog order, owned by the caller.
        """
        list_a = self.container_a()
        list_b = self.container_b()
        results: List[MeasurementRecord] = []

        logger.info("Running %d scenarios with N=%d (%s vs %s)",
                    len(self.scenarios()), self.operation_count, self.name_a, self.name_b)
        started = time.perf_counter()

        for name, scenario in tqdm(self.scenarios(), desc="Scenarios", leave=False,
                                   disable=not self.config.show_progress):
            outcome = scenario(list_a, list_b)
            records = (outcome,) if isinstance(outcome, MeasurementRecord) else outcome
            for record in records:
                logger.debug("%s / %s: %s=%d ns, %s=%d ns",
                             name, record.operation_label,
                             self.name_a, record.duration_a,
                             self.name_b, record.duration_b)
                results.append(record)

        logger.info("Collected %d records in %.2f s", len(results), time.perf_counter() - started)
        return results

    def run_all(self) -> str:
        """Run the catalog and return the rendered report."""
        records = self.run_scenarios()
        return format_report(
            records,
            operation_count=self.operation_count,
            name_a=self.name_a,
            name_b=self.name_b,
            width=self.config.table_width,
        )


def run_all(config: Optional[BenchmarkConfig] = None) -> str:
    """Run the full benchmark with the default containers and return the report."""
    return ListBenchmarkRunner(config).run_all()
