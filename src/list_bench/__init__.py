"""
list_bench — ArrayList vs LinkedList operation benchmarks.

Quick-start imports::

    from list_bench import run_all, ListBenchmarkRunner, format_table
"""

# Containers
from list_bench.array_list import ArrayList
from list_bench.base import SequenceContainer
from list_bench.linked_list import LinkedList, LinkedListNode
from list_bench.factory import (
    CONTAINER_TYPES,
    create_container,
    make_array_list_class,
    register_container,
)
from list_bench.invariants import InvariantError

# Benchmark harness
from list_bench.config import OPERATION_COUNT, BenchmarkConfig
from list_bench.records import MeasurementRecord
from list_bench.report import format_report, format_table, format_verdict, verdict
from list_bench.runner import ListBenchmarkRunner, fill_lists, run_all

__all__ = [
    # Containers
    "ArrayList",
    "CONTAINER_TYPES",
    "InvariantError",
    "LinkedList",
    "LinkedListNode",
    "SequenceContainer",
    "create_container",
    "make_array_list_class",
    "register_container",
    # Benchmark harness
    "BenchmarkConfig",
    "ListBenchmarkRunner",
    "MeasurementRecord",
    "OPERATION_COUNT",
    "fill_lists",
    "format_report",
    "format_table",
    "format_verdict",
    "run_all",
    "verdict",
]
