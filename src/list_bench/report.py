"""Fixed-width text rendering of benchmark records."""

import math
from typing import Iterable, Sequence, Tuple

from list_bench.config import TABLE_WIDTH
from list_bench.records import MeasurementRecord

DEFAULT_NAME_A = "ArrayList"
DEFAULT_NAME_B = "LinkedList"

# Width of the rule under the report preamble
PREAMBLE_WIDTH = 50

ROW_FORMAT = "| {:<8} | {:<18} | {:<8} | {:>16} | {:>16} | {:<24} |"
HEADER_FORMAT = "| {:<8} | {:<18} | {:<8} | {:<16} | {:<16} | {:<24} |"


def verdict(
    record: MeasurementRecord,
    name_a: str = DEFAULT_NAME_A,
    name_b: str = DEFAULT_NAME_B,
) -> Tuple[str, float]:
    """
    Decide which container was faster for one record.

    The smaller duration wins and the ratio is ``max / min``. Equal durations,
    including two zero readings, are a tie credited to A with ratio 1.0.
    A single zero reading wins with an infinite ratio.

    Returns:
        (winner_name, ratio)
    """
    a, b = record.duration_a, record.duration_b
    if a == b:
        return name_a, 1.0
    winner = name_a if a < b else name_b
    fast, slow = min(a, b), max(a, b)
    if fast == 0:
        return winner, math.inf
    ratio = slow / fast
    if ratio == 1.0:
        # Durations this large differ below float precision
        ratio = math.nextafter(1.0, 2.0)
    return winner, ratio


def format_ratio(ratio: float) -> str:
    return f"{ratio:.1f}"


def format_verdict(
    record: MeasurementRecord,
    name_a: str = DEFAULT_NAME_A,
    name_b: str = DEFAULT_NAME_B,
) -> str:
    """
    Render the performance column, e.g. ``"LinkedList 3.0x faster"``.

    A zero reading on the winning side has no finite ratio and renders as
    ``"LinkedList faster (0 ns)"``.
    """
    winner, ratio = verdict(record, name_a, name_b)
    if math.isinf(ratio):
        return f"{winner} faster (0 ns)"
    return f"{winner} {format_ratio(ratio)}x faster"


def format_row(
    record: MeasurementRecord,
    name_a: str = DEFAULT_NAME_A,
    name_b: str = DEFAULT_NAME_B,
) -> str:
    return ROW_FORMAT.format(
        record.operation_group,
        record.operation_label,
        record.iteration_count,
        record.duration_a,
        record.duration_b,
        format_verdict(record, name_a, name_b),
    )


def format_table(
    records: Iterable[MeasurementRecord],
    name_a: str = DEFAULT_NAME_A,
    name_b: str = DEFAULT_NAME_B,
    width: int = TABLE_WIDTH,
) -> str:
    """
    Render records as a fixed-width comparison table.

    Layout: ``=`` rule, title, ``=`` rule, column header, ``-`` rule,
    one line per record, closing ``=`` rule. Every line ends in a newline.
    """
    lines = [
        "=" * width,
        f"{name_a.upper()} vs {name_b.upper()} PERFORMANCE COMPARISON",
        "=" * width,
        HEADER_FORMAT.format(
            "Method", "Operation Type", "Count", f"{name_a}(ns)", f"{name_b}(ns)", "Performance"
        ),
        "-" * width,
    ]
    lines.extend(format_row(record, name_a, name_b) for record in records)
    lines.append("=" * width)
    return "\n".join(lines) + "\n"


def format_report(
    records: Sequence[MeasurementRecord],
    operation_count: int,
    name_a: str = DEFAULT_NAME_A,
    name_b: str = DEFAULT_NAME_B,
    width: int = TABLE_WIDTH,
) -> str:
    """Preamble naming both containers and N, followed by the table."""
    preamble = (
        f"Comparison of {name_a} and {name_b} performance\n"
        f"Number of operations: {operation_count}\n"
        f"{'=' * PREAMBLE_WIDTH}\n\n"
    )
    return preamble + format_table(records, name_a, name_b, width)
