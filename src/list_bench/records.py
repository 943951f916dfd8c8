"""Measurement records produced by the benchmark runner."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MeasurementRecord:
    """
    One row of benchmark output.

    Attributes:
        operation_group: Broad operation family ("add", "remove", "get", ...).
        operation_label: Variant description ("add to end", ...).
        iteration_count: Number of elemental operations timed.
        duration_a: Elapsed nanoseconds for container A.
        duration_b: Elapsed nanoseconds for container B.
    """
    operation_group: str
    operation_label: str
    iteration_count: int
    duration_a: int
    duration_b: int

    def __post_init__(self):
        if self.iteration_count <= 0:
            raise ValueError(f"iteration_count must be > 0, got {self.iteration_count}")
        if self.duration_a < 0 or self.duration_b < 0:
            raise ValueError(
                f"durations must be >= 0, got {self.duration_a} and {self.duration_b}"
            )
