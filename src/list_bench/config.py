"""Benchmark configuration."""

from dataclasses import dataclass

# Number of elemental operations timed by most scenarios
OPERATION_COUNT = 10_000

# Elements placed in both lists before the add-to-middle scenario
MIDDLE_PREFILL = 1000

# Rule width of the rendered comparison table
TABLE_WIDTH = 120


@dataclass
class BenchmarkConfig:
    """Configuration for benchmark runs. Values are fixed in-process constants."""

    # Scale
    operation_count: int = OPERATION_COUNT
    middle_prefill: int = MIDDLE_PREFILL

    # Measurement
    disable_gc: bool = True

    # Output
    table_width: int = TABLE_WIDTH
    show_progress: bool = False

    # Logging
    log_level: str = "INFO"

    def __post_init__(self):
        if self.operation_count < 1:
            raise ValueError(f"operation_count must be >= 1, got {self.operation_count}")
        if self.middle_prefill < 0:
            raise ValueError(f"middle_prefill must be >= 0, got {self.middle_prefill}")
        if self.table_width < 1:
            raise ValueError(f"table_width must be >= 1, got {self.table_width}")

    def __str__(self) -> str:
        lines = [
            f"Operation count (N): {self.operation_count}",
            f"Middle prefill: {self.middle_prefill}",
            f"GC disabled while timing: {self.disable_gc}",
        ]
        return "\n".join(lines)
