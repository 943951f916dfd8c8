"""
Command-line entry point for the list benchmark.

Usage:
    list-bench
    python -m list_bench

The command takes no options: the scenario catalog, operation count and
table layout are fixed. The report goes to stdout; log records and the
progress bar go to stderr.
"""

import argparse
import logging
import sys
from typing import List, Optional

from list_bench.config import BenchmarkConfig
from list_bench.logging_config import setup_logging
from list_bench.runner import ListBenchmarkRunner


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments (only --help is accepted)."""
    parser = argparse.ArgumentParser(
        prog="list-bench",
        description="Compare ArrayList and LinkedList performance across a fixed set of operations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main benchmark execution.

    Returns:
        Exit code (0 for success)
    """
    parse_args(argv)
    config = BenchmarkConfig(show_progress=True)
    setup_logging(getattr(logging, config.log_level.upper(), logging.INFO))

    report = ListBenchmarkRunner(config).run_all()
    sys.stdout.write(report)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
