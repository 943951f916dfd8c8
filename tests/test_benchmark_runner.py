"""Tests for the benchmark runner"""
# pylint: skip-file

import gc
import itertools
import logging
import threading
import unittest
from unittest import mock

from list_bench import runner as runner_module
from list_bench.array_list import ArrayList
from list_bench.config import BenchmarkConfig
from list_bench.factory import make_array_list_class
from list_bench.linked_list import LinkedList
from list_bench.runner import ListBenchmarkRunner, fill_lists, run_all
from tests.test_base import SMALL_N, BaseRunnerTestCase
from tests.utils import RecordingArrayList, RecordingLinkedList

EXPECTED_ROWS = [
    ("add", "add to end"),
    ("add", "add to start"),
    ("add", "add to middle"),
    ("get", "get by index"),
    ("remove", "remove from end"),
    ("remove", "remove from start"),
    ("remove", "remove from middle"),
    ("iterate", "for-loop"),
    ("iterate", "iterator"),
    ("contains", "various positions"),
    ("clear", "all elements"),
]


class TestFillLists(BaseRunnerTestCase):

    def test_fills_both_with_sequential_ints(self):
        a, b = ArrayList(), LinkedList()
        fill_lists(a, b, 25)
        self.validate_sequence(a, list(range(25)))
        self.validate_sequence(b, list(range(25)))

    def test_replaces_previous_contents(self):
        a, b = ArrayList(["junk"] * 7), LinkedList(["junk"] * 3)
        fill_lists(a, b, 4)
        self.validate_sequence(a, [0, 1, 2, 3])
        self.validate_sequence(b, [0, 1, 2, 3])

    def test_zero_count_empties(self):
        a, b = ArrayList([1]), LinkedList([1])
        fill_lists(a, b, 0)
        self.assertTrue(a.is_empty() and b.is_empty())


class TestRunScenarios(BaseRunnerTestCase):

    @classmethod
    def setUpClass(cls):
        cls.runner = ListBenchmarkRunner(BenchmarkConfig(operation_count=SMALL_N))
        cls.records = cls.runner.run_scenarios()

    def test_eleven_records_in_catalog_order(self):
        self.assertEqual(len(self.records), 11)
        self.assertEqual(
            [(r.operation_group, r.operation_label) for r in self.records],
            EXPECTED_ROWS,
        )

    def test_iteration_counts(self):
        n = SMALL_N
        expected = [n, n, n // 10, n, n, n, n // 20, n, n, 4, n]
        self.assertEqual([r.iteration_count for r in self.records], expected)

    def test_durations_non_negative(self):
        for record in self.records:
            self.assertGreaterEqual(record.duration_a, 0)
            self.assertGreaterEqual(record.duration_b, 0)
            self.assertIsInstance(record.duration_a, int)
            self.assertIsInstance(record.duration_b, int)

    def test_iterate_rows_share_baseline(self):
        for_loop, iterator = self.records[7], self.records[8]
        self.assertEqual(for_loop.duration_a, iterator.duration_a)

    def test_each_run_returns_a_new_list(self):
        second = self.runner.run_scenarios()
        self.assertIsNot(second, self.records)
        self.assertEqual(len(second), 11)
        self.assertEqual(len(self.records), 11)

    def test_display_names(self):
        self.assertEqual(self.runner.name_a, "ArrayList")
        self.assertEqual(self.runner.name_b, "LinkedList")


class TestScenarioCounts(BaseRunnerTestCase):
    """Scenario counts at the default operation count"""

    operation_count = 10_000

    def test_add_to_middle(self):
        runner = self.make_runner()
        a, b = ArrayList(), LinkedList()
        record = runner.add_to_middle(a, b)
        self.assert_record(record, "add", "add to middle", 1000)
        # A is refilled to the 1000-element start before B is timed
        self.assertEqual(a.size(), 1000)
        self.assertEqual(b.size(), 2000)

    def test_contains_probes(self):
        runner = self.make_runner(container_a=RecordingArrayList, container_b=RecordingLinkedList)
        a, b = RecordingArrayList(), RecordingLinkedList()
        record = runner.contains(a, b)
        self.assert_record(record, "contains", "various positions", 4)
        self.assertEqual(a.probes, [0, 5000, 9999, 11000])
        self.assertEqual(b.probes, [0, 5000, 9999, 11000])

    def test_remove_from_middle_then_refill(self):
        runner = self.make_runner()
        a, b = ArrayList(), LinkedList()
        record = runner.remove_from_middle(a, b)
        self.assert_record(record, "remove", "remove from middle", 500)
        # A was refilled before B was timed
        self.assertEqual(a.size(), 5000)
        self.assertEqual(b.size(), 4500)
        fill_lists(a, b, 5000)
        self.assertEqual(a.size(), 5000)
        self.assertEqual(b.size(), 5000)

    def test_scaled_counts_never_zero(self):
        runner = self.make_runner(operation_count=5)
        self.assertEqual(runner.middle_insert_count(), 1)
        self.assertEqual(runner.middle_remove_count(), 1)


class TestScenarioIsolation(BaseRunnerTestCase):
    """Every scenario sets up its own start state, whatever came before."""

    operation_count = 100

    def setUp(self):
        self.runner = self.make_runner()
        # Leftover state from some unrelated earlier scenario
        self.a = ArrayList(["junk"] * 37)
        self.b = LinkedList(["junk"] * 11)

    def test_add_to_end(self):
        self.runner.add_to_end(self.a, self.b)
        self.validate_sequence(self.a, list(range(100)))
        self.validate_sequence(self.b, list(range(100)))

    def test_add_to_start(self):
        self.runner.add_to_start(self.a, self.b)
        self.validate_sequence(self.a, list(range(99, -1, -1)))
        self.validate_sequence(self.b, list(range(99, -1, -1)))

    def test_add_to_middle(self):
        self.runner.add_to_middle(self.a, self.b)
        expected = list(range(1000))
        for i in range(10):
            expected.insert(len(expected) // 2, i)
        self.validate_sequence(self.b, expected)
        self.validate_sequence(self.a, list(range(1000)))

    def test_get_by_index(self):
        self.runner.get_by_index(self.a, self.b)
        self.validate_sequence(self.a, list(range(100)))
        self.validate_sequence(self.b, list(range(100)))

    def test_remove_from_end(self):
        self.runner.remove_from_end(self.a, self.b)
        self.validate_sequence(self.a, list(range(100)))
        self.validate_sequence(self.b, [])

    def test_remove_from_start(self):
        self.runner.remove_from_start(self.a, self.b)
        self.validate_sequence(self.a, list(range(100)))
        self.validate_sequence(self.b, [])

    def test_remove_from_middle(self):
        self.runner.remove_from_middle(self.a, self.b)
        expected = list(range(50))
        for _ in range(5):
            expected.pop(len(expected) // 2)
        self.validate_sequence(self.a, list(range(50)))
        self.validate_sequence(self.b, expected)

    def test_iteration(self):
        for_loop, iterator = self.runner.iteration(self.a, self.b)
        self.assert_record(for_loop, "iterate", "for-loop", 100)
        self.assert_record(iterator, "iterate", "iterator", 100)
        self.validate_sequence(self.a, list(range(100)))
        self.validate_sequence(self.b, list(range(100)))

    def test_contains(self):
        self.runner.contains(self.a, self.b)
        self.validate_sequence(self.a, list(range(100)))
        self.validate_sequence(self.b, list(range(100)))

    def test_clear(self):
        self.runner.clear(self.a, self.b)
        self.validate_sequence(self.a, list(range(100)))
        self.validate_sequence(self.b, [])

    def test_scenarios_in_reverse_order(self):
        # Running the catalog backwards still yields the documented counts
        for name, scenario in reversed(self.runner.scenarios()):
            outcome = scenario(self.a, self.b)
            records = outcome if isinstance(outcome, tuple) else (outcome,)
            for record in records:
                self.assertGreater(record.iteration_count, 0, name)


class TestMeasurement(BaseRunnerTestCase):

    operation_count = 50

    def test_durations_come_from_the_clock(self):
        runner = self.make_runner()
        ticks = itertools.count(0, 100)
        with mock.patch.object(runner_module.time, "perf_counter_ns", side_effect=lambda: next(ticks)):
            records = runner.run_scenarios()
        for record in records:
            self.assertEqual(record.duration_a, 100)
            self.assertEqual(record.duration_b, 100)

    def test_gc_disabled_inside_timed_window(self):
        runner = self.make_runner(disable_gc=True)
        seen = []
        self.assertTrue(gc.isenabled())
        runner._measure(lambda c: seen.append(gc.isenabled()), ArrayList())
        self.assertEqual(seen, [False])
        self.assertTrue(gc.isenabled())

    def test_no_progress_thread_while_timing(self):
        runner = ListBenchmarkRunner(BenchmarkConfig(operation_count=50, show_progress=True))
        measure = runner._measure
        before = {t.ident for t in threading.enumerate()}
        seen = []

        def spy(body, container):
            seen.append(threading.enumerate())
            return measure(body, container)

        with mock.patch.object(runner, "_measure", side_effect=spy):
            records = runner.run_scenarios()
        self.assertEqual(len(records), 11)
        self.assertTrue(seen)
        for threads in seen:
            self.assertIn(threading.main_thread(), threads)
            self.assertLessEqual({t.ident for t in threads}, before)
            self.assertNotIn("tqdm_monitor", [t.name for t in threads])

    def test_gc_left_alone_when_configured(self):
        runner = self.make_runner(disable_gc=False)
        seen = []
        runner._measure(lambda c: seen.append(gc.isenabled()), ArrayList())
        self.assertEqual(seen, [True])

    def test_gc_restored_after_error(self):
        runner = self.make_runner(disable_gc=True)

        def boom(container):
            raise RuntimeError("boom")

        with self.assertRaises(RuntimeError):
            runner._measure(boom, ArrayList())
        self.assertTrue(gc.isenabled())

    def test_custom_containers(self):
        small = make_array_list_class(2)
        runner = self.make_runner(container_a=small, container_b=ArrayList)
        records = runner.run_scenarios()
        self.assertEqual(len(records), 11)
        self.assertEqual(runner.name_a, "ArrayList")
        self.assertEqual(runner.name_b, "ArrayList")

    def test_factory_without_display_name(self):
        def make_linked():
            return LinkedList()

        runner = self.make_runner(container_b=make_linked)
        self.assertEqual(runner.name_b, "make_linked")


class TestRunnerLogging(BaseRunnerTestCase):

    operation_count = 20

    def test_summary_logged(self):
        runner = self.make_runner()
        with self.assertLogs("list_bench.runner", level="INFO") as logs:
            runner.run_scenarios()
        self.assertTrue(any("Collected 11 records" in line for line in logs.output))

    def test_warns_on_debug_logging(self):
        project_logger = logging.getLogger("list_bench")
        old_level = project_logger.level
        project_logger.setLevel(logging.DEBUG)
        try:
            with self.assertLogs("list_bench.runner", level="WARNING") as logs:
                self.make_runner()
        finally:
            project_logger.setLevel(old_level)
        self.assertTrue(any("Verbose logging" in line for line in logs.output))


class TestRunAll(BaseRunnerTestCase):

    def test_report(self):
        report = run_all(BenchmarkConfig(operation_count=SMALL_N))
        self.assertTrue(report.startswith("Comparison of ArrayList and LinkedList performance\n"))
        self.assertIn(f"Number of operations: {SMALL_N}\n", report)
        self.assertTrue(report.endswith("=" * 120 + "\n"))
        rows = [line for line in report.split("\n") if line.startswith("| ") and "faster" in line]
        self.assertEqual(len(rows), 11)


if __name__ == "__main__":
    unittest.main()
