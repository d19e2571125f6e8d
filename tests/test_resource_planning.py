"""
Test suite for resource-aware scan planning.
Tests SystemResourceInspector, AdaptiveChunkPlanner and PerformanceMonitor.
"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import threading
import unittest
from unittest import mock

import psutil

from Utilities.adaptive_chunk_planner import AdaptiveChunkPlanner
from Utilities.performance_monitor import PerformanceMonitor
from Utilities.system_resource_inspector import SystemResourceInspector


class TestSystemResourceInspector(unittest.TestCase):
    """RAM and CPU detection."""

    def setUp(self):
        self.inspector = SystemResourceInspector()

    def test_available_ram_positive(self):
        self.assertGreater(self.inspector.get_available_ram(), 0)

    def test_cpu_count_positive(self):
        self.assertGreaterEqual(self.inspector.get_cpu_count(), 1)

    def test_memory_budget_is_fraction(self):
        with mock.patch.object(SystemResourceInspector, 'get_available_ram',
                               return_value=1_000_000):
            self.assertAlmostEqual(self.inspector.get_memory_budget(), 600_000, delta=1)

    def test_ram_fallback_when_psutil_fails(self):
        with mock.patch('psutil.virtual_memory', side_effect=psutil.Error("denied")):
            self.assertEqual(self.inspector.get_available_ram(), 512 * 1024 * 1024)
            self.assertEqual(self.inspector.get_memory_budget(),
                             int(512 * 1024 * 1024 * 0.6))

    def test_cpu_fallback_to_os(self):
        with mock.patch('psutil.Process', side_effect=psutil.Error("denied")), \
                mock.patch('os.cpu_count', return_value=3):
            self.assertEqual(self.inspector.get_cpu_count(), 3)

    def test_cpu_fallback_to_one(self):
        with mock.patch('psutil.Process', side_effect=psutil.Error("denied")), \
                mock.patch('os.cpu_count', return_value=None):
            self.assertEqual(self.inspector.get_cpu_count(), 1)


class TestAdaptiveChunkPlanner(unittest.TestCase):
    """Worker count and chunk size selection."""

    def setUp(self):
        self.planner = AdaptiveChunkPlanner()

    def test_small_scan_single_worker(self):
        plan = self.planner.plan(offset_count=1_500, ram_budget=10**9, cpu_count=16)
        self.assertEqual(plan['workers'], 1)

    def test_workers_capped_by_cpu(self):
        plan = self.planner.plan(offset_count=10_000_000, ram_budget=10**10, cpu_count=4)
        self.assertEqual(plan['workers'], 4)
        self.assertEqual(plan['chunk_size'], 250_000)

    def test_workers_capped_by_max_auto(self):
        plan = self.planner.plan(offset_count=10_000_000, ram_budget=10**10, cpu_count=64)
        self.assertEqual(plan['workers'], 8)

    def test_workers_capped_by_available_chunks(self):
        plan = self.planner.plan(offset_count=3_500, ram_budget=10**10, cpu_count=64)
        self.assertEqual(plan['workers'], 3)

    def test_chunk_size_capped_by_memory(self):
        plan = self.planner.plan(offset_count=10_000_000, ram_budget=160_000, cpu_count=2)
        self.assertEqual(plan['workers'], 2)
        self.assertEqual(plan['chunk_size'], 5_000)

    def test_chunk_size_floor(self):
        plan = self.planner.plan(offset_count=10_000_000, ram_budget=1, cpu_count=2)
        self.assertEqual(plan['chunk_size'], 1_000)

    def test_chunk_size_never_exceeds_small_default(self):
        planner = AdaptiveChunkPlanner({'default_chunk_size': 10, 'min_chunk_size': 10})
        plan = planner.plan(offset_count=1_997, ram_budget=10**10, cpu_count=4)
        self.assertEqual(plan['chunk_size'], 10)
        self.assertEqual(plan['workers'], 4)

    def test_config_override(self):
        planner = AdaptiveChunkPlanner({'default_chunk_size': 10_000})
        plan = planner.plan(offset_count=10_000_000, ram_budget=10**10, cpu_count=2)
        self.assertEqual(plan['chunk_size'], 10_000)


class TestPerformanceMonitor(unittest.TestCase):
    """Per-chunk and per-stage telemetry."""

    def test_summary_aggregates_chunks(self):
        monitor = PerformanceMonitor()
        monitor.start()
        monitor.record_chunk(chunk_id=1, elapsed=0.2, hit_count=3, offset_count=100)
        monitor.record_chunk(chunk_id=0, elapsed=0.1, hit_count=2, offset_count=100)
        monitor.record_stage("detection", 0.3)

        summary = monitor.get_summary()
        self.assertEqual(summary['chunk_count'], 2)
        self.assertEqual(summary['total_offsets'], 200)
        self.assertEqual(summary['total_hits'], 5)
        self.assertEqual(summary['slowest_chunk'], 1)
        self.assertEqual([c['chunk_id'] for c in summary['chunk_records']], [0, 1])
        self.assertAlmostEqual(summary['avg_chunk_time'], 0.15)
        self.assertEqual(summary['stage_times'], {"detection": 0.3})

    def test_start_resets(self):
        monitor = PerformanceMonitor()
        monitor.start()
        monitor.record_chunk(chunk_id=0, elapsed=0.1, hit_count=1, offset_count=10)
        monitor.start()
        self.assertEqual(monitor.get_summary()['chunk_count'], 0)

    def test_empty_summary(self):
        summary = PerformanceMonitor().get_summary()
        self.assertEqual(summary['chunk_count'], 0)
        self.assertIsNone(summary['slowest_chunk'])
        self.assertEqual(summary['throughput_ops'], 0.0)

    def test_concurrent_recording(self):
        monitor = PerformanceMonitor()
        monitor.start()

        def record(base):
            for i in range(100):
                monitor.record_chunk(chunk_id=base + i, elapsed=0.0,
                                     hit_count=1, offset_count=1)

        threads = [threading.Thread(target=record, args=(n * 100,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(monitor.get_summary()['chunk_count'], 400)

    def test_memory_snapshot(self):
        monitor = PerformanceMonitor()
        self.assertGreater(monitor.snapshot_memory(), 0.0)

    def test_format_summary(self):
        monitor = PerformanceMonitor()
        monitor.start()
        monitor.record_stage("merge", 0.01)
        text = monitor.format_summary()
        self.assertIn("Performance Summary", text)
        self.assertIn("merge", text)


if __name__ == '__main__':
    unittest.main()
