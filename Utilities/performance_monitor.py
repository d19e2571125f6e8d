"""
┌──────────────────────────────────────────────────────────────────────────────┐
│ PerformanceMonitor - Scan Telemetry                                          │
├──────────────────────────────────────────────────────────────────────────────┤
│ Author: Dr. Venkata Rajesh Yella | License: MIT | Version: 2025.1            │
└──────────────────────────────────────────────────────────────────────────────┘

DESCRIPTION:
    Thread-safe performance monitor that tracks per-chunk and per-stage
    timings across one scan.

    Tracks:
        - Per-chunk runtime, offsets evaluated and hit count
        - Named stage durations (partition, detection, merge)
        - Peak RSS memory via psutil

    Usage::

        from Utilities.performance_monitor import PerformanceMonitor

        monitor = PerformanceMonitor()
        monitor.start()
        monitor.record_chunk(chunk_id=0, elapsed=0.2, hit_count=12, offset_count=250_000)
        monitor.record_stage("detection", elapsed=0.8)

        summary = monitor.get_summary()
        print(summary["throughput_ops"])
"""

from __future__ import annotations

import logging
import os
import threading
from time import perf_counter
from typing import Any, Dict, List, Optional

import psutil

logger = logging.getLogger(__name__)


class PerformanceMonitor:
    """
    Thread-safe real-time performance monitor for palindrome scans.

    All ``record_*`` methods are safe to call from worker threads.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._start_time: Optional[float] = None
        self._stage_records: Dict[str, float] = {}
        self._chunk_records: List[Dict[str, Any]] = []
        self._peak_memory_mb: float = 0.0

    # ------------------------------------------------------------------
    # LIFECYCLE
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Reset all records and start the global timer."""
        with self._lock:
            self._stage_records = {}
            self._chunk_records = []
            self._peak_memory_mb = 0.0
            self._start_time = perf_counter()
        self.snapshot_memory()

    # ------------------------------------------------------------------
    # RECORDING
    # ------------------------------------------------------------------

    def record_stage(self, stage_name: str, elapsed: float) -> None:
        """
        Record the wall-clock duration of a named scan stage.

        Args:
            stage_name: Stage name (e.g. ``"detection"``, ``"merge"``).
            elapsed:    Duration in seconds.
        """
        with self._lock:
            self._stage_records[stage_name] = elapsed

    def record_chunk(
        self,
        chunk_id: int,
        elapsed: float,
        hit_count: int,
        offset_count: int,
    ) -> None:
        """
        Record the evaluation of one offset chunk.

        Args:
            chunk_id:     Zero-based chunk index.
            elapsed:      Wall-clock time to evaluate the chunk (seconds).
            hit_count:    Palindromes found in this chunk.
            offset_count: Offsets evaluated in this chunk.
        """
        with self._lock:
            self._chunk_records.append(
                {
                    "chunk_id": chunk_id,
                    "elapsed": elapsed,
                    "hit_count": hit_count,
                    "offset_count": offset_count,
                }
            )

    # ------------------------------------------------------------------
    # MEMORY
    # ------------------------------------------------------------------

    def snapshot_memory(self) -> float:
        """
        Capture current RSS memory and update peak.

        Returns:
            Current RSS memory in MB, or 0.0 if the process cannot be inspected.
        """
        try:
            mb = psutil.Process(os.getpid()).memory_info().rss / 1_048_576
        except psutil.Error as exc:
            logger.debug(f"PerformanceMonitor: memory snapshot failed: {exc}")
            return 0.0
        with self._lock:
            if mb > self._peak_memory_mb:
                self._peak_memory_mb = mb
        return mb

    # ------------------------------------------------------------------
    # SUMMARY
    # ------------------------------------------------------------------

    def get_summary(self) -> Dict[str, Any]:
        """
        Return a snapshot of all collected performance metrics.

        Returns:
            Dict with keys::

                {
                    "total_elapsed":   float,   # seconds since start()
                    "total_offsets":   int,
                    "total_hits":      int,
                    "throughput_ops":  float,   # offsets / second
                    "peak_memory_mb":  float,
                    "chunk_count":     int,
                    "avg_chunk_time":  float,
                    "slowest_chunk":   int | None,
                    "chunk_records":   list,    # sorted by chunk_id
                    "stage_times":     dict,
                }
        """
        with self._lock:
            elapsed_since_start = (
                perf_counter() - self._start_time if self._start_time else 0.0
            )
            records = sorted(self._chunk_records, key=lambda c: c["chunk_id"])
            total_offsets = sum(c["offset_count"] for c in records)
            total_hits = sum(c["hit_count"] for c in records)
            chunk_times = [c["elapsed"] for c in records]
            slowest = (
                max(records, key=lambda c: c["elapsed"])["chunk_id"] if records else None
            )

            return {
                "total_elapsed": elapsed_since_start,
                "total_offsets": total_offsets,
                "total_hits": total_hits,
                "throughput_ops": (
                    total_offsets / elapsed_since_start if elapsed_since_start > 0 else 0.0
                ),
                "peak_memory_mb": self._peak_memory_mb,
                "chunk_count": len(records),
                "avg_chunk_time": (
                    sum(chunk_times) / len(chunk_times) if chunk_times else 0.0
                ),
                "slowest_chunk": slowest,
                "chunk_records": records,
                "stage_times": dict(self._stage_records),
            }

    def format_summary(self) -> str:
        """Return a human-readable performance summary table."""
        s = self.get_summary()

        lines: List[str] = [
            "══════════════════════════════════════════════════",
            "  Performance Summary",
            "══════════════════════════════════════════════════",
            f"  Total runtime      : {s['total_elapsed']:.3f} s",
            f"  Offsets evaluated  : {s['total_offsets']:,}",
            f"  Palindromes found  : {s['total_hits']:,}",
            f"  Throughput         : {s['throughput_ops']:,.0f} offsets/s",
            f"  Peak memory        : {s['peak_memory_mb']:.1f} MB",
            f"  Chunks processed   : {s['chunk_count']}",
            f"  Avg chunk time     : {s['avg_chunk_time']:.3f} s",
        ]

        if s.get("stage_times"):
            lines.append("")
            lines.append("  Stage Times:")
            for stage, t in sorted(s["stage_times"].items()):
                lines.append(f"    {stage:<20} {t:.3f} s")

        if s.get("slowest_chunk") is not None:
            lines.append(f"\n  Slowest chunk: {s['slowest_chunk']}")

        lines.append("══════════════════════════════════════════════════")
        return "\n".join(lines)
