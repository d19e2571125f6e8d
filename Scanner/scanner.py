"""
┌──────────────────────────────────────────────────────────────────────────────┐
│ PalindromeScanner - Chunk-Parallel Reverse-Complement Palindrome Scan        │
├──────────────────────────────────────────────────────────────────────────────┤
│ Author: Dr. Venkata Rajesh Yella | License: MIT | Version: 2025.1            │
└──────────────────────────────────────────────────────────────────────────────┘

DESCRIPTION:
    Applies the low-information filter and the palindrome predicate at every
    valid offset of a sequence, in parallel, and returns the hits in
    ascending offset order.

    Execution model::

        Caller
            ↓
        ScanConfig (validated once: L, workers, policy, chunk size)
            ↓
        ChunkGenerator  – contiguous offset chunks
            ↓
        ThreadPoolExecutor (max_workers = config.workers)
            ↓
        evaluate_chunk() [per chunk]  – reads the shared read-only code array
            ↓
        Private offset list per chunk
            ↓
        Main: place partials by chunk index, concatenate → ordered hits

    The merge is keyed by chunk index, never by completion order, so the
    output is identical for any worker count or chunk size.

    A single worker (or a single chunk) runs in the calling thread without a
    pool.

USAGE::

    from Scanner.scanner import PalindromeScanner, ScanConfig

    scanner = PalindromeScanner(ScanConfig(window_length=10, workers=4))
    hits = scanner.scan(sequence)
    for hit in hits:
        print(hit.offset, hit.window)
    print(scanner.format_performance_summary())
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from time import perf_counter
from typing import Any, Callable, Dict, List, Optional, Union

from Scanner.chunk_generator import ChunkGenerator, balanced_chunk_size
from Scanner.predicates import PalindromePolicy
from Scanner.sequence import Sequence
from Scanner.window_kernel import evaluate_chunk, evaluate_chunk_python
from Utilities.config.scan import CHUNKING_CONFIG, SCAN_CONFIG
from Utilities.errors import ConfigurationError
from Utilities.performance_monitor import PerformanceMonitor

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# DATA CLASSES
# ──────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Hit:
    """A qualifying window: 0-based ``offset`` and the window's symbols."""
    offset: int
    window: str

    @property
    def length(self) -> int:
        return len(self.window)

    @property
    def end(self) -> int:
        return self.offset + len(self.window)


def _require_positive_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be a positive integer (got {value!r})")
    if value < 1:
        raise ConfigurationError(f"{name} must be ≥ 1 (got {value})")
    return value


@dataclass(frozen=True)
class ScanConfig:
    """
    Parameters of one scan, validated at construction and immutable after.

    Attributes:
        window_length: Window length L (≥ 1)
        workers:       Worker threads (≥ 1)
        policy:        ``PalindromePolicy`` or its string value
        chunk_size:    Maximum offsets per chunk (≥ 1)
        vectorized:    numpy kernel when True, per-window loop when False

    Raises:
        ConfigurationError: On any invalid value.
    """
    window_length: int = SCAN_CONFIG['default_window_length']
    workers: int = SCAN_CONFIG['default_workers']
    policy: Union[PalindromePolicy, str] = SCAN_CONFIG['default_policy']
    chunk_size: int = CHUNKING_CONFIG['default_chunk_size']
    vectorized: bool = SCAN_CONFIG['vectorized']

    def __post_init__(self) -> None:
        _require_positive_int("window_length", self.window_length)
        _require_positive_int("workers", self.workers)
        _require_positive_int("chunk_size", self.chunk_size)
        try:
            object.__setattr__(self, "policy", PalindromePolicy.parse(self.policy))
        except ValueError as exc:
            choices = ", ".join(p.value for p in PalindromePolicy)
            raise ConfigurationError(
                f"unknown palindrome policy {self.policy!r} (choose from {choices})"
            ) from exc


# ──────────────────────────────────────────────────────────────────────────────
# SCANNER
# ──────────────────────────────────────────────────────────────────────────────

class PalindromeScanner:
    """
    Chunk-parallel palindrome scanner with per-chunk telemetry.

    Progress callback payload (one call per completed chunk)::

        {
            "stage":           "detection",
            "chunk_id":        int,
            "elapsed":         float,   # chunk wall-clock
            "offsets":         int,     # offsets evaluated in the chunk
            "hits":            int,
            "throughput":      float,   # offsets/sec for this chunk
            "progress_pct":    float,   # 0–100
        }
    """

    def __init__(self, config: Optional[ScanConfig] = None) -> None:
        self.config = config if config is not None else ScanConfig()
        self._monitor = PerformanceMonitor()
        self._cancel_event = threading.Event()

        logger.debug(
            f"PalindromeScanner ready (L={self.config.window_length}, "
            f"workers={self.config.workers}, policy={self.config.policy.value}, "
            f"chunk={self.config.chunk_size:,})"
        )

    # ------------------------------------------------------------------
    # PUBLIC API
    # ------------------------------------------------------------------

    def scan(
        self,
        sequence: Union[Sequence, str],
        progress_callback: Optional[Callable[[Dict[str, Any]], None]] = None,
    ) -> List[Hit]:
        """
        Scan ``sequence`` and return every hit in ascending offset order.

        Args:
            sequence:          ``Sequence`` or plain symbol string.
            progress_callback: Optional callable receiving a telemetry dict.

        Returns:
            List of ``Hit``; empty when no offset qualifies or L > len(sequence).

        Raises:
            ScanCancelledError: If :meth:`cancel` was called during the scan.
        """
        if not isinstance(sequence, Sequence):
            sequence = Sequence(sequence)

        self._cancel_event.clear()
        self._monitor.start()

        window_length = self.config.window_length
        policy = self.config.policy
        offset_count = sequence.offset_count(window_length)

        logger.info(
            f"PalindromeScanner: '{sequence.name}' length={sequence.length:,} bp, "
            f"L={window_length}, policy={policy.value}"
        )

        if offset_count == 0:
            logger.info(
                f"PalindromeScanner: window length {window_length} exceeds sequence "
                f"length {sequence.length:,} – nothing to scan"
            )
            return []
        if policy is PalindromePolicy.STRICT and window_length % 2 != 0:
            logger.warning(
                f"PalindromeScanner: odd window length {window_length} never "
                "satisfies the strict policy – result is empty"
            )
            return []

        # Partition
        t0 = perf_counter()
        chunk_size = balanced_chunk_size(
            offset_count,
            self.config.workers,
            max_chunk_size=self.config.chunk_size,
            min_chunk_size=min(self.config.chunk_size, CHUNKING_CONFIG['min_chunk_size']),
        )
        chunks = list(ChunkGenerator(offset_count, chunk_size, window_length).generate())
        self._monitor.record_stage("partition", perf_counter() - t0)

        workers = min(self.config.workers, len(chunks))
        logger.info(f"PalindromeScanner: {len(chunks)} chunk(s) → {workers} worker(s)")

        # Detection
        t_detection = perf_counter()
        partials: List[Optional[List[int]]] = [None] * len(chunks)
        if workers == 1:
            self._run_sequential(sequence, chunks, partials, progress_callback)
        else:
            self._run_parallel(sequence, chunks, partials, workers, progress_callback)
        self._monitor.record_stage("detection", perf_counter() - t_detection)

        # Merge in chunk order
        t_merge = perf_counter()
        text = sequence.text
        hits = [
            Hit(offset, text[offset:offset + window_length])
            for partial in partials
            for offset in partial
        ]
        self._monitor.record_stage("merge", perf_counter() - t_merge)
        self._monitor.snapshot_memory()

        logger.info(f"PalindromeScanner: complete – {len(hits):,} palindrome(s)")
        return hits

    def cancel(self) -> None:
        """Request cooperative cancellation of the scan in progress."""
        logger.info("PalindromeScanner: cancellation requested")
        self._cancel_event.set()

    def get_performance_summary(self) -> Dict[str, Any]:
        """Return the performance summary dict from the last ``scan()`` call."""
        return self._monitor.get_summary()

    def format_performance_summary(self) -> str:
        return self._monitor.format_summary()

    # ------------------------------------------------------------------
    # EXECUTION
    # ------------------------------------------------------------------

    def _evaluate(self, sequence: Sequence, chunk: Dict[str, Any]) -> Dict[str, Any]:
        """Evaluate one chunk; only reads shared state, returns a private list."""
        t0 = perf_counter()
        if self.config.vectorized:
            offsets = evaluate_chunk(
                sequence.codes, chunk["start"], chunk["end"],
                self.config.window_length, self.config.policy, self._cancel_event,
            )
        else:
            offsets = evaluate_chunk_python(
                sequence, chunk["start"], chunk["end"],
                self.config.window_length, self.config.policy, self._cancel_event,
            )
        return {
            "index": chunk["index"],
            "offsets": offsets,
            "offset_count": chunk["end"] - chunk["start"],
            "elapsed": perf_counter() - t0,
        }

    def _collect(
        self,
        result: Dict[str, Any],
        partials: List[Optional[List[int]]],
        completed: int,
        total: int,
        progress_callback: Optional[Callable],
    ) -> None:
        idx = result["index"]
        partials[idx] = result["offsets"]
        self._monitor.record_chunk(
            chunk_id=idx,
            elapsed=result["elapsed"],
            hit_count=len(result["offsets"]),
            offset_count=result["offset_count"],
        )
        logger.debug(
            f"PalindromeScanner: chunk {idx} done "
            f"({len(result['offsets'])} hits, {result['elapsed']:.3f}s)"
        )
        if progress_callback is not None:
            self._emit_progress(progress_callback, result, completed / total * 100.0)

    def _run_sequential(self, sequence, chunks, partials, progress_callback) -> None:
        for completed, chunk in enumerate(chunks, start=1):
            result = self._evaluate(sequence, chunk)
            self._collect(result, partials, completed, len(chunks), progress_callback)

    def _run_parallel(self, sequence, chunks, partials, workers, progress_callback) -> None:
        with ThreadPoolExecutor(max_workers=workers,
                                thread_name_prefix="palindrome-scan") as executor:
            futures = [executor.submit(self._evaluate, sequence, chunk) for chunk in chunks]
            try:
                for completed, future in enumerate(as_completed(futures), start=1):
                    self._collect(future.result(), partials, completed,
                                  len(chunks), progress_callback)
            except BaseException:
                # stop the remaining chunks before the pool joins
                self._cancel_event.set()
                for future in futures:
                    future.cancel()
                raise

    # ------------------------------------------------------------------
    # PROGRESS HELPER
    # ------------------------------------------------------------------

    @staticmethod
    def _emit_progress(cb: Callable, result: Dict[str, Any], progress_pct: float) -> None:
        elapsed = result["elapsed"]
        telemetry = {
            "stage": "detection",
            "chunk_id": result["index"],
            "elapsed": elapsed,
            "offsets": result["offset_count"],
            "hits": len(result["offsets"]),
            "throughput": result["offset_count"] / elapsed if elapsed > 0 else 0.0,
            "progress_pct": progress_pct,
        }
        try:
            cb(telemetry)
        except Exception as exc:
            logger.warning(f"PalindromeScanner: progress_callback error: {exc}")


# ──────────────────────────────────────────────────────────────────────────────
# CONVENIENCE
# ──────────────────────────────────────────────────────────────────────────────

def scan(
    sequence: Union[Sequence, str],
    window_length: int,
    workers: int = 1,
    policy: Union[PalindromePolicy, str] = PalindromePolicy.STRICT,
    **config_kwargs: Any,
) -> List[Hit]:
    """
    One-shot scan with a throwaway ``PalindromeScanner``.

    Example:
        >>> [(h.offset, h.window) for h in scan("ACATGAGGC", 4)]
        [(1, 'CATG')]
    """
    config = ScanConfig(window_length=window_length, workers=workers,
                        policy=policy, **config_kwargs)
    return PalindromeScanner(config).scan(sequence)
