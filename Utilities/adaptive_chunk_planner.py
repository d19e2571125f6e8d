"""
┌──────────────────────────────────────────────────────────────────────────────┐
│ Adaptive Chunk Planner - Worker Count / Chunk Size Selection                 │
├──────────────────────────────────────────────────────────────────────────────┤
│ Author: Dr. Venkata Rajesh Yella | License: MIT | Version: 2025.1            │
└──────────────────────────────────────────────────────────────────────────────┘

DESCRIPTION:
    Decides worker count and chunk size for ``--threads auto`` from the number
    of offsets to scan, the RAM budget and the CPU count.

    Rules:

        * Scans shorter than two minimum chunks run on a single worker.
        * Workers = min(cpu_count, max_auto_workers, chunks available).
        * Chunk size is capped so that ``workers × chunk_size × bytes_per_offset``
          stays inside the RAM budget.

USAGE::

    from Utilities.system_resource_inspector import SystemResourceInspector

    resources = SystemResourceInspector()
    planner   = AdaptiveChunkPlanner()

    plan = planner.plan(
        offset_count = 50_000_000,
        ram_budget   = resources.get_memory_budget(),
        cpu_count    = resources.get_cpu_count(),
    )
    # plan["chunk_size"], plan["workers"]
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from Utilities.config.scan import CHUNKING_CONFIG

logger = logging.getLogger(__name__)


class AdaptiveChunkPlanner:
    """Determine worker count and chunk size for a given environment."""

    def __init__(self, config: Optional[Dict[str, Any]] = None) -> None:
        cfg = dict(CHUNKING_CONFIG)
        if config:
            cfg.update(config)
        self.default_chunk_size: int = cfg['default_chunk_size']
        self.min_chunk_size: int = cfg['min_chunk_size']
        self.max_auto_workers: int = cfg['max_auto_workers']
        self.bytes_per_offset: int = cfg['bytes_per_offset']

    def plan(
        self,
        offset_count: int,
        ram_budget: int,
        cpu_count: int,
    ) -> Dict[str, Any]:
        """
        Compute scan parameters appropriate for the given resources.

        Args:
            offset_count: Number of window offsets to evaluate.
            ram_budget:   Safe available RAM in bytes.
            cpu_count:    Number of usable CPU cores.

        Returns:
            Dict with keys ``chunk_size`` (int) and ``workers`` (int ≥ 1).
        """
        if offset_count < 2 * self.min_chunk_size:
            workers = 1
        else:
            max_useful = max(1, offset_count // self.min_chunk_size)
            workers = max(1, min(cpu_count, self.max_auto_workers, max_useful))

        memory_cap = ram_budget // max(1, workers * self.bytes_per_offset)
        chunk_size = max(self.min_chunk_size, min(self.default_chunk_size, memory_cap))

        plan: Dict[str, Any] = {
            "chunk_size": chunk_size,
            "workers": workers,
        }

        logger.info(
            f"AdaptiveChunkPlanner: offsets={offset_count:,}, "
            f"ram_budget={ram_budget / 1e9:.2f} GB, cpus={cpu_count} → "
            f"chunk_size={chunk_size:,}, workers={workers}"
        )
        return plan
