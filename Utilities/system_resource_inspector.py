"""
┌──────────────────────────────────────────────────────────────────────────────┐
│ System Resource Inspector - RAM / CPU Availability Detection                 │
├──────────────────────────────────────────────────────────────────────────────┤
│ Author: Dr. Venkata Rajesh Yella | License: MIT | Version: 2025.1            │
└──────────────────────────────────────────────────────────────────────────────┘

DESCRIPTION:
    Detects RAM and CPU availability and determines safe operating limits.
    Used by AdaptiveChunkPlanner when the worker count is ``auto``.

USAGE::

    inspector = SystemResourceInspector()
    budget = inspector.get_memory_budget()   # 60% of available RAM in bytes
    cpus   = inspector.get_cpu_count()
"""

from __future__ import annotations

import logging
import os

import psutil

logger = logging.getLogger(__name__)

# Fraction of available RAM exposed as the safe memory budget
_MEMORY_BUDGET_FRACTION: float = 0.60

# Conservative fallback when the OS refuses to report memory
_FALLBACK_RAM: int = 512 * 1024 * 1024


class SystemResourceInspector:
    """
    Inspect system resources and compute safe operating limits.

    All values are in bytes unless otherwise stated.
    """

    def get_available_ram(self) -> int:
        """
        Return currently available (free + reclaimable) RAM in bytes.

        Falls back to a conservative 512 MB estimate when psutil cannot read
        memory statistics (restricted containers).
        """
        try:
            return psutil.virtual_memory().available
        except (psutil.Error, OSError) as exc:
            logger.warning(f"Cannot read available RAM – defaulting to 512 MB: {exc}")
            return _FALLBACK_RAM

    def get_cpu_count(self) -> int:
        """
        Return the number of CPU cores this process may run on.

        Prefers the scheduler affinity mask (containers, taskset), then
        ``os.cpu_count()``; falls back to 1.
        """
        try:
            count = len(psutil.Process().cpu_affinity())
        except (AttributeError, psutil.Error, OSError):
            count = os.cpu_count()
        if count is None or count < 1:
            logger.warning("CPU count unavailable – defaulting to 1")
            return 1
        return count

    def get_memory_budget(self) -> int:
        """
        Return the safe usable RAM budget in bytes.

        Defined as ``_MEMORY_BUDGET_FRACTION`` (60 %) of currently available
        RAM so the scan does not starve other processes.

        Returns:
            Safe memory budget in bytes (≥ 1 byte).
        """
        budget = int(self.get_available_ram() * _MEMORY_BUDGET_FRACTION)
        return max(budget, 1)
