"""
┌──────────────────────────────────────────────────────────────────────────────┐
│ Chunk Generator - Contiguous Offset-Range Partitioner                        │
├──────────────────────────────────────────────────────────────────────────────┤
│ Author: Dr. Venkata Rajesh Yella | License: MIT | Version: 2025.1            │
└──────────────────────────────────────────────────────────────────────────────┘

DESCRIPTION:
    Splits the valid window-offset range ``[0, n − L]`` into contiguous,
    non-overlapping chunks.  Chunks partition *offsets*, not bases: a chunk
    ``[start, end)`` reads symbols ``[start, end + L − 1)``, so neighbouring
    chunks share ``L − 1`` symbols of input but never an offset.  No boundary
    deduplication is therefore needed.

    Example with 1 000 000 offsets, chunk_size=250 000, L=10:

        Chunk 0:  offsets [      0 – 250 000)  span_end = 250 009
        Chunk 1:  offsets [250 000 – 500 000)  span_end = 500 009
        Chunk 2:  offsets [500 000 – 750 000)  span_end = 750 009
        Chunk 3:  offsets [750 000 – 1 000 000) span_end = 1 000 009

USAGE::

    gen = ChunkGenerator(offset_count=1_000_000, chunk_size=250_000, window_length=10)
    for chunk in gen.generate():
        # chunk["index"], chunk["start"], chunk["end"], chunk["span_end"]
        evaluate(chunk["start"], chunk["end"])
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Generator

logger = logging.getLogger(__name__)


class ChunkGenerator:
    """
    Yield offset chunks as dicts, in ascending order.

    Each yielded dict contains:

    * ``index``     – int, zero-based chunk index (merge key)
    * ``start``     – int, first offset (inclusive)
    * ``end``       – int, last offset (exclusive)
    * ``span_end``  – int, exclusive end of the symbols the chunk reads
    """

    def __init__(self, offset_count: int, chunk_size: int, window_length: int = 1):
        """
        Args:
            offset_count:  Number of valid offsets (``max(0, n − L + 1)``).
            chunk_size:    Offsets per chunk.
            window_length: Window length L, used for ``span_end``.

        Raises:
            ValueError: If ``chunk_size`` < 1 or ``offset_count`` < 0.
        """
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be ≥ 1 (got {chunk_size})")
        if offset_count < 0:
            raise ValueError(f"offset_count must be ≥ 0 (got {offset_count})")
        self.offset_count = offset_count
        self.chunk_size = chunk_size
        self.window_length = window_length

    def __len__(self) -> int:
        return math.ceil(self.offset_count / self.chunk_size)

    def generate(self) -> Generator[Dict[str, Any], None, None]:
        """Yield chunk dicts covering ``[0, offset_count)`` exactly once."""
        index = 0
        for start in range(0, self.offset_count, self.chunk_size):
            end = min(start + self.chunk_size, self.offset_count)
            logger.debug(f"ChunkGenerator: chunk {index} offsets [{start:,}–{end:,})")
            yield {
                "index": index,
                "start": start,
                "end": end,
                "span_end": end + self.window_length - 1,
            }
            index += 1

        logger.debug(
            f"ChunkGenerator: yielded {index} chunk(s) for {self.offset_count:,} offsets"
        )


def balanced_chunk_size(offset_count: int, workers: int, max_chunk_size: int,
                        min_chunk_size: int = 1) -> int:
    """
    Chunk size that gives every worker at least one chunk, capped at
    ``max_chunk_size`` and floored at ``min_chunk_size``.
    """
    if offset_count <= 0:
        return max(1, min_chunk_size)
    per_worker = math.ceil(offset_count / max(1, workers))
    return max(1, min_chunk_size, min(max_chunk_size, per_worker))
