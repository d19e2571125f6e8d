"""
Test suite for offset-range chunking.
Verifies every offset is covered exactly once, in order.
"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import unittest
from Scanner.chunk_generator import ChunkGenerator, balanced_chunk_size


class TestChunkGenerator(unittest.TestCase):
    """Partitioning of [0, offset_count) into contiguous chunks."""

    def test_exact_coverage(self):
        """Chunks are contiguous, ordered and cover every offset once."""
        for offset_count, chunk_size in [(1, 1), (10, 3), (997, 100), (1000, 250), (5, 10)]:
            chunks = list(ChunkGenerator(offset_count, chunk_size, 4).generate())
            covered = [o for c in chunks for o in range(c["start"], c["end"])]
            self.assertEqual(covered, list(range(offset_count)))
            self.assertEqual([c["index"] for c in chunks], list(range(len(chunks))))

    def test_len_matches_generate(self):
        gen = ChunkGenerator(997, 100, 4)
        self.assertEqual(len(gen), 10)
        self.assertEqual(len(list(gen.generate())), 10)

    def test_span_end(self):
        chunks = list(ChunkGenerator(20, 10, 6).generate())
        self.assertEqual(chunks[0]["span_end"], 15)
        self.assertEqual(chunks[1]["span_end"], 25)

    def test_zero_offsets(self):
        self.assertEqual(list(ChunkGenerator(0, 100).generate()), [])

    def test_invalid_chunk_size(self):
        with self.assertRaises(ValueError):
            ChunkGenerator(10, 0)

    def test_negative_offset_count(self):
        with self.assertRaises(ValueError):
            ChunkGenerator(-1, 10)


class TestBalancedChunkSize(unittest.TestCase):
    """Chunk sizing across workers."""

    def test_splits_across_workers(self):
        self.assertEqual(balanced_chunk_size(1000, 4, max_chunk_size=250_000), 250)

    def test_capped_by_max(self):
        self.assertEqual(balanced_chunk_size(1000, 4, max_chunk_size=100), 100)

    def test_floor(self):
        self.assertEqual(balanced_chunk_size(10, 8, max_chunk_size=100, min_chunk_size=5), 5)

    def test_empty_range(self):
        self.assertEqual(balanced_chunk_size(0, 4, max_chunk_size=100), 1)


if __name__ == '__main__':
    unittest.main()
