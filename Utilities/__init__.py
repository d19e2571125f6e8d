"""
Utilities package for PalindromeFinder.

Contains the I/O boundary and ambient support around the Scanner core:
- Configuration (config/)
- Error taxonomy (errors.py)
- Sequence loading from FASTA-style text, plain or gzip (sequence_loader.py)
- Result emission and BED / DataFrame export (result_emitter.py)
- Resource-aware planning:
  - SystemResourceInspector  – RAM / CPU availability
  - AdaptiveChunkPlanner     – Worker count and chunk size for ``--threads auto``
- PerformanceMonitor         – Thread-safe scan telemetry
"""
