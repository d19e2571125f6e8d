"""
Scan configuration for PalindromeFinder.

This module contains scan parameters:
- Default window length and worker count
- Default palindrome policy
- Offset chunking thresholds
- Resource-aware worker planning limits

CHUNKING BEHAVIOR
-----------------
The valid offset range is split into contiguous chunks of at most
``default_chunk_size`` offsets.  When fewer chunks than workers would result,
the chunk size shrinks so every worker gets work, but never below
``min_chunk_size`` (tiny chunks cost more in scheduling than they save).
"""

# ==================== SCAN PARAMETERS ====================
SCAN_CONFIG = {
    'default_window_length': 10,   # Window length L (bp)
    'default_workers': 1,          # Worker threads
    'default_policy': 'strict',    # 'strict' (even-only bisection) or 'pairwise'
    'vectorized': True,            # numpy kernel; False = per-window reference loop
}

# ==================== CHUNKING CONFIG ====================
CHUNKING_CONFIG = {
    'default_chunk_size': 250_000,   # Offsets per chunk
    'min_chunk_size': 1_000,         # Floor when balancing chunks across workers

    # Resource-aware planning (used for --threads auto)
    'max_auto_workers': 8,           # Upper bound on auto-detected workers
    'bytes_per_offset': 16,          # Approx. kernel working set per offset in flight
}
