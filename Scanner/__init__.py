"""
Scanner package for PalindromeFinder.

Contains the computational core:
- complement.py      – Watson–Crick complement mapping (N for anything else)
- sequence.py        – Shared immutable Sequence buffer and Window views
- predicates.py      – Palindrome predicate (strict / pairwise) and all-N filter
- window_kernel.py   – Chunk-level evaluation (numpy and reference loop)
- chunk_generator.py – Contiguous offset-range partitioning
- scanner.py         – PalindromeScanner: thread-pool scan with ordered merge
"""

from .complement import complement, reverse_complement, WILDCARD
from .sequence import Sequence, Window
from .predicates import PalindromePolicy, is_palindrome, is_uninformative
from .scanner import Hit, PalindromeScanner, ScanConfig, scan

__all__ = [
    'complement',
    'reverse_complement',
    'WILDCARD',
    'Sequence',
    'Window',
    'PalindromePolicy',
    'is_palindrome',
    'is_uninformative',
    'Hit',
    'PalindromeScanner',
    'ScanConfig',
    'scan',
]
