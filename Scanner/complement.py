"""
┌──────────────────────────────────────────────────────────────────────────────┐
│ Complement - Watson–Crick Symbol Mapping                                     │
├──────────────────────────────────────────────────────────────────────────────┤
│ Author: Dr. Venkata Rajesh Yella | License: MIT | Version: 2025.1            │
└──────────────────────────────────────────────────────────────────────────────┘

Total mapping over nucleotide symbols: A↔T, C↔G.  Anything else (ambiguity
codes, lowercase, punctuation) is "not informative" and maps to the wildcard
sentinel ``N``.  ``N`` is the only fixed point.
"""
# ═══════════════════════════════════════════════════════════════════════════════
# IMPORTS
# ═══════════════════════════════════════════════════════════════════════════════
import numpy as np

# ═══════════════════════════════════════════════════════════════════════════════
# TUNABLE PARAMETERS
# ═══════════════════════════════════════════════════════════════════════════════
WILDCARD = 'N'
ALPHABET = ('A', 'C', 'G', 'T')
_COMPLEMENT = {'A': 'T', 'C': 'G', 'G': 'C', 'T': 'A'}

# Numeric codes used by the vectorised kernel (A=0, C=1, G=2, T=3, N=4)
SYMBOL_CODES = {'A': 0, 'C': 1, 'G': 2, 'T': 3}
WILDCARD_CODE = 4
# ═══════════════════════════════════════════════════════════════════════════════


def complement(symbol: str) -> str:
    """
    Watson–Crick complement of a single symbol.

    Args:
        symbol: One nucleotide character

    Returns:
        Complementary symbol, or ``'N'`` for anything outside {A, C, G, T}

    Example:
        >>> complement('A')
        'T'
        >>> complement('?')
        'N'
    """
    return _COMPLEMENT.get(symbol, WILDCARD)


def normalize_symbol(symbol: str) -> str:
    """Return ``symbol`` if it is A/C/G/T, otherwise the wildcard ``N``."""
    return symbol if symbol in _COMPLEMENT else WILDCARD


def reverse_complement(seq: str) -> str:
    """
    Reverse complement of a symbol string, symbol by symbol.

    Unlike ``str.translate`` based helpers this keeps the total-function
    contract: unrecognised symbols come back as ``N``.

    Example:
        >>> reverse_complement("ATAG")
        'CTAT'
    """
    return ''.join(complement(s) for s in reversed(seq))


def build_encoding_table() -> np.ndarray:
    """Return the 256-entry byte → symbol-code lookup array."""
    enc = np.full(256, WILDCARD_CODE, dtype=np.uint8)
    for ch, code in SYMBOL_CODES.items():
        enc[ord(ch)] = code
    return enc


def build_complement_codes() -> np.ndarray:
    """Return the code → complement-code lookup array (N stays N)."""
    comp = np.empty(WILDCARD_CODE + 1, dtype=np.uint8)
    for ch, code in SYMBOL_CODES.items():
        comp[code] = SYMBOL_CODES[_COMPLEMENT[ch]]
    comp[WILDCARD_CODE] = WILDCARD_CODE
    return comp


ENCODING_TABLE = build_encoding_table()
COMPLEMENT_CODES = build_complement_codes()
