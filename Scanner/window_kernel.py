"""
┌──────────────────────────────────────────────────────────────────────────────┐
│ Window Kernel - Chunk-Level Evaluation of Filter + Predicate                 │
├──────────────────────────────────────────────────────────────────────────────┤
│ Author: Dr. Venkata Rajesh Yella | License: MIT | Version: 2025.1            │
└──────────────────────────────────────────────────────────────────────────────┘

DESCRIPTION:
    Evaluates the low-information filter and the palindrome predicate for
    every offset of one contiguous chunk ``[start, end)`` and returns the
    qualifying offsets in ascending order.

    Two interchangeable implementations:

    * ``evaluate_chunk``        – numpy, one vectorised comparison per symbol
                                  pair.  All slices are views of the shared
                                  code array; numpy drops the GIL during the
                                  element-wise work so threads scale.
    * ``evaluate_chunk_python`` – per-window loop over ``Scanner.predicates``.
                                  Reference path, also used by the tests to
                                  cross-check the vectorised one.

    Both produce identical output for any input.

    Pairwise symmetry: ``a == comp(b)`` iff ``b == comp(a)`` because the code
    complement is an involution (N included), so only pairs k < ceil(L/2)
    need testing.  Under STRICT only k < L/2 are tested and odd L is empty.
"""

from __future__ import annotations

import threading
from typing import List, Optional, Union

import numpy as np

from Scanner.complement import COMPLEMENT_CODES, WILDCARD_CODE
from Scanner.predicates import PalindromePolicy, is_palindrome, is_uninformative
from Scanner.sequence import Sequence
from Utilities.errors import ScanCancelledError


def _pair_count(window_length: int, policy: PalindromePolicy) -> int:
    if policy is PalindromePolicy.STRICT:
        return window_length // 2
    return (window_length + 1) // 2


def _check_cancel(cancel_event: Optional[threading.Event]) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise ScanCancelledError("scan cancelled")


def evaluate_chunk(
    codes: np.ndarray,
    start: int,
    end: int,
    window_length: int,
    policy: Union[PalindromePolicy, str] = PalindromePolicy.STRICT,
    cancel_event: Optional[threading.Event] = None,
) -> List[int]:
    """
    Vectorised scan of offsets ``[start, end)``.

    Args:
        codes:         Shared symbol-code array of the whole sequence.
        start:         First offset of the chunk (inclusive).
        end:           Last offset of the chunk (exclusive).
        window_length: Window length L (≥ 1).
        policy:        Palindrome policy.
        cancel_event:  Optional event checked between comparison passes.

    Returns:
        Qualifying offsets, ascending, in sequence-global coordinates.

    Raises:
        ValueError:         Unknown policy name.
        ScanCancelledError: ``cancel_event`` was set.
    """
    policy = PalindromePolicy.parse(policy)
    _check_cancel(cancel_event)
    count = end - start
    if count <= 0:
        return []
    if policy is PalindromePolicy.STRICT and window_length % 2 != 0:
        return []

    # Low-information filter: N count per window via a prefix sum over the span
    span = codes[start:end + window_length - 1]
    n_prefix = np.zeros(span.shape[0] + 1, dtype=np.int64)
    np.cumsum(span == WILDCARD_CODE, out=n_prefix[1:])
    n_per_window = n_prefix[window_length:window_length + count] - n_prefix[:count]
    passed = n_per_window < window_length

    for k in range(_pair_count(window_length, policy)):
        if not passed.any():
            break
        _check_cancel(cancel_event)
        left = codes[start + k:start + k + count]
        mirror = start + window_length - 1 - k
        right = codes[mirror:mirror + count]
        passed &= left == COMPLEMENT_CODES[right]

    return (np.flatnonzero(passed) + start).tolist()


def evaluate_chunk_python(
    sequence: Sequence,
    start: int,
    end: int,
    window_length: int,
    policy: Union[PalindromePolicy, str] = PalindromePolicy.STRICT,
    cancel_event: Optional[threading.Event] = None,
) -> List[int]:
    """Per-window reference implementation of :func:`evaluate_chunk`."""
    policy = PalindromePolicy.parse(policy)
    offsets: List[int] = []
    for offset in range(start, end):
        _check_cancel(cancel_event)
        window = sequence.window(offset, window_length)
        if is_uninformative(window):
            continue
        if is_palindrome(window, policy):
            offsets.append(offset)
    return offsets
