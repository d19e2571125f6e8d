"""
┌──────────────────────────────────────────────────────────────────────────────┐
│ Sequence / Window - Shared Immutable Symbol Buffer and Its Views             │
├──────────────────────────────────────────────────────────────────────────────┤
│ Author: Dr. Venkata Rajesh Yella | License: MIT | Version: 2025.1            │
└──────────────────────────────────────────────────────────────────────────────┘

DESCRIPTION:
    A ``Sequence`` is built once from loaded text and is never mutated while a
    scan runs.  Next to the text it keeps a read-only ``uint8`` code array
    (A=0, C=1, G=2, T=3, everything else N=4) that all scan workers slice
    without copying.

    A ``Window`` is a (sequence, start, length) triple.  It does not copy any
    symbols; ``Window.text`` materialises a string only when asked.

USAGE::

    from Scanner.sequence import Sequence

    seq = Sequence("ACATGAGGC", name="chr1")
    w = seq.window(1, 4)
    print(w.text)    # "CATG"
    print(len(seq))  # 9
"""

from __future__ import annotations

from typing import Iterator, Optional

import numpy as np

from Scanner.complement import ENCODING_TABLE


class Sequence:
    """
    Immutable nucleotide sequence shared across scan workers.

    Parameters
    ----------
    text : str
        Symbol text exactly as loaded (no case folding happens here).
    name : str
        Identifier carried through to exports.

    Attributes
    ----------
    text : str
        The symbol text.
    name : str
        Sequence identifier.
    length : int
        Cached ``len(text)``.
    codes : np.ndarray
        Read-only ``uint8`` array of symbol codes, shape ``(length,)``.
    """

    __slots__ = ("text", "name", "length", "codes")

    def __init__(self, text: str, name: str = "sequence") -> None:
        self.text: str = text
        self.name: str = name
        self.length: int = len(text)

        # One byte per character; non-ASCII characters become '?' and map to N
        raw = np.frombuffer(text.encode("ascii", errors="replace"), dtype=np.uint8)
        codes = ENCODING_TABLE[raw]
        codes.flags.writeable = False
        self.codes: np.ndarray = codes

    # ------------------------------------------------------------------
    # Windows
    # ------------------------------------------------------------------

    def offset_count(self, window_length: int) -> int:
        """Number of valid window offsets; never negative."""
        return max(0, self.length - window_length + 1)

    def window(self, offset: int, window_length: int) -> Window:
        """
        Return the view ``self[offset : offset + window_length]``.

        Raises:
            IndexError: If the window does not fit inside the sequence.
        """
        if offset < 0 or window_length < 0 or offset + window_length > self.length:
            raise IndexError(
                f"window [{offset}, {offset + window_length}) outside sequence "
                f"of length {self.length}"
            )
        return Window(self, offset, window_length)

    def windows(self, window_length: int) -> Iterator[Window]:
        """Yield every window of ``window_length`` in ascending offset order."""
        for offset in range(self.offset_count(window_length)):
            yield Window(self, offset, window_length)

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self.length

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Sequence(name={self.name!r}, length={self.length:,})"


class Window:
    """Read-only, non-owning view of ``length`` symbols starting at ``start``."""

    __slots__ = ("sequence", "start", "length")

    def __init__(self, sequence: Sequence, start: int, length: int) -> None:
        self.sequence = sequence
        self.start = start
        self.length = length

    @property
    def end(self) -> int:
        return self.start + self.length

    @property
    def text(self) -> str:
        return self.sequence.text[self.start:self.end]

    def __len__(self) -> int:
        return self.length

    def __getitem__(self, k: int) -> str:
        if k < 0:
            k += self.length
        if not 0 <= k < self.length:
            raise IndexError(f"window index {k} out of range")
        return self.sequence.text[self.start + k]

    def __iter__(self) -> Iterator[str]:
        text = self.sequence.text
        for i in range(self.start, self.end):
            yield text[i]

    def __repr__(self) -> str:
        preview: Optional[str] = self.text if self.length <= 20 else self.text[:17] + "..."
        return f"Window(start={self.start}, length={self.length}, text={preview!r})"
