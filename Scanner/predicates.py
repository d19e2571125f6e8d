"""Window predicates: reverse-complement palindrome test and all-N filter."""
# IMPORTS
from enum import Enum
from typing import Union

from Scanner.complement import complement, normalize_symbol, WILDCARD
from Scanner.sequence import Window

WindowLike = Union[Window, str]


class PalindromePolicy(str, Enum):
    """How a window of length L is tested for self-complementarity.

    STRICT    split an even-length window in half; the first half must equal
              the reverse complement of the second half.  Odd L never passes.
    PAIRWISE  pair position k with L-1-k for every k (the centre of an odd
              window pairs with itself) and require left == complement(right).
              Only a centre N can satisfy the self-pair.

    Both agree on even L.  Symbols outside A/C/G/T compare as N under both.
    """

    STRICT = "strict"
    PAIRWISE = "pairwise"

    @classmethod
    def parse(cls, value: Union[str, "PalindromePolicy"]) -> "PalindromePolicy":
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


def _pairs_match(window: WindowLike, k: int) -> bool:
    return normalize_symbol(window[k]) == complement(window[len(window) - 1 - k])


def is_palindrome(window: WindowLike,
                  policy: Union[PalindromePolicy, str] = PalindromePolicy.STRICT) -> bool:
    """
    True when ``window`` is a reverse-complement palindrome under ``policy``.

    Example:
        >>> is_palindrome("ATAGCTAT")
        True
        >>> is_palindrome("ATAGCTAA")
        False

    Raises:
        ValueError: If ``policy`` is not a known policy name.
    """
    policy = PalindromePolicy.parse(policy)
    length = len(window)

    if policy is PalindromePolicy.STRICT:
        if length % 2 != 0:
            return False
        # first half == reverse complement of the second half
        return all(_pairs_match(window, k) for k in range(length // 2))

    return all(_pairs_match(window, k) for k in range(length))


def is_uninformative(window: WindowLike) -> bool:
    """True when every symbol is the wildcard (unrecognised symbols count as N)."""
    return all(normalize_symbol(s) == WILDCARD for s in window)
