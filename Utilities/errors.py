"""
┌──────────────────────────────────────────────────────────────────────────────┐
│ Errors - Exception Taxonomy for PalindromeFinder                             │
├──────────────────────────────────────────────────────────────────────────────┤
│ Author: Dr. Venkata Rajesh Yella | License: MIT | Version: 2025.1            │
└──────────────────────────────────────────────────────────────────────────────┘

DESCRIPTION:
    All failures originate at the I/O or configuration boundary.  The pure
    components (complement mapping, window predicate, low-information filter)
    never raise.

        PalindromeFinderError
            ├── SequenceLoadError    – input missing / unreadable / undecodable
            ├── ConfigurationError   – window length, worker count, policy …
            └── ScanCancelledError   – cooperative cancellation of a scan
"""

from typing import Optional


class PalindromeFinderError(Exception):
    """Base class for every error raised by PalindromeFinder."""
    pass


class SequenceLoadError(PalindromeFinderError):
    """Raised when an input sequence cannot be loaded.

    The originating exception is chained (``raise ... from exc``) so callers
    can inspect ``__cause__``.
    """

    def __init__(self, path: Optional[str], reason: str):
        self.path = path
        self.reason = reason
        where = f"'{path}'" if path else "<input>"
        super().__init__(f"Failed to load sequence from {where}: {reason}")


class ConfigurationError(PalindromeFinderError, ValueError):
    """Raised when scan parameters are incompatible with the runtime."""
    pass


class ScanCancelledError(PalindromeFinderError):
    """Raised by a scan that observed a cancellation request."""
    pass
