"""
Configuration modules for PalindromeFinder.

This package contains configuration constants:
- scan: window length, worker count, policy and chunking defaults
- export: result emission and export settings
"""

from .scan import SCAN_CONFIG, CHUNKING_CONFIG
from .export import EXPORT_CONFIG

__all__ = [
    'SCAN_CONFIG',
    'CHUNKING_CONFIG',
    'EXPORT_CONFIG',
]
