"""
Export configuration for PalindromeFinder.

This module contains export settings:
- Core columns for DataFrame exports
- BED track metadata
- Count line label for the emitter
"""

# ==================== EXPORT FORMATS ====================
EXPORT_CONFIG = {
    'available_formats': ['TSV', 'BED'],

    # Columns of the pandas DataFrame built from hits
    'core_columns': [
        'Offset',   # 0-based window start
        'End',      # 0-based exclusive end
        'Length',   # Window length (bp)
        'Window',   # Window symbols
    ],

    # BED track header
    'bed_track_name': 'PalindromeFinder_hits',
    'bed_track_description': 'Reverse-complement palindromes',
    'bed_item_name': 'RC_palindrome',

    # Optional summary line written after the hits
    'count_label': '# total_hits',
}
