"""
┌──────────────────────────────────────────────────────────────────────────────┐
│ Result Emitter - Hit Output and Export                                       │
├──────────────────────────────────────────────────────────────────────────────┤
│ Author: Dr. Venkata Rajesh Yella | License: MIT | Version: 2025.1            │
└──────────────────────────────────────────────────────────────────────────────┘
"""
# ═══════════════════════════════════════════════════════════════════════════════
# IMPORTS
# ═══════════════════════════════════════════════════════════════════════════════
import logging
import sys
from typing import Iterable, List, Optional, Sequence as SequenceType, TextIO

import pandas as pd

from Scanner.scanner import Hit
from Utilities.config.export import EXPORT_CONFIG

logger = logging.getLogger(__name__)


def emit_hits(hits: Iterable[Hit], stream: Optional[TextIO] = None,
              show_count: bool = False) -> int:
    """
    Write one ``<offset>\\t<window>`` line per hit, in the given order.

    Args:
        hits:       Hits in ascending offset order
        stream:     Output stream (default ``sys.stdout``)
        show_count: Append a ``# total_hits\\t<n>`` line

    Returns:
        Number of hits written
    """
    out = stream if stream is not None else sys.stdout
    count = 0
    for hit in hits:
        out.write(f"{hit.offset}\t{hit.window}\n")
        count += 1
    if show_count:
        out.write(f"{EXPORT_CONFIG['count_label']}\t{count}\n")
    return count


def hits_to_dataframe(hits: SequenceType[Hit]) -> pd.DataFrame:
    """Convert hits to a DataFrame with the core export columns."""
    columns = EXPORT_CONFIG['core_columns']
    if not hits:
        return pd.DataFrame(columns=columns)
    return pd.DataFrame(
        {
            'Offset': [h.offset for h in hits],
            'End': [h.end for h in hits],
            'Length': [h.length for h in hits],
            'Window': [h.window for h in hits],
        },
        columns=columns,
    )


def export_to_bed(hits: SequenceType[Hit], sequence_name: str = "sequence",
                  filename: Optional[str] = None) -> str:
    """
    Export hits to BED6 (0-based, half-open) with a track header.

    Args:
        hits:          Hits to export
        sequence_name: Chromosome / sequence column value
        filename:      Optional output path; written when given

    Returns:
        BED content as a string
    """
    bed_lines: List[str] = [
        f"track name={EXPORT_CONFIG['bed_track_name']} "
        f"description=\"{EXPORT_CONFIG['bed_track_description']}\""
    ]
    # BED columns are whitespace-delimited
    chrom = "_".join(sequence_name.split()) or "sequence"
    item = EXPORT_CONFIG['bed_item_name']
    df = hits_to_dataframe(hits)
    for row in df.itertuples(index=False):
        # palindromes read the same on both strands
        bed_lines.append(f"{chrom}\t{row.Offset}\t{row.End}\t{item}\t0\t.")

    bed_content = '\n'.join(bed_lines) + '\n'

    if filename:
        with open(filename, 'w') as f:
            f.write(bed_content)
        logger.info(f"Wrote {len(df):,} BED record(s) to {filename}")

    return bed_content
