"""
┌──────────────────────────────────────────────────────────────────────────────┐
│ Sequence Loader - FASTA-Style Text → Sequence                                │
├──────────────────────────────────────────────────────────────────────────────┤
│ Author: Dr. Venkata Rajesh Yella | License: MIT | Version: 2025.1            │
└──────────────────────────────────────────────────────────────────────────────┘

Rules (FASTA-compliant, Pearson & Lipman, 1988):
    1. Every line starting with '>' is a header and is discarded.
    2. Remaining lines are stripped of surrounding whitespace and
       concatenated in file order (multi-record files become one sequence).
    3. Symbols are uppercased unless ``uppercase=False``.
    4. The first word of the first header (without '>') names the sequence.

Any I/O or decoding failure raises ``SequenceLoadError`` chained to the
original exception; no partial sequence is ever returned.
"""

# ═══════════════════════════════════════════════════════════════════════════════
# IMPORTS
# ═══════════════════════════════════════════════════════════════════════════════
import gzip
import logging
import os
from typing import Iterable, List, Optional, Tuple

from Scanner.sequence import Sequence
from Utilities.errors import SequenceLoadError

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# TUNABLE PARAMETERS
# ═══════════════════════════════════════════════════════════════════════════════
HEADER_MARKER = '>'
GZIP_MAGIC = b'\x1f\x8b'
GZIP_SUFFIXES = ('.gz', '.bgz')
# ═══════════════════════════════════════════════════════════════════════════════


def _collect_lines(lines: Iterable[str], uppercase: bool) -> Tuple[str, str]:
    """Return (first header, concatenated body) from an iterable of lines."""
    header = ""
    body: List[str] = []
    for line in lines:
        if line.startswith(HEADER_MARKER):
            if not header:
                # sequence ID only; the description after it is dropped
                fields = line[1:].split()
                header = fields[0] if fields else ""
            continue
        line = line.strip()
        if line:
            body.append(line.upper() if uppercase else line)
    return header, ''.join(body)


def parse_sequence_text(text: str, name: Optional[str] = None,
                        uppercase: bool = True) -> Sequence:
    """
    Build a ``Sequence`` from in-memory FASTA-style text.

    Example:
        >>> parse_sequence_text(">h\\nACATGAGGC").text
        'ACATGAGGC'
    """
    header, body = _collect_lines(text.splitlines(), uppercase)
    return Sequence(body, name=name or header or "sequence")


def _is_gzip(path: str) -> bool:
    if path.endswith(GZIP_SUFFIXES):
        return True
    with open(path, 'rb') as fh:
        return fh.read(2) == GZIP_MAGIC


def load_sequence(path: str, uppercase: bool = True,
                  encoding: str = 'utf-8') -> Sequence:
    """
    Load a FASTA-style file (plain or gzip) into a ``Sequence``.

    Args:
        path:      Path to the input file
        uppercase: Uppercase symbols (default) or keep them as given
        encoding:  Text encoding of the file

    Returns:
        Sequence named after the first header, or the file stem

    Raises:
        SequenceLoadError: Missing/unreadable file, decoding or read error
    """
    path = os.fspath(path)
    try:
        if _is_gzip(path):
            fh = gzip.open(path, 'rt', encoding=encoding)
        else:
            fh = open(path, 'r', encoding=encoding)
        with fh:
            header, body = _collect_lines(fh, uppercase)
    except FileNotFoundError as exc:
        raise SequenceLoadError(path, "file not found") from exc
    except IsADirectoryError as exc:
        raise SequenceLoadError(path, "path is a directory") from exc
    except PermissionError as exc:
        raise SequenceLoadError(path, "permission denied") from exc
    except UnicodeDecodeError as exc:
        raise SequenceLoadError(path, f"undecodable content ({exc.reason})") from exc
    except (OSError, EOFError) as exc:
        raise SequenceLoadError(path, str(exc) or exc.__class__.__name__) from exc

    stem = os.path.basename(path)
    for suffix in GZIP_SUFFIXES:
        if stem.endswith(suffix):
            stem = stem[:-len(suffix)]
    name = header or os.path.splitext(stem)[0] or "sequence"

    logger.info(f"Loaded '{name}' from {path}: {len(body):,} bp")
    if not body:
        logger.warning(f"Sequence loaded from {path} is empty")
    return Sequence(body, name=name)
