"""
┌──────────────────────────────────────────────────────────────────────────────┐
│ PalindromeFinder - Reverse-Complement Palindrome Scanner                     │
│ Command-Line Entry Point                                                     │
├──────────────────────────────────────────────────────────────────────────────┤
│ Author: Dr. Venkata Rajesh Yella | License: MIT | Version: 2025.1            │
└──────────────────────────────────────────────────────────────────────────────┘

USAGE::

    palindrome-finder -w 10 -t 4 genome.fa > hits.tsv
    python app.py --window-length 12 --threads auto --count -v genome.fa.gz

Exit status: 0 success (also with zero hits), 1 load or output failure,
2 configuration failure.
"""
# ═══════════════════════════════════════════════════════════════════════════════
# IMPORTS
# ═══════════════════════════════════════════════════════════════════════════════
import argparse
import logging
import os
import sys
from typing import List, Optional

_current_dir = os.path.dirname(os.path.abspath(__file__))
if _current_dir not in sys.path:
    sys.path.insert(0, _current_dir)

from Scanner.predicates import PalindromePolicy
from Scanner.scanner import PalindromeScanner, ScanConfig
from Utilities.adaptive_chunk_planner import AdaptiveChunkPlanner
from Utilities.config.scan import CHUNKING_CONFIG, SCAN_CONFIG
from Utilities.errors import ConfigurationError, SequenceLoadError
from Utilities.result_emitter import emit_hits, export_to_bed
from Utilities.sequence_loader import load_sequence
from Utilities.system_resource_inspector import SystemResourceInspector

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# TUNABLE PARAMETERS
# ═══════════════════════════════════════════════════════════════════════════════
EXIT_OK = 0
EXIT_IO_FAILURE = 1
EXIT_CONFIG_FAILURE = 2
AUTO_THREADS = 'auto'
LOG_FORMAT = '%(levelname)s: %(message)s'
# ═══════════════════════════════════════════════════════════════════════════════


def _threads_arg(value: str):
    if value.strip().lower() == AUTO_THREADS:
        return AUTO_THREADS
    try:
        return int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected a positive integer or '{AUTO_THREADS}', got {value!r}"
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='palindrome-finder',
        description='Report every fixed-length reverse-complement palindrome '
                    'in a FASTA-style sequence as <offset>\\t<window> lines.',
    )
    parser.add_argument('input', help='Sequence file (FASTA-style, plain or gzip)')
    parser.add_argument('-w', '--window-length', type=int,
                        default=SCAN_CONFIG['default_window_length'],
                        help='Window length L (default: %(default)s)')
    parser.add_argument('-t', '--threads', type=_threads_arg,
                        default=SCAN_CONFIG['default_workers'],
                        help=f"Worker threads, or '{AUTO_THREADS}' (default: %(default)s)")
    parser.add_argument('-p', '--policy', default=SCAN_CONFIG['default_policy'],
                        choices=[p.value for p in PalindromePolicy],
                        help='strict: even-only bisection; pairwise: symmetric '
                             'pair test (default: %(default)s)')
    parser.add_argument('--chunk-size', type=int,
                        default=CHUNKING_CONFIG['default_chunk_size'],
                        help='Maximum offsets per chunk (default: %(default)s)')
    parser.add_argument('--keep-case', action='store_true',
                        help='Do not uppercase the input symbols')
    parser.add_argument('--count', action='store_true',
                        help='Append a total-count line after the hits')
    parser.add_argument('--bed', metavar='PATH',
                        help='Also write hits as BED to PATH')
    parser.add_argument('--stats', action='store_true',
                        help='Print a performance summary to stderr')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Increase log verbosity (-v info, -vv debug)')
    return parser


def configure_logging(verbosity: int) -> None:
    """Log to stderr so stdout carries only results."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger().setLevel(level)


def _build_config(args: argparse.Namespace, workers: int,
                  chunk_size: Optional[int] = None) -> ScanConfig:
    return ScanConfig(
        window_length=args.window_length,
        workers=workers,
        policy=args.policy,
        chunk_size=chunk_size if chunk_size is not None else args.chunk_size,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    # Fail fast on configuration before touching the input
    auto = args.threads == AUTO_THREADS
    try:
        config = _build_config(args, 1 if auto else args.threads)
    except ConfigurationError as exc:
        logger.error(f"Configuration error: {exc}")
        return EXIT_CONFIG_FAILURE

    try:
        sequence = load_sequence(args.input, uppercase=not args.keep_case)
    except SequenceLoadError as exc:
        cause = f" ({exc.__cause__})" if exc.__cause__ else ""
        logger.error(f"{exc}{cause}")
        return EXIT_IO_FAILURE

    if auto:
        inspector = SystemResourceInspector()
        # --chunk-size stays an upper bound, below the planner's usual floor too
        planner = AdaptiveChunkPlanner({
            'default_chunk_size': args.chunk_size,
            'min_chunk_size': min(args.chunk_size, CHUNKING_CONFIG['min_chunk_size']),
        })
        plan = planner.plan(
            offset_count=sequence.offset_count(args.window_length),
            ram_budget=inspector.get_memory_budget(),
            cpu_count=inspector.get_cpu_count(),
        )
        config = _build_config(args, plan['workers'], plan['chunk_size'])

    scanner = PalindromeScanner(config)
    hits = scanner.scan(sequence)

    emit_hits(hits, sys.stdout, show_count=args.count)
    sys.stdout.flush()

    if args.bed:
        try:
            export_to_bed(hits, sequence.name, args.bed)
        except OSError as exc:
            logger.error(f"Cannot write BED file {args.bed}: {exc}")
            return EXIT_IO_FAILURE

    if args.stats:
        print(scanner.format_performance_summary(), file=sys.stderr)

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
