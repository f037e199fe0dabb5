"""Main CLI entry point for nativepack."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from structlog import get_logger

from .. import __version__
from ..bench import run_benchmark
from ..cli.analyze import analyze_file
from ..log import setup_logging

logger = get_logger()


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the nativepack CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="nativepack: Native Binary Serialization",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  nativepack --analyze records.py       Show the wire layout of each record
  nativepack --bench 100000             Compare against a JSON baseline
  nativepack --version                  Show version
        """,
    )

    parser.add_argument(
        "--analyze",
        metavar="FILE",
        type=str,
        help="Analyze record classes and show their wire layout",
    )

    parser.add_argument(
        "--bench",
        metavar="ITERATIONS",
        type=int,
        help="Time encode+decode round trips against a JSON baseline",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"nativepack {__version__}",
    )

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    # Handle --analyze
    if args.analyze:
        file_path = Path(args.analyze)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1

        try:
            analyze_file(file_path)
        except Exception as e:
            logger.debug("analyze failed", file=str(file_path), exc_info=True)
            print(f"Error analyzing file: {e}", file=sys.stderr)
            return 1
        return 0

    # Handle --bench
    if args.bench is not None:
        if args.bench <= 0:
            print(f"Error: ITERATIONS must be > 0, got {args.bench}", file=sys.stderr)
            return 1

        result = run_benchmark(args.bench)
        print(f"Round trips: {result.iterations}")
        print(f"nativepack: {result.native_seconds:.3f} s ({result.encoded_bytes} bytes)")
        print(f"json:       {result.baseline_seconds:.3f} s ({result.baseline_bytes} bytes)")
        print(f"Speedup: {result.speedup:.1f}x")
        if result.native_mismatches or result.baseline_mismatches:
            print(
                f"PROBLEMS! mismatches: nativepack={result.native_mismatches} "
                f"json={result.baseline_mismatches}",
                file=sys.stderr,
            )
            return 1
        return 0

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
