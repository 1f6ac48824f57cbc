"""
Command-line entry point.

    seqguard -i reads.fastq.gz -t 8

Prints "QC Result: PASS" or "QC Result: FAIL" and the non-canonical
base report on stdout; rule violations go to stderr.
"""

import argparse
import logging
import sys
from typing import List, Optional

from seqguard import __version__
from seqguard.config import BATCH, MODES, QCConfig
from seqguard.qc.engine import validate_file
from seqguard.qc.report import write_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seqguard",
        description="FASTQ quality check.",
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument("-i", "--input", required=True, metavar="FILE",
                        help="Path to .fastq or .fastq.gz file")
    parser.add_argument("-t", "--threads", type=int, default=8, metavar="INT",
                        help="Number of worker processes (default: 8)")
    parser.add_argument("--mode", choices=MODES, default=BATCH,
                        help="batch: check every record and report all errors (default)\n"
                             "streaming: stop at the first failing record")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log progress to stderr")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the validator.

    Returns:
        Exit status: 0 on PASS, 1 on FAIL
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.threads < 1:
        parser.error("--threads must be at least 1")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    config = QCConfig(mode=args.mode, workers=args.threads)
    result = validate_file(args.input, config)
    write_report(result, sys.stdout)
    return 0 if result.passed else 1


if __name__ == "__main__":
    sys.exit(main())
