"""
FASTQ input handling.

This module provides:
- Opening plain and gzip-compressed FASTQ files
- Dropping blank lines from a text stream
- Grouping lines into 4-line records (whole-file or streaming)
"""

from seqguard.io.fastq import (
    FastqRecord,
    LINES_PER_RECORD,
    open_fastq,
    read_lines,
    extract_records,
    iter_records,
)

__all__ = [
    "FastqRecord",
    "LINES_PER_RECORD",
    "open_fastq",
    "read_lines",
    "extract_records",
    "iter_records",
]
