"""
Quality-control engine for FASTQ files.

This module provides:
- The per-record rule set (header, duplicates, length, bases, quality)
- Run-wide state and verdict aggregation
- Batch and streaming execution strategies
- Report rendering
"""

from seqguard.qc.rules import (
    RecordVerdict,
    RuleSet,
    check_header,
    check_duplicate_header,
    check_length_parity,
    tally_non_canonical,
    check_quality_range,
)

from seqguard.qc.context import ValidationContext

from seqguard.qc.engine import (
    QCResult,
    validate_lines,
    validate_file,
)

from seqguard.qc.report import (
    format_summary,
    format_base_report,
    write_report,
)

__all__ = [
    "RecordVerdict",
    "RuleSet",
    "check_header",
    "check_duplicate_header",
    "check_length_parity",
    "tally_non_canonical",
    "check_quality_range",
    "ValidationContext",
    "QCResult",
    "validate_lines",
    "validate_file",
    "format_summary",
    "format_base_report",
    "write_report",
]
