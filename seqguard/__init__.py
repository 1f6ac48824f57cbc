"""
seqguard: quality-control validation for FASTQ files

This package checks FASTQ files for:
- 4-line record structure
- Header format and duplicate headers
- Sequence/quality length parity
- Quality characters outside the printable ASCII range
- Non-canonical bases (reported, never failing)

Plain and gzip-compressed input are supported. Records can be checked
exhaustively across worker processes or streamed with fail-fast.
"""

__version__ = "0.1.0"
__author__ = "seqguard Contributors"

from seqguard.config import QCConfig

from seqguard.errors import (
    SeqguardError,
    InputError,
    StructuralError,
    RecordError,
)

from seqguard.io import (
    FastqRecord,
    read_lines,
    extract_records,
    iter_records,
)

from seqguard.qc import (
    QCResult,
    validate_lines,
    validate_file,
    write_report,
)

__all__ = [
    "QCConfig",
    # Errors
    "SeqguardError",
    "InputError",
    "StructuralError",
    "RecordError",
    # I/O
    "FastqRecord",
    "read_lines",
    "extract_records",
    "iter_records",
    # QC
    "QCResult",
    "validate_lines",
    "validate_file",
    "write_report",
]
