"""
FASTQ record extraction.

FASTQ is a text-based format for storing nucleotide sequences
along with quality scores. Each record consists of 4 lines:
1. Header line starting with '@' followed by sequence ID
2. Sequence line
3. '+' separator line (optionally followed by the ID again)
4. Quality line (ASCII-encoded Phred scores)

Blank lines are dropped before grouping and never count towards
the structural line total.
"""

import gzip
import logging
import zlib
import numpy as np
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, TextIO, Union

from seqguard.errors import (
    EmptyFileError,
    InputError,
    NotMultipleOfFourError,
    TruncatedRecordError,
)

logger = logging.getLogger(__name__)

LINES_PER_RECORD = 4


@dataclass
class FastqRecord:
    """
    Represents a single FASTQ record, fields in file order.

    Attributes:
        header: Identifier line, including its '@' prefix
        sequence: The nucleotide sequence
        separator: The '+' line (not validated)
        quality: Quality string (ASCII-encoded)
    """
    header: str
    sequence: str
    separator: str
    quality: str

    def __len__(self) -> int:
        return len(self.sequence)

    def __str__(self) -> str:
        return f"{self.header}\n{self.sequence}\n{self.separator}\n{self.quality}"

    def quality_codes(self) -> np.ndarray:
        """
        Code points of the quality string.

        Returns:
            numpy array of integer code points, one per character
        """
        return np.fromiter(
            (ord(c) for c in self.quality), dtype=np.int64, count=len(self.quality)
        )


def open_fastq(filepath: Union[str, Path]) -> TextIO:
    """
    Open a FASTQ file for reading, handling gzip compression if needed.

    Raises:
        InputError: If the file cannot be opened
    """
    filepath = Path(filepath)
    try:
        if filepath.suffix == ".gz":
            return gzip.open(filepath, "rt", encoding="utf-8", newline="\n")
        return open(filepath, "rt", encoding="utf-8", newline="\n")
    except OSError as e:
        raise InputError(f"Failed to open file: {e}") from e


def read_lines(handle: Iterable[str]) -> Iterator[str]:
    """
    Yield the non-blank lines of a text stream with line endings removed.

    Read, decompression and decoding failures surface as InputError.

    Args:
        handle: Open text stream or any iterable of lines

    Yields:
        Lines that contain at least one non-whitespace character
    """
    try:
        for line in handle:
            line = line.rstrip("\r\n")
            if line.strip():
                yield line
    except (OSError, EOFError, zlib.error, UnicodeDecodeError) as e:
        raise InputError(f"Failed to read file: {e}") from e


def _make_record(group: List[str]) -> FastqRecord:
    header, sequence, separator, quality = group
    return FastqRecord(header, sequence, separator, quality)


def extract_records(lines: Iterable[str]) -> List[FastqRecord]:
    """
    Group lines into records, checking the structure of the whole file first.

    Used by batch validation: no record is produced unless the complete
    line total is valid.

    Args:
        lines: Non-blank lines (see read_lines)

    Returns:
        List of FastqRecord objects in file order

    Raises:
        EmptyFileError: If there are no lines
        NotMultipleOfFourError: If the line count is not a multiple of 4
    """
    lines = list(lines)
    if not lines:
        raise EmptyFileError()
    if len(lines) % LINES_PER_RECORD != 0:
        raise NotMultipleOfFourError(len(lines))

    logger.debug("Extracted %d lines (%d records)", len(lines), len(lines) // LINES_PER_RECORD)
    return [
        _make_record(lines[i:i + LINES_PER_RECORD])
        for i in range(0, len(lines), LINES_PER_RECORD)
    ]


def iter_records(lines: Iterable[str]) -> Iterator[FastqRecord]:
    """
    Lazily group lines into records.

    Used by streaming validation. Structural problems are only detected
    when the stream ends, after every complete record has been yielded.

    Args:
        lines: Non-blank lines (see read_lines)

    Yields:
        FastqRecord objects in file order

    Raises:
        EmptyFileError: If there are no lines
        TruncatedRecordError: If the stream ends inside a record

    Example:
        >>> records = iter_records(["@r1", "ACGT", "+", "IIII"])
        >>> next(records).sequence
        'ACGT'
    """
    group = []
    seen_any = False
    for line in lines:
        seen_any = True
        group.append(line)
        if len(group) == LINES_PER_RECORD:
            yield _make_record(group)
            group = []

    if not seen_any:
        raise EmptyFileError()
    if group:
        raise TruncatedRecordError(len(group))
