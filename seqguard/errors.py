"""
Error types for FASTQ validation.

Two families live here:
- Exceptions (SeqguardError and subclasses) for fatal, file-level
  problems that abort a run.
- Record diagnostics (RecordError and subclasses) for per-record
  violations. These are collected, never raised.
"""

from dataclasses import dataclass


class SeqguardError(Exception):
    """Base class for fatal validation errors."""

    @property
    def message(self) -> str:
        return str(self)


class InputError(SeqguardError):
    """The input stream could not be opened, read or decompressed."""


class StructuralError(SeqguardError):
    """The file is not made of complete 4-line records."""


class EmptyFileError(StructuralError):

    def __init__(self):
        super().__init__("File is empty or contains only blank lines.")


class NotMultipleOfFourError(StructuralError):

    def __init__(self, count: int):
        self.count = count
        super().__init__(
            f"FASTQ format error: number of lines ({count}) is not a multiple of 4"
        )


class TruncatedRecordError(StructuralError):

    def __init__(self, dangling: int):
        self.dangling = dangling
        super().__init__(
            "FASTQ format error: truncated record at end of file "
            f"({dangling} dangling lines)"
        )


@dataclass(frozen=True)
class RecordError:
    """
    A single rule violation found in one record.

    Attributes:
        index: 1-based position of the record in the file
    """
    index: int

    @property
    def message(self) -> str:
        return f"Invalid record (record {self.index})"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class InvalidHeader(RecordError):
    header: str

    @property
    def message(self) -> str:
        return f"Invalid header line (record {self.index}): {self.header}"


@dataclass(frozen=True)
class DuplicateHeader(RecordError):
    header: str

    @property
    def message(self) -> str:
        return f"Duplicate header found (record {self.index}): {self.header}"


@dataclass(frozen=True)
class LengthMismatch(RecordError):
    seq_len: int
    qual_len: int

    @property
    def message(self) -> str:
        return (
            f"Length mismatch (record {self.index}): "
            f"seq = {self.seq_len}, qual = {self.qual_len}"
        )


@dataclass(frozen=True)
class InvalidQualityChar(RecordError):
    """Quality character outside the accepted range (position is 1-based)."""
    position: int
    char: str

    @property
    def message(self) -> str:
        return (
            "Invalid character in quality string "
            f"(record {self.index}, position {self.position}): '{self.char}'"
        )
