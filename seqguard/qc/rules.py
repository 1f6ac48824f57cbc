"""
Per-record quality-control rules.

Each check takes the 1-based record index plus the fields it needs and
returns a list of diagnostics; an empty list means the check passed.
The base tally is bookkeeping only and never fails a record.
"""

import numpy as np
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, List, MutableMapping, MutableSet, Optional

from seqguard.config import (
    CANONICAL_BASES,
    HEADER_PREFIXES,
    QUALITY_MAX,
    QUALITY_MIN,
    QCConfig,
)
from seqguard.errors import (
    DuplicateHeader,
    InvalidHeader,
    InvalidQualityChar,
    LengthMismatch,
    RecordError,
)
from seqguard.io.fastq import FastqRecord


@dataclass
class RecordVerdict:
    """
    Outcome of the rule set for one record.

    Attributes:
        index: 1-based record position
        header: The record's header line, kept for the duplicate check
        errors: Diagnostics raised by the failed checks
    """
    index: int
    header: str
    errors: List[RecordError] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.errors


def check_header(
    index: int,
    header: str,
    prefixes: Iterable[str] = HEADER_PREFIXES
) -> List[RecordError]:
    """
    Check that the header starts with an accepted prefix.

    Example:
        >>> check_header(1, "@read1")
        []
        >>> check_header(2, "read2")
        [InvalidHeader(index=2, header='read2')]
    """
    if header.startswith(tuple(prefixes)):
        return []
    return [InvalidHeader(index, header)]


def check_duplicate_header(
    index: int,
    header: str,
    seen: MutableSet[str]
) -> List[RecordError]:
    """
    Record the header in the seen set, failing if it was already there.

    The header is inserted even when other checks on the record fail.
    """
    if header in seen:
        return [DuplicateHeader(index, header)]
    seen.add(header)
    return []


def check_length_parity(index: int, sequence: str, quality: str) -> List[RecordError]:
    """Sequence and quality must have the same number of characters."""
    if len(sequence) != len(quality):
        return [LengthMismatch(index, len(sequence), len(quality))]
    return []


def tally_non_canonical(
    sequence: str,
    counts: MutableMapping[str, int],
    canonical: str = CANONICAL_BASES
) -> None:
    """
    Add every non-canonical base of the sequence to counts.

    Args:
        sequence: Nucleotide sequence, any case (ASCII letters are uppercased,
            other characters are counted as they appear)
        counts: Mapping updated in place
        canonical: Uppercase bases that are not counted
    """
    for base, n in Counter(c.upper() if c.isascii() else c for c in sequence).items():
        if base not in canonical:
            counts[base] = counts.get(base, 0) + n


def check_quality_range(
    index: int,
    record: FastqRecord,
    low: int = QUALITY_MIN,
    high: int = QUALITY_MAX
) -> List[RecordError]:
    """
    Report every quality character outside [low, high].

    One diagnostic per offending character, with 1-based positions.
    """
    codes = record.quality_codes()
    bad_positions = np.nonzero((codes < low) | (codes > high))[0]
    return [
        InvalidQualityChar(index, int(pos) + 1, record.quality[pos])
        for pos in bad_positions
    ]


class RuleSet:
    """
    The record-level checks bound to one configuration.

    Duplicate detection needs the set of every header seen so far, so
    callers that validate records out of file order can skip it here
    (seen=None) and let the aggregator resolve duplicates afterwards.
    """

    def __init__(self, config: Optional[QCConfig] = None):
        self.config = config or QCConfig()

    def evaluate(
        self,
        index: int,
        record: FastqRecord,
        counts: MutableMapping[str, int],
        seen: Optional[MutableSet[str]] = None
    ) -> RecordVerdict:
        """
        Run the rules on one record.

        Args:
            index: 1-based record position
            record: Record to check
            counts: Non-canonical tally, updated in place
            seen: Headers seen so far; duplicate check skipped when None

        Returns:
            RecordVerdict holding the diagnostics of every failed check
        """
        cfg = self.config
        verdict = RecordVerdict(index, record.header)

        verdict.errors += check_header(index, record.header, cfg.header_prefixes)
        if seen is not None:
            verdict.errors += check_duplicate_header(index, record.header, seen)
        verdict.errors += check_length_parity(index, record.sequence, record.quality)
        tally_non_canonical(record.sequence, counts, cfg.canonical_bases)
        verdict.errors += check_quality_range(index, record, cfg.quality_min, cfg.quality_max)

        return verdict
