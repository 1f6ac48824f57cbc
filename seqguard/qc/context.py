"""
Run-wide validation state.

ValidationContext owns the seen-header set and the non-canonical base
tally, and folds per-record verdicts into the overall verdict. Verdicts
must be registered in file order so that, of two records sharing a
header, the later one is always the one flagged.
"""

from typing import Dict, Mapping, Set

from seqguard.qc.rules import RecordVerdict, check_duplicate_header


class ValidationContext:
    """
    Accumulates state across all records of one validation run.

    Attributes:
        seen_headers: Every header registered so far
        base_counts: Uppercased non-canonical base -> occurrence count
        records_checked: Number of records registered
        passed: False as soon as any registered record fails
    """

    def __init__(self):
        self.seen_headers: Set[str] = set()
        self.base_counts: Dict[str, int] = {}
        self.records_checked = 0
        self.passed = True

    def register(self, verdict: RecordVerdict, check_duplicates: bool = True) -> RecordVerdict:
        """
        Fold one record's verdict into the run.

        Args:
            verdict: Outcome of the rule set for the record
            check_duplicates: Run the duplicate-header check here. Pass
                False when the rule set already did it against seen_headers.

        Returns:
            The same verdict, with a DuplicateHeader error added if needed
        """
        if check_duplicates:
            verdict.errors += check_duplicate_header(
                verdict.index, verdict.header, self.seen_headers
            )
        self.records_checked += 1
        self.passed = self.passed and verdict.passed
        return verdict

    def merge_counts(self, counts: Mapping[str, int]) -> None:
        """Add a worker's local base tally to the run total."""
        for base, n in counts.items():
            self.base_counts[base] = self.base_counts.get(base, 0) + n
