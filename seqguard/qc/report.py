"""
Rendering of the QC report.

The primary stream gets one summary line followed by the non-canonical
base report. Diagnostics are written to the diagnostic stream by the
engine as they are found, not here.
"""

import sys
from typing import TYPE_CHECKING, List, Mapping, Optional, TextIO

if TYPE_CHECKING:
    from seqguard.qc.engine import QCResult

PASS_LINE = "QC Result: PASS"
FAIL_LINE = "QC Result: FAIL"
ALL_CANONICAL_LINE = "All bases are A, T, G, or C."
NON_CANONICAL_TITLE = "Non-ATGC base report:"


def format_summary(passed: bool) -> str:
    return PASS_LINE if passed else FAIL_LINE


def format_base_report(counts: Mapping[str, int]) -> List[str]:
    """
    Lines of the non-canonical base histogram.

    Args:
        counts: Uppercased base -> occurrence count

    Returns:
        A blank separator line, then either the title and one
        "  {base}: {count}" line per base (sorted by base), or the
        all-canonical statement when counts is empty

    Example:
        >>> format_base_report({"N": 1})
        ['', 'Non-ATGC base report:', '  N: 1']
    """
    if not counts:
        return ["", ALL_CANONICAL_LINE]
    lines = ["", NON_CANONICAL_TITLE]
    for base in sorted(counts):
        lines.append(f"  {base}: {counts[base]}")
    return lines


def write_report(result: "QCResult", out: Optional[TextIO] = None) -> None:
    """
    Write the summary and base report of a QCResult.

    The base report is written whenever at least one record was
    evaluated, whatever the verdict. A run that failed before reaching
    any record gets the summary line only.
    """
    out = out or sys.stdout
    print(format_summary(result.passed), file=out)
    if result.records_checked:
        for line in format_base_report(result.base_counts):
            print(line, file=out)
