"""Tests for report rendering."""

import io

from seqguard.qc import QCResult, format_base_report, format_summary, write_report


def render(result):
    out = io.StringIO()
    write_report(result, out)
    return out.getvalue()


def test_summary_lines():
    assert format_summary(True) == "QC Result: PASS"
    assert format_summary(False) == "QC Result: FAIL"


def test_base_report_empty():
    assert format_base_report({}) == ["", "All bases are A, T, G, or C."]


def test_base_report_sorted_histogram():
    assert format_base_report({"R": 2, "N": 5}) == [
        "",
        "Non-ATGC base report:",
        "  N: 5",
        "  R: 2",
    ]


def test_pass_report():
    result = QCResult(passed=True, records_checked=1)
    assert render(result) == "QC Result: PASS\n\nAll bases are A, T, G, or C.\n"


def test_histogram_printed_on_fail():
    result = QCResult(passed=False, base_counts={"N": 1}, records_checked=2)
    assert render(result) == "QC Result: FAIL\n\nNon-ATGC base report:\n  N: 1\n"


def test_no_records_checked_prints_summary_only():
    result = QCResult(passed=False)
    assert render(result) == "QC Result: FAIL\n"
