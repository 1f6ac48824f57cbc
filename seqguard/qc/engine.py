"""
Execution of the rule set over a whole FASTQ file.

Two strategies are available:
- batch (default): check the file structure first, then every record,
  optionally across a pool of worker processes. All diagnostics are
  reported.
- streaming: read records one at a time and stop at the first record
  that fails. Uses constant memory but reports only up to that record.

Both give the same overall verdict for a given file.

Workers never share state. Each one returns its verdicts and a local base
tally; the parent merges them in file order, so the record flagged as a
duplicate header is always the later occurrence.
"""

import logging
import sys
from collections import Counter
from dataclasses import dataclass, field
from multiprocessing import Pool
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from seqguard.config import BATCH, QCConfig
from seqguard.errors import InputError, RecordError, SeqguardError
from seqguard.io.fastq import FastqRecord, extract_records, iter_records, open_fastq, read_lines
from seqguard.qc.context import ValidationContext
from seqguard.qc.rules import RecordVerdict, RuleSet

logger = logging.getLogger(__name__)

Emitter = Callable[[str], None]


@dataclass
class QCResult:
    """
    Outcome of a validation run.

    Attributes:
        passed: Overall verdict
        base_counts: Non-canonical base tally
        records_checked: Number of records run through the rule set
        diagnostics: Every record-level violation found
        fatal: The error that aborted the run, if any
    """
    passed: bool
    base_counts: Dict[str, int] = field(default_factory=dict)
    records_checked: int = 0
    diagnostics: List[RecordError] = field(default_factory=list)
    fatal: Optional[SeqguardError] = None


def emit_stderr(message: str) -> None:
    print(message, file=sys.stderr)


# Worker entry point, defined at module level so it can be pickled
def _check_chunk(task: Tuple[int, List[FastqRecord], QCConfig]) -> Tuple[List[RecordVerdict], Dict[str, int]]:
    start_index, records, config = task
    rules = RuleSet(config)
    counts = Counter()
    verdicts = [
        rules.evaluate(start_index + offset, record, counts)
        for offset, record in enumerate(records)
    ]
    return verdicts, dict(counts)


def _report(verdict: RecordVerdict, result: QCResult, emit: Emitter) -> None:
    for error in verdict.errors:
        emit(error.message)
    result.diagnostics.extend(verdict.errors)


def _run_batch(lines: Iterable[str], config: QCConfig, context: ValidationContext,
               result: QCResult, emit: Emitter) -> None:
    records = extract_records(lines)
    size = config.chunk_size
    tasks = [
        (start + 1, records[start:start + size], config)
        for start in range(0, len(records), size)
    ]
    del records

    def fold(outputs):
        for verdicts, counts in outputs:
            context.merge_counts(counts)
            for verdict in verdicts:
                _report(context.register(verdict), result, emit)

    workers = min(config.workers, len(tasks))
    if workers <= 1:
        logger.debug("Checking %d chunks in-process", len(tasks))
        fold(map(_check_chunk, tasks))
    else:
        logger.debug("Checking %d chunks with %d workers", len(tasks), workers)
        with Pool(processes=workers) as pool:
            fold(pool.imap(_check_chunk, tasks))


def _run_streaming(lines: Iterable[str], config: QCConfig, context: ValidationContext,
                   result: QCResult, emit: Emitter) -> None:
    rules = RuleSet(config)
    for index, record in enumerate(iter_records(lines), start=1):
        verdict = rules.evaluate(index, record, context.base_counts, context.seen_headers)
        _report(context.register(verdict, check_duplicates=False), result, emit)
        if not verdict.passed:
            logger.info("Stopping at first failing record (record %d)", index)
            break


def validate_lines(
    lines: Iterable[str],
    config: Optional[QCConfig] = None,
    emit: Optional[Emitter] = None
) -> QCResult:
    """
    Validate FASTQ content given as lines of text.

    Blank lines are ignored. Fatal errors (read failures, structural
    problems) end the run with a failing result instead of propagating.

    Args:
        lines: Text lines, with or without line endings
        config: Run settings (defaults to QCConfig())
        emit: Receives each diagnostic message as it is found
            (defaults to writing to stderr)

    Returns:
        QCResult for the run

    Example:
        >>> result = validate_lines(["@r1", "ACGN", "+", "IIII"])
        >>> result.passed, result.base_counts
        (True, {'N': 1})
    """
    config = config or QCConfig()
    emit = emit or emit_stderr
    context = ValidationContext()
    result = QCResult(passed=False)
    run = _run_batch if config.mode == BATCH else _run_streaming

    try:
        run(read_lines(lines), config, context, result, emit)
    except SeqguardError as e:
        logger.debug("Validation aborted: %s", e)
        emit(e.message)
        result.fatal = e

    result.passed = result.fatal is None and context.passed
    result.base_counts = dict(context.base_counts)
    result.records_checked = context.records_checked
    logger.info(
        "Checked %d records (%s mode): %s",
        result.records_checked, config.mode, "PASS" if result.passed else "FAIL",
    )
    return result


def validate_file(
    filepath: Union[str, Path],
    config: Optional[QCConfig] = None,
    emit: Optional[Emitter] = None
) -> QCResult:
    """
    Validate a FASTQ file (.gz files are decompressed transparently).

    Args:
        filepath: Path to the FASTQ file
        config: Run settings (defaults to QCConfig())
        emit: Receives each diagnostic message (defaults to stderr)

    Returns:
        QCResult for the run; a file that cannot be opened gives a
        failing result with fatal set to an InputError
    """
    emit = emit or emit_stderr
    try:
        handle = open_fastq(filepath)
    except InputError as e:
        emit(e.message)
        return QCResult(passed=False, fatal=e)

    logger.debug("Opened %s", filepath)
    with handle:
        return validate_lines(handle, config, emit)
