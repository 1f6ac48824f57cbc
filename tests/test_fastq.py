"""Tests for line reading and record extraction."""

import gzip
import io

import numpy as np
import pytest

from seqguard.errors import (
    EmptyFileError,
    InputError,
    NotMultipleOfFourError,
    TruncatedRecordError,
)
from seqguard.io import FastqRecord, extract_records, iter_records, open_fastq, read_lines


class TestReadLines:

    def test_strips_line_endings(self):
        handle = io.StringIO("@r1\r\nACGT\n+\nIIII")
        assert list(read_lines(handle)) == ["@r1", "ACGT", "+", "IIII"]

    def test_drops_blank_and_whitespace_lines(self):
        lines = ["@r1\n", "\n", "   \n", "ACGT\n", "\t\n", "+\n", "IIII\n"]
        assert list(read_lines(lines)) == ["@r1", "ACGT", "+", "IIII"]

    def test_keeps_inner_whitespace(self):
        assert list(read_lines(["@r1 desc  \n"])) == ["@r1 desc  "]

    def test_decode_error_becomes_input_error(self):
        handle = io.TextIOWrapper(io.BytesIO(b"@r1\n\xff\xfe\n"), encoding="utf-8")
        with pytest.raises(InputError):
            list(read_lines(handle))


class TestExtractRecords:

    def test_fields_are_positional(self):
        records = extract_records(["@r1", "ACGT", "+r1", "IIII"])
        assert records == [FastqRecord("@r1", "ACGT", "+r1", "IIII")]

    def test_multiple_records_in_order(self):
        lines = ["@r1", "A", "+", "I", "@r2", "C", "+", "J"]
        records = extract_records(lines)
        assert [r.header for r in records] == ["@r1", "@r2"]

    def test_empty(self):
        with pytest.raises(EmptyFileError):
            extract_records([])

    def test_not_multiple_of_four(self):
        with pytest.raises(NotMultipleOfFourError) as excinfo:
            extract_records(["@r1", "ACGT", "+", "IIII", "@r2"])
        assert excinfo.value.count == 5
        assert "number of lines (5) is not a multiple of 4" in str(excinfo.value)


class TestIterRecords:

    def test_yields_lazily(self):
        records = iter_records(iter(["@r1", "ACGT", "+", "IIII", "@r2"]))
        assert next(records).header == "@r1"
        with pytest.raises(TruncatedRecordError) as excinfo:
            next(records)
        assert excinfo.value.dangling == 1

    def test_empty(self):
        with pytest.raises(EmptyFileError):
            list(iter_records([]))

    @pytest.mark.parametrize("extra", [1, 2, 3])
    def test_truncated_counts_dangling_lines(self, extra):
        lines = ["@r1", "ACGT", "+", "IIII"] + ["X"] * extra
        with pytest.raises(TruncatedRecordError) as excinfo:
            list(iter_records(lines))
        assert excinfo.value.dangling == extra


class TestFastqRecord:

    def test_quality_codes(self):
        record = FastqRecord("@r1", "ACG", "+", "!I~")
        np.testing.assert_array_equal(record.quality_codes(), [33, 73, 126])

    def test_quality_codes_empty(self):
        record = FastqRecord("@r1", "", "+", "")
        assert record.quality_codes().shape == (0,)

    def test_str(self):
        record = FastqRecord("@r1", "ACGT", "+", "IIII")
        assert str(record) == "@r1\nACGT\n+\nIIII"


class TestOpenFastq:

    def test_plain(self, write_fastq):
        path = write_fastq(["@r1", "ACGT", "+", "IIII"])
        with open_fastq(path) as handle:
            assert list(read_lines(handle)) == ["@r1", "ACGT", "+", "IIII"]

    def test_gzip(self, write_fastq):
        path = write_fastq(["@r1", "ACGT", "+", "IIII"], name="reads.fastq.gz")
        with open_fastq(path) as handle:
            assert list(read_lines(handle)) == ["@r1", "ACGT", "+", "IIII"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputError, match="Failed to open file"):
            open_fastq(tmp_path / "missing.fastq")

    def test_damaged_deflate_body_fails_on_read(self, tmp_path):
        payload = bytearray(gzip.compress(b"@r1\nACGT\n+\nIIII\n" * 2000))
        for i in range(20, 60):
            payload[i] ^= 0xFF
        path = tmp_path / "damaged.fastq.gz"
        path.write_bytes(bytes(payload))
        with open_fastq(path) as handle:
            with pytest.raises(InputError, match="Failed to read file"):
                list(read_lines(handle))

    def test_lone_carriage_return_is_not_a_line_break(self, tmp_path):
        path = tmp_path / "reads.fastq"
        path.write_bytes(b"@r1\r\nAC\rGT\r\n+\nIIIII\n")
        with open_fastq(path) as handle:
            assert list(read_lines(handle)) == ["@r1", "AC\rGT", "+", "IIIII"]

    def test_corrupt_gzip_fails_on_read(self, tmp_path):
        path = tmp_path / "bad.fastq.gz"
        path.write_bytes(b"this is not gzip data\n")
        with open_fastq(path) as handle:
            with pytest.raises(InputError, match="Failed to read file"):
                list(read_lines(handle))
