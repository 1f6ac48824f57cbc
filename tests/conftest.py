import gzip

import pytest


@pytest.fixture
def write_fastq(tmp_path):
    """Write lines to a FASTQ file (gzip when the name ends in .gz) and return its path."""

    def _write(lines, name="reads.fastq"):
        path = tmp_path / name
        text = "".join(line + "\n" for line in lines)
        if name.endswith(".gz"):
            with gzip.open(path, "wt") as f:
                f.write(text)
        else:
            path.write_text(text)
        return path

    return _write


@pytest.fixture
def messages():
    """Diagnostics collected through emit=messages.append."""
    return []
