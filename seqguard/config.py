"""
Run configuration for FASTQ validation.

The domain constants below are the defaults used by the rule set.
Override them through QCConfig rather than editing the rules.
"""

from dataclasses import dataclass
from typing import Tuple

# Printable ASCII range accepted in quality strings (Phred+33, '!' to '~')
QUALITY_MIN = 33
QUALITY_MAX = 126

CANONICAL_BASES = "ATGC"
HEADER_PREFIXES = ("@", ">")

BATCH = "batch"
STREAMING = "streaming"
MODES = (BATCH, STREAMING)

DEFAULT_CHUNK_SIZE = 10000  # records per worker task


@dataclass(frozen=True)
class QCConfig:
    """
    Settings for a single validation run.

    Attributes:
        quality_min: Lowest accepted quality code point (inclusive)
        quality_max: Highest accepted quality code point (inclusive)
        canonical_bases: Bases that are not tallied (compared uppercased)
        header_prefixes: Accepted first characters of a header line
        mode: "batch" (exhaustive, parallel) or "streaming" (fail-fast)
        workers: Number of worker processes in batch mode
        chunk_size: Number of records handed to a worker at once
    """
    quality_min: int = QUALITY_MIN
    quality_max: int = QUALITY_MAX
    canonical_bases: str = CANONICAL_BASES
    header_prefixes: Tuple[str, ...] = HEADER_PREFIXES
    mode: str = BATCH
    workers: int = 1
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self):
        if self.mode not in MODES:
            raise ValueError(f"Unknown mode: {self.mode}")
        if self.workers < 1:
            raise ValueError("workers must be at least 1")
        if self.chunk_size < 1:
            raise ValueError("chunk_size must be at least 1")
        if self.quality_min > self.quality_max:
            raise ValueError(
                f"quality_min ({self.quality_min}) exceeds quality_max ({self.quality_max})"
            )
        if not self.header_prefixes:
            raise ValueError("header_prefixes must not be empty")
        object.__setattr__(self, "canonical_bases", self.canonical_bases.upper())
        object.__setattr__(self, "header_prefixes", tuple(self.header_prefixes))
