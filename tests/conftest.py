"""Shared test fixtures for format parser tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

# Add scripts directory to path so all tests can import from it
SCRIPTS_DIR = str(Path(__file__).resolve().parent.parent / "scripts")
if SCRIPTS_DIR not in sys.path:
    sys.path.insert(0, SCRIPTS_DIR)


SAF_HEADER = "GeneID\tChr\tStart\tEnd\tStrand"

MOTIF_HEADER = (
    ">ACGTACGT\tmyMotif\t5.3\t-12.1\t\tT:10(5.00%),B:2(0.10%),P:1.0e-8"
)

MOTIF_MATRIX = (
    "0.970\t0.010\t0.010\t0.010\n"
    "0.010\t0.970\t0.010\t0.010\n"
)


@pytest.fixture
def temp_saf_file(tmp_path) -> Callable:
    """Factory fixture for creating temporary SAF files.

    Example:
        >>> saf_path = temp_saf_file([
        ...     ["peak1", "chr1", "100", "200", "+"],
        ...     ["peak2", "chr2", "300", "400", "."],
        ... ])
    """
    def _create_saf(
        rows: list[list[str]],
        header: str | None = SAF_HEADER,
        filename: str = "peaks.saf",
    ) -> Path:
        saf_path = tmp_path / filename
        with open(saf_path, "w") as f:
            if header is not None:
                f.write(header + "\n")
            for row in rows:
                f.write("\t".join(row) + "\n")
        return saf_path

    return _create_saf


@pytest.fixture
def temp_bed_file(tmp_path) -> Callable:
    """Factory fixture for creating temporary BED files from raw lines."""
    def _create_bed(lines: list[str], filename: str = "regions.bed") -> Path:
        bed_path = tmp_path / filename
        bed_path.write_text("".join(line + "\n" for line in lines))
        return bed_path

    return _create_bed


@pytest.fixture
def temp_motif_file(tmp_path) -> Callable:
    """Factory fixture for creating temporary HOMER motif files.

    Each header is followed by a short weight matrix, as HOMER writes them.
    """
    def _create_motif(
        headers: list[str],
        filename: str = "known.motif",
        directory: Path | None = None,
    ) -> Path:
        folder = directory or tmp_path
        folder.mkdir(parents=True, exist_ok=True)
        motif_path = folder / filename
        with open(motif_path, "w") as f:
            for header in headers:
                f.write(header + "\n")
                f.write(MOTIF_MATRIX)
        return motif_path

    return _create_motif
