"""Shared fixtures for parser tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

# Add scripts directory to path
SCRIPTS_DIR = str(Path(__file__).resolve().parent.parent.parent / "scripts")
if SCRIPTS_DIR not in sys.path:
    sys.path.insert(0, SCRIPTS_DIR)


def _denovo_header(index: int) -> str:
    return (
        f">ACGT{index}\t{index}-ACGT,BestGuess:ACGT\t6.5\t-{10 * index}.5\t0\t"
        f"T:{100 * index}.0(10.00%),B:{index}.0(1.00%),P:1e-{10 * index}"
    )


@pytest.fixture
def homer_denovo_dir(tmp_path, temp_motif_file) -> Callable:
    """Factory fixture laying out a HOMER de novo results folder.

    Example:
        >>> folder = homer_denovo_dir([1, 2, 10])
        # writes homerResults/motif1.motif, motif2.motif, motif10.motif
    """
    def _create_dir(indices: list[int], bad: tuple[int, ...] = ()) -> Path:
        folder = tmp_path / "homerResults"
        folder.mkdir(exist_ok=True)
        for index in indices:
            header = _denovo_header(index)
            if index in bad:
                header = header.replace("%)", ")", 1)
            temp_motif_file([header], filename=f"motif{index}.motif", directory=folder)
        return folder

    return _create_dir
