"""Parse HOMER motif files.

Can be called as a Snakemake script (tabulate a de novo results folder) or
used as a library. Only header lines (starting with ``>``) are parsed; the
position weight matrix rows beneath each header are ignored.

A HOMER de novo run writes one motif per file, named ``motif1.motif``,
``motif2.motif``, ...; ``collect_denovo`` gathers these in index order.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from collections.abc import Iterable, Iterator

import pandas as pd

from formats import MotifRecord
from formats.motif import MOTIF_MARKER
from utils import partition
from validators import (
    DEFAULT_CONFIG,
    FormatConfig,
    InvariantViolation,
    LineFailure,
    NoCandidateFilesError,
    ParseError,
    ValidationError,
    validate_directory_exists,
    validate_file_exists,
)

log = logging.getLogger(__name__)

MOTIF_FRAME_COLUMNS = [
    "sequence",
    "name",
    "log_odds",
    "log_pvalue",
    "target_count",
    "target_fraction",
    "background_count",
    "background_fraction",
    "pvalue",
]


@dataclass(frozen=True)
class FileFailure:
    """A motif file whose record could not be parsed."""

    path: Path
    message: str

    def __str__(self) -> str:
        return f"{self.path.name}: {self.message}"


@dataclass(frozen=True)
class DenovoCollection:
    """Outcome of collecting a de novo results folder.

    Exactly one of ``failures`` and ``records`` is non-empty.

    Raises:
        InvariantViolation: If both or neither side holds entries
    """

    failures: list[FileFailure] = field(default_factory=list)
    records: list[MotifRecord] = field(default_factory=list)

    def __post_init__(self) -> None:
        if bool(self.failures) == bool(self.records):
            raise InvariantViolation(
                f"De novo collection needs failures or records, not both or neither "
                f"({len(self.failures)} failures, {len(self.records)} records)"
            )

    @property
    def ok(self) -> bool:
        return not self.failures


def iter_motif_records(
    motif_path: str | Path, sep: str = "\t"
) -> Iterator[MotifRecord | LineFailure]:
    """Lazily parse each header line of a motif file.

    Raises:
        ValidationError: If the path is not a file (on first iteration)
    """
    path = validate_file_exists(motif_path, "Motif file")
    with open(path) as f:
        for raw in f:
            line = raw.rstrip("\r\n")
            if not line.startswith(MOTIF_MARKER):
                continue
            try:
                yield MotifRecord.from_line(line, sep)
            except ParseError as e:
                log.warning("Invalid motif header %r: %s", line, e)
                yield LineFailure(line, e)


def read_motif_file(
    motif_path: str | Path, sep: str = "\t"
) -> tuple[list[LineFailure], list[MotifRecord]]:
    """Parse every motif header in a file into (failures, records)."""
    failures, records = partition(
        iter_motif_records(motif_path, sep), lambda r: isinstance(r, LineFailure)
    )
    log.info(
        "Parsed %d motifs (%d invalid headers) from %s",
        len(records),
        len(failures),
        motif_path,
    )
    return failures, records


def parse_single_motif_file(motif_path: str | Path, sep: str = "\t") -> MotifRecord:
    """Parse the first line of a single-motif file.

    Raises:
        ValidationError: If the path is not a file or the file is empty
        ParseError: If the first line is not a valid motif header
    """
    path = validate_file_exists(motif_path, "Motif file")
    with open(path) as f:
        first = f.readline()
    if not first:
        raise ValidationError(f"Motif file is empty: {path}")
    return MotifRecord.from_line(first, sep)


def _try_parse_motif_file(path: Path, sep: str) -> MotifRecord | FileFailure:
    try:
        record = parse_single_motif_file(path, sep)
    except ValidationError as e:
        log.warning("Could not parse %s: %s", path.name, e)
        return FileFailure(path, str(e))
    log.debug("Parsed motif %s from %s", record.name, path.name)
    return record


def _motif_index(path: Path, config: FormatConfig) -> int | None:
    if not path.is_file() or path.suffix != config.motif_file_suffix:
        return None
    index_text = path.stem.removeprefix(config.motif_file_prefix)
    if index_text == path.stem or not index_text.isdigit():
        return None
    return int(index_text)


def find_motif_files(directory: str | Path, config: FormatConfig = DEFAULT_CONFIG) -> list[Path]:
    """List de novo motif files in a folder, sorted by motif index."""
    folder = validate_directory_exists(directory, "HOMER results folder")
    keyed = []
    for path in folder.iterdir():
        index = _motif_index(path, config)
        if index is not None:
            keyed.append((index, path))
    return [path for _, path in sorted(keyed)]


def collect_denovo(
    directory: str | Path, config: FormatConfig = DEFAULT_CONFIG
) -> DenovoCollection:
    """Parse the motif from each de novo motif file in a folder.

    Args:
        directory: HOMER de novo output folder
        config: Supplies the motif file prefix, suffix and delimiter

    Returns:
        ``DenovoCollection`` holding either every per-file failure or, when
        all files parsed, every record in motif index order

    Raises:
        ValidationError: If ``directory`` is not a directory
        NoCandidateFilesError: If the folder holds no motif files
    """
    motif_files = find_motif_files(directory, config)
    if not motif_files:
        raise NoCandidateFilesError(f"No motif files in folder: {directory}")
    log.info("Found %d motif files in %s", len(motif_files), directory)

    failures, records = partition(
        (_try_parse_motif_file(path, config.delimiter) for path in motif_files),
        lambda r: isinstance(r, FileFailure),
    )

    if failures:
        log.warning("%d of %d motif files failed to parse", len(failures), len(motif_files))
        return DenovoCollection(failures=failures)
    return DenovoCollection(records=records)


def motifs_to_frame(records: Iterable[MotifRecord]) -> pd.DataFrame:
    """Tabulate motif records using their flattened R text fields.

    Columns a record does not carry are left empty.
    """
    rows = [dict(zip(MOTIF_FRAME_COLUMNS, r.r_text_fields())) for r in records]
    return pd.DataFrame(rows, columns=MOTIF_FRAME_COLUMNS)


# --- Main execution via Snakemake ---
try:
    from typing import TYPE_CHECKING

    if TYPE_CHECKING:
        from snakemake.script import Snakemake
        snakemake: Snakemake
    else:
        snakemake = snakemake  # type: ignore  # noqa: F821

    logging.basicConfig(
        filename=snakemake.log[0],
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    collection = collect_denovo(snakemake.input.homer_dir)
    if not collection.ok:
        for failure in collection.failures:
            log.error("Failed: %s", failure)
        raise ValidationError(f"{len(collection.failures)} motif file(s) failed to parse")

    df = motifs_to_frame(collection.records)
    df.to_csv(snakemake.output.tsv, sep="\t", index=False)
    log.info("Wrote %d motifs to %s", len(df), snakemake.output.tsv)
except NameError:
    pass  # Not running via Snakemake (e.g., imported for testing)
