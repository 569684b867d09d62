"""Parse SAF interval files and convert them to BED.

Can be called as a Snakemake script (SAF -> BED6 conversion) or used as a
library. Parsing is lazy: each input line yields either a ``SAFRecord``
or a ``LineFailure``, so a malformed line never stops the rest of the
file from being read.
"""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

import pandas as pd

from formats import SAFRecord, parse_saf_line
from utils import partition
from validators import (
    DEFAULT_CONFIG,
    SAF_HEADER_FIELDS,
    FormatConfig,
    LineFailure,
    ParseError,
    ValidationError,
    render_strand,
    validate_file_exists,
)

log = logging.getLogger(__name__)

SAF_FRAME_COLUMNS = ["name", "chr", "start", "end", "strand"]


def _is_failure(result) -> bool:
    return isinstance(result, LineFailure)


def _check_header(header: str, config: FormatConfig) -> None:
    first = header.rstrip("\r\n").split(config.delimiter)[0]
    if first not in config.saf_header_tokens:
        log.warning(
            "Unexpected SAF header column %r (expected one of %s)",
            first,
            sorted(config.saf_header_tokens),
        )


def iter_saf_records(
    lines: Iterable[str], config: FormatConfig = DEFAULT_CONFIG
) -> Iterator[SAFRecord | LineFailure]:
    """Parse SAF lines one at a time.

    The first line is treated as a header when ``config.saf_has_header``.

    Args:
        lines: Source of raw lines (e.g. an open file)
        config: Parser configuration

    Yields:
        A ``SAFRecord`` per valid line, a ``LineFailure`` per invalid line
    """
    it = iter(lines)
    if config.saf_has_header:
        header = next(it, None)
        if header is None:
            return
        _check_header(header, config)

    for raw in it:
        line = raw.rstrip("\r\n")
        try:
            yield parse_saf_line(line, config.delimiter)
        except ParseError as e:
            log.warning("Invalid SAF line %r: %s", line, e)
            yield LineFailure(line, e)


def parse_saf(
    saf_path: str | Path, config: FormatConfig = DEFAULT_CONFIG
) -> Iterator[SAFRecord | LineFailure]:
    """Lazily parse records from a SAF file.

    The file is opened on first iteration and closed once the iterator is
    exhausted or discarded.

    Raises:
        ValidationError: If the file does not exist (on first iteration)
    """
    path = validate_file_exists(saf_path, "SAF file")
    with open(path) as f:
        yield from iter_saf_records(f, config)


def read_saf(
    saf_path: str | Path, config: FormatConfig = DEFAULT_CONFIG
) -> tuple[list[LineFailure], list[SAFRecord]]:
    """Parse a whole SAF file into (failures, records)."""
    failures, records = partition(parse_saf(saf_path, config), _is_failure)
    log.info(
        "Parsed %d SAF records (%d invalid lines) from %s",
        len(records),
        len(failures),
        saf_path,
    )
    return failures, records


def write_saf(records: Iterable[SAFRecord], outfile: str | Path, sep: str = "\t") -> Path:
    """Write records as SAF with the standard header.

    Returns:
        Path to the written file
    """
    path = Path(outfile)
    path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with open(path, "w") as out:
        out.write(sep.join(SAF_HEADER_FIELDS) + "\n")
        for record in records:
            out.write(record.to_line(sep) + "\n")
            count += 1
    log.info("Wrote %d SAF records to %s", count, path)
    return path


def saf_to_bed_name(file_name: str) -> str:
    """Replace a file name's extension with ``bed``.

    Example:
        >>> saf_to_bed_name("peaks.merged.saf")
        'peaks.merged.bed'

    Raises:
        ValidationError: If the name has no extension
    """
    parts = file_name.split(".")
    if len(parts) < 2:
        raise ValidationError(f"Could not transform filename for SAF to BED: {file_name}")
    return ".".join(parts[:-1] + ["bed"])


def saf_to_bed(
    saf_path: str | Path,
    outfile: str | Path | None = None,
    config: FormatConfig = DEFAULT_CONFIG,
) -> tuple[list[LineFailure], Path]:
    """Write a BED6 file from a SAF file.

    Valid records are written as ``chr start end name 0 strand``; invalid
    lines are skipped and returned.

    Args:
        saf_path: Path to the SAF file
        outfile: Output path; defaults to the SAF path with a ``.bed``
            extension
        config: Parser configuration

    Returns:
        Tuple of (failures, output path). An empty failure list means every
        line was converted.
    """
    path = validate_file_exists(saf_path, "SAF file")
    out_path = Path(outfile) if outfile else path.with_name(saf_to_bed_name(path.name))
    out_path.parent.mkdir(parents=True, exist_ok=True)

    failures, records = partition(parse_saf(path, config), _is_failure)
    with open(out_path, "w") as out:
        for record in records:
            out.write("\t".join(record.to_bed_fields()) + "\n")

    if failures:
        log.warning("%d invalid line(s) skipped converting %s", len(failures), path.name)
    log.info("Wrote BED file %s", out_path)
    return failures, out_path


def records_to_frame(records: Iterable[SAFRecord]) -> pd.DataFrame:
    """Tabulate SAF records; absent strands become ``.``."""
    rows = [
        {
            "name": r.name,
            "chr": str(r.chr),
            "start": int(r.start),
            "end": int(r.end),
            "strand": render_strand(r.strand),
        }
        for r in records
    ]
    df = pd.DataFrame(rows, columns=SAF_FRAME_COLUMNS)
    return df.astype({"start": "int64", "end": "int64"})


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

    log.info("Converting SAF to BED: %s", snakemake.input.saf)
    failures, _ = saf_to_bed(snakemake.input.saf, snakemake.output.bed)
    for failure in failures:
        log.warning("Skipped: %s", failure)
except NameError:
    pass  # Not running via Snakemake (e.g., imported for testing)
