"""Parse BED interval files.

BED3 and BED6 lines are both accepted; ``track``, ``browser`` and comment
lines are skipped. Also provides location-based renaming of interval
files and tabix indexing for region queries.
"""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

import pysam

from formats import BED3, BED6, parse_bed_line
from utils import split_fields
from validators import (
    LineFailure,
    ParseError,
    validate_file_exists,
)

log = logging.getLogger(__name__)

BED_SKIP_PREFIXES = ("#", "track", "browser")
BED_NAME_INDEX = 3


def iter_bed_records(
    lines: Iterable[str], sep: str = "\t"
) -> Iterator[BED3 | BED6 | LineFailure]:
    """Parse BED lines one at a time, skipping headers and blank lines."""
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line.strip() or line.startswith(BED_SKIP_PREFIXES):
            continue
        try:
            yield parse_bed_line(line, sep)
        except ParseError as e:
            log.warning("Invalid BED line %r: %s", line, e)
            yield LineFailure(line, e)


def parse_bed(bed_path: str | Path, sep: str = "\t") -> Iterator[BED3 | BED6 | LineFailure]:
    """Lazily parse records from a BED file.

    Raises:
        ValidationError: If the file does not exist (on first iteration)
    """
    path = validate_file_exists(bed_path, "BED file")
    with open(path) as f:
        yield from iter_bed_records(f, sep)


def replace_names_with_location(
    lines: Iterable[str],
    outfile: str | Path,
    sep: str = "_",
    skip_header: bool = False,
) -> tuple[list[str], Path]:
    """Rewrite the BED name column of each line as ``chr<sep>start<sep>end``.

    Lines with fewer than four tab-separated columns cannot carry a name
    and are not written.

    Args:
        lines: Input BED lines
        outfile: Output path
        sep: Delimiter between the parts of the new name
        skip_header: Drop the first line

    Returns:
        Tuple of (bad lines, output path)
    """
    path = Path(outfile)
    path.parent.mkdir(parents=True, exist_ok=True)
    it = iter(lines)
    if skip_header:
        next(it, None)

    bad_lines = []
    with open(path, "w") as out:
        for raw in it:
            line = raw.rstrip("\r\n")
            fields = split_fields(line)
            if len(fields) <= BED_NAME_INDEX:
                bad_lines.append(line)
                continue
            fields[BED_NAME_INDEX] = sep.join(fields[:BED_NAME_INDEX])
            out.write("\t".join(fields) + "\n")

    if bad_lines:
        log.warning("%d line(s) too short to rename in %s", len(bad_lines), path.name)
    log.info("Wrote location-named intervals to %s", path)
    return bad_lines, path


def index_bed(bed_path: str | Path, force: bool = False) -> Path:
    """Compress a sorted BED file with bgzip and build a tabix index.

    Args:
        bed_path: Path to a coordinate-sorted BED file
        force: Overwrite an existing compressed file and index

    Returns:
        Path to the ``.bed.gz`` file; its ``.tbi`` sits alongside
    """
    path = validate_file_exists(bed_path, "BED file")
    gz_path = Path(f"{path}.gz")
    pysam.tabix_compress(str(path), str(gz_path), force=force)
    pysam.tabix_index(str(gz_path), preset="bed", force=force)
    log.info("Indexed %s", gz_path)
    return gz_path


def fetch_intervals(
    gz_path: str | Path, chrom: str, start: int, end: int
) -> list[BED3 | BED6 | LineFailure]:
    """Return records from an indexed BED file overlapping a region.

    A malformed row becomes a ``LineFailure`` in place, as in
    ``iter_bed_records``, so the rows around it are still returned.
    """
    path = validate_file_exists(gz_path, "Indexed BED file")
    with pysam.TabixFile(str(path)) as tbx:
        if chrom not in tbx.contigs:
            return []
        return list(iter_bed_records(tbx.fetch(chrom, start, end)))
