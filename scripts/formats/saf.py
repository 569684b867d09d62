"""SAF (simplified annotation format) records.

A SAF line holds five tab-separated fields::

    GeneID  Chr  Start  End  Strand

with ``Start`` 0-based inclusive, ``End`` 0-based exclusive and ``Strand``
one of ``+``, ``-`` or ``.`` (absent).
"""

from __future__ import annotations

from dataclasses import dataclass

from utils import split_fields
from validators import (
    Chromosome,
    InvalidChromosome,
    NonNegativeInt,
    PositiveInt,
    Strand,
    WrongFieldCount,
    parse_strand,
    refine_strand,
    render_strand,
)

from .intervals import GenomicInterval, refine_coordinates, parse_coordinates

SAF_FIELD_COUNT = 5


@dataclass(frozen=True)
class SAFRecord(GenomicInterval):
    """A validated SAF record.

    Args:
        name: Feature identifier, free text
        chr: Chromosome (``str`` values are validated)
        start: Start coordinate
        end: End coordinate, strictly greater than start
        strand: Strand, or None when absent (``str`` values are parsed)

    Raises:
        ValidationError: If a coordinate fails refinement
        IllegalCoordinateOrder: If start >= end
        IllegalStrand: If the strand is not ``+``, ``-``, ``.`` or None

    Example:
        >>> r = SAFRecord("peak1", "chr1", 100, 200)
        >>> r.size, r.to_line()
        (PositiveInt(100), 'peak1\\tchr1\\t100\\t200\\t.')
    """

    name: str
    chr: Chromosome
    start: NonNegativeInt
    end: PositiveInt
    strand: Strand | None = None

    def __post_init__(self) -> None:
        refine_coordinates(self)
        object.__setattr__(self, "strand", refine_strand(self.strand))

    @classmethod
    def from_interval(cls, interval: GenomicInterval, sep: str = "_") -> SAFRecord:
        """Lift any interval into SAF, named by its location, strand absent."""
        return cls(
            interval.location_name(sep), interval.chr, interval.start, interval.end
        )

    def to_fields(self) -> list[str]:
        return [
            self.name,
            str(self.chr),
            str(int(self.start)),
            str(int(self.end)),
            render_strand(self.strand),
        ]

    def to_line(self, sep: str = "\t") -> str:
        return sep.join(self.to_fields())

    def to_bed_fields(self) -> list[str]:
        """BED6 columns: chr, start, end, name, score 0, strand."""
        return self.to_bed6_fields(self.name, None, self.strand)


def parse_saf_line(line: str, sep: str = "\t") -> SAFRecord:
    """Parse one SAF data line.

    Fields are checked in order (field count, chromosome, coordinates,
    strand), then the record constructor checks that start < end.

    Raises:
        WrongFieldCount: If the line does not have exactly 5 fields
        InvalidChromosome: If the chromosome lacks the ``chr`` prefix
        NonIntegralCoordinate: If start/end are not valid coordinates
        IllegalStrand: If the strand is not ``+``, ``-`` or ``.``
        IllegalCoordinateOrder: If start >= end

    Example:
        >>> parse_saf_line("peak1\\tchr1\\t100\\t200\\t+").strand
        <Strand.PLUS: '+'>
    """
    fields = split_fields(line, sep)
    if len(fields) != SAF_FIELD_COUNT:
        raise WrongFieldCount(str(SAF_FIELD_COUNT), len(fields))

    name, chr_text, start_text, end_text, strand_text = fields
    try:
        chrom = Chromosome.from_text(chr_text)
    except InvalidChromosome:
        raise InvalidChromosome(f"Could not parse chromosome '{chr_text}'") from None
    start, end = parse_coordinates(start_text, end_text)
    strand = parse_strand(strand_text)
    return SAFRecord(name, chrom, start, end, strand)
