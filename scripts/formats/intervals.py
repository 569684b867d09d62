"""Genomic interval records (BED3/BED6) and the shared interval behaviour.

Any record type that exposes ``chr``, ``start`` and ``end`` can inherit
``GenomicInterval`` to gain the derived operations (size, location name,
BED6 rendering) without reimplementing them.
"""

from __future__ import annotations

from dataclasses import dataclass

from utils import split_fields
from validators import (
    BEDScore,
    Chromosome,
    IllegalCoordinateOrder,
    InvalidChromosome,
    InvariantViolation,
    NonIntegralCoordinate,
    NonNegativeInt,
    ParseError,
    PositiveInt,
    Strand,
    ValidationError,
    WrongFieldCount,
    parse_strand,
    refine_strand,
    render_strand,
)

BED3_FIELD_COUNT = 3
BED6_FIELD_COUNT = 6


class GenomicInterval:
    """Mixin for records with ``chr``, ``start`` and ``end`` attributes.

    ``start`` is 0-based inclusive and ``end`` 0-based exclusive.
    """

    chr: Chromosome
    start: NonNegativeInt
    end: PositiveInt

    @property
    def size(self) -> PositiveInt:
        """Number of bases covered, ``end - start``.

        Raises:
            InvariantViolation: If the coordinates do not describe a
                non-empty interval, which validated construction rules out
        """
        try:
            return PositiveInt(int(self.end) - int(self.start))
        except ValidationError:
            raise InvariantViolation(
                f"Invalid region coordinates: ({self.start}, {self.end})"
            ) from None

    def location_name(self, sep: str = "_") -> str:
        """Name encoding the location, e.g. ``chr1_100_200``."""
        return sep.join((str(self.chr), str(int(self.start)), str(int(self.end))))

    def to_bed6_fields(
        self,
        name: str | None = None,
        score: BEDScore | None = None,
        strand: Strand | None = None,
    ) -> list[str]:
        """Render as BED6 columns, filling unknown fields with placeholders.

        Args:
            name: Feature name; defaults to the location name
            score: BED score; defaults to 0
            strand: Feature strand; rendered as ``.`` when absent
        """
        return [
            str(self.chr),
            str(int(self.start)),
            str(int(self.end)),
            self.location_name() if name is None else name,
            str(int(BEDScore.empty() if score is None else score)),
            render_strand(strand),
        ]


def refine_coordinates(record) -> None:
    """Refine chr/start/end in place on a frozen dataclass instance."""
    if not isinstance(record.chr, Chromosome):
        object.__setattr__(record, "chr", Chromosome(record.chr))
    object.__setattr__(record, "start", NonNegativeInt(record.start))
    object.__setattr__(record, "end", PositiveInt(record.end))
    if record.start >= record.end:
        raise IllegalCoordinateOrder(int(record.start), int(record.end))


@dataclass(frozen=True)
class BED3(GenomicInterval):
    """Minimal BED record.

    Raises:
        ValidationError: If a coordinate fails refinement
        IllegalCoordinateOrder: If start is not less than end

    Example:
        >>> BED3("chr1", 100, 250).size
        PositiveInt(150)
    """

    chr: Chromosome
    start: NonNegativeInt
    end: PositiveInt

    def __post_init__(self) -> None:
        refine_coordinates(self)

    def to_fields(self) -> list[str]:
        return [str(self.chr), str(int(self.start)), str(int(self.end))]


@dataclass(frozen=True)
class BED6(BED3):
    """BED record with name, score and strand.

    Raises:
        IllegalStrand: If the strand is not ``+``, ``-``, ``.`` or None
    """

    name: str = ""
    score: BEDScore = BEDScore.empty()
    strand: Strand | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "score", BEDScore(self.score))
        object.__setattr__(self, "strand", refine_strand(self.strand))

    def to_fields(self) -> list[str]:
        return self.to_bed6_fields(self.name, self.score, self.strand)


def parse_coordinates(
    start_text: str, end_text: str
) -> tuple[NonNegativeInt, PositiveInt]:
    """Refine raw start/end text.

    Raises:
        NonIntegralCoordinate: If either value is not a valid coordinate
    """
    try:
        return NonNegativeInt.from_text(start_text), PositiveInt.from_text(end_text)
    except ValidationError as e:
        raise NonIntegralCoordinate(
            f"Non integral coordinate(s) ({start_text}, {end_text}): {e}"
        ) from e


def parse_bed_line(line: str, sep: str = "\t") -> BED3 | BED6:
    """Parse a BED3 or BED6 line, chosen by field count.

    Lines with 3 fields give a ``BED3``; lines with 6 or more give a
    ``BED6`` (extra columns are ignored).

    Raises:
        ParseError: Subclass naming the first field that failed
    """
    fields = split_fields(line, sep)
    if len(fields) != BED3_FIELD_COUNT and len(fields) < BED6_FIELD_COUNT:
        raise WrongFieldCount("3 or at least 6", len(fields))

    chr_text, start_text, end_text = fields[:3]
    try:
        chrom = Chromosome.from_text(chr_text)
    except InvalidChromosome:
        raise InvalidChromosome(f"Could not parse chromosome '{chr_text}'") from None
    start, end = parse_coordinates(start_text, end_text)

    if len(fields) == BED3_FIELD_COUNT:
        return BED3(chrom, start, end)

    name, score_text, strand_text = fields[3:6]
    try:
        score = BEDScore.from_text(score_text)
    except ValidationError as e:
        raise ParseError(f"Invalid BED score '{score_text}': {e}") from e
    return BED6(chrom, start, end, name, score, parse_strand(strand_text))


def parse_location_name(text: str, sep: str = "_") -> BED3:
    """Inverse of ``GenomicInterval.location_name``.

    Example:
        >>> parse_location_name("chr2_10_20")
        BED3(chr=Chromosome(name='chr2'), start=NonNegativeInt(10), end=PositiveInt(20))

    Raises:
        ParseError: If the name does not hold chromosome, start and end
    """
    parts = text.rsplit(sep, 2)
    if len(parts) != 3:
        raise WrongFieldCount("3", len(parts))
    chrom = Chromosome.from_text(parts[0])
    start, end = parse_coordinates(parts[1], parts[2])
    return BED3(chrom, start, end)
