"""Record models and line grammars for interval and motif formats.

Modules:
    intervals: GenomicInterval behaviour, BED3/BED6 records and lines
    saf: SAF records and lines
    scientific: Scientific-notation numbers
    motif: HOMER motif header records, occurrence data, p-values
"""

from .intervals import (
    BED3,
    BED6,
    GenomicInterval,
    parse_bed_line,
    parse_coordinates,
    parse_location_name,
)

from .saf import (
    SAFRecord,
    parse_saf_line,
)

from .scientific import ScientificNumber

from .motif import (
    BackgroundOccurrence,
    DecimalPvalue,
    MotifRecord,
    OccurrenceCount,
    OccurrenceData,
    PvalueLiteral,
    ScientificPvalue,
    TargetOccurrence,
    parse_pvalue,
)

__all__ = [
    # Intervals
    "BED3",
    "BED6",
    "GenomicInterval",
    "parse_bed_line",
    "parse_coordinates",
    "parse_location_name",
    # SAF
    "SAFRecord",
    "parse_saf_line",
    # Motifs
    "ScientificNumber",
    "BackgroundOccurrence",
    "DecimalPvalue",
    "MotifRecord",
    "OccurrenceCount",
    "OccurrenceData",
    "PvalueLiteral",
    "ScientificPvalue",
    "TargetOccurrence",
    "parse_pvalue",
]
