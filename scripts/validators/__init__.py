"""Validated building blocks for genomic text formats.

This package provides the exception taxonomy, refined numeric values,
chromosome and strand types, and parser configuration used by the
``formats`` and ``parsers`` packages.

Modules:
    base: Exception taxonomy, line failures, file checks
    numeric: Non-negative/positive integers, BED scores, probabilities
    chromosomes: Chromosome names and their ordering
    strand: Strand symbols and the absent-strand marker
    config: Parser configuration and YAML loading

Example:
    >>> from validators import Chromosome, NonNegativeInt, ValidationError
    >>> try:
    ...     NonNegativeInt(-1)
    ... except ValidationError as e:
    ...     print(f"Validation failed: {e}")
    Validation failed: NonNegativeInt must be non-negative, got: -1
"""

from .base import (
    ValidationError,
    ParseError,
    WrongFieldCount,
    InvalidChromosome,
    NonIntegralCoordinate,
    IllegalCoordinateOrder,
    IllegalStrand,
    InvalidMotifField,
    InvalidOccurrenceEncoding,
    InvalidPvalueEncoding,
    NoCandidateFilesError,
    InvariantViolation,
    LineFailure,
    validate_file_exists,
    validate_directory_exists,
    summarize_failures,
)

from .numeric import (
    RefinedInt,
    NonNegativeInt,
    PositiveInt,
    BEDScore,
    RefinedFloat,
    Probability,
)

from .chromosomes import (
    CHROMOSOME_PREFIX,
    Chromosome,
    compare_chromosome_names,
    sort_chromosomes,
)

from .strand import (
    ABSENT_STRAND,
    Strand,
    parse_strand,
    refine_strand,
    render_strand,
)

from .config import (
    DEFAULT_CONFIG,
    DEFAULT_SAF_HEADER_TOKENS,
    SAF_HEADER_FIELDS,
    FormatConfig,
    config_from_dict,
    load_config,
    validate_format_config,
)

__all__ = [
    # Exceptions
    "ValidationError",
    "ParseError",
    "WrongFieldCount",
    "InvalidChromosome",
    "NonIntegralCoordinate",
    "IllegalCoordinateOrder",
    "IllegalStrand",
    "InvalidMotifField",
    "InvalidOccurrenceEncoding",
    "InvalidPvalueEncoding",
    "NoCandidateFilesError",
    "InvariantViolation",
    "LineFailure",
    # File checks
    "validate_file_exists",
    "validate_directory_exists",
    "summarize_failures",
    # Refined numbers
    "RefinedInt",
    "NonNegativeInt",
    "PositiveInt",
    "BEDScore",
    "RefinedFloat",
    "Probability",
    # Chromosomes
    "CHROMOSOME_PREFIX",
    "Chromosome",
    "compare_chromosome_names",
    "sort_chromosomes",
    # Strand
    "ABSENT_STRAND",
    "Strand",
    "parse_strand",
    "refine_strand",
    "render_strand",
    # Config
    "DEFAULT_CONFIG",
    "DEFAULT_SAF_HEADER_TOKENS",
    "SAF_HEADER_FIELDS",
    "FormatConfig",
    "config_from_dict",
    "load_config",
    "validate_format_config",
]
