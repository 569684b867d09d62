"""Base validation utilities for genomic text formats.

This module provides the exception taxonomy shared by every parser, plus
the small file checks used before a parse is attempted. Per-line parse
errors subclass ``ParseError`` so that file-level readers can collect them
alongside the offending line. Invariant violations do not subclass it,
so they always propagate.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class ValidationError(Exception):
    """Custom exception for data validation failures."""

    pass


class ParseError(ValidationError):
    """A single line of input could not be turned into a record."""

    pass


class WrongFieldCount(ParseError):
    """Line does not split into the expected number of fields."""

    def __init__(self, expected: str, found: int, line: str | None = None):
        self.expected = expected
        self.found = found
        where = f" in '{line}'" if line is not None else ""
        super().__init__(f"Expected {expected} fields but got {found}{where}")


class InvalidChromosome(ParseError):
    """Chromosome name lacks the required prefix."""

    pass


class NonIntegralCoordinate(ParseError):
    """A coordinate is not a valid (non-negative or positive) integer."""

    pass


class IllegalCoordinateOrder(ParseError):
    """Start coordinate is not strictly less than end coordinate."""

    def __init__(self, start: int, end: int):
        self.start = start
        self.end = end
        super().__init__(
            f"Start coordinate ({start}) not less than end coordinate ({end})"
        )


class IllegalStrand(ParseError):
    """Strand text is neither '+', '-' nor the absence marker."""

    pass


class InvalidMotifField(ParseError):
    """Motif sequence, log-odds or log p-value field is malformed."""

    pass


class InvalidOccurrenceEncoding(ParseError):
    """Target/background occurrence subfield is malformed."""

    pass


class InvalidPvalueEncoding(ParseError):
    """P-value subfield is neither a decimal nor scientific notation."""

    pass


class NoCandidateFilesError(ValidationError):
    """A directory scan found nothing to parse."""

    pass


class InvariantViolation(Exception):
    """Internal-consistency failure.

    Raised when validated construction has been bypassed or upstream data
    combines fields in a way the format never produces. Not a
    ``ValidationError``: line-level collectors must not swallow it.
    """

    pass


@dataclass(frozen=True)
class LineFailure:
    """An input line paired with the error raised while parsing it."""

    line: str
    error: ParseError

    @property
    def message(self) -> str:
        return str(self.error)

    def __str__(self) -> str:
        return f"{self.message} in '{self.line}'"


def validate_file_exists(file_path: str | Path, file_description: str) -> Path:
    """Validate that a file exists and is readable.

    Args:
        file_path: Path to file
        file_description: Description of file for error messages

    Returns:
        Resolved Path object

    Raises:
        ValidationError: If file doesn't exist or isn't readable
    """
    path = Path(file_path)
    if not path.exists():
        raise ValidationError(f"{file_description} not found: {path}")
    if not path.is_file():
        raise ValidationError(f"{file_description} is not a file: {path}")
    return path


def validate_directory_exists(dir_path: str | Path, description: str) -> Path:
    """Validate that a path exists and is a directory.

    Raises:
        ValidationError: If the path is missing or is not a directory
    """
    path = Path(dir_path)
    if not path.is_dir():
        raise ValidationError(f"{description} is not a directory: {path}")
    return path


def summarize_failures(
    failures: list[LineFailure], file_name: str, limit: int = 10
) -> str:
    """Format line failures into a single multi-line message.

    Example:
        >>> summarize_failures([], "peaks.saf")
        'peaks.saf has 0 invalid line(s)'
    """
    lines = [f"{file_name} has {len(failures)} invalid line(s)"]
    for failure in failures[:limit]:
        lines.append(f"  {failure}")
    if len(failures) > limit:
        lines.append(f"  ... and {len(failures) - limit} more")
    return "\n".join(lines)
