"""HOMER motif header records.

Each motif in a HOMER motif file starts with a header line::

    >SEQUENCE  name  logOdds  [logPvalue  [placeholder  occurrence]]

where ``occurrence`` packs target/background occurrence and the
enrichment p-value::

    T:17311.0(44.36%),B:2181.5(5.80%),P:1e-9731

See http://homer.ucsd.edu/homer/motif/creatingCustomMotifs.html for the
format. Parsing and rendering are exact inverses for well-formed text.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import ClassVar

from utils import format_number, parse_int, parse_number, split_fields
from validators import (
    InvalidMotifField,
    InvalidOccurrenceEncoding,
    InvalidPvalueEncoding,
    InvariantViolation,
    Probability,
    ValidationError,
    WrongFieldCount,
)

from .scientific import ScientificNumber

MOTIF_MARKER = ">"
NAN_LITERALS = {"nan", "-nan"}
OCCURRENCE_SUFFIX = "%)"
PVALUE_PREFIX = "P:"
MIN_MOTIF_FIELDS = 3

# Field positions within a header line
LOG_PVALUE_INDEX = 3
PLACEHOLDER_INDEX = 4
OCCURRENCE_INDEX = 5

_PERCENT_QUANTUM = Decimal("0.01")


# --- Occurrence sub-record ---


@dataclass(frozen=True)
class OccurrenceCount:
    """Count of sequences holding the motif and the fraction it represents."""

    PREFIX: ClassVar[str] = ""

    count: int | float
    percent: Probability

    def __post_init__(self) -> None:
        object.__setattr__(self, "percent", Probability(self.percent))

    @classmethod
    def from_text(cls, text: str) -> OccurrenceCount:
        """Parse ``<prefix>:<count>(<pct>%)``.

        Raises:
            InvalidOccurrenceEncoding: If prefix, suffix, structure or
                numbers are malformed, or the percentage is outside [0, 100]
        """
        if not text.startswith(cls.PREFIX):
            raise InvalidOccurrenceEncoding(
                f"Invalid prefix (expected '{cls.PREFIX}') on occurrence datum text: {text}"
            )
        if not text.endswith(OCCURRENCE_SUFFIX):
            raise InvalidOccurrenceEncoding(
                f"Invalid suffix (expected '{OCCURRENCE_SUFFIX}') on occurrence datum text: {text}"
            )
        body = text.removeprefix(f"{cls.PREFIX}:").removesuffix(OCCURRENCE_SUFFIX)
        parts = body.split("(")
        if len(parts) != 2:
            raise InvalidOccurrenceEncoding(f"Invalid motif occurrence field text: {text}")
        try:
            count = parse_number(parts[0])
            percent = float(parse_number(parts[1])) / 100
        except ValueError as e:
            raise InvalidOccurrenceEncoding(f"Error parsing occurrence datum {text}: {e}") from e
        try:
            return cls(count, Probability(percent))
        except ValidationError as e:
            raise InvalidOccurrenceEncoding(f"Invalid occurrence percentage in {text}: {e}") from e

    @property
    def text(self) -> str:
        pct = Decimal(repr(100 * float(self.percent))).quantize(
            _PERCENT_QUANTUM, rounding=ROUND_HALF_UP
        )
        return f"{self.PREFIX}:{format_number(self.count)}({pct}%)"


@dataclass(frozen=True)
class TargetOccurrence(OccurrenceCount):
    PREFIX: ClassVar[str] = "T"


@dataclass(frozen=True)
class BackgroundOccurrence(OccurrenceCount):
    PREFIX: ClassVar[str] = "B"


@dataclass(frozen=True)
class DecimalPvalue:
    """P-value written as a plain decimal."""

    value: int | float

    @property
    def text(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True)
class ScientificPvalue:
    """P-value written as ``<base>e<exponent>``."""

    number: ScientificNumber

    @property
    def text(self) -> str:
        return self.number.text


PvalueLiteral = DecimalPvalue | ScientificPvalue


def parse_pvalue(text: str) -> PvalueLiteral:
    """Parse the p-value subfield, with or without its ``P:`` prefix.

    Example:
        >>> parse_pvalue("P:1.0e-8").text
        '1.0e-8'
        >>> parse_pvalue("0.01")
        DecimalPvalue(value=0.01)

    Raises:
        InvalidPvalueEncoding: If the text is neither form
    """
    parts = text.removeprefix(PVALUE_PREFIX).split("e")
    if len(parts) == 1:
        try:
            return DecimalPvalue(parse_number(parts[0]))
        except ValueError:
            raise InvalidPvalueEncoding(f"Invalid p-value: {text}") from None
    if len(parts) == 2:
        base_text, exponent_text = parts
        try:
            base = parse_number(base_text)
        except ValueError:
            raise InvalidPvalueEncoding(f"Invalid scientific number base in: {text}") from None
        try:
            exponent = parse_int(exponent_text)
        except ValueError:
            raise InvalidPvalueEncoding(
                f"Invalid exponent ({exponent_text}) in alleged p-value text ({text})"
            ) from None
        try:
            return ScientificPvalue(ScientificNumber(base, exponent))
        except ValidationError as e:
            raise InvalidPvalueEncoding(f"Invalid scientific number in {text}: {e}") from e
    raise InvalidPvalueEncoding(f"Invalid p-value text: {text}")


@dataclass(frozen=True)
class OccurrenceData:
    """Target occurrence, background occurrence and enrichment p-value."""

    target: TargetOccurrence
    background: BackgroundOccurrence
    pvalue: PvalueLiteral

    @classmethod
    def from_text(cls, text: str) -> OccurrenceData:
        """Parse ``T:...,B:...,P:...``.

        Raises:
            InvalidOccurrenceEncoding: If there are not exactly three
                subfields or an occurrence subfield is malformed
            InvalidPvalueEncoding: If the p-value subfield is malformed
        """
        parts = text.split(",")
        if len(parts) != 3:
            raise InvalidOccurrenceEncoding(f"Invalid motif occurrence field: {text}")
        target_text, background_text, pvalue_text = parts
        return cls(
            TargetOccurrence.from_text(target_text),
            BackgroundOccurrence.from_text(background_text),
            parse_pvalue(pvalue_text),
        )

    @property
    def text(self) -> str:
        return ",".join(
            (self.target.text, self.background.text, f"{PVALUE_PREFIX}{self.pvalue.text}")
        )

    def r_text_fields(self) -> list[str]:
        return [
            format_number(self.target.count),
            repr(float(self.target.percent)),
            format_number(self.background.count),
            repr(float(self.background.percent)),
            self.pvalue.text,
        ]


# --- Motif header record ---


def _parse_log_odds(text: str) -> int | float:
    if text in NAN_LITERALS:
        return math.nan
    try:
        return parse_number(text)
    except ValueError:
        raise InvalidMotifField(f"Invalid log-odds: {text}") from None


@dataclass(frozen=True)
class MotifRecord:
    """A HOMER motif header line.

    Args:
        sequence: Consensus sequence, without the leading ``>``
        name: Motif name; may be empty
        log_odds: Detection threshold; may be NaN
        log_pvalue: Log of the enrichment p-value
        occurrence: Occurrence statistics; requires ``log_pvalue``
        placeholder: Text of the unused fifth column, kept for rendering

    Raises:
        InvariantViolation: If occurrence data or a placeholder is given
            without a log p-value, which the format never produces
    """

    sequence: str
    name: str
    log_odds: int | float
    log_pvalue: int | float | None = None
    occurrence: OccurrenceData | None = None
    placeholder: str | None = None

    def __post_init__(self) -> None:
        if self.occurrence is not None and self.log_pvalue is None:
            raise InvariantViolation(
                "Nonempty occurrence data + empty log p-value is prohibited"
            )
        if self.placeholder is not None and self.log_pvalue is None:
            raise InvariantViolation(
                "Nonempty placeholder field + empty log p-value is prohibited"
            )

    @classmethod
    def from_line(cls, line: str, sep: str = "\t") -> MotifRecord:
        return cls.from_fields(split_fields(line, sep))

    @classmethod
    def from_fields(cls, fields: list[str]) -> MotifRecord:
        """Build a record from already-split header fields.

        Raises:
            WrongFieldCount: Fewer than three fields
            InvalidMotifField: Bad sequence marker, log-odds or log p-value
            InvalidOccurrenceEncoding: Bad occurrence subfield
            InvalidPvalueEncoding: Bad p-value subfield
        """
        if len(fields) < MIN_MOTIF_FIELDS:
            raise WrongFieldCount(f"at least {MIN_MOTIF_FIELDS}", len(fields))
        if not fields[0].startswith(MOTIF_MARKER):
            raise InvalidMotifField(
                f"Invalid motif sequence field ({fields[0]}) -- "
                f"the motif sequence field must start with '{MOTIF_MARKER}'"
            )

        log_odds = _parse_log_odds(fields[2])

        log_pvalue = None
        if len(fields) > LOG_PVALUE_INDEX:
            try:
                log_pvalue = parse_number(fields[LOG_PVALUE_INDEX])
            except ValueError:
                raise InvalidMotifField(
                    f"Invalid log p-value: {fields[LOG_PVALUE_INDEX]}"
                ) from None

        placeholder = fields[PLACEHOLDER_INDEX] if len(fields) > PLACEHOLDER_INDEX else None

        occurrence = None
        if len(fields) > OCCURRENCE_INDEX:
            occurrence = OccurrenceData.from_text(fields[OCCURRENCE_INDEX])

        return cls(
            sequence=fields[0].removeprefix(MOTIF_MARKER),
            name=fields[1],
            log_odds=log_odds,
            log_pvalue=log_pvalue,
            occurrence=occurrence,
            placeholder=placeholder,
        )

    def text_fields(self) -> list[str]:
        """Header fields in file order."""
        fields = [f"{MOTIF_MARKER}{self.sequence}", self.name, format_number(self.log_odds)]
        if self.log_pvalue is not None:
            fields.append(format_number(self.log_pvalue))
        if self.occurrence is not None or self.placeholder is not None:
            fields.append(self.placeholder or "")
        if self.occurrence is not None:
            fields.append(self.occurrence.text)
        return fields

    def render(self, sep: str = "\t") -> str:
        return sep.join(self.text_fields())

    def r_text_fields(self) -> list[str]:
        """Flattened fields for downstream R scripts.

        The sequence marker is dropped and ``-`` in the name becomes ``_``.
        Occurrence data expands to target count/percent, background
        count/percent and p-value.
        """
        fields = [
            self.sequence,
            self.name.replace("-", "_"),
            format_number(self.log_odds),
        ]
        if self.log_pvalue is None and self.occurrence is None:
            return fields
        if self.log_pvalue is not None and self.occurrence is None:
            return fields + [format_number(self.log_pvalue)]
        if self.log_pvalue is not None and self.occurrence is not None:
            return fields + [format_number(self.log_pvalue)] + self.occurrence.r_text_fields()
        raise InvariantViolation(
            "Motif data instance with occurrence data but no log p-value"
        )

    def __str__(self) -> str:
        return self.render()
