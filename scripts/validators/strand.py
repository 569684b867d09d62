"""Reference strand of a genomic feature."""

from __future__ import annotations

from enum import Enum

from .base import IllegalStrand

ABSENT_STRAND = "."


class Strand(str, Enum):
    """Forward (plus) or reverse (minus) strand."""

    PLUS = "+"
    MINUS = "-"

    @classmethod
    def from_text(cls, text: str) -> Strand:
        """Parse exactly ``+`` or ``-``.

        Raises:
            IllegalStrand: For any other text, including ``.``
        """
        try:
            return cls(text)
        except ValueError:
            raise IllegalStrand(f"Illegal strand ({text!r})") from None

    def __str__(self) -> str:
        return self.value


def parse_strand(text: str) -> Strand | None:
    """Parse a strand column in which ``.`` marks an absent strand.

    Example:
        >>> parse_strand("+")
        <Strand.PLUS: '+'>
        >>> parse_strand(".") is None
        True

    Raises:
        IllegalStrand: If text is neither a strand symbol nor ``.``
    """
    if text == ABSENT_STRAND:
        return None
    return Strand.from_text(text)


def render_strand(strand: Strand | None) -> str:
    """Inverse of ``parse_strand``."""
    if strand is None:
        return ABSENT_STRAND
    return strand.value


def refine_strand(value: Strand | str | None) -> Strand | None:
    """Coerce a record's strand field to ``Strand`` or None.

    Text goes through ``parse_strand``, so ``.`` means absent.

    Raises:
        IllegalStrand: For unrecognised text or a non-text value
    """
    if value is None or isinstance(value, Strand):
        return value
    if isinstance(value, str):
        return parse_strand(value)
    raise IllegalStrand(f"Illegal strand ({value!r})")
