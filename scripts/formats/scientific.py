"""Numbers written in scientific notation, e.g. ``1e-9731``.

Motif enrichment p-values regularly underflow a double, so they are kept
as an exact (base, exponent) pair rather than converted to ``float``.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from decimal import Decimal

from utils import format_number
from validators import ValidationError

BASE_MIN = 1.0
BASE_MAX = 10.0


@functools.total_ordering
@dataclass(frozen=True)
class ScientificNumber:
    """``base * 10 ** exponent`` with base in [1, 10).

    Example:
        >>> ScientificNumber(2.5, -10).text
        '2.5e-10'
        >>> ScientificNumber(1, -9731) < ScientificNumber(9.9, -12)
        True

    Raises:
        ValidationError: If base is outside [1, 10) or exponent is not an int
    """

    base: int | float
    exponent: int

    def __post_init__(self) -> None:
        if isinstance(self.base, bool) or not isinstance(self.base, (int, float)):
            raise ValidationError(f"Scientific notation base must be a number: {self.base!r}")
        if not BASE_MIN <= self.base < BASE_MAX:
            raise ValidationError(
                f"Scientific notation base must be in [{BASE_MIN}, {BASE_MAX}), got: {self.base}"
            )
        if isinstance(self.exponent, bool) or not isinstance(self.exponent, int):
            raise ValidationError(
                f"Scientific notation exponent must be an int: {self.exponent!r}"
            )

    @property
    def text(self) -> str:
        return f"{format_number(self.base)}e{self.exponent}"

    def as_decimal(self) -> Decimal:
        """Exact value; unlike ``float`` it does not underflow."""
        return Decimal(format_number(self.base)).scaleb(self.exponent)

    def __float__(self) -> float:
        return float(self.as_decimal())

    def __lt__(self, other: ScientificNumber) -> bool:
        if not isinstance(other, ScientificNumber):
            return NotImplemented
        return (self.exponent, self.base) < (other.exponent, other.base)

    def __str__(self) -> str:
        return self.text
