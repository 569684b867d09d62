"""Refined numeric values.

Each class here wraps a built-in number and checks its predicate inside
``__new__``, so there is no way to obtain an instance that violates it.
Instances behave like the underlying ``int``/``float`` for arithmetic,
comparison and hashing.
"""

from __future__ import annotations

from utils import parse_int

from .base import ValidationError


class RefinedInt(int):
    """Integer subtype whose values satisfy ``check``."""

    description = "integer"

    def __new__(cls, value: int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(
                f"{cls.__name__} requires an int, got: {value!r} "
                f"({type(value).__name__})"
            )
        if not cls.check(value):
            raise ValidationError(
                f"{cls.__name__} must be {cls.description}, got: {value}"
            )
        return super().__new__(cls, value)

    @classmethod
    def check(cls, value: int) -> bool:
        return True

    @classmethod
    def from_text(cls, text: str):
        """Parse text as an integer, then refine it.

        Raises:
            ValidationError: If text is not an integer, or the integer
                fails the predicate
        """
        try:
            value = parse_int(text)
        except ValueError as e:
            raise ValidationError(f"{text!r} is not an integer") from e
        return cls(value)

    @property
    def value(self) -> int:
        return int(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"


class NonNegativeInt(RefinedInt):
    """Integer >= 0, e.g. a 0-based inclusive start coordinate."""

    description = "non-negative"

    @classmethod
    def check(cls, value: int) -> bool:
        return value >= 0


class PositiveInt(NonNegativeInt):
    """Integer > 0, e.g. a 0-based exclusive end coordinate."""

    description = "positive"

    @classmethod
    def check(cls, value: int) -> bool:
        return value > 0


class BEDScore(RefinedInt):
    """BED score column, an integer in [0, 1000]."""

    description = "between 0 and 1000 (inclusive)"
    MIN = 0
    MAX = 1000

    @classmethod
    def check(cls, value: int) -> bool:
        return cls.MIN <= value <= cls.MAX

    @classmethod
    def empty(cls) -> BEDScore:
        return cls(0)


class RefinedFloat(float):
    """Float subtype whose values satisfy ``check``."""

    description = "a number"

    def __new__(cls, value: float):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValidationError(
                f"{cls.__name__} requires a number, got: {value!r} "
                f"({type(value).__name__})"
            )
        if not cls.check(float(value)):
            raise ValidationError(
                f"{cls.__name__} must be {cls.description}, got: {value}"
            )
        return super().__new__(cls, value)

    @classmethod
    def check(cls, value: float) -> bool:
        return True

    @property
    def value(self) -> float:
        return float(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({float(self)!r})"


class Probability(RefinedFloat):
    """Float in [0.0, 1.0]."""

    description = "between 0.0 and 1.0 (inclusive)"

    @classmethod
    def check(cls, value: float) -> bool:
        # NaN fails both comparisons
        return 0.0 <= value <= 1.0
