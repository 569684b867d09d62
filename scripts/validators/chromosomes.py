"""Chromosome validation and ordering.

A chromosome is identified by a name carrying the ``chr`` prefix. Names
order numerically when the suffix after the prefix is an integer and
lexicographically otherwise, with numeric names always first:

    chr1 < chr2 < chr10 < chr22 < chrM < chrUn < chrX < chrY
"""

from __future__ import annotations

import functools
from dataclasses import dataclass

from utils import parse_int

from .base import InvalidChromosome

CHROMOSOME_PREFIX = "chr"


def _suffix_key(name: str) -> tuple[int, int, str]:
    suffix = name[len(CHROMOSOME_PREFIX):]
    try:
        return (0, parse_int(suffix), "")
    except ValueError:
        return (1, 0, suffix)


def compare_chromosome_names(a: str, b: str) -> int:
    """Compare two prefixed chromosome names.

    Returns a negative number, zero or a positive number as ``a`` sorts
    before, together with, or after ``b``. Names whose numeric suffixes
    are equal (``chr1`` and ``chr01``) compare as zero.

    Example:
        >>> compare_chromosome_names("chr2", "chr10") < 0
        True
        >>> compare_chromosome_names("chrX", "chr22") > 0
        True
    """
    key_a, key_b = _suffix_key(a), _suffix_key(b)
    return (key_a > key_b) - (key_a < key_b)


@functools.total_ordering
@dataclass(frozen=True, eq=True, order=False)
class Chromosome:
    """Validated chromosome name.

    Args:
        name: Chromosome name; must start with ``chr``

    Raises:
        InvalidChromosome: If the prefix is missing

    Example:
        >>> Chromosome("chr1") < Chromosome("chrX")
        True
        >>> str(Chromosome("chr7"))
        'chr7'
    """

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.startswith(CHROMOSOME_PREFIX):
            raise InvalidChromosome(
                f"Chromosome name must start with '{CHROMOSOME_PREFIX}': {self.name!r}"
            )

    @classmethod
    def from_text(cls, text: str) -> Chromosome:
        return cls(text)

    @property
    def sort_key(self) -> tuple[int, int, str]:
        return _suffix_key(self.name)

    def __lt__(self, other: Chromosome) -> bool:
        if not isinstance(other, Chromosome):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __str__(self) -> str:
        return self.name


def sort_chromosomes(names) -> list[Chromosome]:
    """Validate and sort chromosome names.

    Raises:
        InvalidChromosome: If any name lacks the prefix

    Example:
        >>> [str(c) for c in sort_chromosomes(["chrX", "chr10", "chr2"])]
        ['chr2', 'chr10', 'chrX']
    """
    return sorted(Chromosome(n) if not isinstance(n, Chromosome) else n for n in names)
