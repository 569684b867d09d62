"""Tests for SAF records and the SAF line grammar."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

SCRIPTS_DIR = str(Path(__file__).resolve().parent.parent.parent / "scripts")
sys.path.insert(0, SCRIPTS_DIR)

from formats import BED3, BED6, SAFRecord, parse_saf_line  # noqa: E402
from validators import (  # noqa: E402
    Chromosome,
    IllegalCoordinateOrder,
    IllegalStrand,
    InvalidChromosome,
    NonIntegralCoordinate,
    Strand,
    WrongFieldCount,
)


class TestSAFRecord:
    @pytest.mark.parametrize("start,end", [(0, 1), (100, 200), (5, 1_000_000)])
    def test_size_is_end_minus_start(self, start, end):
        assert SAFRecord("r", "chr1", start, end).size == end - start

    @pytest.mark.parametrize("start,end", [(200, 100), (50, 50)])
    def test_start_not_less_than_end(self, start, end):
        with pytest.raises(IllegalCoordinateOrder):
            SAFRecord("r", "chr1", start, end)

    def test_strand_defaults_to_absent(self):
        assert SAFRecord("r", "chr1", 0, 10).strand is None

    def test_to_line(self):
        record = SAFRecord("peak1", "chr1", 100, 200, Strand.PLUS)
        assert record.to_line() == "peak1\tchr1\t100\t200\t+"
        assert record.to_line(",") == "peak1,chr1,100,200,+"

    def test_strand_text_refined(self):
        record = SAFRecord("p", "chr1", 1, 5, "+")
        assert record.strand is Strand.PLUS
        assert record.to_line() == "p\tchr1\t1\t5\t+"
        assert SAFRecord("p", "chr1", 1, 5, ".").strand is None

    @pytest.mark.parametrize("strand", ["x", "plus", 0])
    def test_illegal_strand_rejected(self, strand):
        with pytest.raises(IllegalStrand):
            SAFRecord("p", "chr1", 1, 5, strand)

    def test_to_bed_fields(self):
        record = SAFRecord("peak1", "chr1", 100, 200)
        assert record.to_bed_fields() == ["chr1", "100", "200", "peak1", "0", "."]

    def test_from_interval(self):
        record = SAFRecord.from_interval(BED6("chr3", 10, 30, "site", 5, Strand.MINUS))
        assert record == SAFRecord("chr3_10_30", "chr3", 10, 30)

    def test_from_interval_separator(self):
        assert SAFRecord.from_interval(BED3("chr3", 10, 30), ":").name == "chr3:10:30"


class TestParseSafLine:
    def test_valid_line(self):
        record = parse_saf_line("peak1\tchr1\t100\t200\t.")
        assert record == SAFRecord("peak1", Chromosome("chr1"), 100, 200, None)

    def test_reversed_coordinates(self):
        with pytest.raises(IllegalCoordinateOrder):
            parse_saf_line("peak1\tchr1\t200\t100\t.")

    @pytest.mark.parametrize(
        "line",
        [
            "peak1\tchr1\t100\t200\t+",
            "peak1\tchr1\t100\t200\t-",
            "peak1\tchr1\t100\t200\t.",
            "\tchrX\t0\t1\t.",
        ],
    )
    def test_reserialize_matches_input(self, line):
        assert parse_saf_line(line).to_line() == line

    def test_trailing_newline_stripped(self):
        assert parse_saf_line("p\tchr1\t1\t2\t+\n").strand is Strand.PLUS

    @pytest.mark.parametrize(
        "line",
        ["peak1\tchr1\t100\t200", "peak1\tchr1\t100\t200\t+\textra", "peak1"],
    )
    def test_wrong_field_count(self, line):
        with pytest.raises(WrongFieldCount, match="Expected 5 fields"):
            parse_saf_line(line)

    def test_invalid_chromosome(self):
        with pytest.raises(InvalidChromosome, match="Could not parse chromosome '1'"):
            parse_saf_line("peak1\t1\t100\t200\t+")

    @pytest.mark.parametrize("start,end", [("1.5", "200"), ("100", "x"), ("-1", "200")])
    def test_non_integral_coordinate(self, start, end):
        with pytest.raises(NonIntegralCoordinate):
            parse_saf_line(f"peak1\tchr1\t{start}\t{end}\t+")

    def test_illegal_strand(self):
        with pytest.raises(IllegalStrand):
            parse_saf_line("peak1\tchr1\t100\t200\t*")

    def test_fields_checked_in_order(self):
        """Chromosome is reported before coordinates and strand."""
        with pytest.raises(InvalidChromosome):
            parse_saf_line("peak1\t1\tx\ty\t*")
