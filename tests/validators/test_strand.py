"""Tests for strand parsing."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

SCRIPTS_DIR = str(Path(__file__).resolve().parent.parent.parent / "scripts")
sys.path.insert(0, SCRIPTS_DIR)

from validators import (  # noqa: E402
    ABSENT_STRAND,
    IllegalStrand,
    Strand,
    parse_strand,
    refine_strand,
    render_strand,
)


class TestStrand:
    def test_from_text(self):
        assert Strand.from_text("+") is Strand.PLUS
        assert Strand.from_text("-") is Strand.MINUS

    def test_from_text_rejects_absent_marker(self):
        with pytest.raises(IllegalStrand, match=r"Illegal strand \('\.'\)"):
            Strand.from_text(".")

    def test_str_is_symbol(self):
        assert str(Strand.MINUS) == "-"


class TestParseStrand:
    def test_absent(self):
        assert parse_strand(ABSENT_STRAND) is None

    @pytest.mark.parametrize("text", ["*", "plus", "", "++"])
    def test_illegal(self, text):
        with pytest.raises(IllegalStrand):
            parse_strand(text)

    @pytest.mark.parametrize("text", ["+", "-", "."])
    def test_render_inverts_parse(self, text):
        assert render_strand(parse_strand(text)) == text


class TestRefineStrand:
    def test_passes_strand_and_none_through(self):
        assert refine_strand(Strand.MINUS) is Strand.MINUS
        assert refine_strand(None) is None

    def test_parses_text(self):
        assert refine_strand("+") is Strand.PLUS
        assert refine_strand(".") is None

    @pytest.mark.parametrize("value", ["x", 1, 1.0])
    def test_illegal(self, value):
        with pytest.raises(IllegalStrand):
            refine_strand(value)
