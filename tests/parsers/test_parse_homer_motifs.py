"""Tests for HOMER motif file parsing."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add scripts directory to path
SCRIPTS_DIR = str(Path(__file__).resolve().parent.parent.parent / "scripts")
if SCRIPTS_DIR not in sys.path:
    sys.path.insert(0, SCRIPTS_DIR)

from formats import MotifRecord  # noqa: E402
from parsers.parse_homer_motifs import (  # noqa: E402
    MOTIF_FRAME_COLUMNS,
    DenovoCollection,
    FileFailure,
    collect_denovo,
    find_motif_files,
    iter_motif_records,
    motifs_to_frame,
    parse_single_motif_file,
    read_motif_file,
)
from validators import (  # noqa: E402
    InvalidOccurrenceEncoding,
    InvariantViolation,
    LineFailure,
    NoCandidateFilesError,
    ValidationError,
    config_from_dict,
)

KNOWN_HEADERS = [
    ">ACGTACGT\tmyMotif\t5.3\t-12.1\t\tT:10(5.00%),B:2(0.10%),P:1.0e-8",
    ">GATA\tGATA-1\t4.2",
    ">CACGTG\tMYC\t6.0\t-8.5",
]


class TestIterMotifRecords:
    def test_parses_headers_only(self, temp_motif_file):
        records = list(iter_motif_records(temp_motif_file(KNOWN_HEADERS)))
        assert [r.name for r in records] == ["myMotif", "GATA-1", "MYC"]

    def test_bad_header_collected(self, temp_motif_file):
        headers = [KNOWN_HEADERS[0], ">GATA\tGATA-1\tnotanumber", KNOWN_HEADERS[2]]
        results = list(iter_motif_records(temp_motif_file(headers)))
        assert len(results) == 3
        assert isinstance(results[1], LineFailure)
        assert "Invalid log-odds" in results[1].message

    def test_missing_file(self, tmp_path):
        with pytest.raises(ValidationError, match="Motif file not found"):
            list(iter_motif_records(tmp_path / "missing.motif"))


class TestReadMotifFile:
    def test_partition(self, temp_motif_file):
        headers = KNOWN_HEADERS + [">BAD\tx\t1\t2\t\tT:1(1%)"]
        failures, records = read_motif_file(temp_motif_file(headers))
        assert len(records) == 3
        assert len(failures) == 1
        assert isinstance(failures[0].error, InvalidOccurrenceEncoding)


class TestParseSingleMotifFile:
    def test_first_line(self, temp_motif_file):
        record = parse_single_motif_file(temp_motif_file(KNOWN_HEADERS))
        assert record.name == "myMotif"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "motif1.motif"
        path.write_text("")
        with pytest.raises(ValidationError, match="empty"):
            parse_single_motif_file(path)


class TestCollectDenovo:
    def test_records_in_index_order(self, homer_denovo_dir):
        folder = homer_denovo_dir([10, 2, 1])
        collection = collect_denovo(folder)
        assert collection.ok
        assert collection.failures == []
        assert [r.sequence for r in collection.records] == ["ACGT1", "ACGT2", "ACGT10"]

    def test_failures_only(self, homer_denovo_dir):
        folder = homer_denovo_dir([1, 2, 3], bad=(2,))
        collection = collect_denovo(folder)
        assert not collection.ok
        assert collection.records == []
        assert [f.path.name for f in collection.failures] == ["motif2.motif"]
        assert "Invalid suffix" in collection.failures[0].message

    def test_ignores_other_files(self, homer_denovo_dir):
        folder = homer_denovo_dir([1])
        (folder / "motif1.similar.motif").write_text("junk\n")
        (folder / "motifX.motif").write_text("junk\n")
        (folder / "homerResults.html").write_text("<html/>\n")
        (folder / "motif2.logo.png").write_text("")
        (folder / "motif3.motif").mkdir()
        assert [p.name for p in find_motif_files(folder)] == ["motif1.motif"]
        assert len(collect_denovo(folder).records) == 1

    def test_no_motif_files(self, tmp_path):
        with pytest.raises(NoCandidateFilesError, match="No motif files"):
            collect_denovo(tmp_path)

    def test_not_a_directory(self, tmp_path):
        with pytest.raises(ValidationError, match="is not a directory"):
            collect_denovo(tmp_path / "missing")

    def test_custom_naming(self, temp_motif_file, tmp_path):
        folder = tmp_path / "custom"
        temp_motif_file([KNOWN_HEADERS[1]], filename="m1.pwm", directory=folder)
        config = config_from_dict({"motif_file_prefix": "m", "motif_file_suffix": ".pwm"})
        assert [r.name for r in collect_denovo(folder, config).records] == ["GATA-1"]


class TestDenovoCollection:
    def test_mixed_outcome_rejected(self, tmp_path):
        failure = FileFailure(tmp_path / "motif1.motif", "bad")
        record = MotifRecord("ACGT", "m", 1.0)
        with pytest.raises(InvariantViolation, match="not both or neither"):
            DenovoCollection(failures=[failure], records=[record])

    def test_empty_outcome_rejected(self):
        with pytest.raises(InvariantViolation):
            DenovoCollection()

    def test_frozen(self):
        collection = DenovoCollection(records=[MotifRecord("ACGT", "m", 1.0)])
        with pytest.raises(AttributeError):
            collection.failures = []


class TestMotifsToFrame:
    def test_full_and_partial_records(self, temp_motif_file):
        _, records = read_motif_file(temp_motif_file(KNOWN_HEADERS))
        df = motifs_to_frame(records)
        assert list(df.columns) == MOTIF_FRAME_COLUMNS
        assert len(df) == 3
        assert df.loc[0, "pvalue"] == "1.0e-8"
        assert df.loc[0, "target_fraction"] == "0.05"
        assert df.loc[1, "name"] == "GATA_1"
        assert df.loc[2, "log_pvalue"] == "-8.5"
