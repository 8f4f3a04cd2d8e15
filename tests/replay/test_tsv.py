"""Tests for the tab-delimited replay log."""

import csv
from pathlib import Path

import pytest

from stacks_mock.chain.synthesizer import synthesize_block
from stacks_mock.helpers.errors import EncodeError, LogWriteError
from stacks_mock.replay import tsv
from stacks_mock.replay.records import Record, RecordKind, decode_record
from stacks_mock.replay.tsv import read_log, record_to_row, row_to_record, write_log


class TestWriteLog:
    """Tests for write_log."""

    def test_three_blocks(self, tmp_path: Path) -> None:
        """Test three tab-delimited rows with ids 1..3 and the kind tag."""
        path = write_log(3, tmp_path / "stacks_blocks.tsv")
        lines = path.read_text(encoding="utf-8").splitlines()

        assert len(lines) == 3
        for expected_id, line in enumerate(lines, start=1):
            columns = line.split("\t")
            assert len(columns) == 4
            assert columns[0] == str(expected_id)
            assert columns[1] == str(expected_id)
            assert columns[2] == "stacks_block_received"

    def test_no_header_and_unquoted(self, tmp_path: Path) -> None:
        """Test the first row is data and the blob is not quoted."""
        path = write_log(1, tmp_path / "log.tsv")
        line = path.read_text(encoding="utf-8").splitlines()[0]

        assert line.startswith("1\t1\tstacks_block_received\t{")
        assert line.endswith("}")

    def test_lines_end_with_newline(self, tmp_path: Path) -> None:
        """Test rows are terminated by a bare newline."""
        data = write_log(2, tmp_path / "log.tsv").read_bytes()

        assert data.endswith(b"}\n")
        assert b"\r" not in data

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        """Test missing directories are created."""
        path = tmp_path / "a" / "b" / "stacks_blocks.tsv"
        write_log(1, path)

        assert path.exists()

    def test_zero_blocks_writes_empty_file(self, tmp_path: Path) -> None:
        """Test block_count 0 leaves an empty log."""
        path = write_log(0, tmp_path / "log.tsv")

        assert path.read_text(encoding="utf-8") == ""

    def test_negative_count_raises(self, tmp_path: Path) -> None:
        """Test negative counts are rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            write_log(-1, tmp_path / "log.tsv")

    def test_unwritable_path_raises(self, tmp_path: Path) -> None:
        """Test a path whose parent is a file raises LogWriteError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")

        with pytest.raises(LogWriteError, match="failed to write tsv file"):
            write_log(1, blocker / "stacks_blocks.tsv")

    def test_stops_at_first_encode_error(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test an encode failure propagates and later heights are not attempted."""
        attempted: list[int] = []
        real_encode = tsv.encode_record

        def flaky_encode(height: int, burn_height: int) -> Record:
            attempted.append(height)
            if height == 2:
                msg = "boom"
                raise EncodeError(msg)
            return real_encode(height, burn_height)

        monkeypatch.setattr(tsv, "encode_record", flaky_encode)

        with pytest.raises(EncodeError, match="boom"):
            write_log(5, tmp_path / "log.tsv")
        assert attempted == [1, 2]


class TestReadLog:
    """Tests for read_log."""

    def test_round_trip(self, tmp_path: Path) -> None:
        """Test N written blocks read back in order and decode to the same blocks."""
        path = write_log(5, tmp_path / "log.tsv")
        records = read_log(path)

        assert [record.id for record in records] == [1, 2, 3, 4, 5]
        for record in records:
            assert record.kind is RecordKind.STACKS_BLOCK_RECEIVED
            assert decode_record(record) == synthesize_block(record.id, record.id + 100)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Test reading a missing log raises LogWriteError."""
        with pytest.raises(LogWriteError, match="failed to read tsv file"):
            read_log(tmp_path / "missing.tsv")

    def test_bad_row_raises(self, tmp_path: Path) -> None:
        """Test rows with an unknown kind raise EncodeError."""
        path = tmp_path / "log.tsv"
        path.write_text("1\t1\tmystery_kind\t\n", encoding="utf-8")

        with pytest.raises(EncodeError, match="invalid record row"):
            read_log(path)


class TestRowConversion:
    """Tests for record_to_row and row_to_record."""

    def test_absent_blob_is_empty_column(self) -> None:
        """Test records without a blob write an empty last column."""
        record = Record(id=3, created_at="3", kind=RecordKind.BURN_BLOCK_RECEIVED)

        assert record_to_row(record) == ["3", "3", "burn_block_received", ""]
        assert row_to_record(["3", "3", "burn_block_received", ""]) == record

    def test_wrong_column_count_raises(self) -> None:
        """Test short rows are rejected."""
        with pytest.raises(EncodeError, match="expected 4 columns"):
            row_to_record(["1", "1", "stacks_block_received"])

    def test_non_numeric_id_raises(self) -> None:
        """Test ids must be integers."""
        with pytest.raises(EncodeError):
            row_to_record(["x", "1", "stacks_block_received", ""])

    def test_delimiter_in_field_is_quoted(self, tmp_path: Path) -> None:
        """Test a field containing a tab survives a write/read cycle."""
        record = Record(
            id=1, created_at="1\t2", kind=RecordKind.STACKS_BLOCK_RECEIVED, blob="{}"
        )
        path = tmp_path / "log.tsv"
        with path.open("w", newline="", encoding="utf-8") as f:
            csv.writer(f, dialect=tsv.ReplayLogDialect).writerow(record_to_row(record))

        assert path.read_text(encoding="utf-8").startswith("1\t'1\t2'\t")
        assert read_log(path) == [record]
