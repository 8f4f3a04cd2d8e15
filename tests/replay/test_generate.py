"""Tests for the replay log generator entry point."""

from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from stacks_mock.replay.generate import generate, main
from stacks_mock.replay.tsv import read_log


class TestGenerate:
    """Tests for generate and main."""

    def test_writes_to_given_output(self, tmp_path: Path) -> None:
        """Test an explicit output path is used."""
        output = StringIO()
        path = generate(4, tmp_path / "out.tsv", console=Console(file=output))

        assert path == tmp_path / "out.tsv"
        assert [record.id for record in read_log(path)] == [1, 2, 3, 4]
        assert "Wrote 4 stacks blocks" in output.getvalue()

    def test_defaults_to_scratch_dir(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test a scratch directory is created when no output is given."""
        monkeypatch.setenv("STACKS_MOCK_WORKING_DIR", str(tmp_path / "scratch"))

        path = generate(2, console=Console(file=StringIO()))

        assert path.name == "stacks_blocks.tsv"
        assert path.parent.parent == tmp_path / "scratch"
        assert len(read_log(path)) == 2

    def test_main_parses_arguments(self, tmp_path: Path) -> None:
        """Test the command line arguments are honored."""
        path = main(["--blocks", "3", "--output", str(tmp_path / "cli.tsv")])

        assert len(read_log(path)) == 3
