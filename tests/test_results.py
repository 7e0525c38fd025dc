"""Tests for result writing."""

from __future__ import annotations

from pathlib import Path

import pytest

from booker.exceptions import ResultDestinationError
from booker.results import format_results, write_results


class TestWriteResults:
    """Tests for write_results."""

    def test_one_token_per_line(self, tmp_path: Path) -> None:
        path = tmp_path / "results.txt"

        write_results(["ok", "failed", "yes"], path)

        assert path.read_text(encoding="utf-8") == "ok\nfailed\nyes\n"

    def test_no_results_writes_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "results.txt"

        write_results([], path)

        assert path.exists()
        assert path.read_text(encoding="utf-8") == ""

    def test_dash_writes_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        write_results(["no", "yes"], "-")

        assert capsys.readouterr().out == "no\nyes\n"

    def test_unwritable_destination(self, tmp_path: Path) -> None:
        with pytest.raises(ResultDestinationError, match="Failed to write to output file"):
            write_results(["ok"], tmp_path / "missing_dir" / "results.txt")

    def test_format_results(self) -> None:
        assert format_results(iter(["ok"])) == "ok\n"
