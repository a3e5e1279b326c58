"""
Tests for CLI functionality.
"""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any
from unittest.mock import MagicMock, patch

import pytest

from inat_genbank_names.cli import collect_ids, create_parser, main
from inat_genbank_names.config import Settings
from inat_genbank_names.errors import BatchFetchError
from inat_genbank_names.schemas import MismatchRecord, RunReport, RunStatistics

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def orchestrator() -> Iterator[MagicMock]:
    """Patch out settings, logging and the pipeline; yield the fake orchestrator."""
    fake = MagicMock()
    fake.run.return_value = RunReport()
    with (
        patch("inat_genbank_names.cli.get_settings", return_value=Settings()),
        patch("inat_genbank_names.cli.setup_logging"),
        patch("inat_genbank_names.cli.build_orchestrator", return_value=fake),
    ):
        yield fake


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self) -> None:
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.prog == "inat-genbank-names"

    def test_parser_has_version(self) -> None:
        with pytest.raises(SystemExit):
            create_parser().parse_args(["--version"])

    def test_flags(self) -> None:
        args = create_parser().parse_args(["-v", "-q", "123"])
        assert args.verbose is True
        assert args.quiet is True
        assert args.observation == "123"

    def test_file_option(self) -> None:
        args = create_parser().parse_args(["-f", "ids.txt"])
        assert str(args.file) == "ids.txt"
        assert args.observation is None


class TestCollectIds:
    def test_single_id(self) -> None:
        parser = create_parser()
        assert collect_ids(parser.parse_args(["232615678"]), parser) == [232615678]

    @pytest.mark.parametrize("argv", [[], ["abc"], ["0"], ["-5"]])
    def test_invalid_id_is_usage_error(self, argv: list[str]) -> None:
        parser = create_parser()
        with pytest.raises(SystemExit) as exc:
            collect_ids(parser.parse_args(["--", *argv]), parser)
        assert exc.value.code == 2

    def test_file(self, tmp_path: Path) -> None:
        path = tmp_path / "ids.txt"
        path.write_text("1,2\n3")
        parser = create_parser()
        assert collect_ids(parser.parse_args(["-f", str(path)]), parser) == [1, 2, 3]


class TestMain:
    """Exit codes and output."""

    def test_single_observation(self, orchestrator: MagicMock) -> None:
        assert main(["232615678"]) == 0
        args, _ = orchestrator.run.call_args
        assert args[0] == [232615678]

    def test_streams_mismatches(
        self, orchestrator: MagicMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        mismatch = MismatchRecord(
            id=5, accession_display_name="Amanita muscaria", comparison_display_name="Russula"
        )

        def run(ids: list[int], on_mismatch: Any = None) -> RunReport:
            on_mismatch(mismatch)
            return RunReport(mismatches=[mismatch])

        orchestrator.run.side_effect = run
        assert main(["5"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].startswith("iNat #")
        assert lines[1].split("\t")[0].strip() == "5"

    def test_no_output_without_mismatches(
        self, orchestrator: MagicMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["5"]) == 0
        assert capsys.readouterr().out == ""

    def test_fatal_batch_error(self, orchestrator: MagicMock) -> None:
        orchestrator.run.side_effect = BatchFetchError("iNaturalist is down")
        assert main(["5"]) == 1

    def test_empty_file(self, orchestrator: MagicMock, tmp_path: Path) -> None:
        path = tmp_path / "ids.txt"
        path.write_text("no ids\n")
        assert main(["-f", str(path)]) == 1
        orchestrator.run.assert_not_called()

    def test_missing_argument(self, orchestrator: MagicMock) -> None:
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 2

    def test_time_estimate_for_large_runs(
        self, orchestrator: MagicMock, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "ids.txt"
        path.write_text(" ".join(str(i) for i in range(1, 31)))
        assert main(["-f", str(path)]) == 0
        assert "Processing 30 observations. Estimated time: 1 minute and 21 seconds" in (
            capsys.readouterr().err
        )

    def test_no_estimate_when_quiet(
        self, orchestrator: MagicMock, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "ids.txt"
        path.write_text(" ".join(str(i) for i in range(1, 31)))
        assert main(["-q", "-f", str(path)]) == 0
        assert "Estimated time" not in capsys.readouterr().err

    def test_verbose_summary(
        self, orchestrator: MagicMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        orchestrator.run.return_value = RunReport(
            statistics=RunStatistics(total_external_calls=3, total_specimens_processed=1)
        )
        assert main(["-v", "5"]) == 0
        out = capsys.readouterr().out
        assert "Total API calls made: 3" in out
        assert "Total observations processed: 1" in out
        assert "Average API calls per observation: 3.00" in out

    def test_logging_flags_passed_through(self, orchestrator: MagicMock) -> None:
        with patch("inat_genbank_names.cli.setup_logging") as mock_setup:
            main(["-q", "5"])
        mock_setup.assert_called_once_with(verbose=False, quiet=True, default="INFO")
