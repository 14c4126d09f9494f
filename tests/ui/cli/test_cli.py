"""Tests for the command processor."""

from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from sidetag.features.tagging import RunResults
from sidetag.ui.cli import CommandProcessor
from sidetag.ui.cli.args import TagArgs


@pytest.fixture
def tag_args(mocker: MockerFixture) -> TagArgs:
    args = TagArgs(base_dir=Path("lib"), dry_run=False, quiet=True)
    _ = mocker.patch("sidetag.ui.cli.cli.ArgumentParser.process_args", return_value=args)
    return args


def test_process_command_runs_service(tag_args: TagArgs, mocker: MockerFixture) -> None:
    """A completed run exits normally even with failed files."""

    run = mocker.patch(
        "sidetag.ui.cli.cli.ProgressDisplay.run_with_service",
        return_value=RunResults(failed=["x.mp3"]),
    )
    show = mocker.patch("sidetag.ui.cli.cli.ResultDisplay.show_results")

    CommandProcessor.process_command([])

    request = run.call_args.args[1]
    assert request.base_dir == Path("lib")
    assert request.dry_run is False
    show.assert_called_once()


def test_process_command_exits_on_error(tag_args: TagArgs, mocker: MockerFixture) -> None:
    """Unexpected errors such as a missing download directory exit with 1."""

    _ = tag_args
    _ = mocker.patch(
        "sidetag.ui.cli.cli.ProgressDisplay.run_with_service",
        side_effect=ValueError("Not a directory: lib/download"),
    )

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command([])

    assert excinfo.value.code == 1


def test_process_command_exits_on_interrupt(tag_args: TagArgs, mocker: MockerFixture) -> None:
    """Ctrl-C exits with 130."""

    _ = tag_args
    _ = mocker.patch(
        "sidetag.ui.cli.cli.ProgressDisplay.run_with_service",
        side_effect=KeyboardInterrupt,
    )

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command([])

    assert excinfo.value.code == 130


def test_cli_end_to_end(tmp_path: Path, mocker: MockerFixture) -> None:
    """The real parser, service and display cooperate on an empty download folder."""

    _ = mocker.patch("sidetag.ui.cli.args.parser.setup_logger")
    (tmp_path / "download").mkdir()

    CommandProcessor.process_command([str(tmp_path), "--quiet"])

    assert (tmp_path / "mp3tag-log.json").exists()
