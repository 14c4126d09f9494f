"""Tests for result display functionality."""

import pytest
from pytest_mock import MockerFixture

from sidetag.features.tagging import RunResults
from sidetag.ui.cli.display.result import ResultDisplay


@pytest.fixture
def run_results() -> RunResults:
    return RunResults(
        done=["a.mp3"],
        skipped=["b.mp3"],
        failed=["c.mp3"],
        skipped_existing=["d.mp3"],
    )


def test_show_results(run_results: RunResults, mocker: MockerFixture) -> None:
    """The summary table and failed files are printed."""

    display = ResultDisplay()
    mock_console = mocker.MagicMock()
    display.console = mock_console

    display.show_results(run_results)

    printed = [str(call.args[0]) for call in mock_console.print.call_args_list]
    assert mock_console.print.call_count == 3
    assert any("c.mp3" in line for line in printed)


def test_show_results_quiet_still_lists_failures(run_results: RunResults, mocker: MockerFixture) -> None:
    """Quiet mode hides the table but keeps errors visible."""

    display = ResultDisplay()
    mock_console = mocker.MagicMock()
    display.console = mock_console

    display.show_results(run_results, quiet=True)

    printed = [str(call.args[0]) for call in mock_console.print.call_args_list]
    assert printed == ["[red]Failed: 1[/red]", "[red]  • c.mp3[/red]"]


def test_show_results_quiet_without_failures(mocker: MockerFixture) -> None:
    """Nothing is printed in quiet mode when every file succeeded."""

    display = ResultDisplay()
    mock_console = mocker.MagicMock()
    display.console = mock_console

    display.show_results(RunResults(done=["a.mp3"]), quiet=True)

    mock_console.print.assert_not_called()


def test_show_results_prints_error_messages(mocker: MockerFixture) -> None:
    """Failed files are listed with their error message when one is known."""

    display = ResultDisplay()
    mock_console = mocker.MagicMock()
    display.console = mock_console
    results = RunResults(failed=["a.mp3", "b.mp3"], errors={"a.mp3": "broken header"})

    display.show_results(results, quiet=True)

    printed = [str(call.args[0]) for call in mock_console.print.call_args_list]
    assert printed == [
        "[red]Failed: 2[/red]",
        "[red]  • a.mp3: broken header[/red]",
        "[red]  • b.mp3[/red]",
    ]
