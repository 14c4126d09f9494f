"""Tests for command line argument parser."""

import logging
from argparse import Namespace
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from sidetag.platform.logging import DEFAULT_LOG_FILE
from sidetag.ui.cli.args import ArgumentParser, TagArgs


def test_create_parser_defaults() -> None:
    """The base directory is optional and defaults to the current directory."""

    parser = ArgumentParser.create_parser()

    args: Namespace = parser.parse_args([])
    assert args.base_dir == "."
    assert not args.dry_run and not args.verbose and not args.quiet

    args = parser.parse_args(["music", "--dry-run", "--verbose"])
    assert args.base_dir == "music"
    assert args.dry_run and args.verbose


def test_verbose_and_quiet_are_exclusive() -> None:
    """Conflicting verbosity flags are rejected by argparse."""

    with pytest.raises(SystemExit):
        _ = ArgumentParser.create_parser().parse_args(["--verbose", "--quiet"])


def test_process_args(mocker: MockerFixture) -> None:
    """Arguments are coerced and logging is configured from the flags."""

    mock_config = mocker.patch("sidetag.ui.cli.args.parser.Config")
    mock_setup_logger = mocker.patch("sidetag.ui.cli.args.parser.setup_logger")
    mock_config.load.return_value.log_file = None

    args = ArgumentParser.process_args(["library"])

    assert args == TagArgs(base_dir=Path("library"), dry_run=False, quiet=False)
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.INFO
    assert mock_setup_logger.call_args.kwargs["log_file"] == DEFAULT_LOG_FILE

    mock_setup_logger.reset_mock()
    _ = ArgumentParser.process_args(["--quiet"])
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.ERROR

    mock_setup_logger.reset_mock()
    mock_config.load.return_value.log_file = Path("custom.log")
    _ = ArgumentParser.process_args(["--verbose"])
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.DEBUG
    assert mock_setup_logger.call_args.kwargs["log_file"] == Path("custom.log")
