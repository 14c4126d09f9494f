"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import final

from sidetag.config.config import Config
from sidetag.platform.logging import DEFAULT_LOG_FILE, setup_logger
from sidetag.ui.cli.args.options import TagArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="sidetag",
            description=(
                "Merge cover art, lyrics and catalog years into the MP3 files of "
                "BASE_DIR/download, copying tagged files to BASE_DIR/done."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "base_dir",
            nargs="?",
            default=".",
            type=str,
            help="Directory holding download/, detail.json and the outputs (default: current directory)",
            metavar="BASE_DIR",
        )
        _ = parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Report what would happen without copying, moving or tagging files",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> TagArgs:
        """Process command line arguments and configure logging.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            TagArgs: Processed command line arguments.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        return TagArgs(
            base_dir=Path(parsed_args.base_dir),
            dry_run=parsed_args.dry_run,
            quiet=parsed_args.quiet,
        )
