"""Command line interface for sidetag."""

import sys
from typing import final

from sidetag.application.services import TagRequest, TaggingService
from sidetag.platform.logging import logger
from sidetag.ui.cli.args import ArgumentParser, TagArgs
from sidetag.ui.cli.display import ProgressDisplay, ResultDisplay


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments and run one tagging pass.

        Per-file failures are reported but do not change the exit status.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: TagArgs = ArgumentParser.process_args(args_list)
            request = TagRequest(base_dir=args.base_dir, dry_run=args.dry_run)
            results = ProgressDisplay().run_with_service(TaggingService(), request)
            ResultDisplay().show_results(results, quiet=args.quiet, dry_run=args.dry_run)
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Errors exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
