"""src/sidetag/ui/cli/display/result.py
What: Render the end-of-run summary of tagging outcomes.
Why: Keep console output formatting out of the command flow.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sidetag.features.tagging import RunResults


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self) -> None:
        self.console = Console()

    def show_results(self, results: RunResults, *, quiet: bool = False, dry_run: bool = False) -> None:
        """Display per-outcome counts and list the failed files.

        Args:
            results: Aggregated run results.
            quiet: Whether to suppress non-error output.
            dry_run: Whether the results describe planned rather than applied work.
        """
        if not quiet:
            title = "Tagging Plan" if dry_run else "Tagging Summary"
            table = Table(title=title, show_header=True, header_style="bold")
            table.add_column("Outcome")
            table.add_column("Files", justify="right")
            table.add_row("[green]Done[/green]" if not dry_run else "[green]Would tag[/green]", str(len(results.done)))
            table.add_row("[yellow]Skipped[/yellow]", str(len(results.skipped)))
            table.add_row("[yellow]Already done[/yellow]", str(len(results.skipped_existing)))
            table.add_row("[red]Failed[/red]", str(len(results.failed)))
            table.add_row("[bold]Total[/bold]", str(results.total))
            self.console.print(table)

        if not results.failed:
            return

        self.console.print(f"[red]Failed: {len(results.failed)}[/red]")
        for file_name in results.failed:
            error_message = results.errors.get(file_name)
            if error_message:
                self.console.print(f"[red]  • {escape(file_name)}: {escape(error_message)}[/red]")
            else:
                self.console.print(f"[red]  • {escape(file_name)}[/red]")
