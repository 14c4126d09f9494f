"""Progress display functionality for CLI."""

from typing import Any, Callable, Protocol, final, runtime_checkable

from rich.console import Console
from rich.progress import Progress, TaskID

from sidetag.application.services import TagRequest
from sidetag.features.tagging import RunResults
from sidetag.platform.logging import EventRichHandler, logger


@runtime_checkable
class TaggingServiceLike(Protocol):
    """Protocol for application services that can run with a progress callback."""

    def run(
        self,
        request: TagRequest,
        progress_callback: Callable[[int, int, str], None] | None = None,
    ) -> RunResults:
        ...


@final
class ProgressDisplay:
    """Handles progress display in CLI."""

    def run_with_service(self, app: TaggingServiceLike, request: TagRequest) -> RunResults:
        """Run a tagging pass via the application service with a progress bar.

        Args:
            app: Application service instance used to orchestrate processing.
            request: Tagging run parameters.

        Returns:
            Aggregated run results.
        """
        progress_console: Console | None = None
        for handler in logger.handlers:
            if isinstance(handler, EventRichHandler):
                progress_console = handler.console
                break

        progress_kwargs: dict[str, Any] = {
            "transient": True,
            "redirect_stdout": False,
            "redirect_stderr": False,
        }
        if progress_console is not None:
            progress_kwargs["console"] = progress_console

        with Progress(**progress_kwargs) as progress:
            task_id: TaskID | None = None

            def _cb(processed: int, total: int, current_file: str) -> None:
                nonlocal task_id
                _ = current_file  # consumed via logging elsewhere
                if task_id is None:
                    task_id = progress.add_task("[cyan]Tagging files...", total=total)
                progress.update(
                    task_id,
                    completed=processed,
                    description=f"[cyan]Tagging files... {processed}/{total}",
                )

            return app.run(request, _cb)
