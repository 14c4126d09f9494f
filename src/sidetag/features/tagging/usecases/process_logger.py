"""src/sidetag/features/tagging/usecases/process_logger.py
What: Structured processing log callback contract and its default emitter.
Why: Let the disposition engine log events without binding to a handler.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from sidetag.platform.logging import logger

from .processing_types import ProcessingEvent


class ProcessLogger(Protocol):
    """Signature for structured processing log emitters."""

    def __call__(
        self,
        level: int,
        event: ProcessingEvent,
        message: str,
        *message_args: object,
        **context: object,
    ) -> None:
        ...


def log_processing(
    level: int,
    event: ProcessingEvent,
    message: str,
    *message_args: object,
    **context: object,
) -> None:
    """Emit ``message`` on the package logger with the event and context as extras."""

    extra: dict[str, object] = {"processing_event": event.value}
    for key, value in context.items():
        extra[key] = str(value) if isinstance(value, Path) else value
    logger.log(level, message, *message_args, extra=extra, stacklevel=2)


__all__ = ["ProcessLogger", "log_processing"]
