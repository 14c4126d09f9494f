"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final


@final
@dataclass(frozen=True, slots=True)
class TagArgs:
    """Command line arguments for a tagging run."""

    base_dir: Path
    dry_run: bool
    quiet: bool


__all__ = ["TagArgs"]
