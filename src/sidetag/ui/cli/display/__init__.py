"""CLI display helpers."""

from .progress import ProgressDisplay
from .result import ResultDisplay

__all__ = ["ProgressDisplay", "ResultDisplay"]
