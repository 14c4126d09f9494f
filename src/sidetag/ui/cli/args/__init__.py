"""Command line argument parsing."""

from .options import TagArgs
from .parser import ArgumentParser

__all__ = ["ArgumentParser", "TagArgs"]
