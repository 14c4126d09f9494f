"""Concrete adapters for tagging ports."""

from .id3_writer import Id3TagWriter

__all__ = ["Id3TagWriter"]
