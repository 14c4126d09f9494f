# Where: sidetag.features.tagging.__init__
# What: Expose tagging services, adapters and shared dataclasses.
# Why: Provide a cohesive import surface for application and UI layers.

from sidetag.shared import CoverImage, FileTags, Lyrics, ParsedName
from .adapters import Id3TagWriter
from .usecases import (
    Disposition,
    FileOutcome,
    ProcessingEvent,
    RunLayout,
    RunResults,
    TagProcessor,
    TagWriterPort,
    parse_file_name,
    write_report,
)

__all__ = [
    "CoverImage",
    "Disposition",
    "FileOutcome",
    "FileTags",
    "Id3TagWriter",
    "Lyrics",
    "ParsedName",
    "ProcessingEvent",
    "RunLayout",
    "RunResults",
    "TagProcessor",
    "TagWriterPort",
    "parse_file_name",
    "write_report",
]
