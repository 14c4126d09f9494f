"""Tagging use cases: parsing, sidecar discovery, dispositions and reporting."""

from .directory_runner import run_directory_processing, scan_audio_files
from .file_runner import TagWriteError, run_file_processing
from .filename_parser import parse_file_name
from .ports import TagWriterPort
from .process_logger import ProcessLogger, log_processing
from .processing_types import (
    Disposition,
    FileOutcome,
    ProcessingEvent,
    RunLayout,
    RunLogContext,
    RunResults,
)
from .report import write_report
from .tag_processor import TagProcessor

__all__ = [
    "Disposition",
    "FileOutcome",
    "ProcessLogger",
    "ProcessingEvent",
    "RunLayout",
    "RunLogContext",
    "RunResults",
    "TagProcessor",
    "TagWriteError",
    "TagWriterPort",
    "log_processing",
    "parse_file_name",
    "run_directory_processing",
    "run_file_processing",
    "scan_audio_files",
    "write_report",
]
