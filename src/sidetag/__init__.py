"""sidetag: merge catalog years, cover art and lyrics into downloaded MP3 files."""

__version__ = "0.1.0"
