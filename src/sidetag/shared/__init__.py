# Where: sidetag.shared
# What: Re-export value types shared across features.
# Why: Give features one import path for common dataclasses.

from .file_tags import CoverImage, FileTags, Lyrics, ParsedName

__all__ = ["CoverImage", "FileTags", "Lyrics", "ParsedName"]
