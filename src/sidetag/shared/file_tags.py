# Where: sidetag.shared.file_tags
# What: Value types describing parsed filenames and the tags written to a file.
# Why: Centralize the metadata representation shared by parsing, matching and writing.

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ParsedName:
    """Artist, title and album recovered from a filename."""

    artist: str
    title: str
    album: str = ""


@dataclass(frozen=True)
class CoverImage:
    """Embedded front cover picture."""

    mime: str
    data: bytes = field(repr=False)
    description: str = "cover"


@dataclass(frozen=True)
class Lyrics:
    """Unsynchronised lyrics text with its ID3 language code."""

    language: str
    text: str = field(repr=False)


@dataclass
class FileTags:
    """Tags accumulated for one file before they are written."""

    artist: str = ""
    title: str = ""
    album: str = ""
    year: str | None = None
    image: CoverImage | None = None
    lyrics: Lyrics | None = None

    @classmethod
    def from_parsed(cls, parsed: ParsedName) -> "FileTags":
        return cls(artist=parsed.artist, title=parsed.title, album=parsed.album)


__all__ = ["CoverImage", "FileTags", "Lyrics", "ParsedName"]
