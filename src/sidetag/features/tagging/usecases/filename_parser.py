"""src/sidetag/features/tagging/usecases/filename_parser.py
What: Derive artist, title and album from an ``Artist - Title - Album`` filename.
Why: Downloaded files carry their metadata only in their names.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from typing import Final

from sidetag.shared import ParsedName

NameMatcher = Callable[[str], ParsedName | None]

_THREE_PARTS: Final[re.Pattern[str]] = re.compile(r"^(.*?)\s*-\s*(.*?)\s*-\s*(.*)$")
_TWO_PARTS: Final[re.Pattern[str]] = re.compile(r"^(.*?)\s*-\s*(.*)$")


def match_artist_title_album(base: str) -> ParsedName | None:
    match = _THREE_PARTS.match(base)
    if match is None:
        return None
    artist, title, album = (group.strip() for group in match.groups())
    return ParsedName(artist=artist, title=title, album=album)


def match_artist_title(base: str) -> ParsedName | None:
    match = _TWO_PARTS.match(base)
    if match is None:
        return None
    artist, title = (group.strip() for group in match.groups())
    return ParsedName(artist=artist, title=title)


def match_title_only(base: str) -> ParsedName:
    return ParsedName(artist="", title=base)


# Tried in order; the first matcher that does not decline wins.
DEFAULT_MATCHERS: Final[tuple[NameMatcher, ...]] = (
    match_artist_title_album,
    match_artist_title,
    match_title_only,
)


def parse_file_name(base: str, matchers: Sequence[NameMatcher] = DEFAULT_MATCHERS) -> ParsedName:
    """Parse a base filename (extension already stripped).

    Args:
        base: Filename without its extension.
        matchers: Ordered matchers; each returns ``None`` to decline.

    Returns:
        ParsedName: Always a result; the whole name becomes the title when
        no delimiter pattern applies.
    """

    for matcher in matchers:
        parsed = matcher(base)
        if parsed is not None:
            return parsed
    return match_title_only(base)


__all__ = [
    "DEFAULT_MATCHERS",
    "NameMatcher",
    "match_artist_title",
    "match_artist_title_album",
    "match_title_only",
    "parse_file_name",
]
