"""src/sidetag/features/catalog/catalog.py
Where: Catalog feature.
What: Load the external song catalog and look up records by title and artist.
Why: The catalog is the only source of release years for downloaded files.
Assumptions:
- The catalog is a JSON array of objects carrying at least ``name`` and ``artist``.
Trade-offs:
- Matching is exact and case-sensitive; no normalisation is attempted.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from sidetag.platform.logging import logger
from sidetag.shared import ParsedName


class CatalogLoadError(RuntimeError):
    """Raised when the catalog file cannot be read or is not a JSON array."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot load catalog {path}: {reason}")
        self.path: Path = path
        self.reason: str = reason


@dataclass(frozen=True, slots=True)
class CatalogRecord:
    """One catalog entry."""

    name: str
    artist: str
    year: str | int | None = None

    @property
    def year_text(self) -> str | None:
        """Year as tag text, or ``None`` when the entry carries no usable year."""

        if self.year is None or self.year == "" or self.year == 0:
            return None
        return str(self.year)


class Catalog:
    """Immutable, ordered collection of catalog records."""

    def __init__(self, records: Iterable[CatalogRecord] = ()) -> None:
        self._records: tuple[CatalogRecord, ...] = tuple(records)

    def __len__(self) -> int:
        return len(self._records)

    def find(self, parsed: ParsedName) -> CatalogRecord | None:
        """Return the first record whose name and artist equal the parsed title and artist."""

        for record in self._records:
            if record.name == parsed.title and record.artist == parsed.artist:
                return record
        return None


def _record_from_entry(entry: object) -> CatalogRecord | None:
    if not isinstance(entry, dict):
        return None
    name = entry.get("name")
    artist = entry.get("artist")
    if not isinstance(name, str) or not isinstance(artist, str):
        return None
    year = entry.get("year")
    if isinstance(year, bool) or not isinstance(year, (str, int, float)):
        year = None
    elif isinstance(year, float):
        year = int(year) if year.is_integer() else str(year)
    return CatalogRecord(name=name, artist=artist, year=year)


def parse_catalog(data: object, *, source: Path) -> Catalog:
    """Build a catalog from decoded JSON, dropping entries that can never match."""

    if not isinstance(data, list):
        raise CatalogLoadError(source, f"expected a JSON array, got {type(data).__name__}")

    records: list[CatalogRecord] = []
    dropped = 0
    for entry in data:
        record = _record_from_entry(entry)
        if record is None:
            dropped += 1
            continue
        records.append(record)

    if dropped:
        logger.debug("Dropped %d catalog entries without string name/artist", dropped)
    return Catalog(records)


def load_catalog(path: Path) -> Catalog:
    """Read and parse the catalog file.

    Raises:
        CatalogLoadError: If the file is missing, unreadable or malformed.
    """

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogLoadError(path, str(exc) or type(exc).__name__) from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CatalogLoadError(path, str(exc)) from exc

    return parse_catalog(data, source=path)


__all__ = [
    "Catalog",
    "CatalogLoadError",
    "CatalogRecord",
    "load_catalog",
    "parse_catalog",
]
