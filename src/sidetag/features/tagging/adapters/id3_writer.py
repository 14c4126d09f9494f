"""src/sidetag/features/tagging/adapters/id3_writer.py
Where: Tagging feature adapters layer.
What: Merge FileTags into an MP3's ID3 tag using mutagen.
Why: Keep mutagen frame details out of the disposition engine.
Assumptions:
- Frames not managed here are preserved.
Trade-offs:
- Saving as ID3v2.3 converts the TDRC year into TYER for older players.
"""

from __future__ import annotations

from pathlib import Path
from typing import final

from mutagen.id3 import APIC, ID3, TALB, TDRC, TIT2, TPE1, USLT, ID3NoHeaderError, PictureType

from sidetag.shared import FileTags

# Text frames: ID3 frame id -> FileTags attribute
_TEXT_FRAMES: tuple[tuple[type, str], ...] = (
    (TPE1, "artist"),
    (TIT2, "title"),
    (TALB, "album"),
    (TDRC, "year"),
)

_UTF16 = 1


@final
class Id3TagWriter:
    """Write FileTags into ID3v2.3 frames, replacing frames of the same kind."""

    def __init__(self, *, v2_version: int = 3) -> None:
        self.v2_version: int = v2_version

    def write(self, tags: FileTags, target_path: Path) -> bool:
        try:
            id3 = ID3(target_path)
        except ID3NoHeaderError:
            id3 = ID3()

        for frame_class, attribute in _TEXT_FRAMES:
            value = getattr(tags, attribute)
            if not value:
                continue
            id3.delall(frame_class.__name__)
            id3.add(frame_class(encoding=_UTF16, text=[str(value)]))

        if tags.image is not None:
            id3.delall("APIC")
            id3.add(
                APIC(
                    encoding=_UTF16,
                    mime=tags.image.mime,
                    type=PictureType.COVER_FRONT,
                    desc=tags.image.description,
                    data=tags.image.data,
                )
            )

        if tags.lyrics is not None:
            id3.delall("USLT")
            id3.add(
                USLT(
                    encoding=_UTF16,
                    lang=tags.lyrics.language,
                    desc="",
                    text=tags.lyrics.text,
                )
            )

        if self.v2_version == 3:
            id3.update_to_v23()
        id3.save(target_path, v2_version=self.v2_version)
        return True


__all__ = ["Id3TagWriter"]
