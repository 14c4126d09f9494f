"""Configuration management for sidetag."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from sidetag.config.paths import default_config_path
from sidetag.platform.logging import logger


AUDIO_EXTENSIONS_DEFAULT: tuple[str, ...] = (".mp3",)
IMAGE_EXTENSIONS_DEFAULT: tuple[str, ...] = (".jpg", ".jpeg", ".png")
LYRICS_LANGUAGE_DEFAULT: str = "chi"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path
    log_file: Path | None = _path_field()

    # Files considered for tagging (matched case-insensitively)
    audio_extensions: list[str] = field(default_factory=lambda: list(AUDIO_EXTENSIONS_DEFAULT))

    # Cover candidates, searched in order
    image_extensions: list[str] = field(default_factory=lambda: list(IMAGE_EXTENSIONS_DEFAULT))

    # ID3 language code written with unsynchronised lyrics
    lyrics_language: str = LYRICS_LANGUAGE_DEFAULT
    cover_description: str = "cover"

    # Layout under the base directory
    download_dir_name: str = "download"
    done_dir_name: str = "done"
    skipped_dir_name: str = "skipped"
    catalog_file_name: str = "detail.json"
    report_file_name: str = "mp3tag-log.json"

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        Missing files yield the defaults; nothing is written to disk.

        Args:
            config_file: Explicit TOML file. Defaults to the portable location.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None and config_file is None:
            return cls._instance

        target = config_file or default_config_path()

        if not target.exists():
            instance = cls()
        else:
            try:
                with open(target, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
            instance = cls(**{key: value for key, value in config_dict.items() if key in known})
            logger.debug("Configuration loaded from %s", target)

        if config_file is None:
            cls._instance = instance
            cls._loaded_from = target
        return instance


# Global configuration instance
config = Config.load()
