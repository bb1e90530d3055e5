"""Reading and writing the editor's settings file."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import platformdirs
import tomli_w

logger = logging.getLogger(__name__)


class SettingsError(Exception):
    """Settings could not be located, read or written."""


@dataclass
class Settings:
    """User configurable editor settings."""

    theme_index: int = 0

    @classmethod
    def _from_mapping(cls, data: dict[str, Any]) -> Settings:
        try:
            theme_index = data["theme_index"]
        except KeyError:
            raise ValueError("missing field `theme_index`") from None
        if isinstance(theme_index, bool) or not isinstance(theme_index, int):
            raise ValueError("`theme_index` must be an integer")
        if theme_index < 0:
            raise ValueError("`theme_index` must not be negative")
        return cls(theme_index=theme_index)


def settings_path() -> Path:
    """Return the path of the settings file inside the user's config directory."""
    try:
        config_dir = platformdirs.user_config_path()
    except (OSError, RuntimeError) as error:
        raise SettingsError(
            "Could not get path to the user's config directory"
        ) from error
    return config_dir / "zee" / "settings.toml"


def read_settings(path: str | Path) -> Settings:
    """Read settings from a file, falling back to the defaults on any problem."""
    path = Path(path)
    if not path.exists():
        return Settings()
    try:
        contents = path.read_text(encoding="utf-8")
    except (OSError, ValueError) as error:
        logger.error("Could not read settings file `%s`: %s", path, error)
        return Settings()
    logger.info("Reading settings file `%s`", path)
    try:
        return Settings._from_mapping(tomllib.loads(contents))
    except ValueError as error:
        logger.error("Could not parse settings file `%s`: %s", path, error)
        return Settings()


def create_default_file(path: str | Path) -> None:
    """Write the default settings to a file, creating its directory if needed."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        raise SettingsError(
            f"Could not create config directory `{path.parent}`"
        ) from error
    contents = tomli_w.dumps(asdict(Settings()))
    try:
        path.write_text(contents, encoding="utf-8")
    except OSError as error:
        raise SettingsError(f"Could not write settings file `{path}`") from error