"""Storage of the configured time zones in the user's config directory."""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path


class ConfigError(Exception):
    """Raised when the configuration cannot be located or changed."""


def _user_config_dir() -> Path:
    if sys.platform == "win32":
        appdata = os.environ.get("AppData")
        if not appdata:
            raise ConfigError("could not get user config dir: %AppData% is not defined")
        return Path(appdata)
    if sys.platform == "darwin":
        home = os.environ.get("HOME")
        if not home:
            raise ConfigError("could not get user config dir: $HOME is not defined")
        return Path(home) / "Library" / "Application Support"
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        if not os.path.isabs(xdg):
            raise ConfigError("could not get user config dir: path in $XDG_CONFIG_HOME is relative")
        return Path(xdg)
    home = os.environ.get("HOME")
    if not home:
        raise ConfigError("could not get user config dir: neither $XDG_CONFIG_HOME nor $HOME are defined")
    return Path(home) / ".config"


def config_file_path() -> Path:
    """Return the path of the configuration file."""
    return _user_config_dir() / "tz" / "config.json"


def _extract_zones(data: object) -> list[str]:
    if not isinstance(data, dict):
        return []
    if "zones" in data:
        zones = data["zones"]
    else:
        zones = next((value for key, value in data.items() if key.lower() == "zones"), None)
    if not isinstance(zones, list) or not all(isinstance(zone, str) for zone in zones):
        return []
    return list(zones)


def load_zones() -> list[str]:
    """Return the configured zones, or an empty list if none can be read."""
    try:
        data = json.loads(config_file_path().read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return []
    return _extract_zones(data)


def _write(path: Path, zones: list[str]) -> None:
    path.write_text(json.dumps({"zones": zones}, indent=2, ensure_ascii=False), encoding="utf-8")


def add_zone(zone: str) -> None:
    """Append a zone to the configuration, creating it if needed."""
    zones = load_zones()
    if zone in zones:
        raise ConfigError("timezone already exists")
    zones.append(zone)
    path = config_file_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    _write(path, zones)


def remove_zone(zone: str) -> None:
    """Remove every occurrence of a zone from the configuration."""
    zones = load_zones()
    if zone not in zones:
        raise ConfigError("timezone not found in config")
    _write(config_file_path(), [z for z in zones if z != zone])


def reset() -> None:
    """Delete the configuration file."""
    os.remove(config_file_path())