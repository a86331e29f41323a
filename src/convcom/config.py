"""Configuration file loading and creation."""

import json
import logging
import os
from pathlib import Path

logger = logging.getLogger("convcom.config")

CONFIG_FILENAME = "convcom.json"

DEFAULT_TYPES: list[str] = [
    "build",
    "ci",
    "chore",
    "docs",
    "feat",
    "fix",
    "perf",
    "refactor",
    "revert",
    "style",
    "test",
]

# Module-level cache for singleton pattern
_config_cache: "Config | None" = None


class ConfigError(Exception):
    """Config file could not be read, parsed or written."""


def clear_config_cache() -> None:
    """Clear the config cache. Useful for testing or config reload."""
    global _config_cache
    _config_cache = None


def get_default_config_path() -> Path:
    """Get default config file path, respecting CONVCOM_CONFIG env var.

    This is the single source of truth for config path resolution.
    """
    config_path = os.environ.get("CONVCOM_CONFIG")
    if config_path:
        return Path(config_path)
    return Path.cwd() / CONFIG_FILENAME


class Config:
    """Allowed commit types and scopes."""

    def __init__(
        self,
        types: list[str],
        scopes: list[str] | None = None,
        path: Path | None = None,
    ):
        self._types = list(types)
        self._scopes = list(scopes or [])
        self._path = path

    @property
    def types(self) -> list[str]:
        return list(self._types)

    @property
    def scopes(self) -> list[str]:
        return list(self._scopes)

    @property
    def path(self) -> Path | None:
        return self._path

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Factory method - explicit loading with caching.

        Raises:
            ConfigError: If the file is missing, unreadable or malformed.
        """
        global _config_cache

        # Return cached instance if available and no custom path specified
        if _config_cache is not None and path is None:
            return _config_cache

        config = cls.from_file(path or get_default_config_path())

        if path is None:
            _config_cache = config

        return config

    @classmethod
    def from_file(cls, path: Path) -> "Config":
        """Read and validate a config file."""
        try:
            content = path.read_text()
        except FileNotFoundError:
            raise ConfigError(f"config file {path} not found (run with -init to create one)")
        except OSError as e:
            raise ConfigError(f"cannot read {path}: {e}") from e

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ConfigError(f"invalid JSON in {path}: {e}") from e

        config = cls.from_dict(data, path=path)
        logger.debug("Loaded config from %s", path)
        return config

    @classmethod
    def from_dict(cls, data: object, path: Path | None = None) -> "Config":
        """Create Config from parsed JSON, ignoring unknown keys."""
        if not isinstance(data, dict):
            raise ConfigError("config must be a JSON object")

        types = _string_list(data.get("types"), "types")
        if not types:
            raise ConfigError("config must define at least one commit type")
        scopes = data.get("scopes")
        scopes = [] if scopes is None else _string_list(scopes, "scopes")

        return cls(types, scopes, path=path)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {"types": self.types, "scopes": self.scopes}


def _string_list(value: object, key: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) and v.strip() for v in value):
        raise ConfigError(f"'{key}' must be a list of non-empty strings")
    return value


def create_config_file(path: Path | None = None) -> Path:
    """Write the default config file.

    Refuses to overwrite an existing file.

    Returns:
        Path of the created file

    Raises:
        ConfigError: If the file exists or cannot be written.
    """
    path = path or get_default_config_path()
    if path.exists():
        raise ConfigError(f"config file {path.name} already exists")

    config = Config(DEFAULT_TYPES, [])
    try:
        # Exclusive create
        with open(path, "x") as f:
            f.write(json.dumps(config.to_dict(), indent=2) + "\n")
    except FileExistsError:
        raise ConfigError(f"config file {path.name} already exists")
    except OSError as e:
        raise ConfigError(f"failed to create config file: {e}") from e

    logger.debug("Wrote default config to %s", path)
    return path
