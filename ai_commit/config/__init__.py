"""Configuration Management Package"""

import json
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

API_KEY_ENV = "GEMINI_API_KEY"
TIMEOUT_ENV = "AI_COMMIT_TIMEOUT"


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


@dataclass
class Config:
    """User configuration with sensible defaults."""
    timeout: Optional[int] = None  # Seconds; None waits for Gemini indefinitely
    spinner: bool = True

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults after warning.
        """
        warnings = []
        defaults = Config()

        if self.timeout is not None and (
            isinstance(self.timeout, bool) or not isinstance(self.timeout, int) or self.timeout <= 0
        ):
            warnings.append(f"Invalid timeout '{self.timeout}', using no timeout")
            self.timeout = defaults.timeout

        if not isinstance(self.spinner, bool):
            warnings.append(f"Invalid spinner '{self.spinner}', using {str(defaults.spinner).lower()}")
            self.spinner = defaults.spinner

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


class ConfigManager:
    """Loads configuration from .aicommitrc (local, then home) plus env overrides."""

    CONFIG_FILENAME = ".aicommitrc"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        config = Config()
        for path in (Path.cwd() / self.CONFIG_FILENAME, Path.home() / self.CONFIG_FILENAME):
            if path.exists():
                config = self._load_from_file(path)
                self._config_path = path
                break

        self._apply_env_overrides(config)
        self._config = config
        return self._config

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("expected a JSON object")
            return Config.from_dict(data)
        except (ValueError, OSError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()

    def _apply_env_overrides(self, config: Config) -> None:
        raw = os.environ.get(TIMEOUT_ENV, "").strip()
        if not raw:
            return
        if not raw.isdigit() or int(raw) <= 0:
            raise ConfigError(f"{TIMEOUT_ENV} must be a positive number of seconds, got '{raw}'")
        config.timeout = int(raw)

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


def require_api_key(environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the Gemini API key, or raise ConfigError if it is unset or empty."""
    environ = os.environ if environ is None else environ
    api_key = environ.get(API_KEY_ENV, "").strip()
    if not api_key:
        raise ConfigError(
            f"{API_KEY_ENV} environment variable is not set.\n"
            f"  export {API_KEY_ENV}='your-key-here'"
        )
    return api_key


_manager = ConfigManager()


def load_config() -> Config:
    return _manager.load()


__all__ = [
    "API_KEY_ENV",
    "TIMEOUT_ENV",
    "Config",
    "ConfigError",
    "ConfigManager",
    "load_config",
    "require_api_key",
]
