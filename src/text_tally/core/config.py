"""Configuration management for the YAML config file."""

import codecs
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .paths import ensure_data_dir, get_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.yaml"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}

_DEFAULT_CONFIG_TEMPLATE = """# Auto-generated default configuration for text-tally
logging:
  level: "INFO"

links:
  # Anchors whose href ends with this literal suffix are tallied
  suffix: ".txt"

http:
  # null = platform default encoding
  encoding: null
  # null = no timeout beyond what the transport does
  timeout: null
"""

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "logging": {"level": "INFO"},
    "links": {"suffix": ".txt"},
    "http": {"encoding": None, "timeout": None},
}


def default_config_path() -> Path:
    """Return the config file location inside the runtime data directory."""
    return get_data_dir() / CONFIG_FILENAME


def _write_template(path: Path, content: str) -> None:
    """Write templated YAML content to disk with a trailing newline."""
    path.write_text(content.strip() + "\n", encoding="utf-8")


class ConfigManager:
    """Loads, defaults and validates the YAML configuration file."""

    def __init__(self, config_path: Optional[str] = None):
        """Initialize the manager and ensure the config file exists."""
        if config_path:
            path = Path(config_path).expanduser()
        else:
            path = ensure_data_dir() / CONFIG_FILENAME
        if not path.is_absolute():
            path = path.resolve()
        self.config_path = str(path)
        self._config = None
        self._ensure_default_config()

    def _ensure_default_config(self) -> None:
        """Create the default configuration file if it is missing."""
        config_file = Path(self.config_path)
        if config_file.exists():
            return
        config_file.parent.mkdir(parents=True, exist_ok=True)
        _write_template(config_file, _DEFAULT_CONFIG_TEMPLATE)
        logger.info("Created default config.yaml at %s", config_file)

    def load_config(self) -> Dict[str, Any]:
        """Load the configuration file, filling in defaults for missing keys."""
        if self._config is None:
            try:
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    raw = yaml.safe_load(f) or {}
                if not isinstance(raw, dict):
                    raise ValueError("top level of config.yaml must be a mapping")
                logger.debug(f"Loaded configuration from {self.config_path}")
            except Exception as e:
                logger.error(f"Failed to load config from {self.config_path}: {e}")
                raise

            config: Dict[str, Any] = {}
            for section, values in DEFAULTS.items():
                merged = dict(values)
                user_section = raw.get(section)
                if isinstance(user_section, dict):
                    merged.update(user_section)
                elif user_section is not None:
                    # Keep the bad value so validate_config can report it
                    merged = user_section
                config[section] = merged
            self._config = config

        return self._config

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Return ``config[section][key]`` or *default* when absent."""
        values = self.load_config().get(section)
        value = values.get(key) if isinstance(values, dict) else None
        return default if value is None else value

    def validate_config(self) -> bool:
        """Validate the configuration file."""
        try:
            config = self.load_config()

            for section in DEFAULTS:
                if not isinstance(config.get(section), dict):
                    logger.error(f"Section '{section}' must be a mapping in config.yaml")
                    return False

            level = config['logging'].get('level')
            if not isinstance(level, str) or level.upper() not in _LOG_LEVELS:
                logger.error(f"logging.level must be one of {sorted(_LOG_LEVELS)}, got {level!r}")
                return False

            suffix = config['links'].get('suffix')
            if not isinstance(suffix, str) or not suffix:
                logger.error("links.suffix must be a non-empty string")
                return False

            encoding = config['http'].get('encoding')
            if encoding is not None:
                if not isinstance(encoding, str):
                    logger.error("http.encoding must be a string or null")
                    return False
                try:
                    codecs.lookup(encoding)
                except LookupError:
                    logger.error(f"http.encoding names an unknown codec: {encoding!r}")
                    return False

            timeout = config['http'].get('timeout')
            if timeout is not None:
                if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
                    logger.error("http.timeout must be a positive number or null")
                    return False

            logger.debug("Configuration validation passed")
            return True

        except Exception as e:
            logger.error(f"Configuration validation failed: {e}")
            return False


__all__ = [
    "ConfigManager",
    "CONFIG_FILENAME",
    "DEFAULTS",
    "default_config_path",
]
