"""Configuration management."""

import logging
from typing import Dict, Any, Optional, Mapping
from pathlib import Path
import json

from ..errors import ConfigurationError
from ..ui.progress import ProgressBarConfig

# Configure logging
logger = logging.getLogger(__name__)


class Config:
    """Application configuration manager.

    Settings live in a JSON object: a ``progress`` section holding
    :class:`ProgressBarConfig` options, and the default number of
    ``workers`` for parallel runs.
    """

    def __init__(self, config_file: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_file: Path to configuration file
        """
        self.config_file = Path(config_file) if config_file else Path("terminal_feedback.json")
        self._config: Dict[str, Any] = self._get_default_config()
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from file over the defaults.

        An unreadable file, or one that does not hold a JSON object, leaves
        the defaults in place.
        """
        if not self.config_file.exists():
            return

        try:
            with open(self.config_file, 'r') as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning(f"Ignoring unreadable config file {self.config_file}: {e}")
            return

        if not isinstance(data, dict):
            logger.warning(f"Ignoring config file {self.config_file}: expected a JSON object")
            return

        self._config.update(data)

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration."""
        return {
            "progress": {},
            "workers": 1
        }

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value
        """
        return self._config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set configuration value.

        Args:
            key: Configuration key
            value: Configuration value
        """
        self._config[key] = value

    def save(self) -> None:
        """Save configuration to file."""
        with open(self.config_file, 'w') as f:
            json.dump(self._config, f, indent=2)
        logger.info(f"Saved configuration to {self.config_file}")

    def _progress_section(self) -> Dict[str, Any]:
        """Return a copy of the ``progress`` section.

        Raises:
            ConfigurationError: If the section is not a JSON object
        """
        section = self.get("progress")
        if section is None:
            return {}
        if not isinstance(section, Mapping):
            raise ConfigurationError(
                f"'progress' in {self.config_file} must be an object, got {section!r}"
            )
        return dict(section)

    def progress_config(self, **overrides: Any) -> ProgressBarConfig:
        """Build progress bar settings from the ``progress`` section.

        Args:
            **overrides: Options taking precedence over the file, ``None``
                values are ignored

        Returns:
            Progress bar configuration

        Raises:
            ConfigurationError: If the section is malformed or holds unknown
                or wrongly typed options
        """
        options = self._progress_section()
        options.update({key: value for key, value in overrides.items() if value is not None})
        return ProgressBarConfig.from_options(**options)

    def save_progress_options(self, **options: Any) -> None:
        """Store progress options in the ``progress`` section and save.

        Options are validated first, so the file never holds settings that
        cannot be loaded back.

        Args:
            **options: Progress bar options, ``None`` values are ignored

        Raises:
            ConfigurationError: If an option is unknown or wrongly typed
        """
        section = self._progress_section()
        section.update({key: value for key, value in options.items() if value is not None})
        ProgressBarConfig.from_options(**section)
        self.set("progress", section)
        self.save()

    def workers(self) -> int:
        """Default number of parallel workers.

        Raises:
            ConfigurationError: If the value is not a positive integer
        """
        value = self.get("workers", 1)
        if not isinstance(value, int) or isinstance(value, bool) or value < 1:
            raise ConfigurationError(
                f"'workers' in {self.config_file} must be a positive integer, got {value!r}"
            )
        return value
