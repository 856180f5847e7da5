"""Configuration manager for loading and saving podfeed settings."""

import os
from pathlib import Path

import yaml

from podfeed.config.schema import FeedSettings
from podfeed.utils.errors import ConfigNotFoundError, InvalidConfigError

CONFIG_FILENAME = "podfeed.yaml"


def get_config_dir() -> Path:
    """Get the podfeed config directory, honouring XDG_CONFIG_HOME."""
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / "podfeed"
    return Path.home() / ".config" / "podfeed"


class ConfigManager:
    """Manages the podfeed settings file."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            config_dir: Optional custom config directory. Defaults to XDG config dir.
        """
        self.config_dir = config_dir if config_dir is not None else get_config_dir()
        self.config_file = self.config_dir / CONFIG_FILENAME

    def load_settings(self) -> FeedSettings:
        """Load and validate settings.

        Returns:
            Validated FeedSettings instance

        Raises:
            ConfigNotFoundError: If the settings file doesn't exist
            InvalidConfigError: If the file is not valid YAML or fails validation
        """
        if not self.config_file.exists():
            raise ConfigNotFoundError(f"Settings file not found: {self.config_file}")

        try:
            with open(self.config_file) as f:
                data = yaml.safe_load(f) or {}
            return FeedSettings(**data)
        except Exception as e:
            raise InvalidConfigError(
                f"Invalid configuration in {self.config_file}: {e}"
            ) from e

    def save_settings(self, settings: FeedSettings) -> None:
        """Save settings.

        Args:
            settings: FeedSettings instance to save
        """
        data = settings.model_dump(mode="python")

        self.config_dir.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, "w") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
