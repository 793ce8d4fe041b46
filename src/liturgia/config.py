"""Configuration management for liturgia.

Handles loading and saving the TOML configuration stored in:
- macOS/Linux: ~/.config/liturgia/config.toml (XDG_CONFIG_HOME)
- Windows: %APPDATA%\\liturgia\\config.toml
"""

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import tomllib
import tomli_w

from liturgia.logging_config import get_logger
from liturgia.services.liturgy_client import DEFAULT_API_URL

logger = get_logger(__name__)

API_URL_ENV = "LITURGIA_API_URL"


def get_app_config_dir() -> Path:
    """Get the platform-specific config directory for liturgia.

    Returns:
        Path to the config directory
    """
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / "liturgia"
        return Path.home() / "AppData" / "Roaming" / "liturgia"

    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / "liturgia"
    return Path.home() / ".config" / "liturgia"


def get_app_config_path() -> Path:
    """Get the path to the config.toml file.

    Returns:
        Path to config.toml
    """
    return get_app_config_dir() / "config.toml"


@dataclass
class AppConfig:
    """Configuration for liturgia.

    Attributes:
        api_url: Base URL of the liturgy service
        timeout: Request timeout in seconds (None waits indefinitely)
        format_psalm: Format the psalm like the other passages
        log_dir: Directory for session logs
        log_level: Log level name
    """

    # Liturgy service
    api_url: str = DEFAULT_API_URL
    timeout: Optional[float] = None

    # Display
    format_psalm: bool = True

    # Logging
    log_dir: Path = field(default_factory=lambda: get_app_config_dir() / "logs")
    log_level: str = "DEBUG"

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "AppConfig":
        """Load configuration from TOML file.

        Args:
            path: Path to config file (defaults to standard location)

        Returns:
            AppConfig instance with loaded values

        Raises:
            FileNotFoundError: If config file doesn't exist
        """
        if path is None:
            path = get_app_config_path()

        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "rb") as f:
            data = tomllib.load(f)

        config = cls()

        if "service" in data:
            service = data["service"]
            config.api_url = service.get("api_url", config.api_url)
            if "timeout" in service:
                config.timeout = float(service["timeout"])

        if "display" in data:
            config.format_psalm = bool(data["display"].get("format_psalm", config.format_psalm))

        if "logging" in data:
            logging_data = data["logging"]
            if "log_dir" in logging_data:
                config.log_dir = Path(logging_data["log_dir"])
            config.log_level = logging_data.get("level", config.log_level)

        return config.apply_env_overrides()

    def apply_env_overrides(self) -> "AppConfig":
        """Apply environment variable overrides.

        Returns:
            This config, for chaining
        """
        api_url = os.environ.get(API_URL_ENV)
        if api_url:
            self.api_url = api_url
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert config to its TOML structure.

        Returns:
            Dictionary of TOML tables
        """
        service: dict[str, Any] = {"api_url": self.api_url}
        # TOML has no null, an absent timeout means none
        if self.timeout is not None:
            service["timeout"] = self.timeout

        return {
            "service": service,
            "display": {"format_psalm": self.format_psalm},
            "logging": {"log_dir": str(self.log_dir), "level": self.log_level},
        }

    def save(self, path: Optional[Path] = None) -> None:
        """Save configuration to TOML file.

        Args:
            path: Path to save config (defaults to standard location)
        """
        if path is None:
            path = get_app_config_path()

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "wb") as f:
            tomli_w.dump(self.to_dict(), f)


def ensure_app_config_exists(path: Optional[Path] = None) -> AppConfig:
    """Ensure config file exists, creating default if needed.

    Args:
        path: Path to config file (defaults to standard location)

    Returns:
        AppConfig instance
    """
    if path is None:
        path = get_app_config_path()

    if path.exists():
        try:
            return AppConfig.load(path)
        except (tomllib.TOMLDecodeError, ValueError) as e:
            logger.warning(f"Config at {path} is unreadable ({e}), writing defaults")

    config = AppConfig()
    config.save(path)
    return config.apply_env_overrides()
