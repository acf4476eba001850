"""Application settings loader from YAML configuration."""
import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from rewardflow.utils.exceptions import ConfigError

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config.yaml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class AppSettings:
    """Application-wide settings loaded from config.yaml."""

    # App info
    app_name: str
    app_version: str

    # Logging
    log_level: str
    log_max_file_size_mb: int
    log_backup_count: int
    logs_dir: Optional[str]

    # Rewards
    point_to_currency_rate: Decimal
    zero_rate_falls_back: bool

    # Category -> legend color, in chart order
    category_colors: Dict[str, str]

    @property
    def tracked_categories(self) -> List[str]:
        """Category names in the order they appear in the config file."""
        return list(self.category_colors)

    @classmethod
    def load(cls, config_path: Path = None) -> "AppSettings":
        """Load settings from YAML file."""
        if config_path is None:
            env_path = os.getenv("REWARDFLOW_CONFIG")
            config_path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file is empty or malformed: {config_path}")

        try:
            settings = cls(
                app_name=config["app"]["name"],
                app_version=str(config["app"]["version"]),
                log_level=str(config["logging"]["level"]),
                log_max_file_size_mb=config["logging"]["max_file_size_mb"],
                log_backup_count=config["logging"]["backup_count"],
                logs_dir=config["logging"].get("logs_dir"),
                point_to_currency_rate=Decimal(str(config["rewards"]["point_to_currency_rate"])),
                zero_rate_falls_back=bool(config["rewards"]["zero_rate_falls_back"]),
                category_colors={str(name): str(color) for name, color in config["categories"].items()}
            )
        except KeyError as e:
            raise ConfigError(f"Missing configuration key {e} in {config_path}") from e
        except (InvalidOperation, AttributeError, TypeError) as e:
            raise ConfigError(f"Invalid configuration value in {config_path}: {e}") from e

        if settings.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {settings.log_level}")
        if settings.point_to_currency_rate < 0:
            raise ConfigError("point_to_currency_rate must not be negative")
        if not settings.category_colors:
            raise ConfigError("At least one tracked category is required")

        return settings


# Global settings instance
_settings: AppSettings = None


def get_settings() -> AppSettings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings.load()
    return _settings
