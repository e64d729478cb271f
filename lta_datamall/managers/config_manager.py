"""
Configuration management for the LTA DataMall client.

This module handles loading, saving, and validating client configuration
using Pydantic models for type safety and validation. Callers may also
build an APIConfig in code and never touch the file.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from version import __api_base_url__, __app_name__, get_user_agent

from ..api.exceptions import ConfigurationException

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0
API_KEY_PLACEHOLDER = "YOUR_API_KEY_HERE"


class APIConfig(BaseModel):
    """Configuration for LTA DataMall API access."""

    api_key: str = Field(default="", description="DataMall account key")
    base_url: str = Field(default=__api_base_url__, description="API root URL")
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        le=600,
        description="Total request timeout in seconds",
    )
    user_agent: str = Field(
        default_factory=get_user_agent, description="User-Agent header sent with requests"
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v):
        """Validate base URL scheme and strip the trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v):
        return v.strip()

    @property
    def resolved_api_key(self) -> Optional[str]:
        """Get the API key, or None if unset or still the placeholder."""
        if not self.api_key or self.api_key == API_KEY_PLACEHOLDER:
            return None
        return self.api_key


class ConfigManager:
    """
    Manages client configuration with file persistence.

    Handles loading configuration from JSON files, creating a default
    configuration, and saving changes back to disk.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file. If None, uses the
                per-user config directory.
        """
        if config_path is None:
            self.config_path = self.get_default_config_path()
        else:
            self.config_path = Path(config_path)
        self.config: Optional[APIConfig] = None
        logger.debug(f"ConfigManager initialized with path: {self.config_path}")

    @staticmethod
    def get_default_config_path() -> Path:
        """
        Get the default configuration file path.

        On Windows, uses %APPDATA%/lta-datamall/config.json
        Elsewhere, uses $XDG_CONFIG_HOME/lta-datamall/config.json or
        ~/.config/lta-datamall/config.json

        Returns:
            Path: Default configuration file path
        """
        if os.name == "nt":
            appdata = os.environ.get("APPDATA")
            if appdata:
                return Path(appdata) / __app_name__ / "config.json"
            return Path("config.json")

        xdg_config = os.environ.get("XDG_CONFIG_HOME")
        if xdg_config:
            config_dir = Path(xdg_config) / __app_name__
        else:
            config_dir = Path.home() / ".config" / __app_name__
        return config_dir / "config.json"

    def load_config(self) -> APIConfig:
        """
        Load configuration from file.

        If the configuration file doesn't exist, creates a default one.

        Returns:
            APIConfig: The loaded configuration

        Raises:
            ConfigurationException: If the configuration file is invalid
        """
        logger.debug(f"Loading config from: {self.config_path}")

        if not self.config_path.exists():
            logger.info(f"Config file doesn't exist, creating default at: {self.config_path}")
            self.create_default_config()

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationException(f"Invalid JSON in config file: {e}") from e
        except OSError as e:
            raise ConfigurationException(f"Failed to read config: {e}") from e

        try:
            self.config = APIConfig(**data.get("api", {}))
        except (ValidationError, AttributeError, TypeError) as e:
            raise ConfigurationException(f"Failed to load config: {e}") from e

        logger.debug(f"Successfully loaded config from: {self.config_path}")
        return self.config

    def save_config(self, config: APIConfig) -> bool:
        """
        Save configuration to file.

        Args:
            config: Configuration data to save

        Returns:
            bool: True if saved successfully, False otherwise
        """
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                json.dump({"api": config.model_dump()}, f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Failed to save config to {self.config_path}: {e}")
            return False

        self.config = config
        logger.info(f"Saved config to: {self.config_path}")
        return True

    def create_default_config(self) -> None:
        """Create a default configuration file."""
        self.save_config(APIConfig(api_key=API_KEY_PLACEHOLDER))

    def update_api_key(self, api_key: str) -> bool:
        """
        Update the API key and save to file.

        Args:
            api_key: New DataMall account key
        """
        if self.config is None:
            self.load_config()

        updated = self.config.model_copy(update={"api_key": api_key.strip()})
        return self.save_config(updated)

    def validate_api_credentials(self) -> bool:
        """
        Check if an API key is configured.

        Returns:
            bool: True if a real key is set, False otherwise
        """
        if self.config is None:
            self.load_config()

        return self.config is not None and self.config.resolved_api_key is not None
