"""
Configuration Loader
Loads and validates YAML configuration files
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional
import yaml

from .app_config import AppConfig

API_KEY_ENV = "YOUTUBE_API_KEY"
DEFAULT_API_BASE = "https://www.googleapis.com/youtube/v3"
DEFAULT_TIMEOUT = 10.0


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


class ConfigLoader:
    """
    Loads and validates configuration from YAML files.

    Responsibilities:
    - Read YAML configuration file (optional when the environment suffices)
    - Validate all fields
    - Validate types and value ranges
    - Return validated AppConfig instance
    """

    def __init__(self, config_path: Optional[Path] = None, environ: Optional[Dict[str, str]] = None):
        """
        Initialize ConfigLoader.

        Args:
            config_path: Path to YAML configuration file (None = environment only)
            environ: Environment mapping used for the API key fallback
        """
        self._config_path = config_path
        self._environ = os.environ if environ is None else environ

    def load(self) -> AppConfig:
        """
        Load and validate configuration.

        Returns:
            AppConfig: Validated configuration object

        Raises:
            ConfigValidationError: If configuration is invalid
            FileNotFoundError: If config file doesn't exist
        """
        config_data = self._load_yaml() if self._config_path is not None else {}

        return AppConfig(
            api_key=self._validate_api_key(config_data),
            channel=self._validate_channel(config_data),
            timeout=self._validate_timeout(config_data),
            api_base=self._validate_api_base(config_data),
        )

    def _load_yaml(self) -> Dict[str, Any]:
        """Load YAML file and return parsed data."""
        if not self._config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self._config_path}"
            )

        try:
            with open(self._config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML syntax: {e}")

        if data is None:
            return {}

        if not isinstance(data, dict):
            raise ConfigValidationError(
                "Configuration must be a YAML mapping/dictionary"
            )

        return data

    def _validate_api_key(self, config: Dict[str, Any]) -> str:
        """Validate api_key field, falling back to the environment."""
        api_key = config.get("api_key")
        if api_key is None:
            api_key = self._environ.get(API_KEY_ENV)
        if api_key is None:
            raise ConfigValidationError(
                f"Missing required field: 'api_key' (or set {API_KEY_ENV})"
            )

        if not isinstance(api_key, str):
            raise ConfigValidationError(
                f"Field 'api_key' must be a string, got {type(api_key).__name__}"
            )

        if not api_key.strip():
            raise ConfigValidationError("Field 'api_key' cannot be empty")

        return api_key.strip()

    def _validate_channel(self, config: Dict[str, Any]) -> Optional[str]:
        """Validate channel field (optional)."""
        channel = config.get("channel")
        if channel is None:
            return None

        if not isinstance(channel, str):
            raise ConfigValidationError(
                f"Field 'channel' must be a string, got {type(channel).__name__}"
            )

        if not channel.strip():
            raise ConfigValidationError("Field 'channel' cannot be empty")

        return channel.strip()

    def _validate_timeout(self, config: Dict[str, Any]) -> float:
        """Validate timeout field (optional)."""
        timeout = config.get("timeout", DEFAULT_TIMEOUT)

        # bool is an int subclass
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            raise ConfigValidationError(
                f"Field 'timeout' must be a number, got {type(timeout).__name__}"
            )

        if timeout <= 0:
            raise ConfigValidationError(
                f"Field 'timeout' must be greater than 0, got {timeout}"
            )

        return float(timeout)

    def _validate_api_base(self, config: Dict[str, Any]) -> str:
        api_base = config.get("api_base", DEFAULT_API_BASE)

        if not isinstance(api_base, str) or not api_base.strip().startswith("http"):
            raise ConfigValidationError(
                f"Field 'api_base' must be an http(s) URL, got {api_base!r}"
            )

        return api_base.strip().rstrip("/")
