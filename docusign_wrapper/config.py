"""
Configuration management for DocuSign Wrapper.

Settings are read from a JSON file in the configuration directory and
can be overridden with DOCUSIGN_* environment variables.
"""

import json
import logging
import os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional, Dict, Any

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_HOST = "https://demo.docusign.net/restapi/v2"
DEFAULT_TIMEOUT = 30
DEFAULT_CONFIG_DIR = Path.home() / ".docusign-wrapper"
CONFIG_FILE_NAME = "config.json"

# Environment variable -> config field
ENV_OVERRIDES = {
    "DOCUSIGN_HOST": "host",
    "DOCUSIGN_USERNAME": "username",
    "DOCUSIGN_PASSWORD": "password",
    "DOCUSIGN_INTEGRATOR_KEY": "integrator_key",
    "DOCUSIGN_ACCOUNT_ID": "account_id",
    "DOCUSIGN_TIMEOUT": "timeout",
}


@dataclass
class DocuSignConfig:
    """Connection settings and credentials for the DocuSign API."""

    host: str = DEFAULT_HOST
    username: str = ""
    password: str = ""
    integrator_key: str = ""
    account_id: str = ""
    timeout: int = DEFAULT_TIMEOUT
    verify_ssl: bool = True
    max_retries: int = 0

    def is_configured(self) -> bool:
        """Check that everything needed to log in is present."""
        return all([
            self.host,
            self.username,
            self.password,
            self.integrator_key,
            self.account_id,
        ])

    def missing_fields(self) -> list:
        """Names of the login settings that are still empty."""
        required = ["host", "username", "password", "integrator_key", "account_id"]
        return [name for name in required if not getattr(self, name)]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DocuSignConfig":
        """Build a config, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


class ConfigManager:
    """Loads, saves and updates the configuration file."""

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize the configuration manager.

        Args:
            config_dir: Custom configuration directory. Falls back to
                DOCUSIGN_CONFIG_DIR, then ~/.docusign-wrapper.
        """
        if config_dir is None:
            env_dir = os.environ.get("DOCUSIGN_CONFIG_DIR")
            config_dir = Path(env_dir) if env_dir else DEFAULT_CONFIG_DIR
        self.config_dir = Path(config_dir)
        self._config: Optional[DocuSignConfig] = None

    def get_config_path(self) -> Path:
        """Path of the JSON configuration file."""
        return self.config_dir / CONFIG_FILE_NAME

    def _read_file(self) -> Dict[str, Any]:
        """Raw settings stored in the file, without environment overrides."""
        path = self.get_config_path()
        if not path.exists():
            return {}

        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read configuration file {path}", details=str(e))

    def load(self) -> DocuSignConfig:
        """Read the file (if any) and apply environment overrides."""
        config = DocuSignConfig.from_dict(self._read_file())
        self._apply_env(config)
        self._config = config
        return config

    def _apply_env(self, config: DocuSignConfig) -> None:
        for env_name, field_name in ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if not value:
                continue
            if field_name == "timeout":
                try:
                    config.timeout = int(value)
                except ValueError:
                    raise ConfigurationError(f"{env_name} must be an integer, got: {value}")
            else:
                setattr(config, field_name, value)
            logger.debug(f"Using {field_name} from {env_name}")

    def get(self) -> DocuSignConfig:
        """Get the current configuration, loading it on first use."""
        if self._config is None:
            return self.load()
        return self._config

    def save(self, config: DocuSignConfig) -> None:
        """Write the configuration to disk as given."""
        self._write(config.to_dict())
        self._config = config

    def _write(self, data: Dict[str, Any]) -> None:
        self.config_dir.mkdir(parents=True, exist_ok=True)
        path = self.get_config_path()
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

        # The file may hold a password
        try:
            path.chmod(0o600)
        except OSError as e:
            logger.warning(f"Could not restrict permissions on {path}: {e}")

    def update(self, **kwargs: Any) -> DocuSignConfig:
        """
        Update selected fields in the file.

        Only the stored settings and kwargs are written; environment
        overrides are applied when the result is read back.
        """
        stored = DocuSignConfig.from_dict(self._read_file())
        for key, value in kwargs.items():
            if not hasattr(stored, key):
                raise ConfigurationError(f"Unknown configuration key: {key}")
            setattr(stored, key, value)
        self._write(stored.to_dict())
        return self.load()

    def clear(self) -> None:
        """Delete the configuration file."""
        path = self.get_config_path()
        if path.exists():
            path.unlink()
        self._config = None


_config_manager: Optional[ConfigManager] = None


def get_config_manager(config_dir: Optional[Path] = None) -> ConfigManager:
    """Get the shared configuration manager (or a new one for a custom dir)."""
    global _config_manager
    if config_dir is not None:
        _config_manager = ConfigManager(config_dir)
    elif _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def get_config() -> DocuSignConfig:
    """Get the current configuration."""
    return get_config_manager().get()
