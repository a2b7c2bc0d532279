# chain_identifier/core/config.py
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
from pathlib import Path
import os

import yaml

from chain_identifier.core.exceptions import ConfigError

CONFIG_ENV_VAR = "CHAIN_IDENTIFIER_CONFIG"
METADATA_DIR_ENV_VAR = "CHAIN_IDENTIFIER_METADATA_DIR"
LOG_LEVEL_ENV_VAR = "CHAIN_IDENTIFIER_LOG_LEVEL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_LOG_FORMATS = ("simple", "detailed", "json")

@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "WARNING"
    format: str = "simple"
    file: Optional[str] = None

@dataclass
class IdentifierConfig:
    """Identifier configuration"""
    metadata_dir: Optional[str] = None
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_file(cls, config_path: str) -> 'IdentifierConfig':
        """Load configuration from YAML file"""
        config_file = Path(config_path)
        if not config_file.exists():
            return cls()

        with open(config_file, 'r') as f:
            try:
                config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

        return cls.from_dict(config_data)

    @classmethod
    def from_dict(cls, config_data: Dict[str, Any]) -> 'IdentifierConfig':
        """Create config from dictionary"""
        if not isinstance(config_data, dict):
            raise ConfigError("Configuration root must be a mapping")
        try:
            return cls(
                metadata_dir=config_data.get('metadata_dir'),
                logging=LoggingConfig(**(config_data.get('logging') or {})),
            )
        except TypeError as e:
            raise ConfigError(f"Unknown configuration key: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for YAML serialization"""
        return {
            'metadata_dir': self.metadata_dir,
            'logging': self.logging.__dict__,
        }

    def save(self, config_path: str):
        """Save configuration to file"""
        config_file = Path(config_path)
        config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(config_file, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)

    def validate(self):
        """Validate configuration"""
        if self.logging.level.upper() not in _LOG_LEVELS:
            raise ConfigError(f"Invalid log level: {self.logging.level}")
        if self.logging.format.lower() not in _LOG_FORMATS:
            raise ConfigError(f"Invalid log format: {self.logging.format}")
        if self.metadata_dir is not None and not Path(self.metadata_dir).is_dir():
            raise ConfigError(f"Metadata directory does not exist: {self.metadata_dir}")

def load_config(config_path: Optional[str] = None) -> IdentifierConfig:
    """Load configuration from a file and apply environment overrides"""
    config_path = config_path or os.getenv(CONFIG_ENV_VAR)
    config = IdentifierConfig.from_file(config_path) if config_path else IdentifierConfig()

    metadata_dir = os.getenv(METADATA_DIR_ENV_VAR)
    if metadata_dir:
        config.metadata_dir = metadata_dir

    log_level = os.getenv(LOG_LEVEL_ENV_VAR)
    if log_level:
        config.logging.level = log_level.upper()

    config.validate()
    return config
