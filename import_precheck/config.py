"""
Configuration management for the image import prechecks.
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import yaml

from .exceptions import ConfigurationError
from .logging_config import get_logger

logger = get_logger('config')

DOCS_URL = "https://cloud.google.com/sdk/gcloud/reference/compute/images/import"


@dataclass
class PrecheckConfig:
    """Settings shared by the prechecks."""
    docs_url: str = DOCS_URL


@dataclass
class CatalogConfig:
    """Settings for the supported OS catalog."""
    path: Optional[str] = None
    extra_osids: List[str] = field(default_factory=list)


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = "INFO"
    log_file: Optional[str] = None
    verbose: bool = False


@dataclass
class Config:
    """Main configuration class."""
    precheck: PrecheckConfig = field(default_factory=PrecheckConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from file or use defaults.

    Args:
        config_path: Optional path to a YAML configuration file

    Returns:
        Config object with loaded settings

    Raises:
        ConfigurationError: If the configuration file is invalid
    """
    config = Config()

    if config_path and os.path.exists(config_path):
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in configuration file: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Error reading configuration file: {e}") from e

        if config_data:
            if not isinstance(config_data, dict):
                raise ConfigurationError("Configuration file must contain a mapping")
            _update_config_from_dict(config, config_data)
            logger.info(f"Loaded configuration from {config_path}")

    elif config_path:
        logger.warning(f"Configuration file not found: {config_path}")

    return config


def _section(config_data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config_data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"Configuration section '{name}' must be a mapping")
    return section


def _expect(value: Any, expected: type, key: str) -> Any:
    if not isinstance(value, expected):
        raise ConfigurationError(f"Configuration key '{key}' must be of type {expected.__name__}")
    return value


def _update_config_from_dict(config: Config, config_data: Dict[str, Any]) -> None:
    """
    Update configuration object from dictionary data.

    Args:
        config: Config object to update
        config_data: Dictionary with configuration data
    """
    precheck_data = _section(config_data, 'precheck')
    if 'docs_url' in precheck_data:
        config.precheck.docs_url = _expect(precheck_data['docs_url'], str, 'precheck.docs_url')

    catalog_data = _section(config_data, 'catalog')
    if 'path' in catalog_data and catalog_data['path'] is not None:
        config.catalog.path = _expect(catalog_data['path'], str, 'catalog.path')
    if 'extra_osids' in catalog_data:
        extra = _expect(catalog_data['extra_osids'] or [], list, 'catalog.extra_osids')
        config.catalog.extra_osids = [_expect(osid, str, 'catalog.extra_osids') for osid in extra]

    logging_data = _section(config_data, 'logging')
    if 'level' in logging_data:
        config.logging.level = _expect(logging_data['level'], str, 'logging.level')
    if 'log_file' in logging_data:
        log_file = logging_data['log_file']
        config.logging.log_file = None if log_file is None else _expect(log_file, str, 'logging.log_file')
    if 'verbose' in logging_data:
        config.logging.verbose = _expect(logging_data['verbose'], bool, 'logging.verbose')


def get_default_config_path() -> Optional[str]:
    """
    Get the default configuration file path.

    Returns:
        Path to default config file if it exists, None otherwise
    """
    possible_paths = [
        'import_precheck.yaml',
        'import_precheck.yml',
        os.path.expanduser('~/.import_precheck.yaml'),
        os.path.expanduser('~/.import_precheck.yml'),
    ]

    for path in possible_paths:
        if os.path.exists(path):
            return path

    return None
