"""
Configuration - Runtime settings loader
Reads an optional JSON config file, a .env file and environment variables
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_LOGIN = 'ECAMPUS_LOGIN'
ENV_PASSWORD = 'ECAMPUS_PASSWORD'
ENV_DEBUG = 'DEBUG'
ENV_TERM = 'ECAMPUS_TERM'
ENV_TIMEOUT = 'ECAMPUS_TIMEOUT_MS'
ENV_CONFIG = 'ECAMPUS_CONFIG'

DEFAULT_CONFIG_PATH = 'config.json'
DEFAULT_TIMEOUT_MS = 1000 * 10


class ConfigError(ValueError):
    """Raised when the configuration cannot be read"""


@dataclass
class Config:
    """Settings for one run"""

    login: Optional[str] = None
    password: Optional[str] = None
    debug: bool = False
    term: Optional[str] = None
    timeout_ms: int = DEFAULT_TIMEOUT_MS

    @property
    def headless(self) -> bool:
        return not self.debug


def _mask(value: Optional[str], show: int = 2) -> str:
    if not value:
        return "(empty)"
    return value[:show] + "*" * max(0, len(value) - show)


def _load_file(config_path: Path) -> dict:
    """Load optional JSON config file"""
    if not config_path.exists():
        return {}

    try:
        with open(config_path, 'r') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read {config_path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a JSON object")

    logger.debug(f"Config file loaded: {config_path}")
    return data


def _as_text(data: dict, key: str) -> Optional[str]:
    """String value of a config key, numbers such as a CPF are accepted"""
    value = data.get(key)
    if value is None or value == '':
        return None
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ConfigError(f"Invalid value for '{key}': {value!r}")
    return str(value)


def _as_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() == 'true'


def _as_timeout(value) -> int:
    try:
        timeout = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid timeout: {value!r}")
    if timeout <= 0:
        raise ConfigError(f"Timeout must be positive, got {timeout}")
    return timeout


def scrub_credentials(environ=None):
    """Remove credential variables from the process environment"""
    environ = os.environ if environ is None else environ
    for key in (ENV_LOGIN, ENV_PASSWORD):
        environ.pop(key, None)


def load_config(config_path: Optional[str] = None, environ=None, use_dotenv: bool = True) -> Config:
    """
    Build the run configuration

    Priority (lowest to highest): defaults, JSON config file, environment.
    Credential variables are scrubbed from the environment once read.

    Args:
        config_path: JSON config file, defaults to $ECAMPUS_CONFIG or config.json
        environ: Mapping to read from, defaults to os.environ
        use_dotenv: Load a .env file into the environment first

    Returns:
        Config
    """
    if use_dotenv:
        load_dotenv()
    environ = os.environ if environ is None else environ

    path = Path(config_path or environ.get(ENV_CONFIG) or DEFAULT_CONFIG_PATH)
    file_data = _load_file(path)

    config = Config(
        login=_as_text(file_data, 'login'),
        password=_as_text(file_data, 'password'),
        debug=_as_bool(file_data.get('debug', False)),
        term=_as_text(file_data, 'term'),
        timeout_ms=_as_timeout(file_data.get('timeout_ms', DEFAULT_TIMEOUT_MS)),
    )

    if environ.get(ENV_LOGIN):
        config.login = environ[ENV_LOGIN]
    if environ.get(ENV_PASSWORD):
        config.password = environ[ENV_PASSWORD]
    if ENV_DEBUG in environ:
        config.debug = _as_bool(environ[ENV_DEBUG])
    if environ.get(ENV_TERM):
        config.term = environ[ENV_TERM]
    if environ.get(ENV_TIMEOUT):
        config.timeout_ms = _as_timeout(environ[ENV_TIMEOUT])

    scrub_credentials(environ)

    logger.debug(f"Config: login={_mask(config.login)} debug={config.debug} "
                 f"term={config.term} timeout_ms={config.timeout_ms}")
    return config
