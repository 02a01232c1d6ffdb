"""Utility functions for application configuration management.

Every lambda is configured through environment variables set on the function.
`load_config()` reads them once per invocation and returns a dictionary with
the common settings plus the section for the active data store backend:

    {
        "base_url": "https://sho.rt",
        "metrics": {"namespace": "UrlShortener/Demo"},
        "active_backend": "dynamodb",
        "dynamodb": {"table_name": "...", "timeout": 2, "max_attempts": 2}
    }

or, with `STORE_BACKEND=redis`:

    {
        ...,
        "active_backend": "redis",
        "redis": {"host": "...", "port": 6379, "db": 0, "username": None, "password": None, "timeout": 2}
    }

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return application prefix for DAOs, or None if `APP_NAME` is not set.

    base_url() -> str
        Return the public base URL used to compose short links.

    load_config() -> dict
        Load the lambda configuration from the environment.

Example:
    >>> from urlshortener.utils.config import load_config
    >>> config = load_config()
    >>> config['dynamodb']['table_name']
    'url-shortener-links'
"""

import os
import logging

from urlshortener.constants import ENV, Backend, Defaults
from urlshortener.exceptions import BadConfigurationError
from urlshortener.utils.helpers import require_environment


logger = logging.getLogger(__name__)


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    """Return the current application name by reading 'APP_NAME'"""
    return os.environ.get(ENV.App.APP_NAME)


def app_prefix() -> str | None:
    """Return application prefix for DAOs

    Returns:
        str: app prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'urlshortener'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'urlshortener:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def base_url() -> str:
    """Return the public base URL for short links, without a trailing slash"""
    return (os.environ.get(ENV.App.BASE_URL) or Defaults.BASE_URL).rstrip('/')


def _int_env(name: str, default: int, minimum: int = 0) -> int:
    raw = os.environ.get(name)
    if raw is None or raw == '':
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise BadConfigurationError(f'Environment variable {name} must be an integer (given value: {raw!r}).') from e
    if value < minimum:
        raise BadConfigurationError(f'Environment variable {name} must be >= {minimum} (given value: {value}).')
    return value


@require_environment(ENV.DynamoDB.TABLE)
def _dynamodb_config() -> dict:
    return {
        'table_name': os.environ[ENV.DynamoDB.TABLE],
        'timeout': _int_env(ENV.Store.TIMEOUT_SECONDS, Defaults.STORE_TIMEOUT_SECONDS, minimum=1),
        'max_attempts': _int_env(ENV.Store.MAX_ATTEMPTS, Defaults.STORE_MAX_ATTEMPTS, minimum=1),
    }


def _redis_config() -> dict:
    return {
        'host': os.environ.get(ENV.Redis.HOST, Defaults.REDIS_HOST),
        'port': _int_env(ENV.Redis.PORT, Defaults.REDIS_PORT, minimum=1),
        'db': _int_env(ENV.Redis.DB, Defaults.REDIS_DB),
        'username': os.environ.get(ENV.Redis.USERNAME) or None,
        'password': os.environ.get(ENV.Redis.PASSWORD) or None,
        'timeout': _int_env(ENV.Store.TIMEOUT_SECONDS, Defaults.STORE_TIMEOUT_SECONDS, minimum=1),
    }


def load_config() -> dict:
    """Load the lambda configuration from environment variables

    Returns:
        dict: common settings plus the active backend's section.

    Raises:
        MissingEnvironmentVariableError:
            If the active backend requires an unset variable (e.g. DYNAMODB_TABLE).
        BadConfigurationError:
            If STORE_BACKEND is unknown or a numeric variable is invalid.
    """
    backend_name = os.environ.get(ENV.Store.BACKEND, Backend.DYNAMODB).lower()
    try:
        backend = Backend(backend_name)
    except ValueError as e:
        supported = ', '.join(b.value for b in Backend)
        raise BadConfigurationError(f'Unsupported store backend {backend_name!r} (supported: {supported}).') from e

    config = {
        'base_url': base_url(),
        'metrics': {'namespace': os.environ.get(ENV.Metrics.NAMESPACE) or Defaults.METRICS_NAMESPACE},
        'active_backend': backend.value,
    }
    if backend is Backend.DYNAMODB:
        config[backend.value] = _dynamodb_config()
    else:
        config[backend.value] = _redis_config()

    logger.debug('Loaded configuration from environment.', extra={'activeBackend': backend.value})
    return config
