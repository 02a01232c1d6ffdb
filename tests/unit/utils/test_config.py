"""Unit tests for configuration helpers in config.py.

Test coverage includes:

1. Application identity
   - app_env() defaults to 'local' and is lowercased.
   - app_prefix() is None without APP_NAME, '<name>:<env>' otherwise.
   - base_url() falls back to the default and drops trailing slashes.

2. load_config()
   - DynamoDB is the default backend and requires DYNAMODB_TABLE.
   - Redis backend settings are read with defaults.
   - Invalid backend names and numeric values raise BadConfigurationError.
"""

import pytest
from pytest import MonkeyPatch

from urlshortener.constants import ENV
from urlshortener.exceptions import BadConfigurationError, MissingEnvironmentVariableError
from urlshortener.utils.config import app_env, app_prefix, base_url, load_config


# -------------------------------
# 1. Application identity
# -------------------------------


def test_app_env_defaults_to_local(monkeypatch: MonkeyPatch):
    monkeypatch.delenv(ENV.App.APP_ENV, raising=False)
    assert app_env() == 'local'


def test_app_env_is_lowercased(monkeypatch: MonkeyPatch):
    monkeypatch.setenv(ENV.App.APP_ENV, 'PROD')
    assert app_env() == 'prod'


def test_app_prefix(monkeypatch: MonkeyPatch):
    assert app_prefix() is None

    monkeypatch.setenv(ENV.App.APP_NAME, 'urlshortener')
    monkeypatch.setenv(ENV.App.APP_ENV, 'dev')
    assert app_prefix() == 'urlshortener:dev'


@pytest.mark.parametrize(
    'value, expected',
    [
        (None, 'http://localhost:3000'),
        ('', 'http://localhost:3000'),
        ('https://sho.rt', 'https://sho.rt'),
        ('https://sho.rt/', 'https://sho.rt'),
    ],
)
def test_base_url(monkeypatch: MonkeyPatch, value, expected):
    if value is not None:
        monkeypatch.setenv(ENV.App.BASE_URL, value)
    assert base_url() == expected


# -------------------------------
# 2. load_config()
# -------------------------------


def test_load_config_defaults_to_dynamodb(monkeypatch: MonkeyPatch):
    monkeypatch.setenv(ENV.DynamoDB.TABLE, 'links')

    assert load_config() == {
        'base_url': 'http://localhost:3000',
        'metrics': {'namespace': 'UrlShortener/Demo'},
        'active_backend': 'dynamodb',
        'dynamodb': {'table_name': 'links', 'timeout': 2, 'max_attempts': 2},
    }


def test_load_config_with_overrides(monkeypatch: MonkeyPatch):
    monkeypatch.setenv(ENV.Store.BACKEND, 'DynamoDB')
    monkeypatch.setenv(ENV.DynamoDB.TABLE, 'links')
    monkeypatch.setenv(ENV.Store.TIMEOUT_SECONDS, '5')
    monkeypatch.setenv(ENV.Store.MAX_ATTEMPTS, '3')
    monkeypatch.setenv(ENV.Metrics.NAMESPACE, 'UrlShortener/Test')
    monkeypatch.setenv(ENV.App.BASE_URL, 'https://sho.rt/')

    config = load_config()

    assert config['base_url'] == 'https://sho.rt'
    assert config['metrics'] == {'namespace': 'UrlShortener/Test'}
    assert config['dynamodb'] == {'table_name': 'links', 'timeout': 5, 'max_attempts': 3}


def test_load_config_without_table(monkeypatch: MonkeyPatch):
    with pytest.raises(MissingEnvironmentVariableError, match='DYNAMODB_TABLE'):
        load_config()


def test_load_config_for_redis(monkeypatch: MonkeyPatch):
    monkeypatch.setenv(ENV.Store.BACKEND, 'redis')
    monkeypatch.setenv(ENV.Redis.HOST, 'redis.internal')
    monkeypatch.setenv(ENV.Redis.PASSWORD, 'secret')

    config = load_config()

    assert config['active_backend'] == 'redis'
    assert 'dynamodb' not in config
    assert config['redis'] == {
        'host': 'redis.internal',
        'port': 6379,
        'db': 0,
        'username': None,
        'password': 'secret',
        'timeout': 2,
    }


def test_load_config_with_unknown_backend(monkeypatch: MonkeyPatch):
    monkeypatch.setenv(ENV.Store.BACKEND, 'postgres')

    with pytest.raises(BadConfigurationError, match="Unsupported store backend 'postgres'"):
        load_config()


@pytest.mark.parametrize(
    'name, value, message',
    [
        (ENV.Store.TIMEOUT_SECONDS, 'soon', 'must be an integer'),
        (ENV.Store.TIMEOUT_SECONDS, '0', 'must be >= 1'),
        (ENV.Store.MAX_ATTEMPTS, '-2', 'must be >= 1'),
    ],
)
def test_load_config_with_bad_numbers(monkeypatch: MonkeyPatch, name, value, message):
    monkeypatch.setenv(ENV.DynamoDB.TABLE, 'links')
    monkeypatch.setenv(name, value)

    with pytest.raises(BadConfigurationError, match=message):
        load_config()
