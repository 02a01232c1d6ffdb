"""Error translation for Redis-backed short link DAOs.

Every redis-py failure surfaces as `DataStoreError`, so callers handle one
exception type for both backends. Connectivity failures name the server the
client points at; server-side rejections (READONLY replica, OOM, WRONGTYPE)
carry the Redis error text.
"""

import functools
from typing import TypeVar, Any
from collections.abc import Callable

import redis

from urlshortener.dao.exceptions import DataStoreError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def _server_address(client: redis.Redis) -> str:
    info = client.connection_pool.connection_kwargs
    return f'{info.get("host")}:{info.get("port")}/{info.get("db")}'


def handle_redis_error[F](method: F) -> F:
    """Wrap a DAO method so any redis.exceptions.RedisError becomes DataStoreError"""

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            raise DataStoreError(f"Can't connect to Redis at {_server_address(self.redis)}.") from e
        except redis.exceptions.RedisError as e:
            raise DataStoreError(f'Redis at {_server_address(self.redis)} rejected the request: {e}') from e

    return wrapper
