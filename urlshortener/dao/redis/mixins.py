"""Shared Redis client setup for Redis-backed short link DAOs."""

import redis

from urlshortener.constants import Defaults
from urlshortener.dao.redis.redis_key_schema import RedisKeySchema
from urlshortener.dao.exceptions import DataStoreError


class RedisClientMixin:
    """Inject a Redis client (`self.redis`) and key schema (`self.keys`) into a DAO.

    The client is pinged on construction, so an unreachable or misconfigured
    server fails fast with DataStoreError instead of on the first request.
    """

    def __init__(
        self,
        redis_host: str = Defaults.REDIS_HOST,
        redis_port: int = Defaults.REDIS_PORT,
        redis_db: int = Defaults.REDIS_DB,
        redis_decode_responses: bool = True,
        redis_username: str | None = None,
        redis_password: str | None = None,
        redis_timeout: int = Defaults.STORE_TIMEOUT_SECONDS,
        redis_client: redis.Redis | None = None,
        prefix: str | None = None,
    ):
        """
        Args:
            redis_host, redis_port, redis_db, redis_username, redis_password:
                Connection parameters, ignored when `redis_client` is given.
            redis_decode_responses (bool):
                Return `str` instead of `bytes`. Records decode from strings.
            redis_timeout (int):
                Socket connect and read timeout in seconds.
            redis_client (redis.Redis | None):
                Pre-initialized client, e.g. a test double.
            prefix (str | None):
                Key namespace, usually '<APP_NAME>:<APP_ENV>'.

        Raises:
            DataStoreError: Redis did not answer the healthcheck PING.
        """
        if redis_client is None:
            redis_client = redis.Redis(
                host=redis_host,
                port=int(redis_port),
                db=int(redis_db),
                decode_responses=redis_decode_responses,
                username=redis_username,
                password=redis_password,
                socket_timeout=redis_timeout,
                socket_connect_timeout=redis_timeout,
            )

        self.redis = redis_client
        self.keys = RedisKeySchema(prefix=prefix)

        self._healthcheck()

    def _healthcheck(self, raise_error: bool = True) -> bool:
        """PING Redis; return False (or raise DataStoreError) when it doesn't answer"""
        try:
            self.redis.ping()
        except redis.exceptions.RedisError as e:
            if raise_error:
                info = self.redis.connection_pool.connection_kwargs
                address = f'{info.get("host")}:{info.get("port")}/{info.get("db")}'
                raise DataStoreError(f"Can't connect to Redis at {address}. Check the provided configuration parameters.") from e
            return False
        return True
