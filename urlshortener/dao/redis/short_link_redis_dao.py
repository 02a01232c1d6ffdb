"""Data Access Object (DAO) implementation for managing short links in Redis

Each record is a Redis hash at `<prefix>:links:<shortcode>` holding the same
fields as the DynamoDB item. The key is set to expire at `expires_at` with
EXPIREAT, so Redis purges expired records on its own.

Classes:
    ShortLinkRedisDAO:
        DAO for storing and retrieving ShortLinkModel in a Redis datastore.

Example:
    >>> dao = ShortLinkRedisDAO(prefix="app:dev")
    >>> dao.put(ShortLinkModel.new(target='https://foo.com', shortcode='a9a9b569'))
    <ShortLinkRedisDAO>
    >>> dao.get('a9a9b569').target
    'https://foo.com'
"""

import logging
from collections.abc import Iterator

from beartype import beartype

from urlshortener.models import ShortLinkModel
from urlshortener.dao.base import ShortLinkBaseDAO
from urlshortener.dao.redis.mixins import RedisClientMixin
from urlshortener.dao.redis.helpers import handle_redis_error
from urlshortener.dao.exceptions import ShortLinkNotFoundError, MalformedRecordError
from urlshortener.dao.serialization import to_record, from_record


logger = logging.getLogger(__name__)


class ShortLinkRedisDAO(RedisClientMixin, ShortLinkBaseDAO):
    """Redis-based Data Access Object (DAO) for managing short link records

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    All methods raise DataStoreError on any Redis failure.
    """

    @handle_redis_error
    @beartype
    def put(self, short_link: ShortLinkModel, **kwargs) -> 'ShortLinkRedisDAO':
        """Write a short link record, unconditionally

        NOTE: HSET and EXPIREAT run in one MULTI/EXEC transaction so a record
              is never visible without its expiry.
        """
        link_key = self.keys.link_key(short_link.shortcode)
        with self.redis.pipeline(transaction=True) as pipe:
            pipe.hset(link_key, mapping=to_record(short_link))
            pipe.expireat(link_key, int(short_link.expires_at.timestamp()))
            pipe.execute()
        return self

    @handle_redis_error
    @beartype
    def get(self, shortcode: str, **kwargs) -> ShortLinkModel:
        record = self.redis.hgetall(self.keys.link_key(shortcode))
        if not record:
            raise ShortLinkNotFoundError(f"Short URL with code '{shortcode}' not found.")
        return from_record(record)

    def scan(self, **kwargs) -> Iterator[ShortLinkModel]:
        for key in self._scan_keys():
            record = self._load(key)
            # Key expired between SCAN and HGETALL
            if not record:
                continue
            try:
                yield from_record(record)
            except MalformedRecordError:
                logger.warning('Skipping malformed short link record during scan.', extra={'key': key})

    @handle_redis_error
    def _scan_keys(self) -> list[str]:
        return list(self.redis.scan_iter(match=self.keys.link_pattern(), count=500))

    @handle_redis_error
    def _load(self, key: str) -> dict:
        return self.redis.hgetall(key)
