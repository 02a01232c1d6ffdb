from urlshortener.dao.redis.redis_key_schema import RedisKeySchema
from urlshortener.dao.redis.mixins import RedisClientMixin
from urlshortener.dao.redis.short_link_redis_dao import ShortLinkRedisDAO


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'ShortLinkRedisDAO',
]
