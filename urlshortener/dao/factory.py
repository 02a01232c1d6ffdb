from urlshortener.constants import Backend
from urlshortener.dao.base import ShortLinkBaseDAO
from urlshortener.dao.dynamodb import ShortLinkDynamoDBDAO
from urlshortener.dao.redis import ShortLinkRedisDAO
from urlshortener.exceptions import BadConfigurationError
from urlshortener.utils.config import app_prefix


def build_short_link_dao(config: dict) -> ShortLinkBaseDAO:
    """Construct the DAO for the active backend of a `load_config()` result

    Raises:
        BadConfigurationError: unknown backend or missing backend section.
        DataStoreError: Redis healthcheck fails.
    """
    backend = config.get('active_backend')
    settings = config.get(backend) if backend else None
    if settings is None:
        raise BadConfigurationError(f'No configuration section for store backend {backend!r}.')

    if backend == Backend.DYNAMODB:
        return ShortLinkDynamoDBDAO(**settings)
    if backend == Backend.REDIS:
        redis_config = {f'redis_{k}': v for k, v in settings.items()}
        return ShortLinkRedisDAO(**redis_config, prefix=app_prefix())
    raise BadConfigurationError(f'Unsupported store backend {backend!r}.')
