from enum import StrEnum


class TTL:
    """TTL durations in seconds."""

    # Short link retention period (1 week in seconds)
    ONE_WEEK = 604_800  # 60 * 60 * 24 * 7


SHORTCODE_LENGTH = 8
ALLOWED_SCHEMES = frozenset({'http', 'https'})


class Backend(StrEnum):
    """Supported short link data stores."""

    DYNAMODB = 'dynamodb'
    REDIS = 'redis'


class RecordField(StrEnum):
    """Attribute names of a persisted short link record."""

    SHORT_CODE = 'short_code'
    ORIGINAL_URL = 'original_url'
    CREATED_AT = 'created_at'
    EXPIRES_AT = 'expires_at'
    CLICK_COUNT = 'click_count'


class Metric(StrEnum):
    """CloudWatch custom metric names."""

    URLS_CREATED = 'UrlsCreated'
    URLS_ACCESSED = 'UrlsAccessed'
    METRICS_ACCESSED = 'MetricsAccessed'


class Defaults:
    """Default values for optional configuration."""

    BASE_URL = 'http://localhost:3000'
    METRICS_NAMESPACE = 'UrlShortener/Demo'
    STORE_TIMEOUT_SECONDS = 2
    STORE_MAX_ATTEMPTS = 2
    LOCALSTACK_ENDPOINT = 'http://localhost:4566'
    REDIS_HOST = 'localhost'
    REDIS_PORT = 6379
    REDIS_DB = 0


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'
        BASE_URL = 'BASE_URL'

    class Store(StrEnum):
        BACKEND = 'STORE_BACKEND'
        TIMEOUT_SECONDS = 'STORE_TIMEOUT_SECONDS'
        MAX_ATTEMPTS = 'STORE_MAX_ATTEMPTS'

    class DynamoDB(StrEnum):
        TABLE = 'DYNAMODB_TABLE'

    class Redis(StrEnum):
        HOST = 'REDIS_HOST'
        PORT = 'REDIS_PORT'
        DB = 'REDIS_DB'
        USERNAME = 'REDIS_USERNAME'
        PASSWORD = 'REDIS_PASSWORD'  # noqa: S105

    class Metrics(StrEnum):
        NAMESPACE = 'METRICS_NAMESPACE'

    class LocalStack(StrEnum):
        ENDPOINT = 'LOCALSTACK_ENDPOINT'  # usually http://localstack:4566


# Error messages returned to API clients
class ErrorMessage(StrEnum):
    INVALID_JSON = 'Invalid JSON in request body'
    MISSING_URL = 'URL parameter is required'
    INVALID_URL = 'Invalid URL: only http and https allowed'
    SHORT_URL_NOT_FOUND = 'Short URL not found'
    ROUTE_NOT_FOUND = 'Not found'
    INTERNAL_SERVER_ERROR = 'Internal server error'
    METRICS_UNAVAILABLE = 'Failed to fetch metrics'


# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
