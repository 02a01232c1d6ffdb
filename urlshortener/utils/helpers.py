"""Helper utilities for AWS lambda functions.

Functions:
    get_short_url() -> str
        Get string representation of short URL for a given shortcode
    to_rfc3339() -> str
        Format an aware datetime as an RFC 3339 UTC timestamp
    from_rfc3339() -> datetime
        Parse an RFC 3339 timestamp into an aware UTC datetime
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present
    guarantee_500_response(handler) -> Callable
        Decorator: Convert unexpected handler errors into a 500 response

Example:
    >>> from urlshortener.utils.helpers import get_short_url
    >>> get_short_url('a9a9b569', 'https://sho.rt')
    'https://sho.rt/s/a9a9b569'
"""

import os
import json
import logging
import functools
from datetime import datetime, UTC
from collections.abc import Callable

from urlshortener.constants import ErrorMessage, UNKNOWN_INTERNAL_SERVER_ERROR
from urlshortener.exceptions import MissingEnvironmentVariableError
from urlshortener.utils.runtime import running_locally


logger = logging.getLogger(__name__)


def get_short_url(shortcode: str, base_url: str) -> str:
    """Get string representation of shortened URL

    Args:
        shortcode (str): shortcode
        base_url (str): public base URL of the redirect endpoint

    Returns:
        str: short url string representation, e.g. https://sho.rt/s/a9a9b569
    """
    return f'{base_url.rstrip("/")}/s/{shortcode}'


def to_rfc3339(dt: datetime) -> str:
    """Format a datetime as RFC 3339 with a trailing 'Z', e.g. '2025-10-15T00:00:00Z'."""
    # fmt: off
    return dt.astimezone(UTC) \
             .replace(microsecond=0) \
             .isoformat() \
             .replace('+00:00', 'Z')
    # fmt: on


def from_rfc3339(value: str) -> datetime:
    """Parse an RFC 3339 timestamp; naive values are assumed to be UTC."""
    dt = datetime.fromisoformat(value)
    return dt.replace(tzinfo=UTC) if dt.tzinfo is None else dt.astimezone(UTC)


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('DYNAMODB_TABLE')
        ... def my_function():
        ...     pass
        >>> my_function()
        MissingEnvironmentVariableError: Missing required environment variables: 'DYNAMODB_TABLE'
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator


def guarantee_500_response(handler: Callable) -> Callable:
    """Decorator: respond with a generic 500 when a lambda handler fails unexpectedly

    The response never leaks internal details. When running locally the
    exception is re-raised instead, so SAM surfaces the full traceback.
    """

    @functools.wraps(handler)
    def wrapper(event, context, *args, **kwargs):
        try:
            return handler(event, context, *args, **kwargs)
        except Exception:
            if running_locally():
                raise
            logger.exception(
                'Unhandled error in lambda handler. Responding with 500.',
                extra={'event': UNKNOWN_INTERNAL_SERVER_ERROR},
            )
            return {
                'statusCode': 500,
                'headers': {'Content-Type': 'application/json'},
                'body': json.dumps({'error': ErrorMessage.INTERNAL_SERVER_ERROR}),
            }

    return wrapper
