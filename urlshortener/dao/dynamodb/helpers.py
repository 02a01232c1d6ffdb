import functools
from typing import TypeVar, Any
from collections.abc import Callable

from botocore.exceptions import BotoCoreError, ClientError

from urlshortener.dao.exceptions import DataStoreError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def handle_dynamodb_error[F](method: F) -> F:
    """Wrap DynamoDB-interacting DAO methods to handle client errors

    Covers both service-side rejections (botocore ClientError, e.g. throttling
    or missing table) and client-side failures (BotoCoreError, e.g. connect or
    read timeouts).

    Args:
        method (Callable[..., Any]):
            DAO method performing DynamoDB operations.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on DynamoDB failures.

    Example:
        >>> @handle_dynamodb_error
        ... def get_item(self, shortcode):
        ...     return self.table.get_item(Key={'short_code': shortcode})
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except ClientError as e:
            code = e.response.get('Error', {}).get('Code', 'Unknown')
            raise DataStoreError(f"DynamoDB request on table '{self.table_name}' failed ({code}).") from e
        except BotoCoreError as e:
            raise DataStoreError(f"Can't reach DynamoDB table '{self.table_name}': {e}") from e

    return wrapper
