"""Data Access Object (DAO) implementation for managing short links in DynamoDB

The table uses `short_code` as its partition key and `expires_at` (epoch
seconds) as its TTL attribute. DynamoDB purges expired items lazily, usually
within a few days, so readers must still check expiry themselves.

Classes:
    ShortLinkDynamoDBDAO:
        DAO for storing and retrieving ShortLinkModel in a DynamoDB table.

Example:
    >>> dao = ShortLinkDynamoDBDAO(table_name='url-shortener-links')
    >>> dao.put(ShortLinkModel.new(target='https://foo.com', shortcode='a9a9b569'))
    <ShortLinkDynamoDBDAO>
    >>> dao.get('a9a9b569').clicks
    0
"""

import logging
from collections.abc import Iterator
from typing import Any

from beartype import beartype

from urlshortener.constants import RecordField
from urlshortener.models import ShortLinkModel
from urlshortener.dao.base import ShortLinkBaseDAO
from urlshortener.dao.dynamodb.mixins import DynamoDBTableMixin
from urlshortener.dao.dynamodb.helpers import handle_dynamodb_error
from urlshortener.dao.exceptions import ShortLinkNotFoundError, MalformedRecordError
from urlshortener.dao.serialization import to_record, from_record


logger = logging.getLogger(__name__)


class ShortLinkDynamoDBDAO(DynamoDBTableMixin, ShortLinkBaseDAO):
    """DynamoDB-based Data Access Object (DAO) for managing short link records

    Methods:
        put(short_link: ShortLinkModel, **kwargs) -> ShortLinkDynamoDBDAO:
            PutItem the full record, overwriting any existing item.

        get(shortcode: str, **kwargs) -> ShortLinkModel:
            GetItem by partition key.
            Raises ShortLinkNotFoundError when the item doesn't exist.
            Raises MalformedRecordError when the item can't be decoded.

        scan(**kwargs) -> Iterator[ShortLinkModel]:
            Paginated Scan over the whole table.

    All methods raise DataStoreError on DynamoDB failures.
    """

    @handle_dynamodb_error
    @beartype
    def put(self, short_link: ShortLinkModel, **kwargs) -> 'ShortLinkDynamoDBDAO':
        """Write a short link record, unconditionally

        No ConditionExpression is used: a repeated submission of the same URL
        refreshes its expiry, and a hash collision overwrites the older record.
        """
        self.table.put_item(Item=to_record(short_link))
        return self

    @handle_dynamodb_error
    @beartype
    def get(self, shortcode: str, **kwargs) -> ShortLinkModel:
        response = self.table.get_item(Key={RecordField.SHORT_CODE.value: shortcode})
        item = response.get('Item')
        if item is None:
            raise ShortLinkNotFoundError(f"Short URL with code '{shortcode}' not found.")
        return from_record(item)

    def scan(self, **kwargs) -> Iterator[ShortLinkModel]:
        start_key = None
        while True:
            items, start_key = self._scan_page(start_key)
            for item in items:
                try:
                    yield from_record(item)
                except MalformedRecordError:
                    logger.warning(
                        'Skipping malformed short link record during scan.',
                        extra={'shortcode': item.get(RecordField.SHORT_CODE.value)},
                    )
            if start_key is None:
                return

    @handle_dynamodb_error
    def _scan_page(self, start_key: dict[str, Any] | None) -> tuple[list[dict[str, Any]], dict[str, Any] | None]:
        scan_kwargs = {} if start_key is None else {'ExclusiveStartKey': start_key}
        response = self.table.scan(**scan_kwargs)
        return response.get('Items', []), response.get('LastEvaluatedKey')
