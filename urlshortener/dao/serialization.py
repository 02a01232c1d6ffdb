"""Conversion between ShortLinkModel and the persisted record layout.

Both backends persist the same attributes:

    short_code    (str)  primary key
    original_url  (str)
    created_at    (str)  RFC 3339, e.g. 2025-10-15T00:00:00Z
    expires_at    (int)  epoch seconds, used as the store TTL attribute
    click_count   (int)  may be absent, defaults to 0
"""

from datetime import datetime, UTC
from typing import Any

from urlshortener.constants import RecordField
from urlshortener.models import ShortLinkModel
from urlshortener.dao.exceptions import MalformedRecordError
from urlshortener.utils.helpers import to_rfc3339, from_rfc3339


def to_record(short_link: ShortLinkModel) -> dict[str, Any]:
    return {
        RecordField.SHORT_CODE.value: short_link.shortcode,
        RecordField.ORIGINAL_URL.value: short_link.target,
        RecordField.CREATED_AT.value: to_rfc3339(short_link.created_at),
        RecordField.EXPIRES_AT.value: int(short_link.expires_at.timestamp()),
        RecordField.CLICK_COUNT.value: short_link.clicks,
    }


def from_record(record: dict[str, Any]) -> ShortLinkModel:
    """Decode a stored record

    Numeric attributes may arrive as `int`, `decimal.Decimal` (boto3 resource)
    or `str` (redis hashes); all three are accepted.

    Raises:
        MalformedRecordError: a required attribute is missing or has a bad value.
    """
    try:
        clicks = int(record.get(RecordField.CLICK_COUNT, 0) or 0)
        if clicks < 0:
            raise ValueError(f'negative click count {clicks}')
        return ShortLinkModel(
            target=str(record[RecordField.ORIGINAL_URL]),
            shortcode=str(record[RecordField.SHORT_CODE]),
            created_at=from_rfc3339(str(record[RecordField.CREATED_AT])),
            expires_at=datetime.fromtimestamp(int(record[RecordField.EXPIRES_AT]), tz=UTC),
            clicks=clicks,
        )
    except (KeyError, TypeError, ValueError) as e:
        shortcode = record.get(RecordField.SHORT_CODE) if isinstance(record, dict) else None
        raise MalformedRecordError(f"Stored record for short code '{shortcode}' is malformed: {e}") from e
