"""Unit tests for RedirectResolver

Test coverage includes:

1. Resolution
   - Ensures a live link resolves to a 301 target and counts the click.
   - Ensures a UrlsAccessed metric is emitted.
   - Ensures the expiry boundary is inclusive.

2. Missing links
   - Confirms unknown shortcodes raise ShortLinkNotFoundError.
   - Confirms expired but unpurged records raise ShortLinkExpiredError (a ShortLinkNotFoundError).

3. Degraded operation
   - Ensures a failed click count update still redirects (Redis READONLY and OOM included).
   - Ensures a failed read propagates DataStoreError.
   - Ensures concurrent resolutions never over-count.
"""

import threading
from datetime import datetime, timedelta, UTC
from unittest.mock import MagicMock

import pytest
import redis
from botocore.exceptions import ClientError

from urlshortener.constants import Metric
from urlshortener.core import CodeAssigner, RedirectResolver
from urlshortener.dao.base import ShortLinkBaseDAO
from urlshortener.dao.exceptions import DataStoreError, ShortLinkExpiredError, ShortLinkNotFoundError
from urlshortener.dao.redis import ShortLinkRedisDAO
from urlshortener.metrics import CloudWatchMetricsPublisher
from urlshortener.models import ShortLinkModel


CREATED_AT = datetime(2025, 10, 15, tzinfo=UTC)
EXPIRES_AT = datetime(2025, 10, 22, tzinfo=UTC)


@pytest.fixture
def metrics():
    return MagicMock(spec=CloudWatchMetricsPublisher)


@pytest.fixture
def resolver(memory_dao, metrics):
    return RedirectResolver(memory_dao, metrics=metrics)


@pytest.fixture
def stored_link(memory_dao):
    CodeAssigner(memory_dao, base_url='https://sho.rt').create('https://foo.com', now=CREATED_AT)
    return 'a9a9b569'


# -------------------------------
# 1. Resolution
# -------------------------------


def test_resolve(resolver, memory_dao, metrics, stored_link):
    target = resolver.resolve(stored_link, now=CREATED_AT + timedelta(hours=1))

    assert target.location == 'https://foo.com'
    assert target.status_code == 301
    assert memory_dao.records[stored_link]['click_count'] == 1
    assert memory_dao.records[stored_link]['original_url'] == 'https://foo.com'
    metrics.emit.assert_called_once_with(Metric.URLS_ACCESSED)


def test_resolve_counts_every_click(resolver, memory_dao, stored_link):
    for _ in range(3):
        resolver.resolve(stored_link, now=CREATED_AT)

    assert memory_dao.records[stored_link]['click_count'] == 3
    assert memory_dao.records[stored_link]['expires_at'] == int(EXPIRES_AT.timestamp())


def test_resolve_at_expiry(resolver, stored_link):
    assert resolver.resolve(stored_link, now=EXPIRES_AT).location == 'https://foo.com'


# -------------------------------
# 2. Missing links
# -------------------------------


def test_resolve_unknown_shortcode(resolver, metrics):
    with pytest.raises(ShortLinkNotFoundError):
        resolver.resolve('deadbeef')

    metrics.emit.assert_not_called()


def test_resolve_expired_link(resolver, memory_dao, metrics, stored_link):
    with pytest.raises(ShortLinkExpiredError) as exc_info:
        resolver.resolve(stored_link, now=EXPIRES_AT + timedelta(seconds=1))

    assert isinstance(exc_info.value, ShortLinkNotFoundError)
    assert memory_dao.records[stored_link]['click_count'] == 0
    metrics.emit.assert_not_called()


# -------------------------------
# 3. Degraded operation
# -------------------------------


def test_resolve_when_click_update_fails(metrics):
    dao = MagicMock(spec=ShortLinkBaseDAO)
    dao.get.return_value = ShortLinkModel(target='https://foo.com', shortcode='a9a9b569', created_at=CREATED_AT, expires_at=EXPIRES_AT)
    dao.put.side_effect = DataStoreError('DynamoDB request failed')

    target = RedirectResolver(dao, metrics=metrics).resolve('a9a9b569', now=CREATED_AT)

    assert target.location == 'https://foo.com'
    dao.put.assert_called_once()
    assert dao.put.call_args.kwargs['short_link'].clicks == 1
    metrics.emit.assert_called_once_with(Metric.URLS_ACCESSED)


def test_resolve_when_read_fails():
    dao = MagicMock(spec=ShortLinkBaseDAO)
    dao.get.side_effect = DataStoreError('DynamoDB request failed')

    with pytest.raises(DataStoreError):
        RedirectResolver(dao).resolve('a9a9b569')

    dao.put.assert_not_called()


def test_resolve_when_metrics_fail(memory_dao, stored_link):
    cloudwatch = MagicMock()
    cloudwatch.put_metric_data.side_effect = ClientError({'Error': {'Code': 'AccessDenied'}}, 'PutMetricData')
    metrics = CloudWatchMetricsPublisher(namespace='UrlShortener/Test', cloudwatch_client=cloudwatch)

    target = RedirectResolver(memory_dao, metrics=metrics).resolve(stored_link, now=CREATED_AT)

    assert target.location == 'https://foo.com'


def test_concurrent_resolutions_never_over_count(memory_dao, stored_link):
    resolver = RedirectResolver(memory_dao)
    threads = [threading.Thread(target=resolver.resolve, args=(stored_link, CREATED_AT)) for _ in range(20)]

    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert 1 <= memory_dao.records[stored_link]['click_count'] <= 20


def redis_backed_dao(stored_hash: dict) -> ShortLinkRedisDAO:
    client = MagicMock(spec=redis.client.Pipeline)
    client.pipeline.return_value = client
    client.__enter__.return_value = client
    client.__exit__.return_value = None
    client.connection_pool = MagicMock()
    client.connection_pool.connection_kwargs = {'host': 'redis', 'port': 6379, 'db': 0}
    client.hgetall.return_value = stored_hash
    return ShortLinkRedisDAO(redis_client=client, prefix='urlshortener:test')


@pytest.mark.parametrize(
    'error',
    [
        redis.exceptions.ReadOnlyError("You can't write against a read only replica."),
        redis.exceptions.ResponseError('OOM command not allowed when used memory > maxmemory'),
    ],
)
def test_resolve_when_redis_rejects_click_update(metrics, error):
    dao = redis_backed_dao({
        'short_code': 'a9a9b569',
        'original_url': 'https://foo.com',
        'created_at': '2025-10-15T00:00:00Z',
        'expires_at': '1761091200',
        'click_count': '2',
    })
    dao.redis.execute.side_effect = error

    target = RedirectResolver(dao, metrics=metrics).resolve('a9a9b569', now=CREATED_AT)

    assert target.location == 'https://foo.com'
    dao.redis.execute.assert_called_once()
    metrics.emit.assert_called_once_with(Metric.URLS_ACCESSED)
