"""Redirect Resolver: look up a short link and count the click.

The click counter is a read-modify-write without compare-and-swap. Concurrent
resolutions of one shortcode can overwrite each other's increment, so counts
may be lower than the true number of redirects. They never exceed it, and the
target URL is never altered by the write-back.
"""

import logging
from datetime import datetime

from urlshortener.constants import Metric
from urlshortener.models import RedirectTarget
from urlshortener.dao.base import ShortLinkBaseDAO
from urlshortener.dao.exceptions import DataStoreError, ShortLinkExpiredError
from urlshortener.metrics import CloudWatchMetricsPublisher


logger = logging.getLogger(__name__)


class RedirectResolver:
    def __init__(self, dao: ShortLinkBaseDAO, metrics: CloudWatchMetricsPublisher | None = None):
        self.dao = dao
        self.metrics = metrics

    def resolve(self, shortcode: str, now: datetime | None = None) -> RedirectTarget:
        """Resolve `shortcode` to its redirect target

        Raises:
            ShortLinkNotFoundError: unknown shortcode.
            ShortLinkExpiredError: record is past `expires_at` but not purged yet.
            DataStoreError: the record could not be read.
        """
        short_link = self.dao.get(shortcode=shortcode)

        # Store TTL deletion lags behind expiry
        if short_link.is_expired(now):
            raise ShortLinkExpiredError(f"Short URL with code '{shortcode}' has expired.")

        try:
            self.dao.put(short_link=short_link.hit())
        except DataStoreError:
            logger.warning(
                'Failed to update click count. Redirecting anyway.',
                exc_info=True,
                extra={'shortcode': shortcode},
            )

        if self.metrics is not None:
            self.metrics.emit(Metric.URLS_ACCESSED)

        return RedirectTarget(shortcode=shortcode, location=short_link.target)
