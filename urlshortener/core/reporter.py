"""Aggregate Reporter: coarse usage counts for the dashboard.

The report is a full scan of the store and is not isolated from concurrent
writes. Expired records which the store has not purged yet are counted.
A production replacement would maintain running counters instead of scanning.
"""

import logging

from urlshortener.constants import ErrorMessage, Metric
from urlshortener.models import UsageReport
from urlshortener.dao.base import ShortLinkBaseDAO
from urlshortener.dao.exceptions import DataStoreError
from urlshortener.metrics import CloudWatchMetricsPublisher


logger = logging.getLogger(__name__)


class AggregateReporter:
    def __init__(self, dao: ShortLinkBaseDAO, metrics: CloudWatchMetricsPublisher | None = None):
        self.dao = dao
        self.metrics = metrics

    def report(self) -> UsageReport:
        """Scan all records and sum them up

        Never raises on store failures: a zeroed report carrying an `error`
        message is returned instead.
        """
        if self.metrics is not None:
            self.metrics.emit(Metric.METRICS_ACCESSED)

        created = accessed = active = 0
        try:
            for short_link in self.dao.scan():
                active += 1
                created += 1
                accessed += short_link.clicks
        except DataStoreError:
            logger.exception('Failed to scan short link records. Reporting zeroes.')
            return UsageReport(error=ErrorMessage.METRICS_UNAVAILABLE)

        return UsageReport(created=created, accessed=accessed, active=active)
