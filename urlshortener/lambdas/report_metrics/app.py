import logging
from datetime import datetime, UTC

from urlshortener.core import AggregateReporter
from urlshortener.dao import build_short_link_dao
from urlshortener.dao.exceptions import DataStoreError
from urlshortener.exceptions import ConfigurationError
from urlshortener.metrics import build_metrics_publisher
from urlshortener.models import UsageReport
from urlshortener.constants import ErrorMessage
from urlshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from urlshortener.utils import load_config, to_rfc3339, guarantee_500_response
from urlshortener.utils.responses import response_200, response_500


logger = logging.getLogger(__name__)


def report_body(report: UsageReport) -> dict:
    body = {
        'urls_created': report.created,
        'urls_accessed': report.accessed,
        'unique_visitors': report.unique_visitors,
        'active_urls': report.active,
        'timestamp': to_rfc3339(datetime.now(UTC)),
    }
    if report.error:
        body['error'] = report.error
    return body


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Report coarse usage counts for the dashboard

    The endpoint is diagnostic: store failures still produce a 200 with zeroed
    counters and an `error` field.

    HTTP responses:
        200: usage counters
            urls_created, urls_accessed, unique_visitors, active_urls, timestamp
            error: present only when the store could not be scanned
        500: configuration error
    """
    try:
        app_config = load_config()
    except ConfigurationError:
        logger.exception('Failed to load configuration for metrics function. Responding with 500.')
        return response_500()

    try:
        dao = build_short_link_dao(app_config)
    except DataStoreError:
        logger.exception('Failed to connect to data store. Reporting zeroes.')
        return response_200(report_body(UsageReport(error=ErrorMessage.METRICS_UNAVAILABLE)))

    metrics = build_metrics_publisher(app_config['metrics']['namespace'])
    report = AggregateReporter(dao, metrics=metrics).report()
    logger.info(
        'Reporting usage metrics.',
        extra={'urlsCreated': report.created, 'urlsAccessed': report.accessed, 'activeUrls': report.active},
    )
    return response_200(report_body(report))
