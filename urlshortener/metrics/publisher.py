"""CloudWatch custom metric publishing

Metric emission is telemetry: it must never block or fail a response.
`emit()` hands the PutMetricData call to a small module-level thread pool and
returns immediately; failures inside the worker are logged and dropped.
`publish()` is the synchronous variant used by the worker.

NOTE:
    Lambda freezes the execution environment once the handler returns, so an
    emission still in flight resumes on the next invocation of the same
    environment (or is lost if the environment is reclaimed).
    Published counts are therefore approximate.

Example:
    >>> publisher = CloudWatchMetricsPublisher(namespace='UrlShortener/Demo')
    >>> publisher.emit(Metric.URLS_ACCESSED)
    <Future at 0x... state=pending>
"""

import os
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from datetime import datetime, UTC

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from urlshortener.constants import ENV, Defaults
from urlshortener.exceptions import MetricsUnavailableError
from urlshortener.types import CloudWatchClient
from urlshortener.utils.runtime import running_locally


logger = logging.getLogger(__name__)

# Shared across invocations of a warm execution environment
_executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix='metrics')


class CloudWatchMetricsPublisher:
    """Publish counter metrics to a CloudWatch namespace

    Attributes:
        namespace (str):
            CloudWatch namespace, e.g. 'UrlShortener/Demo'.
        cloudwatch (CloudWatchClient):
            boto3 CloudWatch client.
    """

    def __init__(
        self,
        namespace: str = Defaults.METRICS_NAMESPACE,
        cloudwatch_client: CloudWatchClient | None = None,
        timeout: int = Defaults.STORE_TIMEOUT_SECONDS,
    ):
        if cloudwatch_client is None:
            config = Config(connect_timeout=timeout, read_timeout=timeout, retries={'max_attempts': 1})
            # fmt: off
            client_kwargs = {
                'endpoint_url': os.environ.get(ENV.LocalStack.ENDPOINT, Defaults.LOCALSTACK_ENDPOINT),
            } if running_locally() else {}
            # fmt: on
            cloudwatch_client = boto3.client('cloudwatch', config=config, **client_kwargs)

        self.namespace = namespace
        self.cloudwatch = cloudwatch_client

    def publish(self, metric_name: str, value: float = 1) -> None:
        """Send one Count datum synchronously

        Raises:
            MetricsUnavailableError: CloudWatch rejected the datum or could not be reached.
        """
        try:
            self.cloudwatch.put_metric_data(
                Namespace=self.namespace,
                MetricData=[
                    {
                        'MetricName': str(metric_name),
                        'Value': float(value),
                        'Unit': 'Count',
                        'Timestamp': datetime.now(UTC),
                    }
                ],
            )
        except (ClientError, BotoCoreError) as e:
            raise MetricsUnavailableError(f"Failed to publish metric '{metric_name}' to '{self.namespace}'.") from e

    def emit(self, metric_name: str, value: float = 1) -> Future | None:
        """Publish a metric in the background without waiting for the result

        Returns:
            Future | None: handle of the background publish (callers normally
            ignore it), or None if the work could not be scheduled.
        """
        try:
            return _executor.submit(self._publish_quietly, metric_name, value)
        except RuntimeError:
            # Executor already shut down (interpreter exit)
            logger.warning('Dropping metric, background executor unavailable.', extra={'metric': str(metric_name)})
            return None

    def _publish_quietly(self, metric_name: str, value: float) -> None:
        try:
            self.publish(metric_name, value)
        except MetricsUnavailableError as e:
            logger.warning(
                'Failed to publish metric.',
                extra={'metric': str(metric_name), 'namespace': self.namespace, 'reason': str(e.__cause__ or e)},
            )
        else:
            logger.debug('Published metric.', extra={'metric': str(metric_name), 'value': value})


def build_metrics_publisher(namespace: str = Defaults.METRICS_NAMESPACE) -> CloudWatchMetricsPublisher | None:
    """Create a publisher, or return None if the CloudWatch client can't be built

    Client construction fails e.g. without a configured AWS region; telemetry
    is then disabled for the invocation instead of failing the request.
    """
    try:
        return CloudWatchMetricsPublisher(namespace=namespace)
    except BotoCoreError:
        logger.warning('CloudWatch client unavailable, metrics disabled.', exc_info=True, extra={'namespace': namespace})
        return None
