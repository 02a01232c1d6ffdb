from urlshortener.metrics.publisher import CloudWatchMetricsPublisher, build_metrics_publisher


__all__ = [
    'CloudWatchMetricsPublisher',
    'build_metrics_publisher',
]
