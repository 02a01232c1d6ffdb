from urlshortener.core.assigner import CodeAssigner
from urlshortener.core.resolver import RedirectResolver
from urlshortener.core.reporter import AggregateReporter


__all__ = [
    'CodeAssigner',
    'RedirectResolver',
    'AggregateReporter',
]
