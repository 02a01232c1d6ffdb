"""Single entry point routing API Gateway requests to the route handlers.

Routes:
    POST /create         -> create_url
    GET  /s/{shortCode}  -> redirect_url
    GET  /metrics        -> report_metrics
    anything else        -> 404 {"error": "Not found"}
"""

import logging

from urlshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from urlshortener.utils import guarantee_500_response
from urlshortener.utils.events import http_method, request_path, path_shortcode
from urlshortener.utils.responses import response_404
from urlshortener.lambdas.create_url import app as create_url
from urlshortener.lambdas.redirect_url import app as redirect_url
from urlshortener.lambdas.report_metrics import app as report_metrics


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    method = http_method(event)
    path = request_path(event)

    if method == 'POST' and path == '/create':
        return create_url.lambda_handler(event, context)
    if method == 'GET' and path_shortcode(event):
        return redirect_url.lambda_handler(event, context)
    if method == 'GET' and path == '/metrics':
        return report_metrics.lambda_handler(event, context)

    logger.info('No route matched. Responding with 404.', extra={'method': method, 'path': path})
    return response_404()
