import json
import logging

from urlshortener.constants import ErrorMessage
from urlshortener.core import CodeAssigner
from urlshortener.dao import build_short_link_dao
from urlshortener.dao.exceptions import DataStoreError
from urlshortener.exceptions import ConfigurationError, InvalidInputError
from urlshortener.metrics import build_metrics_publisher
from urlshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from urlshortener.utils import load_config, to_rfc3339, guarantee_500_response
from urlshortener.utils.events import request_body
from urlshortener.utils.responses import response_200, response_400, response_500
from urlshortener.lambdas.create_url.constants import (
    INVALID_JSON,
    MISSING_URL,
    INVALID_URL,
    STORAGE_UNAVAILABLE,
    SHORT_URL_CREATED,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to shorten URLs

    This Lambda handler follows this procedure to shorten URLs:
    - Step 1: Load configuration
    - Step 2: Extract original URL from request body
    - Step 3: Validate URL, derive shortcode and upsert the record (CodeAssigner)
    - Step 4: Respond to user with 200 success

    HTTP responses:
        200: Successful URL shortening
            short_url: <base url>/s/<shortcode>
            expires_at: RFC 3339 expiry timestamp
        400: Bad client request
            error: invalid JSON, missing url or non-http(s) url
        500: Internal server error
            error: Internal server error

    Args:
        event (LambdaEvent):
            API Gateway event payload in Lambda Proxy format.
        context (LambdaContext):
            AWS Lambda context object containing runtime information.

    Returns:
        LambdaResponse:
            JSON-serializable response following API Gateway Lambda Proxy
            output format. Includes status code, headers, and response body.

    Example:
        >>> event = {'body': '{"url": "https://foo.com"}'}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        200
        >>> json.loads(response['body'])['short_url']
        'https://sho.rt/s/a9a9b569'
    """
    # 1- Get application's config
    try:
        app_config = load_config()
    except ConfigurationError:
        logger.exception('Failed to load configuration for create URL function. Responding with 500.')
        return response_500()

    # 2- Extract original URL from request body
    try:
        payload = json.loads(request_body(event))
    except ValueError:  # json.JSONDecodeError is a ValueError
        logger.info('Invalid JSON in request body. Responding with 400.', extra={'event': INVALID_JSON})
        return response_400(ErrorMessage.INVALID_JSON)
    if not isinstance(payload, dict):
        logger.info('Request body is not a JSON object. Responding with 400.', extra={'event': INVALID_JSON})
        return response_400(ErrorMessage.INVALID_JSON)

    raw_url = payload.get('url')
    if not raw_url:
        logger.info('Missing "url" in request body. Responding with 400.', extra={'event': MISSING_URL})
        return response_400(ErrorMessage.MISSING_URL)

    # 3- Validate URL, derive shortcode and store the record
    try:
        dao = build_short_link_dao(app_config)
        metrics = build_metrics_publisher(app_config['metrics']['namespace'])
        created = CodeAssigner(dao, base_url=app_config['base_url'], metrics=metrics).create(raw_url)
    except InvalidInputError as e:
        logger.info('Rejected URL. Responding with 400.', extra={'event': INVALID_URL, 'reason': str(e)})
        return response_400(ErrorMessage.INVALID_URL)
    except DataStoreError:
        logger.exception('Failed to store short link record. Responding with 500.', extra={'event': STORAGE_UNAVAILABLE})
        return response_500()

    # 4- Return successful response to user
    logger.info(
        'Shortened URL. Responding with 200.',
        extra={'shortcode': created.shortcode, 'event': SHORT_URL_CREATED},
    )
    return response_200(
        {
            'short_url': created.short_url,
            'expires_at': to_rfc3339(created.expires_at),
        }
    )
