import logging

from urlshortener.constants import ErrorMessage
from urlshortener.core import RedirectResolver
from urlshortener.dao import build_short_link_dao
from urlshortener.dao.exceptions import DataStoreError, ShortLinkNotFoundError, ShortLinkExpiredError
from urlshortener.exceptions import ConfigurationError
from urlshortener.metrics import build_metrics_publisher
from urlshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from urlshortener.utils import load_config, guarantee_500_response
from urlshortener.utils.events import path_shortcode
from urlshortener.utils.responses import response_301, response_404, response_500
from urlshortener.lambdas.redirect_url.constants import (
    MISSING_SHORTCODE,
    SHORT_URL_NOT_FOUND,
    SHORT_URL_EXPIRED,
    STORAGE_UNAVAILABLE,
    REDIRECT_SUCCESS,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to redirect short URLs

    This Lambda handler follows this procedure to redirect URLs:
    - Step 1: Load configuration
    - Step 2: Extract shortcode from request path
    - Step 3: Resolve the record, check expiry and count the click (RedirectResolver)
    - Step 4: Redirect client to target URL

    HTTP responses:
        301: Successful redirect
            headers:
                Location: target URL destination
        404: Not found
            error: unknown, missing or expired shortcode
        500: Internal server error
            error: Internal server error

    Example:
        >>> event = {'pathParameters': {'shortCode': 'a9a9b569'}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        301
        >>> response['headers']['Location']
        'https://foo.com'
    """
    # 1- Get application's config
    try:
        app_config = load_config()
    except ConfigurationError:
        logger.exception('Failed to load configuration for redirect URL function. Responding with 500.')
        return response_500()

    # 2- Extract shortcode from request's path
    shortcode = path_shortcode(event)
    if not shortcode:
        logger.info('Missing "shortCode" in path. Responding with 404.', extra={'event': MISSING_SHORTCODE})
        return response_404(ErrorMessage.SHORT_URL_NOT_FOUND)

    # 3- Resolve the short link
    try:
        dao = build_short_link_dao(app_config)
        metrics = build_metrics_publisher(app_config['metrics']['namespace'])
        target = RedirectResolver(dao, metrics=metrics).resolve(shortcode)
    except ShortLinkExpiredError:
        logger.info(
            'Short URL record expired but not yet purged. Responding with 404.',
            extra={'shortcode': shortcode, 'event': SHORT_URL_EXPIRED},
        )
        return response_404(ErrorMessage.SHORT_URL_NOT_FOUND)
    except ShortLinkNotFoundError:
        logger.info(
            'Short URL record not found in database. Responding with 404.',
            extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND},
        )
        return response_404(ErrorMessage.SHORT_URL_NOT_FOUND)
    except DataStoreError:
        logger.exception(
            'Failed to read short URL record. Responding with 500.',
            extra={'shortcode': shortcode, 'event': STORAGE_UNAVAILABLE},
        )
        return response_500()

    # 4- Redirect client to target URL
    logger.info(
        'Redirecting client to target URL. Responding with 301.',
        extra={'shortcode': shortcode, 'event': REDIRECT_SUCCESS},
    )
    return response_301(location=target.location)
