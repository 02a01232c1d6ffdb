"""Accessors for API Gateway Lambda proxy events.

Both HTTP API (payload format 2.0) and REST API (payload format 1.0) events
are understood:

    2.0: event['requestContext']['http']['method'], event['rawPath']
    1.0: event['httpMethod'], event['path']
"""

import re
import base64
import binascii

from urlshortener.types import LambdaEvent


SHORT_LINK_PATH = re.compile(r'^/s/(?P<shortcode>[^/]+)/?$')


def http_method(event: LambdaEvent) -> str:
    method = (event.get('requestContext') or {}).get('http', {}).get('method') or event.get('httpMethod') or ''
    return method.upper()


def request_path(event: LambdaEvent) -> str:
    return event.get('rawPath') or event.get('path') or ''


def path_shortcode(event: LambdaEvent) -> str | None:
    """Return the `shortCode` path parameter, falling back to parsing `/s/<code>`"""
    shortcode = (event.get('pathParameters') or {}).get('shortCode')
    if shortcode:
        return shortcode

    match = SHORT_LINK_PATH.match(request_path(event))
    return match.group('shortcode') if match else None


def request_body(event: LambdaEvent) -> str:
    """Return the raw request body as text, decoding base64 bodies

    Raises:
        ValueError: the body is flagged as base64 but isn't valid base64/UTF-8.
    """
    body = event.get('body') or ''
    if event.get('isBase64Encoded'):
        try:
            return base64.b64decode(body, validate=True).decode('utf-8')
        except (binascii.Error, UnicodeDecodeError) as e:
            raise ValueError('Request body is not valid base64-encoded UTF-8.') from e
    return body
