"""API Gateway (HTTP API, payload 2.0) response builders."""

import json
from typing import Any

from urlshortener.constants import ErrorMessage
from urlshortener.types import LambdaResponse


JSON_HEADERS = {'Content-Type': 'application/json'}


def response_json(status_code: int, body: dict[str, Any]) -> LambdaResponse:
    return {
        'statusCode': status_code,
        'headers': dict(JSON_HEADERS),
        'body': json.dumps(body),
    }


def response_200(body: dict[str, Any]) -> LambdaResponse:
    return response_json(200, body)


def response_301(*, location: str) -> LambdaResponse:
    return {
        'statusCode': 301,
        'headers': {**JSON_HEADERS, 'Location': location},
    }


def response_400(message: str) -> LambdaResponse:
    return response_json(400, {'error': message})


def response_404(message: str = ErrorMessage.ROUTE_NOT_FOUND) -> LambdaResponse:
    return response_json(404, {'error': message})


def response_500() -> LambdaResponse:
    return response_json(500, {'error': ErrorMessage.INTERNAL_SERVER_ERROR})
