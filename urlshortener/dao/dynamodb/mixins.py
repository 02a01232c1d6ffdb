"""DynamoDB mixin providing shared table resource initialization.

Responsibilities:
    - Initialize a boto3 DynamoDB Table resource with short, fixed timeouts
    - Point boto3 at LocalStack when running locally

Classes:
    - DynamoDBTableMixin: Base mixin to inject the DynamoDB table into DAOs.

Example:
    Typical usage with a DAO implementation:

        >>> class ShortLinkDynamoDBDAO(DynamoDBTableMixin, ShortLinkBaseDAO):
        ...     pass
        ...
        >>> dao = ShortLinkDynamoDBDAO(table_name='url-shortener-links')
        >>> dao.table.name
        'url-shortener-links'
"""

import os
from typing import Any

import boto3
from botocore.config import Config

from urlshortener.constants import ENV, Defaults
from urlshortener.utils.runtime import running_locally


class DynamoDBTableMixin:
    """Mixin DynamoDB table setup for DynamoDB-backed DAOs.

    Attributes:
        table_name (str):
            Name of the DynamoDB table.

        table (boto3 Table resource):
            Table resource used by subclasses.
    """

    def __init__(
        self,
        table_name: str,
        timeout: int = Defaults.STORE_TIMEOUT_SECONDS,
        max_attempts: int = Defaults.STORE_MAX_ATTEMPTS,
        dynamodb_resource: Any | None = None,
    ):
        """Initialize a DynamoDB-based DAO

        The option is given to either use an existing boto3 DynamoDB resource
        or create one with bounded connect/read timeouts.

        Args:
            table_name (str):
                Name of the DynamoDB table holding short link records.

            timeout (int):
                Connect and read timeout in seconds. Defaults to 2.

            max_attempts (int):
                Total attempts (first try included) made by botocore's standard
                retry mode. Defaults to 2.

            dynamodb_resource (Any | None):
                Pre-initialized boto3 DynamoDB service resource. If None, a new one is created.
        """
        if dynamodb_resource is None:
            config = Config(
                connect_timeout=timeout,
                read_timeout=timeout,
                retries={'max_attempts': max_attempts, 'mode': 'standard'},
            )
            # fmt: off
            resource_kwargs = {
                'endpoint_url': os.environ.get(ENV.LocalStack.ENDPOINT, Defaults.LOCALSTACK_ENDPOINT),
            } if running_locally() else {}
            # fmt: on
            dynamodb_resource = boto3.resource('dynamodb', config=config, **resource_kwargs)

        self.table_name = table_name
        self.table = dynamodb_resource.Table(table_name)
