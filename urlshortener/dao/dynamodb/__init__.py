from urlshortener.dao.dynamodb.mixins import DynamoDBTableMixin
from urlshortener.dao.dynamodb.short_link_dynamodb_dao import ShortLinkDynamoDBDAO


__all__ = [
    'DynamoDBTableMixin',
    'ShortLinkDynamoDBDAO',
]
