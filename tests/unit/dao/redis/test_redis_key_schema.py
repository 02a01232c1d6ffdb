"""Unit tests for the RedisKeySchema class in redis_key_schema.py.

Test coverage includes:

1. Link key generation
   - Ensures link_key() generates correct Redis keys for a given shortcode.
   - Ensures link_pattern() matches every link key.

2. Prefix behavior
   - Confirms keys are not prefixed when no prefix is provided.
   - Confirms keys are correctly prefixed when a valid prefix is provided.
   - Ensures improper prefix types raise TypeError.
"""

import pytest

from urlshortener.dao.redis.redis_key_schema import RedisKeySchema


# -------------------------------
# 1. Link key generation
# -------------------------------


@pytest.mark.parametrize(
    'shortcode, expected',
    [
        ('a9a9b569', 'links:a9a9b569'),
        ('23d97719', 'links:23d97719'),
    ],
)
def test_link_key(shortcode, expected):
    """Ensure link_key() generates valid Redis keys."""
    keys = RedisKeySchema()
    assert keys.link_key(shortcode) == expected


def test_link_pattern():
    assert RedisKeySchema().link_pattern() == 'links:*'


# -------------------------------
# 2. Prefix behavior
# -------------------------------


@pytest.mark.parametrize(
    'prefix, expected_key, expected_pattern',
    [
        ('urlshortener:test', 'urlshortener:test:links:a9a9b569', 'urlshortener:test:links:*'),
        ('secret', 'secret:links:a9a9b569', 'secret:links:*'),
        (None, 'links:a9a9b569', 'links:*'),
    ],
)
def test_key_prefixing(prefix, expected_key, expected_pattern):
    """Ensure keys are correctly prefixed when a prefix is provided."""
    keys = RedisKeySchema(prefix=prefix)
    assert keys.link_key('a9a9b569') == expected_key
    assert keys.link_pattern() == expected_pattern


@pytest.mark.parametrize('prefix', [123, -1, 45.6, [], {}])
def test_invalid_prefix_type_raises_error(prefix):
    """Ensure invalid prefix types raise a TypeError."""
    with pytest.raises(TypeError):
        RedisKeySchema(prefix=prefix)
