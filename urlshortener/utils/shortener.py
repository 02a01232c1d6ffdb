"""Shortcode generation utility

Short codes are the first 8 lowercase hex characters of the SHA-256 digest of
the raw, unnormalized URL string. Identical URLs therefore always map to the
same shortcode, which makes link creation idempotent.

NOTE:
    Truncating to 32 bits means two distinct URLs may share a shortcode.
    No collision detection is performed: the later write overwrites the
    earlier record. Widening SHORTCODE_LENGTH lowers that risk.

Functions:
    validate_url(raw_url) -> str:
        Ensure a URL is parsable and uses the http or https scheme.
    generate_shortcode(raw_url, length=8) -> str:
        Derive the deterministic shortcode of a URL.

Example:
    >>> from urlshortener.utils import generate_shortcode
    >>> generate_shortcode('https://foo.com')
    'a9a9b569'
"""

import hashlib
from urllib.parse import urlsplit

from urlshortener.constants import ALLOWED_SCHEMES, SHORTCODE_LENGTH
from urlshortener.exceptions import InvalidInputError


def validate_url(raw_url: str) -> str:
    """Ensure `raw_url` is a syntactically valid http(s) URL.

    Only the scheme is checked. The URL itself is returned untouched, since
    shortcodes are derived from the raw string.

    Raises:
        InvalidInputError: empty, unparsable or non-http(s) input.
    """
    if not isinstance(raw_url, str) or not raw_url:
        raise InvalidInputError('URL must be a non-empty string.')

    # JSON escapes can smuggle in lone surrogates, which have no UTF-8 encoding
    try:
        raw_url.encode('utf-8')
    except UnicodeEncodeError as e:
        raise InvalidInputError('URL is not valid UTF-8 text.') from e

    try:
        components = urlsplit(raw_url)
    except ValueError as e:
        raise InvalidInputError(f'Unparsable URL {raw_url!r}.') from e

    if components.scheme not in ALLOWED_SCHEMES:
        raise InvalidInputError(f'Unsupported URL scheme {components.scheme!r} (only http and https allowed).')
    return raw_url


def generate_shortcode(raw_url: str, length: int = SHORTCODE_LENGTH) -> str:
    """Generate a short, deterministic code for a URL.

    Args:
        raw_url (str):
            URL exactly as submitted by the client.
        length (int, optional):
            Number of hex characters to keep. Defaults to 8.

    Returns:
        str: lowercase hex prefix of sha256(raw_url).

    Example:
        >>> generate_shortcode('https://bar.com')
        '23d97719'
    """
    if not isinstance(raw_url, str):
        raise TypeError(f'URL must be of type string (given type: {type(raw_url)}).')
    if not 0 < length <= 64:
        raise ValueError(f'Length must be between 1 and 64 (given value: {length}).')

    return hashlib.sha256(raw_url.encode('utf-8')).hexdigest()[:length]
