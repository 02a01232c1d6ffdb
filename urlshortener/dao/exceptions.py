from urlshortener.exceptions import UrlShortenerError


class DAOError(UrlShortenerError):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class ShortLinkNotFoundError(DAOError):
    """Raised when a ShortLinkModel is not found in the data store."""

    error_code = 'dao:short_link_not_found_error'


class ShortLinkExpiredError(ShortLinkNotFoundError):
    """Raised when a ShortLinkModel is still stored but already past its expiry."""

    error_code = 'dao:short_link_expired_error'


class DataStoreError(DAOError):
    """Raised when the data store encounters an error.

    Examples include connection issues, timeouts, throttling and rejected requests.
    """

    error_code = 'dao:data_store_error'


class MalformedRecordError(DataStoreError):
    """Raised when a stored record cannot be decoded into a ShortLinkModel."""

    error_code = 'dao:malformed_record_error'
