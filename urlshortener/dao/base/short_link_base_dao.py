"""Abstract base class for ShortLink data access objects (DAOs).

This class establishes a consistent contract for all ShortLink DAO implementations,
regardless of the underlying storage mechanism (e.g., DynamoDB, Redis).

Responsibilities:
    - Provide an interface for upserting, retrieving and scanning ShortLinkModel objects.
    - Standardize error handling across multiple data store implementations.
    - Enforce a consistent API for use by the core components.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from urlshortener.models import ShortLinkModel
        >>> from urlshortener.dao.dynamodb import ShortLinkDynamoDBDAO

        >>> dao = ShortLinkDynamoDBDAO(table_name='links')
        >>> dao.put(ShortLinkModel.new(target='https://foo.com', shortcode='a9a9b569'))

        >>> retrieved = dao.get('a9a9b569')
        >>> print(retrieved.target)
        https://foo.com
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from urlshortener.models import ShortLinkModel


class ShortLinkBaseDAO(ABC):
    """Interface for ShortLink data access objects (DAOs).

    Methods:
        put(short_link: ShortLinkModel, **kwargs) -> ShortLinkBaseDAO:
            Unconditionally write a record (create or overwrite).
            Raises DataStoreError on connection or write failure.

        get(shortcode: str, **kwargs) -> ShortLinkModel:
            Retrieve a record by short code.
            Raises ShortLinkNotFoundError if the entry does not exist.
            Raises DataStoreError on connection or read failure.

        scan(**kwargs) -> Iterator[ShortLinkModel]:
            Iterate over every stored record, expired-but-unpurged ones included.
            Raises DataStoreError on connection or read failure.

    NOTE:
        - Records expire through the store's own TTL mechanism. The DAO does not
          provide an interface to manually delete entries.
        - `put` is last-writer-wins. Concurrent read-modify-write cycles on the
          same short code may lose updates.
    """

    @abstractmethod
    def put(self, short_link: ShortLinkModel, **kwargs) -> 'ShortLinkBaseDAO':
        """Upsert a ShortLinkModel into the data store.

        Args:
            short_link (ShortLinkModel):
                The record to be written. Any existing record with the same
                short code is overwritten.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortLinkBaseDAO: self (for method chaining)

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get(self, shortcode: str, **kwargs) -> ShortLinkModel:
        """Retrieve a ShortLinkModel from the data store by its short code.

        Raises:
            ShortLinkNotFoundError:
                If no record with the given short code exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def scan(self, **kwargs) -> Iterator[ShortLinkModel]:
        """Iterate over all records currently held by the data store.

        Records which cannot be decoded are skipped.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass
