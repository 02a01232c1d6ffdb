import threading
from collections.abc import Iterator

import pytest
from pytest import MonkeyPatch

from urlshortener.constants import ENV
from urlshortener.models import ShortLinkModel
from urlshortener.dao.base import ShortLinkBaseDAO
from urlshortener.dao.exceptions import ShortLinkNotFoundError
from urlshortener.dao.serialization import to_record, from_record


class InMemoryShortLinkDAO(ShortLinkBaseDAO):
    """Dictionary-backed DAO which stores records in their persisted layout.

    Each get/put is atomic on its own (like a single DynamoDB request), but a
    get followed by a put is not, so lost updates remain possible.
    """

    def __init__(self):
        self.records = {}
        self._lock = threading.Lock()

    def put(self, short_link: ShortLinkModel, **kwargs) -> 'InMemoryShortLinkDAO':
        with self._lock:
            self.records[short_link.shortcode] = to_record(short_link)
        return self

    def get(self, shortcode: str, **kwargs) -> ShortLinkModel:
        with self._lock:
            record = self.records.get(shortcode)
        if record is None:
            raise ShortLinkNotFoundError(f"Short URL with code '{shortcode}' not found.")
        return from_record(dict(record))

    def scan(self, **kwargs) -> Iterator[ShortLinkModel]:
        with self._lock:
            records = [dict(r) for r in self.records.values()]
        for record in records:
            yield from_record(record)


@pytest.fixture
def memory_dao() -> InMemoryShortLinkDAO:
    return InMemoryShortLinkDAO()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: MonkeyPatch) -> None:
    """Keep tests independent of the developer's shell environment."""
    for group in (ENV.App, ENV.Store, ENV.DynamoDB, ENV.Redis, ENV.Metrics, ENV.LocalStack):
        for name in group:
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv(ENV.App.APP_ENV, 'test')
    monkeypatch.setenv('AWS_DEFAULT_REGION', 'us-east-1')
