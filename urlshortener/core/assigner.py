"""Code Assigner: turn a long URL into a stored short link.

Procedure:
    - Step 1: Validate the URL (http/https only)
    - Step 2: Derive the shortcode from sha256 of the raw URL
    - Step 3: Build a record which expires in one week
    - Step 4: Upsert the record (no check-and-set)
    - Step 5: Compose the short URL

Repeated submissions of the same URL yield the same shortcode and only
refresh the record's expiry, so duplicate deliveries are harmless.
"""

import logging
from datetime import datetime

from urlshortener.constants import Metric
from urlshortener.models import ShortLinkModel, CreatedShortLink
from urlshortener.dao.base import ShortLinkBaseDAO
from urlshortener.metrics import CloudWatchMetricsPublisher
from urlshortener.utils.helpers import get_short_url
from urlshortener.utils.shortener import validate_url, generate_shortcode


logger = logging.getLogger(__name__)


class CodeAssigner:
    def __init__(self, dao: ShortLinkBaseDAO, base_url: str, metrics: CloudWatchMetricsPublisher | None = None):
        self.dao = dao
        self.base_url = base_url
        self.metrics = metrics

    def create(self, raw_url: str, now: datetime | None = None) -> CreatedShortLink:
        """Create (or refresh) the short link for `raw_url`

        Raises:
            InvalidInputError: `raw_url` is empty, unparsable or not http(s).
            DataStoreError: the record could not be written.
        """
        target = validate_url(raw_url)
        shortcode = generate_shortcode(target)

        short_link = ShortLinkModel.new(target=target, shortcode=shortcode, now=now)
        self.dao.put(short_link=short_link)
        logger.debug('Stored short link record.', extra={'shortcode': shortcode, 'expiresAt': short_link.expires_at.isoformat()})

        if self.metrics is not None:
            self.metrics.emit(Metric.URLS_CREATED)

        return CreatedShortLink(
            shortcode=shortcode,
            short_url=get_short_url(shortcode, self.base_url),
            expires_at=short_link.expires_at,
        )
