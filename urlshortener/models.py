from dataclasses import dataclass, replace
from datetime import datetime, timedelta, UTC

from urlshortener.constants import TTL


# fmt: off
@dataclass(frozen=True)
class ShortLinkModel:
    target: str                 # Original long URL (http/https)
    shortcode: str              # 8 lowercase hex characters derived from target
    created_at: datetime        # Creation time (aware, UTC, whole seconds)
    expires_at: datetime        # Absolute expiry, created_at + 1 week at creation
    clicks: int = 0             # Approximate access counter
# fmt: on

    @classmethod
    def new(cls, target: str, shortcode: str, now: datetime | None = None) -> 'ShortLinkModel':
        """Build a fresh record which expires one week from `now`.

        Timestamps are truncated to whole seconds so that the persisted epoch
        expiry and RFC 3339 creation time read back to identical values.
        """
        created_at = (now or datetime.now(UTC)).astimezone(UTC).replace(microsecond=0)
        return cls(
            target=target,
            shortcode=shortcode,
            created_at=created_at,
            expires_at=created_at + timedelta(seconds=TTL.ONE_WEEK),
            clicks=0,
        )

    def is_expired(self, now: datetime | None = None) -> bool:
        now = now or datetime.now(UTC)
        return int(now.timestamp()) > int(self.expires_at.timestamp())

    def hit(self) -> 'ShortLinkModel':
        return replace(self, clicks=self.clicks + 1)


@dataclass(frozen=True)
class CreatedShortLink:
    shortcode: str
    short_url: str
    expires_at: datetime


@dataclass(frozen=True)
class RedirectTarget:
    shortcode: str
    location: str
    status_code: int = 301


@dataclass(frozen=True)
class UsageReport:
    created: int = 0
    accessed: int = 0
    active: int = 0
    error: str | None = None

    @property
    def unique_visitors(self) -> int:
        # No visitor identity is tracked, this mirrors `accessed`
        return self.accessed
