from urlshortener.dao.base import ShortLinkBaseDAO
from urlshortener.dao.factory import build_short_link_dao


__all__ = [
    'ShortLinkBaseDAO',
    'build_short_link_dao',
]
