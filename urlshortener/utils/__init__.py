from urlshortener.utils.config import app_env, app_name, app_prefix, base_url, load_config
from urlshortener.utils.helpers import get_short_url, to_rfc3339, from_rfc3339, require_environment, guarantee_500_response
from urlshortener.utils.shortener import generate_shortcode, validate_url
from urlshortener.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'validate_url',
    'app_env',
    'app_name',
    'app_prefix',
    'base_url',
    'load_config',
    'get_short_url',
    'to_rfc3339',
    'from_rfc3339',
    'require_environment',
    'guarantee_500_response',
    'initialize_logging',
]
