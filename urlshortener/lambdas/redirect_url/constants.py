# Structured log event codes
MISSING_SHORTCODE = 'MISSING_SHORTCODE'
SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'
SHORT_URL_EXPIRED = 'SHORT_URL_EXPIRED'
STORAGE_UNAVAILABLE = 'STORAGE_UNAVAILABLE'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
