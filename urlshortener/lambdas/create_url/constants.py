# Structured log event codes
INVALID_JSON = 'INVALID_JSON'
MISSING_URL = 'MISSING_URL'
INVALID_URL = 'INVALID_URL'
STORAGE_UNAVAILABLE = 'STORAGE_UNAVAILABLE'
SHORT_URL_CREATED = 'SHORT_URL_CREATED'
