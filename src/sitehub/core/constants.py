"""Application-wide constants.

This module defines constants used throughout the application
to avoid magic numbers and ensure consistency.
"""

# Slug generation
MAX_SLUG_LENGTH = 63

# String field lengths
MAX_NAME_LENGTH = 255
MAX_URL_LENGTH = 512
MAX_COLOR_LENGTH = 32

# Pagination defaults
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
MAX_OFFSET = 10000  # Deepest row a listing query may skip to

# Sites
DEFAULT_SITE_SLUG = "sja-utama"
DEFAULT_PRIMARY_COLOR = "#0f4c81"
SITE_COOKIE_MAX_AGE_SECONDS = 60 * 60 * 24 * 30  # 30 days
MAX_NAV_CATEGORIES = 5

# Navigation labels
NAV_HOME_LABEL = "BERANDA"
NAV_SEARCH_LABEL = "PENCARIAN"
ABOUT_TEXT_FALLBACK = "Informasi terbaru dari {site_name}"
