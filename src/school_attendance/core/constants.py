"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
DEFAULT_PAGE_LIMIT = 20
MAX_PAGE_LIMIT = 100

DEFAULT_RADIUS_METERS = 100
MIN_RADIUS_METERS = 10
MAX_RADIUS_METERS = 10000
EARTH_RADIUS_METERS = 6_371_000

# Default school hours: 1 = Monday ... 7 = Sunday.
MIN_DAY_OF_WEEK = 1
MAX_DAY_OF_WEEK = 7

SPECIAL_DAY_NAME_MAX = 120
SPECIAL_DAY_NOTE_MAX = 500

EXPORT_BATCH_SIZE = 500
