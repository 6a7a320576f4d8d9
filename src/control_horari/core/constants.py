"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EARTH_RADIUS_M = 6_371_000
COORDINATE_PRECISION = 4
DEFAULT_SITE_RADIUS_M = 500
DEFAULT_GEO_TIMEOUT_SECONDS = 8

NO_LOCATION_LABEL = "Sense ubicació"

PIN_LENGTH = 4
MIN_NAME_LENGTH = 3
DEFAULT_ADMIN_PIN = "9999"
DEFAULT_ADMIN_NAME = "Albert"
ADMIN_USER_ID = "admin"

DEFAULT_RECENT_MOVEMENTS = 10
DEFAULT_SYNC_TIMEOUT_SECONDS = 5
