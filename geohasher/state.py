"""
Fixed configuration shared across the geohasher package.

Import this module and read attributes directly. Nothing here is mutated at
runtime; per-run settings for the batch tool live in ``BatchConfig``.
"""

# ---------------------------------------------------------------------------
# Geohash encoding
# ---------------------------------------------------------------------------

BASE32_ALPHABET = "0123456789bcdefghjkmnpqrstuvwxyz"
BITS_PER_CHARACTER = 5

MAX_CHARACTER_PRECISION = 12
DEFAULT_CHARACTER_PRECISION = 4

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

# ---------------------------------------------------------------------------
# Text adapter
# ---------------------------------------------------------------------------

ERROR_HASH_VALUE = "error"

# ---------------------------------------------------------------------------
# Query function
# ---------------------------------------------------------------------------

FUNCTION_NAME = "geohash"
STRING_TYPE = "string"

# ---------------------------------------------------------------------------
# Batch tool defaults
# ---------------------------------------------------------------------------

DEFAULT_DELIMITER = ","
DEFAULT_LAT_COLUMN = "lat"
DEFAULT_LON_COLUMN = "lon"
DEFAULT_OUTPUT_COLUMN = "geohash"
