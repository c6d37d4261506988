"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Statutory break table: (upper bound of shift minutes, required break minutes)
BREAK_THRESHOLDS = (
    (300, 0),
    (540, 30),
    (600, 45),
)
MAX_REQUIRED_BREAK_MINUTES = 60

# Fixed break placement: (offset from shift start, duration, required minutes that trigger it)
BREAK_LAYOUT = (
    (300, 30, 30),
    (570, 15, 45),
    (615, 15, 60),
)

# Night window is [23:00, 24:00) and [00:00, 06:00)
NIGHT_START_HOUR = 23
NIGHT_END_HOUR = 6

SUNDAY_WEEKDAY = 6  # datetime.weekday(): Monday=0 .. Sunday=6

NATIONWIDE_REGION = "ALL"

DEFAULT_CONCURRENCY_LIMIT = 5
DEFAULT_MAX_RETRIES = 3
DEFAULT_BASE_DELAY_SECONDS = 0.5
DEFAULT_MAX_DELAY_SECONDS = 5.0
JITTER_RATIO = 0.3

ISO_MINUTE_FORMAT = "%Y-%m-%dT%H:%M"
DAY_FORMAT = "%Y-%m-%d"
