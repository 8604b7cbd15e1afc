"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EWMA_ALPHA = 0.35

HISTORY_DAYS = 30
DEFAULT_FUTURE_DAYS = 7
MIN_SAME_WEEKDAY_SAMPLES = 3
VARIANCE_GROWTH_PER_DAY = 0.15

DEFAULT_WORK_HOURS = 8
DEFAULT_BREAK_MINUTES = 45
DEFAULT_DEPARTURE = "17:30"
DEFAULT_DEPARTURE_MINUTES = 17 * 60 + 30
DEFAULT_CLOCK_IN_MINUTES = 9 * 60

MINUTES_PER_DAY = 24 * 60
EMPTY_DURATION = "--:--"

MAX_FUTURE_DAYS = 90
EXPORT_PREFIX = "timetrack-export"
