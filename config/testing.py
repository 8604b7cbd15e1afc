DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"

FORECAST_FUTURE_DAYS = 7
FORECAST_MAX_FUTURE_DAYS = 30

EXPORT_PREFIX = "timetrack-export"
