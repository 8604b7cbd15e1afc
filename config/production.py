import os

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

FORECAST_FUTURE_DAYS = int(os.getenv("FORECAST_FUTURE_DAYS", "7"))
FORECAST_MAX_FUTURE_DAYS = int(os.getenv("FORECAST_MAX_FUTURE_DAYS", "90"))

EXPORT_PREFIX = os.getenv("EXPORT_PREFIX", "timetrack-export")
