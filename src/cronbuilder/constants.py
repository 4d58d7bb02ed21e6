"""Marker characters used in rendered cron expressions."""

EVERY = "*"
NO_DESIGNATE = "?"
LAST = "L"
WORKDAY = "W"

RANGE_SEPARATOR = "-"
STEP_SEPARATOR = "/"
NTH_SEPARATOR = "#"
LIST_SEPARATOR = ","

# Highest occurrence accepted for "nth weekday of the month"
MAX_WEEKDAY_OCCURRENCE = 4
