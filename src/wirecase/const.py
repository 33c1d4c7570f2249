"""Constants for the wirecase package."""

__version__ = "0.1.0"

# Wire instants use the JavaScript ``Date.toISOString()`` shape:
# UTC, millisecond precision, ``Z`` suffix.
UTC_DESIGNATOR = "Z"

# The Gregorian calendar repeats every 400 years.
GREGORIAN_CYCLE_YEARS = 400
