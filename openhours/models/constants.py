"""Constants for openhours.

This module centralizes the literal layouts and limits used by the parser.
"""


# Shorthand for "always open"
ALWAYS_OPEN_LAYOUT = "24/7"
ALWAYS_OPEN_EXPANSION = "Mo-Su 00:00-23:59"

# Appended to layouts that name days but no times
DEFAULT_DAY_RANGE = "00:00-23:59"

# End-of-day, used when a closing edge is written as 00:00 or 24:00
END_OF_DAY_HOUR = 23
END_OF_DAY_MINUTE = 59

# Digits in an HH or MM field
DIGITS_PER_FIELD = 2

# Characters with meaning to the scanner
TIME_SEPARATOR = ":"
RANGE_INDICATOR = "-"
