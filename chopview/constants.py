import regex

# Extended grapheme clusters (UAX #29)
GRAPHEME_REGEX = regex.compile(r"\X")
# \s plus U+FEFF (byte order mark / zero width no-break space)
WHITESPACE_REGEX = regex.compile(r"[\s\ufeff]")

DIGITS = "0123456789"
DECIMAL_POINT = "."

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(module)s:%(funcName)s %(lineno)s] %(message)s"

# Perf probe defaults, overridden by config.py
DEFAULT_WARMUP = 100
DEFAULT_RUNS = 1000
