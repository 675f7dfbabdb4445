# Settings for stringview-perf-tester.py

import logging

warmup = 100
runs = 1000
log_level = logging.INFO

# Optional TOML file with extra cases, e.g.
#   [cases.long_csv]
#   text = "1,2,3,4,5"
cases_path = None
