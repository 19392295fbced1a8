"""
Project-wide configuration constants.
"""

# Seasons to harvest (inclusive start years)
FIRST_START_YEAR = 2014
LAST_START_YEAR = 2024

# Season listed at the root salary page instead of a year-suffixed path
CURRENT_START_YEAR = 2024

# HoopsHype salary listings
HOOPSHYPE_PLAYERS_URL = "https://hoopshype.com/salaries/players/"

# Output and request defaults
DEFAULT_OUTPUT_PATHS = ("data/raw/nba_salaries.xlsx",)
REQUEST_TIMEOUT_SEC = 30.0
REQUEST_DELAY_SEC = 1.0
REQUEST_RETRIES = 0
