"""Application-wide constants.

These are fixed values that don't change between environments.
For configurable values, see config.py Settings.
"""

# ─────────────────────────────────────────────────────────────
# Fetch window
# ─────────────────────────────────────────────────────────────
FETCH_WINDOW_DAYS = 14  # today through today + 14 calendar days
MAX_BUSINESS_DAYS = 10  # two trading weeks shown on the board

# ─────────────────────────────────────────────────────────────
# Card text
# ─────────────────────────────────────────────────────────────
HEADER_TITLE = "The Most Anticipated Earnings Releases"
HEADER_SUBTITLE_PREFIX = "for the period beginning"
NOTE_TEXT = "(only showing confirmed release dates)"
SECTION_SEPARATOR = "---"
EPS_SUBTITLE_PREFIX = "Est. EPS: $"

# Display-slot labels, cycled by position rather than the real weekday
DAY_LABELS: tuple[str, ...] = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday")

# ─────────────────────────────────────────────────────────────
# Defaults (used as defaults in Settings)
# ─────────────────────────────────────────────────────────────
DEFAULT_FMP_API_URL = "https://financialmodelingprep.com/api/v3"
DEFAULT_REFRESH_CRON = "0 0 * * *"  # daily at midnight UTC

LIVENESS_TEXT = "Earnings Calendar API is running. Access /api/earnings for the data."
