"""
config.py — Constants & App Configuration
==========================================
Central registry for the numbers the whole app agrees on, plus the
Flask configuration object.

Domain constants are plain module globals so the data layer and the
algorithms can import them without touching Flask.  `DefaultConfig` is
loaded by `main.py` via `app.config.from_object()` and may be overridden
with SORTVIZ_* environment variables (`app.config.from_prefixed_env`).
"""

# ---------------------------------------------------------------------------
# Sequence
# ---------------------------------------------------------------------------
VALUE_MIN = 5           # smallest generated value
VALUE_MAX = 100         # largest generated value (also the 100% bar height)

LENGTH_MIN = 10         # array length at the lowest pacing setting
LENGTH_MAX = 80         # array length at the highest pacing setting

# ---------------------------------------------------------------------------
# Pacing  (one slider drives both size and speed)
# ---------------------------------------------------------------------------
PACING_MIN     = 1
PACING_MAX     = 100
PACING_DEFAULT = 50

DELAY_MAX_MS = 240      # delay at PACING_MIN (slowest)
DELAY_MIN_MS = 3        # delay at PACING_MAX (fastest)

# ---------------------------------------------------------------------------
# Bar geometry
# ---------------------------------------------------------------------------
BAR_GAP                 = 6     # px between bars
MIN_BAR_WIDTH           = 2     # px, bars never shrink below this
DEFAULT_CONTAINER_WIDTH = 900   # px, used until the browser reports a width


class DefaultConfig:
    HOST            = "127.0.0.1"
    PORT            = 5000
    DEBUG           = False
    LOG_LEVEL       = "INFO"
    LOG_FILE        = None
    PACING_DEFAULT  = PACING_DEFAULT
    CONTAINER_WIDTH = DEFAULT_CONTAINER_WIDTH
