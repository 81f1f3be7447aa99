# config.py - wordhord settings
# Every value can be overridden from the environment.

import os

# ─── EXTRACTION ───────────────────────────────────────────────────────────────
MARKER_PREFIX = os.environ.get("WORDHORD_MARKER_PREFIX", "word_")
HTML_PARSER   = os.environ.get("WORDHORD_HTML_PARSER", "html.parser")

# ─── QUERIES ──────────────────────────────────────────────────────────────────
DEFAULT_LIMIT = 10
DEFINE_LIMIT  = 10

# ─── FETCHING ─────────────────────────────────────────────────────────────────
FETCH_TIMEOUT = float(os.environ.get("WORDHORD_FETCH_TIMEOUT", "15"))
USER_AGENT    = os.environ.get("WORDHORD_USER_AGENT", "wordhord/1.0")
HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
}

# ─── LOGGING ──────────────────────────────────────────────────────────────────
LOG_LEVEL   = os.environ.get("WORDHORD_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT  = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATEFMT = "%H:%M:%S"
