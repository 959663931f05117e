"""Default values for storage location, price source, and display."""

# ---------------------------------------------------------------------------
# Storage
# ---------------------------------------------------------------------------
APP_NAME = "stockfolio"

STORAGE_DEFAULTS = {
    "data_dir": "~/.stockfolio",
    "file_name": "stockfolio.dat",
}

# Date text format used on input, display, and in the ledger file (dd/mm/yy)
DATE_FORMAT = "%d/%m/%y"

# ---------------------------------------------------------------------------
# Finance API (Yahoo Finance REST mirror, keyed via X-API-KEY)
# ---------------------------------------------------------------------------
FINANCE_API_DEFAULTS = {
    "base_url": "https://yfapi.net",
    "timeout": 15.0,
    "region": "US",
    "lang": "en",
}

# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------
DISPLAY_DEFAULTS = {
    "decimals": 2,
    "color": True,
    "placeholder": "n/a",
}
