"""
Design (config.py)
- Purpose: Centralize constants and configuration.
- Inputs: None.
- Outputs: Constants (seed rows, formatting precision, titles, palette, timings).
- Side effects: None.
- Thread-safety: N/A (read-only constants).
"""

# Bootstrap rows loaded into the store at startup: (name, price)
SEED_ENTRIES = [
    ("Calça Masculina 44", 159.0),
    ("Calça Masculina 42", 159.0),
    ("Calça Masculina 40", 159.0),
    ("Calça Masculina 39", 159.0),
    ("Calça Masculina 38", 159.0),
    ("Calça Masculina 37", 159.0),
    ("Calça Masculina 36", 159.0),
]

# Price shown with this many decimals (table and edit form)
PRICE_DECIMALS = 2

# Draft price for a brand new item; deliberately invalid so an untouched form fails validation
DEFAULT_PRICE = 0.0

WINDOW_TITLE = "Catalog Editor"
LIST_TITLE = "Items"
ADD_DIALOG_TITLE = "Add Item"
EDIT_DIALOG_TITLE = "Edit Item"

NAME_ERROR_TEXT = "Name is required"
PRICE_ERROR_TEXT = "Price must be a valid value"

# Palette
BG_COLOR = "#1e1e1e"
PANEL_COLOR = "#2b2b2b"
FG_COLOR = "#f0f0f0"
ERROR_COLOR = "#FF6A6A"
ADDED_COLOR = "#7CFC00"
UPDATED_COLOR = "#FFA500"

# How long a changed row stays highlighted in the list
HIGHLIGHT_MS = 1200

# Maximum number of log lines kept in the Logs panel (oldest trimmed)
LOG_MAX_LINES = 1000

ENABLE_NOTIFICATIONS = False
NOTIFICATION_TIMEOUT_SEC = 5

# Environment variable that may override the log level by name (e.g. DEBUG)
LOG_ENV_VAR = "CATALOG_EDITOR_LOG"
