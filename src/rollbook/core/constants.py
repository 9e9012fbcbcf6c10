"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

STAFF_ACCOUNTS_KEY = "staff_accounts"
CURRENT_USER_KEY = "currentUser"
ROSTER_KEY_PREFIX = "roster"
ATTENDANCE_KEY_PREFIX = "attendance"

DEFAULT_RECENT_LIMIT = 5

# ARGB-less hex colors used by the Excel report
HEADER_FILL_COLOR = "E6F3FF"
STATUS_FILL_COLORS = {
    "P": "22C55E",
    "AB": "EF4444",
    "OD": "F59E0B",
}
STATUS_FONT_COLOR = "FFFFFF"
MAX_COLUMN_WIDTH = 20

EXPORT_FAILED_MESSAGE = "Failed to export Excel report. Please try again."
