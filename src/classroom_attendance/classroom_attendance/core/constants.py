"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ROOM_CODE_LENGTH = 6
ROOM_CODE_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"

SESSION_USER_KEY = "user"

DEFAULT_HISTORY_LIMIT = 5

MOCK_ATTENDANCE_DAYS = 10
DEMO_PASSWORD = "password123"
