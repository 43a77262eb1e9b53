SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTH_LATENCY_SECONDS = 0.0
DATA_LATENCY_SECONDS = 0.0

# Tests build their own data on top of the demo users and rooms
SEED_MOCK_ATTENDANCE = False
MOCK_RANDOM_SEED = 1234

HISTORY_LIMIT = 5
