import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Mock stores pause before each action to mimic a network round trip
AUTH_LATENCY_SECONDS = float(os.getenv("AUTH_LATENCY_SECONDS", "0.8"))
DATA_LATENCY_SECONDS = float(os.getenv("DATA_LATENCY_SECONDS", "0.5"))

# Fill the seed rooms with ten days of random demo attendance
SEED_MOCK_ATTENDANCE = bool(int(os.getenv("SEED_MOCK_ATTENDANCE", "1")))
MOCK_RANDOM_SEED = int(os.environ["MOCK_RANDOM_SEED"]) if os.getenv("MOCK_RANDOM_SEED") else None

HISTORY_LIMIT = int(os.getenv("HISTORY_LIMIT", "5"))
