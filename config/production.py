import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTH_LATENCY_SECONDS = float(os.getenv("AUTH_LATENCY_SECONDS", "0"))
DATA_LATENCY_SECONDS = float(os.getenv("DATA_LATENCY_SECONDS", "0"))

SEED_MOCK_ATTENDANCE = bool(int(os.getenv("SEED_MOCK_ATTENDANCE", "1")))
MOCK_RANDOM_SEED = None

HISTORY_LIMIT = int(os.getenv("HISTORY_LIMIT", "5"))
