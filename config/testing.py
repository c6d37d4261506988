import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "time_entry_test_db"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

BATCH_CONCURRENCY_LIMIT = 5
RETRY_MAX_RETRIES = 2
RETRY_BASE_DELAY = 0.0
RETRY_MAX_DELAY = 0.0

AUTO_INIT_DB = False
