import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "control_horari_test"),
}

SITE = {
    "name": "Obra Test",
    "latitude": 41.1189,
    "longitude": 1.2445,
    "radius_m": 500.0,
}

ADMIN_NAME = "Albert"
ADMIN_PIN = "9999"

SHEETS_WEBHOOK_URL = ""
SYNC_TIMEOUT_SECONDS = 1.0

GEO_TIMEOUT_SECONDS = 8

LOG_LEVEL = "WARNING"
DEBUG = False
TESTING = True

AUTO_INIT_DB = False
