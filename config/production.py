import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "control_horari"),
}

SITE = {
    "name": os.getenv("SITE_NAME", "Obra Tarragona"),
    "latitude": float(os.getenv("SITE_LAT", "41.1189")),
    "longitude": float(os.getenv("SITE_LNG", "1.2445")),
    "radius_m": float(os.getenv("SITE_RADIUS_M", "500")),
}

ADMIN_NAME = os.getenv("ADMIN_NAME", "Albert")
ADMIN_PIN = os.getenv("ADMIN_PIN", "9999")

SHEETS_WEBHOOK_URL = os.getenv("SHEETS_WEBHOOK_URL", "")
SYNC_TIMEOUT_SECONDS = float(os.getenv("SYNC_TIMEOUT_SECONDS", "5"))

GEO_TIMEOUT_SECONDS = int(os.getenv("GEO_TIMEOUT_SECONDS", "8"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
