import os

from config import health_policy_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "enablement_db"),
}

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

HEALTH_POLICY = health_policy_from_env()
COVERAGE_DISPLAY_LIMIT = int(os.getenv("COVERAGE_DISPLAY_LIMIT", "50"))
REPORT_DISPLAY_LIMIT = int(os.getenv("REPORT_DISPLAY_LIMIT", "20"))
REMEDIATION_OPTIMISTIC_LOCKING = bool(int(os.getenv("REMEDIATION_OPTIMISTIC_LOCKING", "0")))
