import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_payroll"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

PAYSLIP_DIR = os.getenv("PAYSLIP_DIR", "payslips")
PAYSLIP_URL_PREFIX = os.getenv("PAYSLIP_URL_PREFIX", "/payslips")

# Seconds to wait for the per-period generation lock
PAYOUT_LOCK_TIMEOUT = int(os.getenv("PAYOUT_LOCK_TIMEOUT", "10"))
