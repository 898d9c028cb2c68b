import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_payroll"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

PAYSLIP_DIR = os.getenv("PAYSLIP_DIR", "/var/lib/hr_payroll/payslips")
PAYSLIP_URL_PREFIX = os.getenv("PAYSLIP_URL_PREFIX", "/payslips")

PAYOUT_LOCK_TIMEOUT = int(os.getenv("PAYOUT_LOCK_TIMEOUT", "10"))
