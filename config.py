import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./bookkeeping.db")
    MIGRATION_DB_URI = data.get("MIGRATION_DB_URI", "sqlite:///./bookkeeping.db")
    API_PREFIX = data.get("API_PREFIX", "")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    AUTH_DISABLED = bool(data.get("AUTH_DISABLED", False))
    DEFAULT_USER_ID = data.get("DEFAULT_USER_ID", "local_user")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    ENABLE_SENTRY = data.get("ENABLE_SENTRY", 0)
    DSN_SENTRY = data.get("DSN_SENTRY", "")
    SENTRY_ENVIRONMENT = data.get("SENTRY_ENVIRONMENT", "dev")

    # Document numbering
    SALES_NUMBER_PREFIX = data.get("SALES_NUMBER_PREFIX", "INV")
    PURCHASES_NUMBER_PREFIX = data.get("PURCHASES_NUMBER_PREFIX", "PO")
    DOCUMENT_NUMBER_PAD_WIDTH = data.get("DOCUMENT_NUMBER_PAD_WIDTH", 3)
    NUMBERING_MAX_ATTEMPTS = data.get("NUMBERING_MAX_ATTEMPTS", 3)  # Retries on unique-index collision

    # Line item tax rates (percent)
    ALLOWED_TAX_RATES = data.get("ALLOWED_TAX_RATES", [0, 5, 12, 18, 28])

    # Derived-field reconciliation worker
    RECONCILIATION_ENABLED = bool(data.get("RECONCILIATION_ENABLED", True))
    RECONCILIATION_INTERVAL_SECONDS = data.get("RECONCILIATION_INTERVAL_SECONDS", 86400)  # Daily
    RECONCILIATION_REPAIR = bool(data.get("RECONCILIATION_REPAIR", False))
    RECONCILIATION_NOTIFICATION_WEBHOOK = data.get("RECONCILIATION_NOTIFICATION_WEBHOOK", None)
