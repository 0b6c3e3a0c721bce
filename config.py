import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file)
else:
    data = dict()


class ApplicationConfig:
    APP_NAME = data.get("APP_NAME", "CarbonWise")
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./test.db")
    CREATE_TABLES_ON_STARTUP = bool(data.get("CREATE_TABLES_ON_STARTUP", True))
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")

    # Password reset flow
    RESET_STORE_BACKEND = data.get("RESET_STORE_BACKEND", "memory")
    CHALLENGE_TTL_SECONDS = int(data.get("CHALLENGE_TTL_SECONDS", 300))
    RESET_TOKEN_TTL_SECONDS = int(data.get("RESET_TOKEN_TTL_SECONDS", 600))
    PASSWORD_MIN_LENGTH = int(data.get("PASSWORD_MIN_LENGTH", 6))
    EXTERNAL_CALL_TIMEOUT_SECONDS = float(data.get("EXTERNAL_CALL_TIMEOUT_SECONDS", 10))

    # Notification channel
    NOTIFICATION_BACKEND = data.get("NOTIFICATION_BACKEND", "log")
    SMTP_HOST = data.get("SMTP_HOST", "smtp.gmail.com")
    SMTP_PORT = int(data.get("SMTP_PORT", 587))
    SMTP_USER = data.get("SMTP_USER", "")
    SMTP_PASSWORD = data.get("SMTP_PASSWORD", "")
    SMTP_FROM = data.get("SMTP_FROM", SMTP_USER)
