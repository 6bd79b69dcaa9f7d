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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./session_risk.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    ACCESS_TOKEN_EXPIRE_MINUTES = int(data.get("ACCESS_TOKEN_EXPIRE_MINUTES", 60))

    # Risk evaluator
    MAX_ALLOWED_SESSIONS = int(data.get("MAX_ALLOWED_SESSIONS", 2))
    RISK_DISPLAY_THRESHOLD_PERCENT = float(data.get("RISK_DISPLAY_THRESHOLD_PERCENT", 70.0))
    RECENT_EVENTS_DEFAULT_LIMIT = int(data.get("RECENT_EVENTS_DEFAULT_LIMIT", 10))

    # Bootstrap admin, skipped while ADMIN_PASSWORD is unset
    ADMIN_USERNAME = data.get("ADMIN_USERNAME", "admin")
    ADMIN_PASSWORD = data.get("ADMIN_PASSWORD")
