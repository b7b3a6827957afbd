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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./test.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    CONSOLE_TOKEN_TTL_MINUTES = int(data.get("CONSOLE_TOKEN_TTL_MINUTES", 720))
    CONSOLE_COOKIE_NAME = data.get("CONSOLE_COOKIE_NAME", "primeauth_session")
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "test-admin-key-12345")
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
    SESSION_TTL_HOURS = int(data.get("SESSION_TTL_HOURS", 24))
    ENABLE_SESSION_SWEEPER = bool(data.get("ENABLE_SESSION_SWEEPER", False))
    SESSION_SWEEP_INTERVAL_SECONDS = int(data.get("SESSION_SWEEP_INTERVAL_SECONDS", 300))
    STORE_TIMEOUT_SECONDS = float(data.get("STORE_TIMEOUT_SECONDS", 10))
    WEBHOOK_TIMEOUT_SECONDS = float(data.get("WEBHOOK_TIMEOUT_SECONDS", 10))
    WEBHOOK_MAX_RETRIES = int(data.get("WEBHOOK_MAX_RETRIES", 2))
    WEBHOOK_BACKOFF_SECONDS = float(data.get("WEBHOOK_BACKOFF_SECONDS", 0.5))
    TRUST_PROXY_HEADERS = bool(data.get("TRUST_PROXY_HEADERS", False))
