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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./app.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))

    # Access tokens
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_TTL_MINUTES = int(data.get("JWT_TTL_MINUTES", 60))
    JWT_REFRESH_TTL_MINUTES = int(data.get("JWT_REFRESH_TTL_MINUTES", 20160))
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))

    # Email verification and password reset
    EMAIL_VERIFICATION_TTL_MINUTES = int(data.get("EMAIL_VERIFICATION_TTL_MINUTES", 60))
    PASSWORD_RESET_TTL_MINUTES = int(data.get("PASSWORD_RESET_TTL_MINUTES", 60))
    PASSWORD_RESET_HIDE_UNKNOWN_EMAIL = bool(
        data.get("PASSWORD_RESET_HIDE_UNKNOWN_EMAIL", False)
    )

    MAX_FAVOURITE_LOCATIONS = int(data.get("MAX_FAVOURITE_LOCATIONS", 5))

    # Links placed in outgoing emails
    APP_URL = data.get("APP_URL", "http://localhost:8000")
    FRONTEND_URL = data.get("FRONTEND_URL", "http://localhost:3000")

    # Mail delivery ("log" writes messages to the application log)
    MAIL_BACKEND = data.get("MAIL_BACKEND", "log")
    MAIL_FROM_ADDRESS = data.get("MAIL_FROM_ADDRESS", "noreply@example.com")
    MAIL_FROM_NAME = data.get("MAIL_FROM_NAME", "Weather App")
    SMTP_HOST = data.get("SMTP_HOST", "localhost")
    SMTP_PORT = int(data.get("SMTP_PORT", 587))
    SMTP_USERNAME = data.get("SMTP_USERNAME", "")
    SMTP_PASSWORD = data.get("SMTP_PASSWORD", "")
    SMTP_USE_TLS = bool(data.get("SMTP_USE_TLS", True))
