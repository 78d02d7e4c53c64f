from dotenv import load_dotenv
import os

load_dotenv()


def _csv(value):
    return [item.strip() for item in (value or "").split(",") if item.strip()]


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI", "sqlite:///calorie_tracker.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Drop idle connections before use instead of failing the request
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 300,
    }

    # "base64" keeps the reversible user-id credential, "jwt" signs it with SECRET_KEY
    AUTH_SCHEME = os.getenv("AUTH_SCHEME", "base64")
    TOKEN_TTL_HOURS = int(os.getenv("TOKEN_TTL_HOURS", "12"))

    CORS_ORIGINS = _csv(os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:8080"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    HISTORY_DEFAULT_DAYS = int(os.getenv("HISTORY_DEFAULT_DAYS", "30"))
    HISTORY_MAX_DAYS = int(os.getenv("HISTORY_MAX_DAYS", "60"))


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    LOG_LEVEL = "WARNING"
