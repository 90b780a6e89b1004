import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _as_bool(value):
    return str(value).lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Settings read from the environment; every key has a default."""

    MONGODB_URI = os.getenv('MONGODB_URI', 'mongodb://localhost:27017/student-management-app')
    DATABASE_NAME = os.getenv('DATABASE_NAME', '')
    MONGO_TIMEOUT_MS = int(os.getenv('MONGO_TIMEOUT_MS', 5000))

    PORT = int(os.getenv('PORT', 5000))
    APP_ENV = os.getenv('APP_ENV', 'development')
    DEBUG = _as_bool(os.getenv('DEBUG', 'False'))

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')

    FRONTEND_DIR = os.getenv('FRONTEND_DIR', str(BASE_DIR / 'frontend'))
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')


def cors_origins(value):
    """Split a comma-separated origins setting; '*' stays a wildcard."""
    if not value or value.strip() == '*':
        return '*'
    return [origin.strip() for origin in value.split(',') if origin.strip()]
