"""Django settings for the pricing project.

Values come from the environment so the same module serves tests and
deployments.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "insecure-dev-key")
DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() == "true"
ALLOWED_HOSTS: list[str] = []

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "pricing",
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("PRICING_DB_PATH", str(BASE_DIR / "db.sqlite3")),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

USE_TZ = True
TIME_ZONE = "UTC"

PRICING = {
    "FALLBACK_HOURLY_CENTS": 500,
    "DEFAULT_TIMEZONE": "UTC",
    "SERVICE_FEE_CENTS": 100,
    "PLATFORM_FEE_PERCENT": 10,
    "MINIMUM_CHARGE_CENTS": 50,
    "MAX_BOOKING_DURATION_HOURS": 24,
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "loggers": {
        "pricing": {
            "handlers": ["console"],
            "level": os.environ.get("PRICING_LOG_LEVEL", "INFO"),
        },
    },
}
