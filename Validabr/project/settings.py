import os
from pathlib import Path
from dotenv import load_dotenv


BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "change-me")
# Boolean case-insensitive: aceita true/True/1/yes/on
DEBUG = os.getenv("DJANGO_DEBUG", "False").lower() in ("1", "true", "yes", "on")
ALLOWED_HOSTS = [h.strip() for h in os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1").split(",") if h.strip()]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    # Third-party
    "rest_framework",
    # Local apps
    "core",
    "brazil",
    "binding",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {},
    },
]

# Sem persistência: nenhum banco configurado
DATABASES = {}


def _min_occurrences(name: str, default: str = "1") -> int:
    return int(os.getenv(name, default))


# Complexidade de senha; -1 desliga a regra
AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {
        "NAME": "core.password.CapitalLettersValidator",
        "OPTIONS": {"min_occurrences": _min_occurrences("PASSWORD_MIN_CAPITAL_LETTERS")},
    },
    {
        "NAME": "core.password.LowerCaseLettersValidator",
        "OPTIONS": {"min_occurrences": _min_occurrences("PASSWORD_MIN_LOWER_CASE_LETTERS")},
    },
    {
        "NAME": "core.password.DigitsValidator",
        "OPTIONS": {"min_occurrences": _min_occurrences("PASSWORD_MIN_DIGITS")},
    },
]

LANGUAGE_CODE = os.getenv("DJANGO_LANGUAGE_CODE", "pt-br")
# Aceita DJANGO_TIME_ZONE ou TIME_ZONE
TIME_ZONE = os.getenv("DJANGO_TIME_ZONE", os.getenv("TIME_ZONE", "America/Sao_Paulo"))
USE_I18N = True
USE_TZ = True

REST_FRAMEWORK = {
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [],
}

LOG_LEVEL = os.getenv("DJANGO_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "root": {"handlers": ["console"], "level": "WARNING"},
    "loggers": {
        "core": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "binding": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
}
