"""Paramètres Django du projet tenderdesk.

La configuration vient de l'environnement (éventuellement complété par un
fichier `.env` à la racine). Seule `DATABASE_URL` est obligatoire : sans elle,
ou si elle est illisible, le processus démarre quand même et chaque requête
reçoit une erreur de configuration (`DatabaseConfigurationMiddleware`).
"""

import os
from pathlib import Path

import dj_database_url
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")


def env_bool(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "django-insecure-tenderdesk-dev-key")
DEBUG = env_bool("DJANGO_DEBUG", False)
ALLOWED_HOSTS = [h.strip() for h in os.getenv("DJANGO_ALLOWED_HOSTS", "*").split(",") if h.strip()]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "tenders",
    "tasks",
]

MIDDLEWARE = [
    "core.middleware.RequestLoggingMiddleware",
    "core.middleware.DatabaseConfigurationMiddleware",
    "core.middleware.CorsHeadersMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "core.urls"
WSGI_APPLICATION = "core.wsgi.application"
APPEND_SLASH = False

# Base de données : une seule URL de connexion (DATABASE_URL)
DATABASE_URL = os.getenv("DATABASE_URL") or None
DATABASE_CONN_MAX_AGE = int(os.getenv("DATABASE_CONN_MAX_AGE", "60"))
DATABASE_CONNECT_TIMEOUT = int(os.getenv("DATABASE_CONNECT_TIMEOUT", "10"))


def database_config(url):
    """Construit l'entrée DATABASES de Django à partir d'une URL de connexion."""
    config = dj_database_url.parse(
        url,
        conn_max_age=DATABASE_CONN_MAX_AGE,
        conn_health_checks=True,
        ssl_require=env_bool("DATABASE_SSL_REQUIRE", False),
    )
    if "postgresql" in config["ENGINE"]:
        config.setdefault("OPTIONS", {})["connect_timeout"] = DATABASE_CONNECT_TIMEOUT
    return config


def databases_from_url(url):
    """Retourne `(DATABASES, erreur)`.

    Une URL absente ou illisible donne un DATABASES vide ; l'erreur de
    lecture est gardée pour `DatabaseConfigurationMiddleware`.
    """
    if not url:
        return {}, None
    try:
        return {"default": database_config(url)}, None
    except (ValueError, KeyError) as exc:
        return {}, f"Invalid DATABASE_URL: {exc}"


DATABASES, DATABASE_CONFIG_ERROR = databases_from_url(DATABASE_URL)

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
        "core.parsers.AnyContentJSONParser",
    ],
    "DEFAULT_PAGINATION_CLASS": None,
    "UNAUTHENTICATED_USER": None,
    "EXCEPTION_HANDLER": "core.exceptions.api_exception_handler",
}

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
}

LOGS_DIR = BASE_DIR / "logs"
LOGS_DIR.mkdir(exist_ok=True)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
        "file": {
            "class": "logging.FileHandler",
            "filename": str(LOGS_DIR / "tenderdesk.log"),
            "formatter": "simple",
            "encoding": "utf-8",
        },
    },
    "loggers": {
        "core": {"handlers": ["console", "file"], "level": LOG_LEVEL, "propagate": False},
        "tenders": {"handlers": ["console", "file"], "level": LOG_LEVEL, "propagate": False},
        "tasks": {"handlers": ["console", "file"], "level": LOG_LEVEL, "propagate": False},
        "api_client": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
}
