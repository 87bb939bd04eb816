"""
Django settings for a site using the AdSense plugin.

For more information on this file, see
https://docs.djangoproject.com/en/4.2/topics/settings/

For the full list of settings and their values, see
https://docs.djangoproject.com/en/4.2/ref/settings/
"""
import logging
import os

import environ
from django.core.exceptions import ImproperlyConfigured

log = logging.getLogger(__name__)  # noqa

env = environ.Env()
try:
    env.read_env(env("ENV_FILE"))
except ImproperlyConfigured:
    log.info("Unable to read env file. Assuming environment is already set.")


# Build paths inside the project like this: os.path.join(BASE_DIR, ...)
BASE_DIR = os.path.abspath(
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "../..")
)


# Quick-start development settings - unsuitable for production
# See https://docs.djangoproject.com/en/4.2/howto/deployment/checklist/

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = "Overridden in Production"  # noqa

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = True
TESTING = False

ALLOWED_HOSTS = ["*"]


# Application definition

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "adsense",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "whitenoise.middleware.WhiteNoiseMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    "adsense.middleware.AdSenseMiddleware",
]

ROOT_URLCONF = "config.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [os.path.join(BASE_DIR, "templates")],
        "OPTIONS": {
            # Plugins add their own template directories
            "loaders": [
                "django.template.loaders.filesystem.Loader",
                "adsense.loaders.Loader",
                "django.template.loaders.app_directories.Loader",
            ],
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
                "adsense.context_processors.adsense",
            ],
        },
    }
]


# Database
# https://docs.djangoproject.com/en/4.2/ref/settings/#databases
# Only used by the admin, sessions and auth
# --------------------------------------------------------------------------
DB_PATH_SQLITE = os.path.join(BASE_DIR, "db.sqlite3")
DATABASES = {
    "default": env.db(
        "DATABASE_URL",
        default=f"sqlite:///{DB_PATH_SQLITE}",
    )
}
DEFAULT_AUTO_FIELD = "django.db.models.AutoField"


# Internationalization
# https://docs.djangoproject.com/en/4.2/topics/i18n/
# --------------------------------------------------------------------------
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True


# Static files (CSS, JavaScript, Images)
# https://docs.djangoproject.com/en/4.2/howto/static-files/
# --------------------------------------------------------------------------
STATIC_ROOT = os.path.join(BASE_DIR, "static")
STATIC_URL = "/static/"
STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.FileSystemStorage",
    },
    "staticfiles": {
        "BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage",
    },
}


# Logging
# See: https://docs.djangoproject.com/en/4.2/topics/logging
# Sends an email to the site admins on every HTTP 500 error when DEBUG=False.
# An invalid AdSense configuration ends up there.
# --------------------------------------------------------------------------
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {"require_debug_false": {"()": "django.utils.log.RequireDebugFalse"}},
    "formatters": {
        "succinct": {"format": "%(levelname)-8s %(asctime)s [%(name)s] %(message)s"},
        "verbose": {
            "format": "%(levelname)-8s %(asctime)s [%(name)s] "
            "%(module)s.%(funcName)s():%(lineno)d - %(message)s"
        },
    },
    "handlers": {
        "mail_admins": {
            "level": "ERROR",
            "filters": ["require_debug_false"],
            "class": "django.utils.log.AdminEmailHandler",
        },
        "console-adsense": {
            "level": "DEBUG",
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
        "console": {
            "level": "INFO",
            "class": "logging.StreamHandler",
            "formatter": "succinct",
        },
        "null": {
            "class": "logging.NullHandler",
        },
    },
    "loggers": {
        "": {"level": "INFO", "handlers": ["console"], "propagate": False},
        "adsense": {
            "level": "INFO",
            "handlers": ["console-adsense"],
            "propagate": False,
        },
        "django": {"level": "INFO", "handlers": ["console"], "propagate": False},
        "django.request": {
            "handlers": ["mail_admins"],
            "level": "ERROR",
            "propagate": True,
        },
    },
}


# Security settings
# https://docs.djangoproject.com/en/4.2/topics/security/
# See settings/production.py for additional settings
# --------------------------------------------------------------------------
SECURE_CONTENT_TYPE_NOSNIFF = True
SECURE_REFERRER_POLICY = "strict-origin-when-cross-origin"
X_FRAME_OPTIONS = "DENY"
SESSION_COOKIE_HTTPONLY = True


# AdSense
# https://support.google.com/adsense/
# --------------------------------------------------------------------------

# The URL where the Django admin is served
# The AdSense plugin is never active there
ADSENSE_ADMIN_URL = "admin"

ADSENSE = {
    "enabled": env.bool("ADSENSE_ENABLED", default=False),
    # Sandbox mode renders a placeholder and never loads the AdSense scripts
    "sandbox": env.bool("ADSENSE_SANDBOX", default=True),
    "adsense": {
        "data": {
            "client": env("ADSENSE_CLIENT", default=""),
            "slot": env("ADSENSE_SLOT", default=""),
        },
        "options": {
            "type": env("ADSENSE_TYPE", default="banner"),
            "direction": env("ADSENSE_DIRECTION", default="top"),
            "priority": env.int("ADSENSE_PRIORITY", default=10),
            "pipeline": env.bool("ADSENSE_PIPELINE", default=False),
            "load": env("ADSENSE_LOAD", default="async"),
        },
    },
}
