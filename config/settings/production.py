"""
Production Django settings for a site using the AdSense plugin.

This is meant to be customized by setting environment variables.

Only a few environment variables are required:

- SECRET_KEY
- ALLOWED_HOSTS
- ADSENSE_CLIENT
- ADSENSE_SLOT
"""
from .base import *  # noqa
from .base import env


# Django Settings
# https://docs.djangoproject.com/en/4.2/ref/settings/
# --------------------------------------------------------------------------
DEBUG = False

# ALLOWED_HOSTS is required in production
ALLOWED_HOSTS = env.list("ALLOWED_HOSTS")
SECRET_KEY = env("SECRET_KEY")  # Django won't start unless the SECRET_KEY is non-empty
ADMINS = [("Admin", email) for email in env.list("ADMINS", default=[])]


# Logging changes
# --------------------------------------------------------------------------
# Folks spam our site with random hosts all the time. Ignore these errors.
LOGGING["loggers"]["django.security.DisallowedHost"] = {
    "handlers": ["null"],
    "propagate": False,
}


# Security
# https://docs.djangoproject.com/en/4.2/ref/middleware/#http-strict-transport-security
# --------------------------------------------------------------------------
SECURE_SSL_REDIRECT = env.bool("SECURE_SSL_REDIRECT", default=True)
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True


# AdSense
# Live ads in production
# --------------------------------------------------------------------------
ADSENSE["enabled"] = env.bool("ADSENSE_ENABLED", default=True)
ADSENSE["sandbox"] = env.bool("ADSENSE_SANDBOX", default=False)
ADSENSE["adsense"]["data"]["client"] = env("ADSENSE_CLIENT")
ADSENSE["adsense"]["data"]["slot"] = env("ADSENSE_SLOT")
