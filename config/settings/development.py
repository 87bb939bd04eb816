"""Development settings."""
from .base import *  # noqa
from .base import env

# Allow to use weak passwords for development
AUTH_PASSWORD_VALIDATORS = []

INTERNAL_IPS = ["127.0.0.1", "10.0.2.2"]

LOGGING["loggers"]["adsense"]["level"] = "DEBUG"

# Never serve live ads in development unless explicitly asked to
ADSENSE["sandbox"] = env.bool("ADSENSE_SANDBOX", default=True)
