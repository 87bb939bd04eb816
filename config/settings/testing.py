"""Settings used in testing."""

import warnings

from .development import *  # noqa


# Ignore whitenoise message about no static directory
warnings.filterwarnings("ignore", message="No directory at", module="whitenoise.base")

TESTING = True
TEMPLATES[0]["OPTIONS"]["debug"] = DEBUG
LOGGING["loggers"][""]["level"] = "CRITICAL"
LOGGING["loggers"]["adsense"]["level"] = "CRITICAL"

# Whitenoise relies on the manifest being present.
# Which may not be there in testing
# unless you run `collectstatic` before running tests
STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.FileSystemStorage",
    },
    "staticfiles": {
        "BACKEND": "whitenoise.storage.CompressedStaticFilesStorage",
    },
}

# Tests set the AdSense configuration they need with override_settings
ADSENSE = {
    "enabled": False,
    "sandbox": False,
    "adsense": {
        "data": {"client": "ca-pub-123", "slot": "456"},
        "options": {"type": "banner", "direction": "top"},
    },
}
