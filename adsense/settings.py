"""
Default settings for the AdSense plugin.

The plugin is configured with a single ``ADSENSE`` setting
which mirrors the ``plugins.adsense`` configuration tree::

    ADSENSE = {
        "enabled": True,
        "sandbox": False,
        "adsense": {
            "data": {"client": "ca-pub-XXX", "slot": "XXX"},
            "options": {"type": "banner", "direction": "top"},
        },
    }

Only the keys that differ from the defaults below need to be set.
"""
import copy

from django.conf import settings

from .constants import ADSENSE_RESOURCE


DEFAULTS = {
    "enabled": False,
    # Sandbox mode never loads the live AdSense scripts (staging, testing)
    "sandbox": False,
    "adsense": {
        "data": {
            "client": "",
            "slot": "",
        },
        "options": {
            "type": "banner",
            "direction": "top",
            "priority": 10,
            "pipeline": False,
            "load": "async",
            "resource": ADSENSE_RESOURCE,
        },
    },
}

# The URL prefix where the Django admin is served
# The plugin never activates for requests below it
DEFAULT_ADMIN_URL = "admin"


def _merge(base, overrides):
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def get_plugin_settings():
    """
    Return the ``ADSENSE`` setting merged over the defaults.

    This reads ``django.conf.settings`` on every call
    so the result follows ``override_settings`` in tests.
    """
    return _merge(copy.deepcopy(DEFAULTS), getattr(settings, "ADSENSE", None) or {})


def get_admin_url():
    return getattr(settings, "ADSENSE_ADMIN_URL", DEFAULT_ADMIN_URL)
