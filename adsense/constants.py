"""Constants used for the AdSense plugin."""

from django.db import models
from django.utils.translation import gettext_lazy as _


class PlacementType(models.TextChoices):
    BANNER = "banner", _("Banner")
    FIXED = "fixed", _("Fixed")


class PlacementDirection(models.TextChoices):
    LEFT = "left", _("Left")
    TOP = "top", _("Top")
    BOTTOM = "bottom", _("Bottom")
    RIGHT = "right", _("Right")


# Lifecycle phases fired by the host integration
ON_PLUGINS_INITIALIZED = "onPluginsInitialized"
ON_PAGE_CONTENT_RAW = "onPageContentRaw"
ON_SITE_VARIABLES = "onSiteVariables"
ON_TEMPLATE_PATHS = "onTemplatePaths"

FRAGMENT_TEMPLATE = "adsense/partials/adsense.html"
PLUGIN_SCRIPT = "adsense/js/adsense.js"
PLUGIN_STYLESHEET = "adsense/css/adsense.css"

# The async loader published by Google
ADSENSE_RESOURCE = "https://pagead2.googlesyndication.com/pagead/js/adsbygoogle.js"

LOAD_STRATEGIES = ("", "async", "defer")
