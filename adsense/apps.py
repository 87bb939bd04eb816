"""AdSense Django app settings."""

from django.apps import AppConfig


class AdSenseConfig(AppConfig):
    name = "adsense"
    verbose_name = "AdSense"

    def ready(self):
        import adsense.checks  # noqa
