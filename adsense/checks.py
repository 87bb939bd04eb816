"""System checks for the AdSense configuration."""
from django.core import checks

from .exceptions import ConfigurationValidationError
from .placement import PluginConfig
from .validators import check_direction
from .validators import check_type


@checks.register()
def check_adsense_settings(app_configs, **kwargs):
    """
    Report invalid placement options at startup.

    Pages would otherwise fail to render at request time.
    """
    config = PluginConfig.from_settings()
    errors = []

    for check_id, validator, value in (
        ("adsense.E001", check_type, config.type),
        ("adsense.E002", check_direction, config.direction),
    ):
        try:
            validator(value)
        except ConfigurationValidationError as e:
            errors.append(
                checks.Error(str(e), hint="Check settings.ADSENSE", id=check_id)
            )

    if config.enabled and not config.client:
        errors.append(
            checks.Warning(
                "AdSense is enabled without an ad client ID",
                hint='Set settings.ADSENSE["adsense"]["data"]["client"]',
                id="adsense.W001",
            )
        )

    return errors
