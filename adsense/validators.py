"""Validators for the enumerated AdSense placement options."""
import logging

from django.utils.translation import gettext_lazy as _

from .constants import PlacementDirection
from .constants import PlacementType
from .exceptions import ConfigurationValidationError


log = logging.getLogger(__name__)  # noqa


messages = {
    "type_empty": _(
        "The AdSense type variable value must be defined. At the moment it is empty. "
        "If you are overriding the default configuration, "
        "please define the type variable too with a valid value."
    ),
    "type_invalid": _(
        'The AdSense type variable value must be one of "banner" or "fixed". '
        'You gave "%(value)s"'
    ),
    "direction_empty": _(
        "The AdSense direction variable value must be defined. At the moment it is empty. "
        "If you are overriding the default configuration, "
        "please define the direction variable too with a valid value."
    ),
    "direction_invalid": _(
        "The AdSense direction variable value must be one direction like "
        '"left", "right", "top" or "bottom". You gave "%(value)s"'
    ),
}


def _parse_choice(choices, field, value):
    if not value:
        log.warning("AdSense %s is empty", field)
        raise ConfigurationValidationError(
            messages[f"{field}_empty"], field=field, value=value
        )

    normalized = str(value).lower()
    for choice in choices:
        if choice.value == normalized:
            return choice

    log.warning("Invalid AdSense %s: %s", field, value)
    raise ConfigurationValidationError(
        messages[f"{field}_invalid"] % {"value": value}, field=field, value=value
    )


def check_type(value):
    """
    Parse a placement type, ignoring case.

    :raises ConfigurationValidationError: when the value is empty
        or isn't one of ``banner`` or ``fixed``
    :return: the matching ``PlacementType``
    """
    return _parse_choice(PlacementType, "type", value)


def check_direction(value):
    """
    Parse a placement direction, ignoring case.

    :raises ConfigurationValidationError: when the value is empty
        or isn't one of ``left``, ``top``, ``bottom`` or ``right``
    :return: the matching ``PlacementDirection``
    """
    return _parse_choice(PlacementDirection, "direction", value)
