"""Errors raised by the AdSense plugin."""
from django.core.exceptions import ImproperlyConfigured


class ConfigurationValidationError(ImproperlyConfigured):

    """The placement type or direction is empty or not an allowed value."""

    def __init__(self, message, field=None, value=None):
        super().__init__(message)
        self.field = field
        self.value = value
