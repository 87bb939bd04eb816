"""AdSense middleware."""
import logging

from .dispatch import initialize


log = logging.getLogger(__name__)  # noqa


class AdSenseMiddleware:

    """
    Runs the plugin initialization for each request.

    Sets ``request.adsense`` to the request's event dispatcher
    which the AdSense template tags and context processor use.
    """

    def __init__(self, get_response):
        """One-time configuration and initialization."""
        self.get_response = get_response

    def __call__(self, request):
        request.adsense = initialize(request)
        return self.get_response(request)
