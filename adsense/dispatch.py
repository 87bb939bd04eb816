"""
A small per-request event dispatcher for plugin lifecycle phases.

Each request gets its own dispatcher, so listeners a plugin registers
while initializing never leak into other requests::

    dispatcher = initialize(request)
    if dispatcher.has_listeners(ON_PAGE_CONTENT_RAW):
        event = dispatcher.dispatch(ON_PAGE_CONTENT_RAW, page=page, output=[])
"""
import logging
from collections import defaultdict

from .constants import ON_PLUGINS_INITIALIZED
from .plugin import AdSensePlugin


log = logging.getLogger(__name__)  # noqa


class Event(dict):

    """The payload of a dispatched phase. Listeners may add to it."""

    def __init__(self, name, **kwargs):
        super().__init__(**kwargs)
        self.name = name


class EventDispatcher:
    def __init__(self):
        self._listeners = defaultdict(list)
        self._registered = 0

    def add_listener(self, event_name, callback, priority=0):
        # The counter keeps registration order within the same priority
        self._listeners[event_name].append((priority, self._registered, callback))
        self._registered += 1

    def add_subscriber(self, subscriber, events=None):
        """
        Register the listeners of a subscriber.

        :param subscriber: an object whose methods are the listeners
        :param events: a mapping of event name to ``(method name, priority)``.
            Defaults to ``subscriber.get_subscribed_events()``.
        """
        if events is None:
            events = subscriber.get_subscribed_events()

        for event_name, (method_name, priority) in events.items():
            self.add_listener(event_name, getattr(subscriber, method_name), priority)

    def has_listeners(self, event_name):
        return bool(self._listeners.get(event_name))

    def get_listeners(self, event_name):
        """Listeners for an event, highest priority first."""
        listeners = sorted(
            self._listeners.get(event_name, []), key=lambda li: (-li[0], li[1])
        )
        return [callback for _, _, callback in listeners]

    def dispatch(self, event_name, **kwargs):
        event = Event(event_name, **kwargs)
        for callback in self.get_listeners(event_name):
            callback(event)
        return event


def initialize(request=None):
    """
    Build a dispatcher for one request and run the init phase.

    :param request: the current HttpRequest or ``None`` outside of a request
    :return: the dispatcher holding the listeners of any active plugins
    """
    dispatcher = EventDispatcher()
    plugin = AdSensePlugin(dispatcher)
    dispatcher.add_subscriber(plugin)
    dispatcher.dispatch(ON_PLUGINS_INITIALIZED, request=request)
    return dispatcher


def get_dispatcher(request=None):
    """
    Return the dispatcher of a request, initializing it if needed.

    ``AdSenseMiddleware`` normally initializes it as the request comes in.
    """
    if request is None:
        return initialize()

    dispatcher = getattr(request, "adsense", None)
    if dispatcher is None:
        dispatcher = initialize(request)
        request.adsense = dispatcher
    return dispatcher
