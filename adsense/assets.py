"""Script and stylesheet assets registered by plugins for a page."""
import logging
from dataclasses import dataclass

from django.core.exceptions import ImproperlyConfigured
from django.templatetags.static import static
from django.utils.html import format_html
from django.utils.html import format_html_join

from .constants import LOAD_STRATEGIES


log = logging.getLogger(__name__)  # noqa


@dataclass(frozen=True)
class Asset:
    url: str
    priority: int = 10
    pipeline: bool = False
    load: str = ""


class Assets:

    """
    Collects the scripts and stylesheets for a page.

    URLs which aren't absolute are treated as static files.
    Adding the same URL twice keeps the first registration.
    ``pipeline`` is recorded for hosts that bundle assets;
    tags are always rendered one per asset.
    """

    def __init__(self):
        self.js = []
        self.css = []

    @staticmethod
    def _resolve(url):
        if url.startswith(("http://", "https://", "//", "/")):
            return url
        return static(url)

    def _add(self, collection, asset):
        if any(a.url == asset.url for a in collection):
            log.debug("Asset already registered: %s", asset.url)
            return False
        collection.append(asset)
        return True

    def add_js(self, url, priority=10, pipeline=False, load=""):
        load = load or ""
        if load not in LOAD_STRATEGIES:
            raise ImproperlyConfigured(f"Unknown script load strategy: {load}")
        return self._add(self.js, Asset(self._resolve(url), priority, pipeline, load))

    def add_css(self, url, priority=10, pipeline=False):
        return self._add(self.css, Asset(self._resolve(url), priority, pipeline))

    @staticmethod
    def _ordered(collection):
        # sorted() is stable so equal priorities keep registration order
        return sorted(collection, key=lambda a: -a.priority)

    def render_js(self):
        return format_html_join(
            "\n",
            '<script src="{}"{}></script>',
            (
                (asset.url, format_html(" {}", asset.load) if asset.load else "")
                for asset in self._ordered(self.js)
            ),
        )

    def render_css(self):
        return format_html_join(
            "\n",
            '<link rel="stylesheet" href="{}">',
            ((asset.url,) for asset in self._ordered(self.css)),
        )
