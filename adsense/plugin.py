"""
The AdSense plugin.

Injects an AdSense ad unit into pages. The plugin listens to four phases:

* ``onPluginsInitialized`` decides if the plugin is active for the request
* ``onPageContentRaw`` renders the ad unit of a page
* ``onSiteVariables`` registers the scripts and stylesheet
* ``onTemplatePaths`` adds the plugin's templates to the lookup path
"""
import logging
import os

from django.template.loader import render_to_string

from . import constants
from .placement import PageOverride
from .placement import PluginConfig
from .placement import resolve_placement
from .placement import should_render
from .settings import get_admin_url
from .validators import check_direction
from .validators import check_type


log = logging.getLogger(__name__)  # noqa

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")


class AdSensePlugin:
    def __init__(self, dispatcher):
        self.dispatcher = dispatcher
        self.active = True

    @staticmethod
    def get_subscribed_events():
        return {
            constants.ON_PLUGINS_INITIALIZED: ("on_plugins_initialized", 0),
        }

    @staticmethod
    def is_admin(request):
        """Whether the request is for the back office (the Django admin)."""
        admin_url = get_admin_url()
        if request is None or not admin_url:
            return False

        prefix = "/" + admin_url.strip("/") + "/"
        path = request.path_info
        return path == prefix.rstrip("/") or path.startswith(prefix)

    def on_plugins_initialized(self, event):
        """Register the remaining listeners if the plugin is enabled."""
        if self.is_admin(event.get("request")):
            log.debug("AdSense is never active in the admin")
            self.active = False
            return

        if not PluginConfig.from_settings().enabled:
            log.debug("AdSense is disabled")
            self.active = False
            return

        self.dispatcher.add_subscriber(
            self,
            {
                constants.ON_PAGE_CONTENT_RAW: ("on_page_content_raw", 0),
                constants.ON_SITE_VARIABLES: ("on_site_variables", 0),
                constants.ON_TEMPLATE_PATHS: ("on_template_paths", 0),
            },
        )

    def on_page_content_raw(self, event):
        """
        Render the ad unit into the page output.

        The event carries the ``page`` (see ``PageOverride.from_page``),
        any keyword ``overrides`` and the ``output`` list the markup is appended to.
        The template variables are published on the event as ``variables``.

        :raises ConfigurationValidationError: if the type or direction is invalid
        """
        config = PluginConfig.from_settings()

        # The global values are checked even on pages without an ad unit
        check_type(config.type)
        check_direction(config.direction)

        override = PageOverride.from_page(
            event.get("page"), **(event.get("overrides") or {})
        )
        if not should_render(config, override):
            return

        placement = resolve_placement(config, override)
        variables = placement.as_template_vars()
        event["variables"] = variables

        log.debug(
            "Rendering AdSense unit: type=%s, direction=%s, sandbox=%s",
            placement.type,
            placement.direction,
            placement.sandbox,
        )
        event.setdefault("output", []).append(
            render_to_string(constants.FRAGMENT_TEMPLATE, variables)
        )

    def on_site_variables(self, event):
        """Add the AdSense scripts (unless in sandbox mode) and the stylesheet."""
        config = PluginConfig.from_settings()
        assets = event["assets"]

        if not config.sandbox:
            assets.add_js(config.resource, config.priority, config.pipeline, config.load)
            assets.add_js(
                constants.PLUGIN_SCRIPT, config.priority, config.pipeline, config.load
            )
        else:
            log.debug("AdSense sandbox mode, skipping scripts")

        assets.add_css(constants.PLUGIN_STYLESHEET, config.priority, config.pipeline)

    def on_template_paths(self, event):
        """Add the plugin's templates to the template lookup paths."""
        event["paths"].append(TEMPLATES_DIR)
