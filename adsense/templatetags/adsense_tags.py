"""Template tags for AdSense ad units and their assets."""

import logging

from django import template
from django.utils.safestring import mark_safe

from ..assets import Assets
from ..constants import ON_PAGE_CONTENT_RAW
from ..constants import ON_SITE_VARIABLES
from ..dispatch import get_dispatcher


log = logging.getLogger(__name__)  # noqa
register = template.Library()


@register.simple_tag(takes_context=True)
def adsense(context, page=None, **overrides):
    """
    Render the ad unit for a page at this point in the template.

    ::

        {% load adsense_tags %}
        {% adsense page %}
        {% adsense active=True type="fixed" direction="left" %}

    Renders nothing unless the plugin is enabled and the page is active.
    """
    dispatcher = get_dispatcher(context.get("request"))

    output = []
    event = dispatcher.dispatch(
        ON_PAGE_CONTENT_RAW, page=page, overrides=overrides, output=output
    )
    if "variables" in event:
        # Make the resolved values available to the rest of the template
        for name, value in event["variables"].items():
            context[name] = value

    return mark_safe("".join(output))


def _get_assets(context):
    assets = context.get("adsense_assets")
    if assets is None:
        # The context processor isn't installed
        assets = Assets()
        get_dispatcher(context.get("request")).dispatch(
            ON_SITE_VARIABLES, assets=assets
        )
        context["adsense_assets"] = assets
    return assets


@register.simple_tag(takes_context=True)
def adsense_js(context):
    """Render the registered AdSense scripts."""
    return _get_assets(context).render_js()


@register.simple_tag(takes_context=True)
def adsense_css(context):
    """Render the registered AdSense stylesheets."""
    return _get_assets(context).render_css()
