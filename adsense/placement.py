"""
Global configuration, page overrides and the resolved ad placement.

The global configuration comes from ``settings.ADSENSE``.
A page may override some of it (see ``PageOverride``)
and ``resolve_placement`` merges the two into what gets rendered.
"""
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from .constants import PlacementDirection
from .constants import PlacementType
from .settings import get_plugin_settings
from .validators import check_direction
from .validators import check_type


@dataclass(frozen=True)
class PluginConfig:

    """The global plugin configuration for a single request."""

    enabled: bool = False
    sandbox: bool = False
    client: str = ""
    slot: str = ""
    type: str = PlacementType.BANNER
    direction: str = PlacementDirection.TOP
    priority: int = 10
    pipeline: bool = False
    load: str = "async"
    resource: str = ""

    @classmethod
    def from_settings(cls, plugin_settings=None):
        """Build the config from the nested ``ADSENSE`` setting."""
        if plugin_settings is None:
            plugin_settings = get_plugin_settings()

        adsense = plugin_settings.get("adsense") or {}
        data = adsense.get("data") or {}
        options = adsense.get("options") or {}

        return cls(
            enabled=bool(plugin_settings.get("enabled")),
            sandbox=bool(plugin_settings.get("sandbox")),
            client=data.get("client") or "",
            slot=str(data.get("slot") or ""),
            type=options.get("type") or "",
            direction=options.get("direction") or "",
            priority=int(options.get("priority") or 0),
            pipeline=bool(options.get("pipeline")),
            load=options.get("load") or "",
            resource=options.get("resource") or "",
        )


@dataclass(frozen=True)
class PageOverride:

    """
    Settings a single page sets for itself.

    ``None`` means the page didn't set that value.
    """

    enabled: Optional[bool] = None
    active: Optional[bool] = None
    type: Optional[str] = None
    direction: Optional[str] = None
    sandbox: Optional[bool] = None

    @classmethod
    def from_page(cls, page, **extra):
        """
        Read the overrides of a page.

        The page can be ``None``, a mapping of overrides,
        a mapping with an ``adsense`` entry (eg. page metadata)
        or any object with an ``adsense`` mapping attribute.
        Keyword arguments take precedence over the page's own values.
        """
        if isinstance(page, Mapping):
            page = page.get("adsense", page)
        elif page is not None:
            page = getattr(page, "adsense", None)

        values = dict(page or {})
        values.update(extra)

        return cls(
            **{
                field: values[field]
                for field in cls.__dataclass_fields__
                if values.get(field) is not None
            }
        )


@dataclass(frozen=True)
class ResolvedPlacement:

    """What an ad unit is rendered with for a page."""

    sandbox: bool
    type: PlacementType
    direction: PlacementDirection
    client: str
    slot: str

    def as_template_vars(self):
        return {
            "adsense_sandy": self.sandbox,
            "adsense_type": self.type.value,
            "adsense_direction": self.direction.value,
            "adsense_client": self.client,
            "adsense_slot": self.slot,
        }


def should_render(config, override):
    """
    Whether the ad unit is rendered on a page.

    Both the (possibly page overridden) ``enabled`` flag
    and the page's own ``active`` flag must be set.
    """
    enabled = config.enabled if override.enabled is None else override.enabled
    return bool(enabled and override.active)


def resolve_placement(config, override):
    """
    Merge the global config and a page override.

    The page's type and direction win when they are non-empty.
    The sandbox flag only ever comes from the page.

    :raises ConfigurationValidationError: if the merged type or direction is invalid
    """
    return ResolvedPlacement(
        sandbox=bool(override.sandbox),
        type=check_type(override.type or config.type),
        direction=check_direction(override.direction or config.direction),
        client=config.client,
        slot=config.slot,
    )
