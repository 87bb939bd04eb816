"""Context processor that collects the AdSense assets for all templates."""

from .assets import Assets
from .constants import ON_SITE_VARIABLES
from .dispatch import get_dispatcher


def adsense(request):
    assets = Assets()
    get_dispatcher(request).dispatch(ON_SITE_VARIABLES, assets=assets)
    return {"adsense_assets": assets}
