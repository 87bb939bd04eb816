"""
Template loader for plugin templates.

Add it to the template loaders of the project::

    "loaders": [
        "django.template.loaders.filesystem.Loader",
        "adsense.loaders.Loader",
        "django.template.loaders.app_directories.Loader",
    ]
"""
from django.template.loaders import filesystem

from .constants import ON_TEMPLATE_PATHS
from .dispatch import initialize


class Loader(filesystem.Loader):

    """
    Looks up templates in the directories active plugins add.

    Template loaders have no request, so the plugins are initialized
    as outside of a request. Admin pages get the plugin directories too;
    they are only lookup paths and nothing is rendered from them there.
    """

    def get_dirs(self):
        paths = list(super().get_dirs() or [])
        initialize().dispatch(ON_TEMPLATE_PATHS, paths=paths)
        return paths
