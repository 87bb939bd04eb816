import copy

from django.test import override_settings


ADSENSE_SETTINGS = {
    "enabled": True,
    "sandbox": False,
    "adsense": {
        "data": {"client": "ca-pub-123", "slot": "456"},
        "options": {
            "type": "banner",
            "direction": "top",
            "priority": 10,
            "pipeline": False,
            "load": "async",
            "resource": "https://pagead2.googlesyndication.com/pagead/js/adsbygoogle.js",
        },
    },
}


def adsense_settings(**kwargs):
    """
    Return ``override_settings`` for an ADSENSE setting.

    Top level keys are set directly (``enabled``, ``sandbox``).
    Any other key is set in the ``data`` or ``options`` section it belongs to.
    """
    value = copy.deepcopy(ADSENSE_SETTINGS)
    for key, val in kwargs.items():
        if key in value:
            value[key] = val
        elif key in value["adsense"]["data"]:
            value["adsense"]["data"][key] = val
        else:
            value["adsense"]["options"][key] = val
    return override_settings(ADSENSE=value)
