"""Site URL Configuration."""

from django.conf import settings
from django.contrib import admin
from django.urls import path

from .views import PageView


urlpatterns = []

if settings.ADSENSE_ADMIN_URL:
    # If no ADSENSE_ADMIN_URL is specified, the Django admin is disabled
    urlpatterns += [path(f"{settings.ADSENSE_ADMIN_URL}/", admin.site.urls)]

urlpatterns += [
    path(
        r"no-ads/",
        PageView.as_view(title="No ads", adsense={"active": False}),
        name="page-no-ads",
    ),
    path(
        r"",
        PageView.as_view(title="Home", adsense={"active": True}),
        name="page-home",
    ),
]
