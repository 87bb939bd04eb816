"""Views for the site pages."""
from django.views.generic import TemplateView


class PageView(TemplateView):

    """
    A plain content page.

    The page's ``adsense`` metadata overrides the global AdSense settings
    for this page only.
    """

    template_name = "page.html"
    title = None
    adsense = None

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["page"] = {"title": self.title, "adsense": self.adsense or {}}
        return context
