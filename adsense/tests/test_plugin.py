from django.test import TestCase
from django.test.client import RequestFactory

from ..assets import Assets
from ..constants import ON_PAGE_CONTENT_RAW
from ..constants import ON_SITE_VARIABLES
from ..constants import ON_TEMPLATE_PATHS
from ..dispatch import EventDispatcher
from ..dispatch import initialize
from ..exceptions import ConfigurationValidationError
from ..plugin import AdSensePlugin
from ..plugin import TEMPLATES_DIR
from .common import adsense_settings


class TestPageContentRaw(TestCase):
    def render(self, page, **overrides):
        output = []
        event = initialize().dispatch(
            ON_PAGE_CONTENT_RAW, page=page, overrides=overrides, output=output
        )
        return event, "".join(output)

    @adsense_settings()
    def test_render(self):
        event, html = self.render({"active": True})

        self.assertEqual(
            event["variables"],
            {
                "adsense_sandy": False,
                "adsense_type": "banner",
                "adsense_direction": "top",
                "adsense_client": "ca-pub-123",
                "adsense_slot": "456",
            },
        )
        self.assertIn('class="adsbygoogle"', html)
        self.assertIn('data-ad-client="ca-pub-123"', html)
        self.assertIn('data-ad-slot="456"', html)
        self.assertIn("adsense--banner", html)
        self.assertIn("adsense--top", html)
        self.assertNotIn("adsense--sandbox", html)

    @adsense_settings()
    def test_page_overrides(self):
        event, html = self.render(
            {"active": True, "type": "Fixed", "direction": "left", "sandbox": True}
        )

        self.assertEqual(event["variables"]["adsense_type"], "fixed")
        self.assertEqual(event["variables"]["adsense_direction"], "left")
        self.assertTrue(event["variables"]["adsense_sandy"])
        self.assertIn("adsense--fixed", html)
        self.assertIn("adsense--sandbox", html)
        self.assertNotIn('class="adsbygoogle"', html)

        # Keyword overrides
        event, html = self.render(None, active=True, direction="bottom")
        self.assertEqual(event["variables"]["adsense_direction"], "bottom")

    @adsense_settings(sandbox=True)
    def test_global_sandbox_not_used_for_render(self):
        event, html = self.render({"active": True})
        self.assertFalse(event["variables"]["adsense_sandy"])
        self.assertIn('class="adsbygoogle"', html)

    @adsense_settings()
    def test_inactive_page(self):
        event, html = self.render({"active": False})
        self.assertNotIn("variables", event)
        self.assertEqual(html, "")

        event, html = self.render(None)
        self.assertEqual(html, "")

        event, html = self.render({"active": True, "enabled": False})
        self.assertEqual(html, "")

    @adsense_settings(type="popup")
    def test_invalid_type(self):
        self.assertRaises(ConfigurationValidationError, self.render, {"active": True})

        # Checked even for pages without an ad unit
        self.assertRaises(ConfigurationValidationError, self.render, {"active": False})

        # A page type doesn't make up for a bad global type
        self.assertRaises(
            ConfigurationValidationError, self.render, {"active": True, "type": "banner"}
        )

    @adsense_settings(direction="")
    def test_empty_direction(self):
        self.assertRaises(ConfigurationValidationError, self.render, {"active": True})

    @adsense_settings()
    def test_invalid_page_direction(self):
        self.assertRaises(
            ConfigurationValidationError,
            self.render,
            {"active": True, "direction": "diagonal"},
        )

    @adsense_settings(enabled=False)
    def test_disabled(self):
        # No listeners are registered so nothing is checked or rendered
        event, html = self.render({"active": True, "type": "invalid"})
        self.assertEqual(html, "")


class TestSiteVariables(TestCase):
    def collect(self):
        assets = Assets()
        initialize().dispatch(ON_SITE_VARIABLES, assets=assets)
        return assets

    @adsense_settings()
    def test_assets(self):
        assets = self.collect()

        self.assertEqual(
            [a.url for a in assets.js],
            [
                "https://pagead2.googlesyndication.com/pagead/js/adsbygoogle.js",
                "/static/adsense/js/adsense.js",
            ],
        )
        for asset in assets.js:
            self.assertEqual(asset.priority, 10)
            self.assertFalse(asset.pipeline)
            self.assertEqual(asset.load, "async")

        self.assertEqual([a.url for a in assets.css], ["/static/adsense/css/adsense.css"])

    @adsense_settings(sandbox=True)
    def test_sandbox(self):
        assets = self.collect()
        self.assertEqual(len(assets.js), 0)
        self.assertEqual(len(assets.css), 1)

    @adsense_settings(priority=50, pipeline=True, load="defer")
    def test_options(self):
        assets = self.collect()
        self.assertEqual(len(assets.js), 2)
        for asset in assets.js:
            self.assertEqual(asset.priority, 50)
            self.assertTrue(asset.pipeline)
            self.assertEqual(asset.load, "defer")

        self.assertEqual(assets.css[0].priority, 50)
        self.assertTrue(assets.css[0].pipeline)

    @adsense_settings(sandbox=False)
    def test_page_sandbox_not_used_for_assets(self):
        # Rendering a sandboxed page doesn't affect asset registration
        dispatcher = initialize()
        dispatcher.dispatch(
            ON_PAGE_CONTENT_RAW, page={"active": True, "sandbox": True}, output=[]
        )
        assets = Assets()
        dispatcher.dispatch(ON_SITE_VARIABLES, assets=assets)
        self.assertEqual(len(assets.js), 2)


class TestTemplatePaths(TestCase):
    @adsense_settings()
    def test_template_paths(self):
        paths = ["/srv/templates"]
        initialize().dispatch(ON_TEMPLATE_PATHS, paths=paths)
        self.assertEqual(paths, ["/srv/templates", TEMPLATES_DIR])

    @adsense_settings(enabled=False)
    def test_disabled(self):
        paths = []
        initialize().dispatch(ON_TEMPLATE_PATHS, paths=paths)
        self.assertEqual(paths, [])


class TestAdSensePlugin(TestCase):
    @adsense_settings()
    def test_active(self):
        dispatcher = EventDispatcher()
        plugin = AdSensePlugin(dispatcher)
        self.assertTrue(plugin.active)

        dispatcher.add_subscriber(plugin)
        self.assertFalse(dispatcher.has_listeners(ON_PAGE_CONTENT_RAW))

        plugin.on_plugins_initialized({"request": None})
        self.assertTrue(plugin.active)
        self.assertTrue(dispatcher.has_listeners(ON_PAGE_CONTENT_RAW))

    @adsense_settings(enabled=False)
    def test_inactive(self):
        dispatcher = EventDispatcher()
        plugin = AdSensePlugin(dispatcher)
        plugin.on_plugins_initialized({})
        self.assertFalse(plugin.active)


class TestAdminDetection(TestCase):
    def setUp(self):
        self.factory = RequestFactory()

    def test_is_admin(self):
        self.assertTrue(AdSensePlugin.is_admin(self.factory.get("/admin/")))
        self.assertTrue(AdSensePlugin.is_admin(self.factory.get("/admin")))
        self.assertFalse(AdSensePlugin.is_admin(self.factory.get("/")))
        self.assertFalse(AdSensePlugin.is_admin(None))

    def test_is_admin_script_name(self):
        # A site served below a URL prefix
        request = self.factory.get("/admin/", SCRIPT_NAME="/site")
        self.assertEqual(request.path, "/site/admin/")
        self.assertTrue(AdSensePlugin.is_admin(request))

        request = self.factory.get("/pages/", SCRIPT_NAME="/admin")
        self.assertFalse(AdSensePlugin.is_admin(request))

    @adsense_settings()
    def test_no_listeners_in_prefixed_admin(self):
        dispatcher = initialize(self.factory.get("/admin/", SCRIPT_NAME="/site"))
        self.assertFalse(dispatcher.has_listeners(ON_PAGE_CONTENT_RAW))
        self.assertFalse(dispatcher.has_listeners(ON_SITE_VARIABLES))
        self.assertFalse(dispatcher.has_listeners(ON_TEMPLATE_PATHS))


class TestPageContentOutput(TestCase):
    @adsense_settings()
    def test_without_output(self):
        event = initialize().dispatch(ON_PAGE_CONTENT_RAW, page={"active": True})
        self.assertEqual(len(event["output"]), 1)
        self.assertIn('data-ad-client="ca-pub-123"', event["output"][0])
