"""Project configuration for a site using the AdSense plugin."""
