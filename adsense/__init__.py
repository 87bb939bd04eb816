"""Django app that injects AdSense ad units into rendered pages."""
