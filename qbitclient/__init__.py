"""Client for the qBittorrent WebUI API: application, preferences, logs and sync."""

__version__ = "0.1.0"