"""Application preferences endpoints."""

from __future__ import annotations

import json
from typing import Any

from qbitclient.app import Transport, parse_json
from qbitclient.config import QBittorrentConfig


class PreferencesApi:
    """Read and change the application preferences."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def get_raw(self) -> str:
        """Return the application preferences as text."""
        return self.transport.post("/app/preferences")

    def get(self) -> Any:
        """Return the application preferences decoded from JSON."""
        return parse_json(self.get_raw())

    def set(self, config: QBittorrentConfig) -> None:
        """Apply the fields that are set in ``config``.

        Raises QbitError if a setting lies outside the range the API accepts.
        """
        config.validate()
        payload = json.dumps(config.to_dict())
        self.transport.post("/app/setPreferences", {"json": payload})