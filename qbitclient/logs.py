"""Log endpoints."""

from __future__ import annotations

import urllib.parse
from dataclasses import dataclass
from typing import Any

from qbitclient.app import Transport, parse_json


@dataclass(frozen=True)
class GetLogConfig:
    """Which kinds of log messages to fetch.

    Messages with an id lower than or equal to ``last_known_id`` are excluded.
    """

    normal: bool = True
    info: bool = True
    warning: bool = True
    critical: bool = True
    last_known_id: int = -1

    def to_query(self) -> str:
        """Return the URL query string for this configuration."""
        pairs = [
            ("info", self.info),
            ("normal", self.normal),
            ("warning", self.warning),
            ("critical", self.critical),
            ("last_known_id", self.last_known_id),
        ]
        return urllib.parse.urlencode(
            [(key, str(value).lower() if isinstance(value, bool) else str(value)) for key, value in pairs]
        )


class LogApi:
    """Main and peer log endpoints."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def get_log_raw(self, config: GetLogConfig | None = None) -> str:
        """Return the main log as text."""
        config = config or GetLogConfig()
        return self.transport.post(f"/log/main?{config.to_query()}")

    def get_log(self, config: GetLogConfig | None = None) -> Any:
        """Return the main log decoded from JSON."""
        return parse_json(self.get_log_raw(config))

    def get_peer_log_raw(self, last_known_id: int | None = None) -> str:
        """Return the peer log as text."""
        last_id = -1 if last_known_id is None else last_known_id
        return self.transport.post(f"/log/main?last_known_id={last_id}")

    def get_peer_log(self, last_known_id: int | None = None) -> Any:
        """Return the peer log decoded from JSON."""
        return parse_json(self.get_peer_log_raw(last_known_id))