"""Sync endpoints."""

from __future__ import annotations

from typing import Any

from qbitclient.app import Transport, parse_json


class SyncApi:
    """Incremental main-data and torrent-peer sync endpoints."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def main_data_raw(self, rid: int) -> str:
        """Return the main sync data for response id ``rid`` as text."""
        return self.transport.post(f"/sync/maindata?rid={rid}")

    def main_data(self, rid: int) -> Any:
        """Return the main sync data decoded from JSON."""
        return parse_json(self.main_data_raw(rid))

    def torrent_peers_raw(self, torrent_hash: str, rid: int) -> str:
        """Return the peer sync data of a torrent as text."""
        return self.transport.post(f"/sync/torrentPeers?hash={torrent_hash}&rid={rid}")

    def torrent_peers(self, torrent_hash: str, rid: int) -> Any:
        """Return the peer sync data of a torrent decoded from JSON."""
        return parse_json(self.torrent_peers_raw(torrent_hash, rid))