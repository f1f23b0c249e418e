"""Application preferences accepted by the web API."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, fields
from typing import Any

from qbitclient.app import QbitError


class _ScanDirKind(enum.Enum):
    MONITORED_FOLDER = 0
    DEFAULT_PATH = 1
    CUSTOM_PATH = 2


@dataclass(frozen=True)
class ScanDirsValue:
    """Where torrents found in a watched folder are downloaded to."""

    kind: _ScanDirKind
    path: str | None = None

    @classmethod
    def monitored_folder(cls) -> ScanDirsValue:
        """Download into the monitored folder itself."""
        return cls(_ScanDirKind.MONITORED_FOLDER)

    @classmethod
    def default_path(cls) -> ScanDirsValue:
        """Download into the default save path."""
        return cls(_ScanDirKind.DEFAULT_PATH)

    @classmethod
    def custom_path(cls, path: str) -> ScanDirsValue:
        """Download into ``path``."""
        return cls(_ScanDirKind.CUSTOM_PATH, str(path))

    def to_json(self) -> int | str:
        """Return the value as the web API expects it: 0, 1 or a path."""
        if self.kind is _ScanDirKind.CUSTOM_PATH:
            return self.path or ""
        return self.kind.value


class ScanDirs:
    """A mapping of watched folders to their download targets."""

    def __init__(self, entries: Iterable[tuple[str, ScanDirsValue]]) -> None:
        self.entries = [(str(path), value) for path, value in entries]

    def to_dict(self) -> dict[str, int | str]:
        """Return the folders as a JSON-ready dict; later entries win."""
        return {path: value.to_json() for path, value in self.entries}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScanDirs):
            return NotImplemented
        return self.entries == other.entries

    def __repr__(self) -> str:
        return f"ScanDirs({self.entries!r})"


_ALLOWED_VALUES: dict[str, frozenset[int]] = {
    "utp_tcp_mixed_mode": frozenset({0, 1}),
    "upload_slots_behavior": frozenset({0, 1}),
    "proxy_type": frozenset({-1, 1, 2, 3, 4, 5}),
    "encryption": frozenset({0, 1, 2}),
    "upload_choking_algorithm": frozenset({0, 1, 2}),
    "dyndns_service": frozenset({0, 1}),
    "bittorrent_protocol": frozenset({0, 1, 2}),
    "max_ratio_act": frozenset({0, 1}),
    "scheduler_days": frozenset(range(10)),
}


@dataclass
class QBittorrentConfig:
    """qBittorrent preferences; unset (``None``) fields are left unchanged."""

    # General settings
    locale: str | None = None
    create_subfolder_enabled: bool | None = None
    start_paused_enabled: bool | None = None
    auto_delete_mode: int | None = None
    preallocate_all: bool | None = None
    incomplete_files_ext: bool | None = None
    auto_tmm_enabled: bool | None = None
    torrent_changed_tmm_enabled: bool | None = None
    save_path_changed_tmm_enabled: bool | None = None
    category_changed_tmm_enabled: bool | None = None
    # Paths
    save_path: str | None = None
    temp_path_enabled: bool | None = None
    temp_path: str | None = None
    # Scan directories
    scan_dirs: list[ScanDirs] | None = None
    # Export directories
    export_dir: str | None = None
    export_dir_fin: str | None = None
    # Email notifications
    mail_notification_enabled: bool | None = None
    mail_notification_sender: str | None = None
    mail_notification_email: str | None = None
    mail_notification_smtp: str | None = None
    mail_notification_ssl_enabled: bool | None = None
    mail_notification_auth_enabled: bool | None = None
    mail_notification_username: str | None = None
    mail_notification_password: str | None = None
    # Auto-run
    autorun_enabled: bool | None = None
    autorun_program: str | None = None
    # Queueing
    queueing_enabled: bool | None = None
    max_active_downloads: int | None = None
    max_active_torrents: int | None = None
    max_active_uploads: int | None = None
    dont_count_slow_torrents: bool | None = None
    slow_torrent_dl_rate_threshold: int | None = None
    slow_torrent_ul_rate_threshold: int | None = None
    slow_torrent_inactive_timer: int | None = None
    # Share ratio
    max_ratio_enabled: bool | None = None
    max_ratio: float | None = None
    max_ratio_act: int | None = None
    # Connection
    listen_port: int | None = None
    upnp: bool | None = None
    random_port: bool | None = None
    dl_limit: int | None = None
    up_limit: int | None = None
    max_connec: int | None = None
    max_connec_per_torrent: int | None = None
    max_uploads: int | None = None
    max_uploads_per_torrent: int | None = None
    stop_tracker_timeout: int | None = None
    enable_piece_extent_affinity: bool | None = None
    bittorrent_protocol: int | None = None
    limit_utp_rate: bool | None = None
    limit_tcp_overhead: bool | None = None
    limit_lan_peers: bool | None = None
    # Alternative speed limits
    alt_dl_limit: int | None = None
    alt_up_limit: int | None = None
    scheduler_enabled: bool | None = None
    schedule_from_hour: int | None = None
    schedule_from_min: int | None = None
    schedule_to_hour: int | None = None
    schedule_to_min: int | None = None
    scheduler_days: int | None = None
    # Peers
    dht: bool | None = None
    pex: bool | None = None
    lsd: bool | None = None
    encryption: int | None = None
    # Proxy
    proxy_type: int | None = None
    proxy_ip: str | None = None
    proxy_port: int | None = None
    proxy_peer_connections: bool | None = None
    proxy_auth_enabled: bool | None = None
    proxy_username: str | None = None
    proxy_password: str | None = None
    proxy_torrents_only: bool | None = None
    # IP filter
    ip_filter_enabled: bool | None = None
    ip_filter_path: str | None = None
    ip_filter_trackers: bool | None = None
    # Web UI
    web_ui_domain_list: str | None = None
    web_ui_address: str | None = None
    web_ui_port: int | None = None
    web_ui_upnp: bool | None = None
    web_ui_username: str | None = None
    web_ui_password: str | None = None
    web_ui_csrf_protection_enabled: bool | None = None
    web_ui_clickjacking_protection_enabled: bool | None = None
    web_ui_secure_cookie_enabled: bool | None = None
    web_ui_max_auth_fail_count: int | None = None
    web_ui_ban_duration: int | None = None
    web_ui_session_timeout: int | None = None
    web_ui_host_header_validation_enabled: bool | None = None
    bypass_local_auth: bool | None = None
    bypass_auth_subnet_whitelist_enabled: bool | None = None
    bypass_auth_subnet_whitelist: str | None = None
    alternative_webui_enabled: bool | None = None
    alternative_webui_path: str | None = None
    use_https: bool | None = None
    ssl_key: str | None = None
    ssl_cert: str | None = None
    web_ui_https_key_path: str | None = None
    web_ui_https_cert_path: str | None = None
    # Dynamic DNS
    dyndns_enabled: bool | None = None
    dyndns_service: int | None = None
    dyndns_username: str | None = None
    dyndns_password: str | None = None
    dyndns_domain: str | None = None
    # RSS
    rss_refresh_interval: int | None = None
    rss_max_articles_per_feed: int | None = None
    rss_processing_enabled: bool | None = None
    rss_auto_downloading_enabled: bool | None = None
    rss_download_repack_proper_episodes: bool | None = None
    rss_smart_episode_filters: str | None = None
    # Trackers
    add_trackers_enabled: bool | None = None
    add_trackers: str | None = None
    # Custom HTTP headers
    web_ui_use_custom_http_headers_enabled: bool | None = None
    web_ui_custom_http_headers: str | None = None
    # Seeding time
    max_seeding_time_enabled: bool | None = None
    max_seeding_time: int | None = None
    # Announce
    announce_ip: str | None = None
    announce_to_all_tiers: bool | None = None
    announce_to_all_trackers: bool | None = None
    # Advanced
    async_io_threads: int | None = None
    banned_ips: str | None = None
    checking_memory_use: int | None = None
    current_interface_address: str | None = None
    current_network_interface: str | None = None
    disk_cache: int | None = None
    disk_cache_ttl: int | None = None
    embedded_tracker_port: int | None = None
    enable_coalesce_read_write: bool | None = None
    enable_embedded_tracker: bool | None = None
    enable_multi_connections_from_same_ip: bool | None = None
    enable_os_cache: bool | None = None
    enable_upload_suggestions: bool | None = None
    file_pool_size: int | None = None
    outgoing_ports_max: int | None = None
    outgoing_ports_min: int | None = None
    recheck_completed_torrents: bool | None = None
    resolve_peer_countries: bool | None = None
    save_resume_data_interval: int | None = None
    send_buffer_low_watermark: int | None = None
    send_buffer_watermark: int | None = None
    send_buffer_watermark_factor: int | None = None
    socket_backlog_size: int | None = None
    upload_choking_algorithm: int | None = None
    upload_slots_behavior: int | None = None
    upnp_lease_duration: int | None = None
    utp_tcp_mixed_mode: int | None = None

    def __post_init__(self) -> None:
        if self.scan_dirs is not None:
            self.scan_dirs = list(self.scan_dirs)
        self.validate()

    def validate(self) -> None:
        """Raise QbitError if a setting is outside the range the API accepts."""
        for name, allowed in _ALLOWED_VALUES.items():
            value = getattr(self, name)
            if value is not None and value not in allowed:
                raise QbitError(f"parameter not expected: {name}={value!r}")

    def to_dict(self) -> dict[str, Any]:
        """Return the set fields as a JSON-ready dict, in declaration order."""
        result: dict[str, Any] = {}
        for field in fields(self):
            value = getattr(self, field.name)
            if value is None:
                continue
            if field.name == "scan_dirs":
                value = [dirs.to_dict() for dirs in value]
            result[field.name] = value
        return result