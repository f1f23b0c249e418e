import json

import pytest

from qbitclient.app import QbitError
from qbitclient.config import QBittorrentConfig, ScanDirs, ScanDirsValue


def test_scan_dirs_value_wire_forms():
    assert ScanDirsValue.monitored_folder().to_json() == 0
    assert ScanDirsValue.default_path().to_json() == 1
    assert ScanDirsValue.custom_path("./custom/path/here").to_json() == "./custom/path/here"


def test_scan_dirs_to_dict():
    dirs = ScanDirs(
        [
            ("folder_path", ScanDirsValue.custom_path("./custom/path/here")),
            ("folder_path_2", ScanDirsValue.default_path()),
        ]
    )
    assert dirs.to_dict() == {
        "folder_path": "./custom/path/here",
        "folder_path_2": 1,
    }


def test_scan_dirs_later_entry_wins():
    dirs = ScanDirs(
        [
            ("a", ScanDirsValue.default_path()),
            ("a", ScanDirsValue.monitored_folder()),
        ]
    )
    assert dirs.to_dict() == {"a": 0}


def test_empty_config_serializes_to_empty_dict():
    assert QBittorrentConfig().to_dict() == {}


def test_only_set_fields_are_serialized():
    config = QBittorrentConfig(locale="en", dht=False, max_ratio=1.5, listen_port=6881)
    assert config.to_dict() == {
        "locale": "en",
        "max_ratio": 1.5,
        "listen_port": 6881,
        "dht": False,
    }


def test_scan_dirs_in_config_serialize_as_list():
    dirs = ScanDirs([("watch", ScanDirsValue.monitored_folder())])
    config = QBittorrentConfig(scan_dirs=[dirs])
    assert config.to_dict() == {"scan_dirs": [{"watch": 0}]}


def test_json_round_trip():
    config = QBittorrentConfig(save_path="/downloads", proxy_type=-1, scheduler_days=9)
    decoded = json.loads(json.dumps(config.to_dict()))
    assert QBittorrentConfig(**decoded) == config


@pytest.mark.parametrize(
    "name, value",
    [
        ("utp_tcp_mixed_mode", 2),
        ("upload_slots_behavior", 2),
        ("proxy_type", 0),
        ("proxy_type", 6),
        ("encryption", 3),
        ("upload_choking_algorithm", 3),
        ("dyndns_service", 2),
        ("bittorrent_protocol", 3),
        ("max_ratio_act", 2),
        ("scheduler_days", 10),
    ],
)
def test_out_of_range_values_rejected(name, value):
    with pytest.raises(QbitError):
        QBittorrentConfig(**{name: value})


@pytest.mark.parametrize(
    "name, value",
    [
        ("utp_tcp_mixed_mode", 1),
        ("proxy_type", -1),
        ("proxy_type", 5),
        ("encryption", 2),
        ("bittorrent_protocol", 0),
        ("scheduler_days", 0),
        ("scheduler_days", 9),
    ],
)
def test_boundary_values_accepted(name, value):
    config = QBittorrentConfig(**{name: value})
    assert config.to_dict() == {name: value}


def test_validate_after_mutation():
    config = QBittorrentConfig(encryption=1)
    config.encryption = 7
    with pytest.raises(QbitError):
        config.validate()