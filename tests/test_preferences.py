import json

import pytest

from qbitclient.app import QbitError
from qbitclient.config import QBittorrentConfig, ScanDirs, ScanDirsValue
from qbitclient.preferences import PreferencesApi


class FakeTransport:
    def __init__(self, response="", error=None):
        self.response = response
        self.error = error
        self.calls = []

    def post(self, path, form=None):
        self.calls.append((path, form))
        if self.error is not None:
            raise self.error
        return self.response


def test_get_raw_returns_body_and_uses_path():
    transport = FakeTransport('{"locale": "en"}')
    api = PreferencesApi(transport)
    assert api.get_raw() == '{"locale": "en"}'
    assert transport.calls == [("/app/preferences", None)]


def test_get_decodes_json():
    transport = FakeTransport('{"locale": "en", "dht": true, "listen_port": 8999}')
    api = PreferencesApi(transport)
    assert api.get() == {"locale": "en", "dht": True, "listen_port": 8999}


def test_get_invalid_json_raises():
    api = PreferencesApi(FakeTransport("not json"))
    with pytest.raises(QbitError):
        api.get()


def test_set_sends_config_as_json_form_field():
    transport = FakeTransport()
    api = PreferencesApi(transport)
    config = QBittorrentConfig(locale="en", dht=True, max_ratio=1.5, proxy_type=-1)
    assert api.set(config) is None
    assert len(transport.calls) == 1
    path, form = transport.calls[0]
    assert path == "/app/setPreferences"
    assert list(form) == ["json"]
    assert json.loads(form["json"]) == config.to_dict()


def test_set_empty_config_sends_empty_object():
    transport = FakeTransport()
    PreferencesApi(transport).set(QBittorrentConfig())
    assert json.loads(transport.calls[0][1]["json"]) == {}


def test_set_serializes_scan_dirs():
    transport = FakeTransport()
    config = QBittorrentConfig(
        scan_dirs=[
            ScanDirs(
                [
                    ("/watch", ScanDirsValue.default_path()),
                    ("/other", ScanDirsValue.monitored_folder()),
                    ("/custom", ScanDirsValue.custom_path("/dl")),
                ]
            )
        ]
    )
    PreferencesApi(transport).set(config)
    sent = json.loads(transport.calls[0][1]["json"])
    assert sent == {"scan_dirs": [{"/watch": 1, "/other": 0, "/custom": "/dl"}]}


def test_set_rejects_config_made_invalid_after_creation():
    transport = FakeTransport()
    config = QBittorrentConfig(encryption=1)
    config.encryption = 3
    with pytest.raises(QbitError):
        PreferencesApi(transport).set(config)
    assert transport.calls == []


def test_set_propagates_transport_error():
    transport = FakeTransport(error=QbitError("request failed", 403))
    with pytest.raises(QbitError) as info:
        PreferencesApi(transport).set(QBittorrentConfig(upnp=False))
    assert info.value.code == 403