# qbitclient

A small Python client for the qBittorrent WebUI API. It covers the
application endpoints, the application preferences, the main and peer logs,
and the incremental sync data. It uses only the standard library.

## Installation

```
pip install qbitclient
```

For running the tests:

```
pip install "qbitclient[test]"
pytest
```

## Transport and errors

All API classes work over a `Transport` from `qbitclient.app`:

```python
from qbitclient.app import Transport

transport = Transport("http://localhost:8080", sid="token", timeout=30.0)
```

`Transport.post(path, form)` sends `form` as an URL-encoded POST body to
`<authority>/api/v2/<path>` and returns the response body as text. Booleans
in the form are sent as `true` / `false`. When `sid` is given, it is sent as
the `SID` cookie.

Any object with a `post(path, form)` method returning text can stand in for
a `Transport`, which is convenient for testing.

A failed request raises `QbitError`. Its `message` holds the description and
`code` the HTTP status, or `None` when no response was received.
`parse_json(text)` decodes a response and raises `QbitError` on malformed
JSON. `request_with_errors(transport, path, form, messages)` posts a request
and, when it fails with a status listed in `messages`, raises a `QbitError`
with that message instead.

## Application

```python
from qbitclient.app import AppApi

app = AppApi(transport)
print(app.version())            # e.g. "v4.1.3"
print(app.web_api_version())    # e.g. "2.0"
print(app.build_info())         # decoded JSON; build_info_raw() gives text
print(app.default_save_path())
app.shutdown()
```

## Logs

```python
from qbitclient.logs import GetLogConfig, LogApi

logs = LogApi(transport)
entries = logs.get_log(GetLogConfig(warning=False, last_known_id=10))
peers = logs.get_peer_log(None)  # last_known_id defaults to -1
```

`GetLogConfig` is a frozen dataclass with `normal`, `info`, `warning` and
`critical` all `True` and `last_known_id` `-1` by default. `to_query()`
returns its URL query string. Each method has a `_raw` form that returns
the response text.

## Sync

```python
from qbitclient.sync import SyncApi

sync = SyncApi(transport)
main = sync.main_data(0)
peers = sync.torrent_peers("0123456789abcdef0123456789abcdef01234567", 0)
```

`main_data_raw` and `torrent_peers_raw` return the response text.

## Preferences

`QBittorrentConfig` in `qbitclient.config` is a dataclass holding every
preference as optional. Only the settings that are set are sent.
`validate()` raises `QbitError` for values outside the ranges the WebUI
accepts, and it is also run when the config is created. The checked
settings are:

- `scheduler_days`: 0 to 9
- `encryption`: 0 to 2
- `proxy_type`: -1, or 1 to 5
- `dyndns_service`: 0 or 1
- `max_ratio_act`: 0 or 1
- `bittorrent_protocol`: 0 to 2
- `upload_choking_algorithm`: 0 to 2
- `upload_slots_behavior`: 0 or 1
- `utp_tcp_mixed_mode`: 0 or 1

Watched folders are given as `ScanDirs`, a list of `(folder, ScanDirsValue)`
pairs. `ScanDirsValue.monitored_folder()` is sent as `0`,
`ScanDirsValue.default_path()` as `1`, and `ScanDirsValue.custom_path(path)`
as the path itself. `to_dict()` on either class gives the JSON-ready form.

```python
from qbitclient.config import QBittorrentConfig, ScanDirs, ScanDirsValue
from qbitclient.preferences import PreferencesApi

config = QBittorrentConfig(
    dht=True,
    encryption=1,
    scan_dirs=[ScanDirs([("/watch", ScanDirsValue.default_path())])],
)

prefs = PreferencesApi(transport)
prefs.set(config)          # validates, then posts the set fields as JSON
current = prefs.get()      # get_raw() returns the text
```

## What it does not do

- It does not log in. Obtain a session id separately and pass it as `sid`.
- It has no endpoints for managing torrents, transfer limits, RSS feeds and
  rules, or the search engine.
- It has no command-line program.