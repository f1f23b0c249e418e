"""HTTP transport, error type and the application endpoints."""

from __future__ import annotations

import json
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Mapping
from typing import Any


class QbitError(Exception):
    """An error reported by the client or by the web API."""

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if self.code is None:
            return self.message
        return f"{self.message} (status {self.code})"


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Transport:
    """Sends POST requests to a qBittorrent web API at ``authority``."""

    def __init__(self, authority: str, sid: str | None = None, timeout: float = 30.0) -> None:
        self.authority = authority.rstrip("/")
        self.sid = sid
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self.authority}/api/v2/{path.lstrip('/')}"

    def post(self, path: str, form: Mapping[str, Any] | None = None) -> str:
        """POST ``form`` to ``path`` and return the response body as text."""
        body = urllib.parse.urlencode(
            [(key, _form_value(value)) for key, value in (form or {}).items()]
        ).encode("utf-8")
        request = urllib.request.Request(self._url(path), data=body, method="POST")
        request.add_header("Content-Type", "application/x-www-form-urlencoded")
        if self.sid is not None:
            request.add_header("Cookie", f"SID={self.sid}")
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                return response.read().decode("utf-8")
        except urllib.error.HTTPError as exc:
            raise QbitError(f"request to {path} failed", exc.code) from exc
        except urllib.error.URLError as exc:
            raise QbitError(f"request to {path} failed: {exc.reason}") from exc


def parse_json(text: str) -> Any:
    """Decode a JSON response, raising QbitError when it is malformed."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise QbitError(f"invalid JSON in response: {exc}") from exc


def request_with_errors(
    transport: Transport,
    path: str,
    form: Mapping[str, Any] | None,
    messages: Mapping[int, str],
) -> str:
    """POST a request, replacing errors whose status is in ``messages``."""
    try:
        return transport.post(path, form)
    except QbitError as exc:
        if exc.code is not None and exc.code in messages:
            raise QbitError(messages[exc.code], exc.code) from exc
        raise


class AppApi:
    """Application-level endpoints."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def version(self) -> str:
        """Return the application version, e.g. ``v4.1.3``."""
        return self.transport.post("/app/version")

    def web_api_version(self) -> str:
        """Return the web API version, e.g. ``2.0``."""
        return self.transport.post("/app/webapiVersion")

    def build_info_raw(self) -> str:
        """Return the build information as text."""
        return self.transport.post("/app/buildInfo")

    def build_info(self) -> Any:
        """Return the build information decoded from JSON."""
        return parse_json(self.build_info_raw())

    def shutdown(self) -> None:
        """Shut the application down."""
        self.transport.post("/app/shutdown")

    def default_save_path(self) -> str:
        """Return the default save path."""
        return self.transport.post("/app/defaultSavePath")