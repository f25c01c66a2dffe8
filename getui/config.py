"""SDK configuration and ``.env`` loading."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import timedelta
from urllib.parse import quote

import requests

from .errors import ConfigError

DEFAULT_DOMAIN = "https://restapi.getui.com/v2"

_ENV_PREFIX = "GETUI_TEST_"
_REQUIRED_FIELDS = ("app_id", "app_key", "master_secret", "domain")


def _env_field(key: str) -> str | None:
    """Map an ``.env`` key such as ``GETUI_TEST_APP_ID`` to a config field."""
    if not key.startswith(_ENV_PREFIX):
        return None
    suffix = key[len(_ENV_PREFIX):]
    name = suffix.lower()
    if name in _REQUIRED_FIELDS and name.upper() == suffix:
        return name
    return None


@dataclass
class HTTPProxyConfig:
    """An HTTP proxy to route requests through."""

    host: str = ""
    port: int = 0
    username: str = ""
    password: str = ""

    @property
    def url(self) -> str:
        credentials = ""
        if self.username:
            credentials = f"{quote(self.username, safe='')}:{quote(self.password, safe='')}@"
        port = f":{self.port}" if self.port else ""
        return f"http://{credentials}{self.host}{port}"


@dataclass
class Config:
    """Application credentials and HTTP settings. Timeouts are in milliseconds."""

    app_id: str = ""
    app_key: str = ""
    master_secret: str = ""
    domain: str = DEFAULT_DOMAIN

    socket_timeout: int = 30000
    connect_timeout: int = 10000
    connection_request_timeout: int = 0
    max_http_try_time: int = 1
    trust_ssl: bool = False

    open_analyse_stable_domain: bool = True
    analyse_stable_domain_interval: timedelta = timedelta(minutes=2)
    max_failed_num: int = 10
    continuous_failed_num: int = 3
    check_max_failed_num_interval: timedelta = timedelta(seconds=3)
    http_check_timeout: int = 100

    open_check_health_data_switch: bool = False
    check_health_interval: timedelta = timedelta(seconds=30)

    proxy_config: HTTPProxyConfig | None = None

    uri_to_socket_timeout_map: dict[str, int] = field(default_factory=dict)

    def validate(self) -> None:
        """Raise :class:`ConfigError` for the first missing required field."""
        for name in _REQUIRED_FIELDS:
            if not getattr(self, name):
                raise ConfigError(name, f"{name} is required")

    def create_session(self) -> requests.Session:
        """Return an HTTP session configured for this application."""
        session = requests.Session()
        session.verify = not self.trust_ssl
        if self.proxy_config is not None:
            url = self.proxy_config.url
            session.proxies.update({"http": url, "https": url})
        return session

    def custom_socket_timeout(self, uri: str) -> int:
        """The read timeout for *uri*, falling back to ``socket_timeout``."""
        return self.uri_to_socket_timeout_map.get(uri, self.socket_timeout)


def load_config_from_env_file(filename: str | os.PathLike[str]) -> Config:
    """Read credentials from a ``KEY=VALUE`` file on top of the defaults.

    Raises :class:`OSError` when the file cannot be read.
    """
    values: dict[str, str] = {}
    with open(filename, encoding="utf-8", errors="replace") as handle:
        for raw_line in handle:
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            key, sep, value = line.partition("=")
            if not sep:
                continue
            key = key.strip()
            value = value.strip()
            if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
                value = value[1:-1]
            name = _env_field(key)
            if name is not None:
                values[name] = value
    return Config(**values)


def load_config_from_env_file_or_default(filename: str | os.PathLike[str]) -> Config:
    """Like :func:`load_config_from_env_file`, but defaults when unreadable."""
    try:
        return load_config_from_env_file(filename)
    except OSError:
        return Config()