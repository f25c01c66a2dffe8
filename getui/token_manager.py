"""Authentication token retrieval and caching."""

from __future__ import annotations

import hashlib
import time
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone

import requests

from .api_result import ApiResult
from .config import Config
from .dto import AuthDTO, to_payload
from .errors import APIError, InvalidResponseError, NetworkError

TOKEN_LIFETIME = timedelta(hours=23)
"""Tokens live 24 hours on the server; they are refreshed an hour early."""

_JSON_CONTENT_TYPE = "application/json;charset=utf-8"


def generate_sign(app_key: str, timestamp: str, master_secret: str) -> str:
    """The hex SHA-256 of ``app_key + timestamp + master_secret``."""
    return hashlib.sha256(f"{app_key}{timestamp}{master_secret}".encode("utf-8")).hexdigest()


def _utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return moment.astimezone(timezone.utc)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class TokenManager:
    """Fetches an auth token and reuses it until it is about to expire."""

    def __init__(self, config: Config, session: requests.Session) -> None:
        self._config = config
        self._session = session
        self._token = ""
        self._expire_time: datetime | None = None

    @property
    def token(self) -> str:
        """The cached token, whether or not it has expired."""
        return self._token

    @property
    def expire_time(self) -> datetime | None:
        """When the cached token stops being reused, in UTC."""
        return self._expire_time

    def get_token(self) -> str:
        """Return a valid token, requesting a new one when needed."""
        if self._token and self._expire_time is not None and _now() < self._expire_time:
            return self._token

        timestamp = str(time.time_ns() // 1_000_000)
        auth = AuthDTO(
            sign=generate_sign(self._config.app_key, timestamp, self._config.master_secret),
            timestamp=timestamp,
            app_key=self._config.app_key,
        )
        url = f"{self._config.domain}/{self._config.app_id}/auth"
        timeout = (self._config.connect_timeout / 1000, self._config.socket_timeout / 1000)

        try:
            response = self._session.post(
                url,
                json=to_payload(auth),
                headers={"Content-Type": _JSON_CONTENT_TYPE},
                timeout=timeout,
            )
        except requests.RequestException as exc:
            raise NetworkError("failed to send auth request", exc) from exc

        try:
            result = ApiResult.from_dict(response.json())
        except (ValueError, InvalidResponseError) as exc:
            raise NetworkError("failed to decode auth response", exc) from exc

        if not result.is_success():
            raise APIError(result.code, result.msg)

        data = result.data
        if not isinstance(data, Mapping):
            raise NetworkError("failed to parse token", InvalidResponseError("token data is missing"))
        token = data.get("token") or ""
        if not isinstance(token, str):
            raise NetworkError("failed to parse token", InvalidResponseError("token must be a string"))

        self._token = token
        self._expire_time = _now() + TOKEN_LIFETIME
        return self._token

    def set_token(self, token: str, expire_time: datetime) -> None:
        """Cache *token* until *expire_time*."""
        self._token = token
        self._expire_time = _utc(expire_time)

    def clear_token(self) -> None:
        """Forget the cached token."""
        self._token = ""
        self._expire_time = None

    def is_token_expired(self) -> bool:
        """Whether there is no token or its expiry time has passed."""
        if not self._token or self._expire_time is None:
            return True
        return _now() > self._expire_time