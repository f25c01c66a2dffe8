"""The SDK entry point: authenticated requests and the API groups."""

from __future__ import annotations

import json
import time
from typing import Any

import requests

from .api_result import ApiResult
from .config import Config
from .dto import to_payload
from .errors import InvalidResponseError, NetworkError
from .push_api import PushAPI
from .statistic_api import StatisticAPI
from .token_manager import TokenManager
from .user_api import UserAPI

_JSON_CONTENT_TYPE = "application/json;charset=utf-8"


def _seconds(milliseconds: int) -> float | None:
    return milliseconds / 1000 if milliseconds > 0 else None


class Client:
    """Holds the configuration, HTTP session and token, and exposes the APIs.

    Raises :class:`~getui.errors.ConfigError` when the configuration is incomplete.
    """

    def __init__(self, config: Config | None = None) -> None:
        if config is None:
            config = Config()
        config.validate()
        self._config = config
        self._session = config.create_session()
        self._token_manager = TokenManager(config, self._session)
        self.push_api = PushAPI(self)
        self.user_api = UserAPI(self)
        self.statistic_api = StatisticAPI(self)

    @property
    def config(self) -> Config:
        return self._config

    @property
    def token_manager(self) -> TokenManager:
        return self._token_manager

    def get_token(self) -> str:
        """Return a valid auth token, fetching one when needed."""
        return self._token_manager.get_token()

    def do_request(self, method: str, uri: str, body: Any = None) -> ApiResult:
        """Send an authenticated JSON request to ``uri`` below the application URL."""
        token = self.get_token()
        url = f"{self._config.domain}/{self._config.app_id}{uri}"

        data: bytes | None = None
        if body is not None:
            try:
                data = json.dumps(to_payload(body), ensure_ascii=False).encode("utf-8")
            except (TypeError, ValueError) as exc:
                raise NetworkError("failed to marshal request body", exc) from exc

        read_timeout = self._config.custom_socket_timeout(uri)
        if read_timeout <= 0:
            read_timeout = self._config.socket_timeout
        timeout = (_seconds(self._config.connect_timeout), _seconds(read_timeout))

        try:
            response = self._session.request(
                method,
                url,
                data=data,
                headers={"Content-Type": _JSON_CONTENT_TYPE, "token": token},
                timeout=timeout,
            )
        except requests.RequestException as exc:
            raise NetworkError("failed to send request", exc) from exc

        try:
            return ApiResult.from_dict(response.json())
        except (ValueError, InvalidResponseError) as exc:
            raise NetworkError("failed to decode response", exc) from exc

    def generate_request_id(self) -> str:
        """A request id made of the current time in nanoseconds."""
        return str(time.time_ns())

    def close(self) -> None:
        """Release the HTTP session."""
        self._session.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()