"""Reporting endpoints."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date as _date
from typing import Any, Protocol

from .api_result import ApiResult
from .errors import ValidationError


class _RequestSender(Protocol):
    def do_request(self, method: str, uri: str, body: Any = None) -> ApiResult: ...


def _day(value: str | _date | None) -> str:
    if isinstance(value, _date):
        return value.strftime("%Y-%m-%d")
    if not value:
        return _date.today().strftime("%Y-%m-%d")
    return value


class StatisticAPI:
    """Push, user and application reports. Dates default to today."""

    def __init__(self, client: _RequestSender) -> None:
        self._client = client

    def query_push_result_by_task_ids(self, task_ids: Iterable[str]) -> ApiResult:
        """Push results for several tasks."""
        ids = list(task_ids)
        if not ids:
            raise ValidationError("task_ids cannot be empty")
        return self._client.do_request("POST", "/report/push/result", {"task_id_list": ids})

    def query_push_result_by_date(self, date: str | _date | None = None) -> ApiResult:
        """Push results for one day."""
        return self._client.do_request("GET", f"/report/push/date/{_day(date)}", None)

    def query_push_result_by_task_id(self, task_id: str) -> ApiResult:
        """Push results for one task."""
        if not task_id:
            raise ValidationError("task_id cannot be empty")
        return self._client.do_request("GET", f"/report/push/task/{task_id}", None)

    def query_user_data(self, date: str | _date | None = None) -> ApiResult:
        """User figures for one day."""
        return self._client.do_request("GET", f"/report/user/date/{_day(date)}", None)

    def query_performance_data(self, date: str | _date | None = None) -> ApiResult:
        """Performance figures for one day."""
        return self._client.do_request("GET", f"/report/performance/date/{_day(date)}", None)

    def query_online_user_count(self) -> ApiResult:
        """The number of users online now."""
        return self._client.do_request("GET", "/report/online_user", None)

    def query_app_data(self, date: str | _date | None = None) -> ApiResult:
        """Application figures for one day."""
        return self._client.do_request("GET", f"/report/app/date/{_day(date)}", None)