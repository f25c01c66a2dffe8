"""Push endpoints."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

from .api_result import ApiResult
from .dto import AudienceDTO, PushBatchDTO, PushDTO, to_payload
from .errors import (
    EmptyAudienceError,
    EmptyPushMessageError,
    InvalidRequestIDError,
    ValidationError,
)

_MIN_REQUEST_ID = 10
_MAX_REQUEST_ID = 32

_Request = TypeVar("_Request", PushDTO, PushBatchDTO, AudienceDTO)


class _RequestSender(Protocol):
    def do_request(self, method: str, uri: str, body: Any = None) -> ApiResult: ...

    def generate_request_id(self) -> str: ...


def _check_request_id(request_id: str) -> None:
    if request_id and not _MIN_REQUEST_ID <= len(request_id.encode("utf-8")) <= _MAX_REQUEST_ID:
        raise InvalidRequestIDError()


def _check_task_id(task_id: str) -> None:
    if not task_id:
        raise ValidationError("task_id cannot be empty")


class PushAPI:
    """Single, batch, broadcast, tag and list pushes, and task control."""

    def __init__(self, client: _RequestSender) -> None:
        self._client = client

    def _validate(self, dto: Any, name: str, *, needs_message: bool) -> None:
        if dto is None:
            raise ValidationError(f"{name} cannot be nil")
        _check_request_id(dto.request_id)
        if dto.audience is None:
            raise EmptyAudienceError()
        if needs_message and dto.push_message is None:
            raise EmptyPushMessageError()

    def _send(self, dto: _Request, uri: str) -> ApiResult:
        if not dto.request_id:
            dto.request_id = self._client.generate_request_id()
        return self._client.do_request("POST", uri, to_payload(dto))

    def _push(self, push_dto: PushDTO | None, uri: str) -> ApiResult:
        self._validate(push_dto, "push_dto", needs_message=True)
        return self._send(push_dto, uri)

    def _push_batch(self, batch_dto: PushBatchDTO | None, uri: str) -> ApiResult:
        self._validate(batch_dto, "batch_dto", needs_message=True)
        return self._send(batch_dto, uri)

    def _push_list(self, audience_dto: AudienceDTO | None, uri: str) -> ApiResult:
        self._validate(audience_dto, "audience_dto", needs_message=False)
        return self._send(audience_dto, uri)

    def push_to_single_by_cid(self, push_dto: PushDTO | None) -> ApiResult:
        """Push to one client id."""
        return self._push(push_dto, "/push/single/cid")

    def push_to_single_by_alias(self, push_dto: PushDTO | None) -> ApiResult:
        """Push to one alias."""
        return self._push(push_dto, "/push/single/alias")

    def push_batch_by_cid(self, batch_dto: PushBatchDTO | None) -> ApiResult:
        """Push a batch addressed by client id."""
        return self._push_batch(batch_dto, "/push/single/batch/cid")

    def push_batch_by_alias(self, batch_dto: PushBatchDTO | None) -> ApiResult:
        """Push a batch addressed by alias."""
        return self._push_batch(batch_dto, "/push/single/batch/alias")

    def push_all(self, push_dto: PushDTO | None) -> ApiResult:
        """Push to every user; the audience is replaced by ``"all"``."""
        self._validate(push_dto, "push_dto", needs_message=True)
        push_dto.audience = "all"
        return self._send(push_dto, "/push/all")

    def push_by_tag(self, push_dto: PushDTO | None) -> ApiResult:
        """Push to users matching tags."""
        return self._push(push_dto, "/push/tag")

    def push_by_fast_custom_tag(self, push_dto: PushDTO | None) -> ApiResult:
        """Push using a fast custom tag."""
        return self._push(push_dto, "/push/fast_custom_tag")

    def create_msg(self, push_dto: PushDTO | None) -> ApiResult:
        """Create a message body for later list pushes."""
        return self._push(push_dto, "/push/list/message")

    def push_list_by_cid(self, audience_dto: AudienceDTO | None) -> ApiResult:
        """Push a created message to a list of client ids."""
        return self._push_list(audience_dto, "/push/list/cid")

    def push_list_by_alias(self, audience_dto: AudienceDTO | None) -> ApiResult:
        """Push a created message to a list of aliases."""
        return self._push_list(audience_dto, "/push/list/alias")

    def stop_push(self, task_id: str) -> ApiResult:
        """Stop a running push task."""
        _check_task_id(task_id)
        return self._client.do_request("DELETE", f"/task/{task_id}", None)

    def query_schedule_task(self, task_id: str) -> ApiResult:
        """Look up a scheduled task."""
        _check_task_id(task_id)
        return self._client.do_request("GET", f"/task/schedule/{task_id}", None)

    def delete_schedule_task(self, task_id: str) -> ApiResult:
        """Delete a scheduled task."""
        _check_task_id(task_id)
        return self._client.do_request("DELETE", f"/task/schedule/{task_id}", None)