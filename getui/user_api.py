"""User management endpoints."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Protocol

from .api_result import ApiResult
from .errors import InvalidAliasError, InvalidCIDError, ValidationError

_DEFAULT_PAGE = 1
_DEFAULT_PAGE_SIZE = 100
_MAX_PAGE_SIZE = 1000


class _RequestSender(Protocol):
    def do_request(self, method: str, uri: str, body: Any = None) -> ApiResult: ...


def _check_cid(cid: str) -> None:
    if not cid:
        raise InvalidCIDError()


def _check_alias(alias: str) -> None:
    if not alias:
        raise InvalidAliasError()


def _pairs(alias_cid_list: Iterable[Mapping[str, str]]) -> list[dict[str, str]]:
    pairs = [dict(item) for item in alias_cid_list]
    if not pairs:
        raise ValidationError("alias_cid_list cannot be empty")
    return pairs


def _tag_list(tags: Iterable[str] | None) -> list[str] | None:
    return None if tags is None else list(tags)


class UserAPI:
    """Client status, aliases and tags."""

    def __init__(self, client: _RequestSender) -> None:
        self._client = client

    def query_user_status(self, cids: Iterable[str]) -> ApiResult:
        """The online status of several client ids."""
        cid_list = list(cids)
        if not cid_list:
            raise ValidationError("cids cannot be empty")
        return self._client.do_request("POST", "/user/status", {"cid": cid_list})

    def query_alias_by_cid(self, cid: str) -> ApiResult:
        """The alias bound to a client id."""
        _check_cid(cid)
        return self._client.do_request("GET", f"/user/alias/{cid}", None)

    def query_cid_by_alias(self, alias: str) -> ApiResult:
        """The client ids bound to an alias."""
        _check_alias(alias)
        return self._client.do_request("GET", f"/user/cid/{alias}", None)

    def bind_alias(self, alias: str, cid: str) -> ApiResult:
        """Bind *alias* to *cid*."""
        _check_alias(alias)
        _check_cid(cid)
        return self._client.do_request("POST", "/user/alias", {"alias": alias, "cid": cid})

    def unbind_alias(self, alias: str, cid: str) -> ApiResult:
        """Remove the binding between *alias* and *cid*."""
        _check_alias(alias)
        _check_cid(cid)
        return self._client.do_request("DELETE", "/user/alias", {"alias": alias, "cid": cid})

    def bind_alias_batch(self, alias_cid_list: Iterable[Mapping[str, str]]) -> ApiResult:
        """Bind several alias/cid pairs at once."""
        pairs = _pairs(alias_cid_list)
        return self._client.do_request("POST", "/user/alias/batch", {"data_list": pairs})

    def unbind_alias_batch(self, alias_cid_list: Iterable[Mapping[str, str]]) -> ApiResult:
        """Remove several alias/cid bindings at once."""
        pairs = _pairs(alias_cid_list)
        return self._client.do_request("DELETE", "/user/alias/batch", {"data_list": pairs})

    def query_user_detail(self, cid: str) -> ApiResult:
        """Details of one client id."""
        _check_cid(cid)
        return self._client.do_request("GET", f"/user/detail/{cid}", None)

    def set_user_tag(self, cid: str, tags: Iterable[str] | None) -> ApiResult:
        """Set the tags of a client id."""
        _check_cid(cid)
        body = {"cid": cid, "tags": _tag_list(tags)}
        return self._client.do_request("POST", "/user/tag", body)

    def get_user_tag(self, cid: str) -> ApiResult:
        """The tags of a client id."""
        _check_cid(cid)
        return self._client.do_request("GET", f"/user/tag/{cid}", None)

    def delete_user_tag(self, cid: str, tags: Iterable[str] | None) -> ApiResult:
        """Remove tags from a client id."""
        _check_cid(cid)
        body = {"cid": cid, "tags": _tag_list(tags)}
        return self._client.do_request("DELETE", "/user/tag", body)

    def get_user_count(self) -> ApiResult:
        """The number of users."""
        return self._client.do_request("GET", "/user/count", None)

    def get_user_list(self, page: int = _DEFAULT_PAGE, size: int = _DEFAULT_PAGE_SIZE) -> ApiResult:
        """One page of users; out-of-range arguments fall back to defaults."""
        if page <= 0:
            page = _DEFAULT_PAGE
        if size <= 0 or size > _MAX_PAGE_SIZE:
            size = _DEFAULT_PAGE_SIZE
        return self._client.do_request("GET", f"/user/list?page={page}&size={size}", None)