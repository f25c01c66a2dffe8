"""Result envelope returned by every API call."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields, is_dataclass
from typing import Any, TypeVar

from .errors import InvalidResponseError

T = TypeVar("T")


@dataclass
class ApiResult:
    """The ``code``/``msg``/``data`` envelope of a service response."""

    code: int = 0
    msg: str = ""
    data: Any = None

    @classmethod
    def from_dict(cls, payload: Any) -> ApiResult:
        """Build a result from a decoded JSON object."""
        if not isinstance(payload, Mapping):
            raise InvalidResponseError("response must be a JSON object")
        code = payload.get("code")
        if code is None:
            code = 0
        if isinstance(code, bool) or not isinstance(code, int):
            raise InvalidResponseError("response code must be an integer")
        msg = payload.get("msg")
        if msg is None:
            msg = ""
        if not isinstance(msg, str):
            raise InvalidResponseError("response msg must be a string")
        return cls(code=code, msg=msg, data=payload.get("data"))

    def is_success(self) -> bool:
        """Whether the service reported success."""
        return self.code == 0

    def decode_data(self, factory: Callable[..., T]) -> T:
        """Convert ``data`` with *factory*.

        A dataclass type is filled from the matching keys of a JSON object;
        unknown keys are ignored. Any other callable receives the raw data.
        """
        if self.data is None:
            raise InvalidResponseError("response has no data")
        if isinstance(factory, type) and is_dataclass(factory):
            if not isinstance(self.data, Mapping):
                raise InvalidResponseError("response data must be a JSON object")
            names = {
                f.metadata.get("json", f.name): f.name for f in fields(factory) if f.init
            }
            values = {names[key]: value for key, value in self.data.items() if key in names}
            return factory(**values)
        return factory(self.data)

    def __str__(self) -> str:
        return self.msg