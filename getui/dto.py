"""Request and response bodies exchanged with the push service."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import field, fields, is_dataclass, dataclass
from typing import Any


def _omit(default: Any = None, *, name: str | None = None) -> Any:
    """A field left out of the payload when it holds its zero value."""
    metadata: dict[str, Any] = {"omitempty": True}
    if name is not None:
        metadata["json"] = name
    return field(default=default, metadata=metadata)


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (str, bytes, list, tuple, Mapping)):
        return len(value) == 0
    return False


def to_payload(value: Any) -> Any:
    """Convert DTOs, mappings and sequences into JSON-ready values."""
    if is_dataclass(value) and not isinstance(value, type):
        payload: dict[str, Any] = {}
        for spec in fields(value):
            item = getattr(value, spec.name)
            if spec.metadata.get("omitempty") and _is_empty(item):
                continue
            payload[spec.metadata.get("json", spec.name)] = to_payload(item)
        return payload
    if isinstance(value, Mapping):
        return {
            str(key): to_payload(item)
            for key, item in sorted(value.items(), key=lambda pair: str(pair[0]))
        }
    if isinstance(value, (list, tuple)):
        return [to_payload(item) for item in value]
    return value


@dataclass
class AuthDTO:
    sign: str = ""
    timestamp: str = ""
    app_key: str = field(default="", metadata={"json": "appkey"})


@dataclass
class Audience:
    cids: list[str] | None = _omit(name="cid")
    alias: list[str] | None = _omit()
    tag: list[str] | None = _omit()
    all: str = _omit("")
    file_id: str = _omit("")


@dataclass
class RevokeBean:
    old_task_id: str = ""


@dataclass
class Notification:
    title: str = ""
    body: str = ""
    click_type: str = ""
    url: str = _omit("")
    intent: str = _omit("")
    payload: str = _omit("")
    badge: int = _omit(0)
    ring: int = _omit(0)
    buzz: int = _omit(0)
    logo: str = _omit("")
    logo_url: str = _omit("")
    channel_id: str = _omit("")
    channel_name: str = _omit("")
    channel_level: int = _omit(0)
    multi_pkg: bool = _omit(False)
    notify_id: int = _omit(0)
    options: dict[str, str] | None = _omit()


@dataclass
class PushMessage:
    network_type: int = _omit(0)
    duration: str = _omit("")
    notification: Notification | None = _omit()
    transmission: str = _omit("")
    revoke: RevokeBean | None = _omit()


@dataclass
class Alert:
    title: str = _omit("")
    body: str = _omit("")
    subtitle: str = _omit("")
    action: str = _omit("")
    args: list[str] | None = _omit()


@dataclass
class APNS:
    alert: Alert | None = _omit()
    badge: int = _omit(0)
    sound: str = _omit("")
    content_available: int = _omit(0)
    mutable_content: int = _omit(0)
    category: str = _omit("")
    custom_data: dict[str, str] | None = _omit()


@dataclass
class IOSDTO:
    type: str = _omit("")
    apns: APNS | None = _omit()
    apns_collapse_id: str = _omit("")
    auto_badge: str = _omit("")
    mutable_content: int = _omit(0)
    content_available: int = _omit(0)
    category: str = _omit("")
    alert: Alert | None = _omit()


@dataclass
class ThirdNotification:
    title: str = ""
    body: str = ""
    click_type: str = ""
    url: str = _omit("")
    intent: str = _omit("")
    payload: str = _omit("")
    notify_id: str = _omit("")
    channel_id: str = _omit("")
    channel_name: str = _omit("")
    channel_level: int = _omit(0)
    options: dict[str, str] | None = _omit()


@dataclass
class UPS:
    notification: ThirdNotification | None = _omit()
    options: dict[str, str] | None = _omit()
    transmission: str = _omit("")


@dataclass
class AndroidDTO:
    ups: UPS | None = _omit()


@dataclass
class HarmonyNotification:
    title: str = ""
    body: str = ""
    category: str = _omit("")
    click_type: str = _omit("")
    want: str = _omit("")


@dataclass
class HarmonyDTO:
    notification: HarmonyNotification | None = _omit()


@dataclass
class PushChannel:
    ios: IOSDTO | None = _omit()
    android: AndroidDTO | None = _omit()
    harmony: HarmonyDTO | None = _omit()


@dataclass
class Strategy:
    default: int = _omit(0)
    ios: int = _omit(0)
    st: int = _omit(0)
    hw: int = _omit(0)
    xm: int = _omit(0)
    vv: int = _omit(0)
    op: int = _omit(0)
    fcm: int = _omit(0)


@dataclass
class Settings:
    ttl: int = _omit(0)
    strategy: Strategy | None = _omit()
    speed: int = _omit(0)
    schedule_time: str = _omit("")


@dataclass
class _PushRequest:
    request_id: str = ""
    task_name: str = _omit("")
    group_name: str = _omit("")
    settings: Settings | None = _omit()
    audience: Any = None
    push_message: PushMessage | None = None
    push_channel: PushChannel | None = _omit()


@dataclass
class PushDTO(_PushRequest):
    """A push to one audience."""


@dataclass
class PushBatchDTO(_PushRequest):
    """A push sent as part of a batch."""


@dataclass
class AudienceDTO:
    request_id: str = ""
    task_name: str = _omit("")
    group_name: str = _omit("")
    settings: Settings | None = _omit()
    audience: Any = None


@dataclass
class TaskIDDTO:
    task_id: str = ""


@dataclass
class ScheduleTaskDTO:
    task_id: str = ""
    status: str = ""
    create_time: str = ""
    schedule_time: str = ""


@dataclass
class CidStatusDTO:
    cid: str = ""
    status: str = ""


@dataclass
class StatisticDTO:
    task_id: str = ""
    send_count: int = 0
    receive_count: int = 0
    display_count: int = 0
    click_count: int = 0