import json
import time
from datetime import datetime, timedelta, timezone

import pytest
import responses

from getui.client import Client
from getui.config import Config
from getui.dto import Audience, Notification, PushDTO, PushMessage
from getui.errors import APIError, ConfigError, InvalidRequestIDError, NetworkError
from getui.push_api import PushAPI
from getui.statistic_api import StatisticAPI
from getui.user_api import UserAPI

DOMAIN = "https://push.example.com/v2"
APP_ID = "test_app_id"
AUTH_URL = f"{DOMAIN}/{APP_ID}/auth"


def make_config(**overrides):
    values = dict(app_id=APP_ID, app_key="placeholder", master_secret="secret", domain=DOMAIN)
    values.update(overrides)
    return Config(**values)


def add_auth(mock, code=0, msg="success"):
    mock.add(
        responses.POST,
        AUTH_URL,
        json={"code": code, "msg": msg, "data": {"token": "token"}},
    )


@pytest.fixture
def rsps():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


def test_new_client_keeps_config_and_builds_apis():
    config = make_config()
    client = Client(config)
    assert client.config is config
    assert isinstance(client.push_api, PushAPI)
    assert isinstance(client.user_api, UserAPI)
    assert isinstance(client.statistic_api, StatisticAPI)


def test_new_client_rejects_default_config():
    with pytest.raises(ConfigError) as info:
        Client()
    assert info.value.field == "app_id"


@pytest.mark.parametrize("missing", ["app_id", "app_key", "master_secret", "domain"])
def test_new_client_rejects_incomplete_config(missing):
    with pytest.raises(ConfigError) as info:
        Client(make_config(**{missing: ""}))
    assert info.value.field == missing


def test_generate_request_id_changes_over_time():
    client = Client(make_config())
    first = client.generate_request_id()
    time.sleep(0.001)
    second = client.generate_request_id()
    assert first
    assert first != second
    assert first.isdigit()
    assert 10 <= len(first) <= 32


def test_get_token(rsps):
    add_auth(rsps)
    client = Client(make_config())
    assert client.get_token() == "token"
    sent = json.loads(rsps.calls[0].request.body)
    assert sent["appkey"] == "placeholder"


def test_do_request_sends_token_and_body(rsps):
    add_auth(rsps)
    rsps.add(
        responses.POST,
        f"{DOMAIN}/{APP_ID}/user/alias",
        json={"code": 0, "msg": "success", "data": {"ok": True}},
    )
    client = Client(make_config())
    result = client.do_request("POST", "/user/alias", {"alias": "a1", "cid": "c1"})
    assert result.is_success()
    assert result.data == {"ok": True}
    request = rsps.calls[1].request
    assert request.headers["token"] == "token"
    assert request.headers["Content-Type"] == "application/json;charset=utf-8"
    assert json.loads(request.body) == {"alias": "a1", "cid": "c1"}


def test_do_request_without_body(rsps):
    add_auth(rsps)
    rsps.add(responses.GET, f"{DOMAIN}/{APP_ID}/user/count", json={"code": 0, "msg": "success"})
    client = Client(make_config())
    result = client.do_request("GET", "/user/count")
    assert result.is_success()
    assert result.code == 0
    assert str(result) == "success"
    assert rsps.calls[1].request.body is None
    assert rsps.calls[1].request.method == "GET"


def test_do_request_returns_failed_result(rsps):
    add_auth(rsps)
    rsps.add(responses.GET, f"{DOMAIN}/{APP_ID}/user/count", json={"code": 1001, "msg": "error"})
    client = Client(make_config())
    result = client.do_request("GET", "/user/count")
    assert not result.is_success()
    assert result.code == 1001
    assert str(result) == "error"


def test_token_is_cached_between_requests(rsps):
    add_auth(rsps)
    rsps.add(responses.GET, f"{DOMAIN}/{APP_ID}/user/count", json={"code": 0, "msg": "success"})
    client = Client(make_config())
    client.do_request("GET", "/user/count")
    client.do_request("GET", "/user/count")
    auth_calls = [call for call in rsps.calls if call.request.url == AUTH_URL]
    assert len(auth_calls) == 1
    assert not client.token_manager.is_token_expired()


def test_expired_token_is_refreshed(rsps):
    add_auth(rsps)
    client = Client(make_config())
    client.token_manager.set_token("token", datetime.now(timezone.utc) - timedelta(seconds=1))
    assert client.token_manager.is_token_expired()
    assert client.get_token() == "token"
    assert len(rsps.calls) == 1


def test_auth_failure_raises_api_error(rsps):
    add_auth(rsps, code=10001, msg="error")
    client = Client(make_config())
    with pytest.raises(APIError) as info:
        client.do_request("GET", "/user/count")
    assert info.value.code == 10001
    assert info.value.message == "error"


def test_unreachable_endpoint_raises_network_error(rsps):
    add_auth(rsps)
    client = Client(make_config())
    with pytest.raises(NetworkError) as info:
        client.do_request("GET", "/user/count")
    assert info.value.message == "failed to send request"


def test_undecodable_response_raises_network_error(rsps):
    add_auth(rsps)
    rsps.add(responses.GET, f"{DOMAIN}/{APP_ID}/user/count", body="not json")
    client = Client(make_config())
    with pytest.raises(NetworkError) as info:
        client.do_request("GET", "/user/count")
    assert info.value.message == "failed to decode response"


def test_unserialisable_body_raises_network_error(rsps):
    add_auth(rsps)
    client = Client(make_config())
    with pytest.raises(NetworkError) as info:
        client.do_request("POST", "/user/status", {"cid": object()})
    assert info.value.message == "failed to marshal request body"


def test_push_fills_request_id(rsps):
    add_auth(rsps)
    rsps.add(
        responses.POST,
        f"{DOMAIN}/{APP_ID}/push/single/cid",
        json={"code": 0, "msg": "success", "data": {}},
    )
    client = Client(make_config())
    push_dto = PushDTO(
        push_message=PushMessage(
            notification=Notification(
                title="测试推送标题", body="测试推送内容", click_type="url", url="https://www.getui.com"
            )
        ),
        audience=Audience(cids=["test_cid_123"]),
    )
    result = client.push_api.push_to_single_by_cid(push_dto)
    assert result.is_success()
    sent = json.loads(rsps.calls[1].request.body)
    assert push_dto.request_id
    assert sent["request_id"] == push_dto.request_id
    assert sent["audience"] == {"cid": ["test_cid_123"]}
    assert sent["push_message"]["notification"]["title"] == "测试推送标题"


def test_push_with_invalid_request_id_sends_nothing(rsps):
    client = Client(make_config())
    push_dto = PushDTO(
        request_id="123",
        push_message=PushMessage(transmission="data"),
        audience=Audience(cids=["test_cid_123"]),
    )
    with pytest.raises(InvalidRequestIDError):
        client.push_api.push_to_single_by_cid(push_dto)
    assert len(rsps.calls) == 0


def test_context_manager_returns_client():
    config = make_config()
    with Client(config) as client:
        assert client.config is config