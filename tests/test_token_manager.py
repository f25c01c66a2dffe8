import json
from datetime import datetime, timedelta, timezone

import pytest
import requests
import responses

from getui.config import Config
from getui.errors import APIError, NetworkError
from getui.token_manager import TokenManager, generate_sign

DOMAIN = "https://api.example.com/v2"
AUTH_URL = f"{DOMAIN}/app_id_1/auth"


@pytest.fixture
def config():
    return Config(
        app_id="app_id_1",
        app_key="placeholder",
        master_secret="secret",
        domain=DOMAIN,
    )


@pytest.fixture
def manager(config):
    return TokenManager(config, config.create_session())


@pytest.fixture
def rsps():
    with responses.RequestsMock() as mock:
        yield mock


def add_success(mock):
    mock.add(responses.POST, AUTH_URL, json={"code": 0, "msg": "success", "data": {"token": "token"}})


def test_generate_sign_of_empty_input_is_sha256_of_empty_string():
    assert generate_sign("", "", "") == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_generate_sign_concatenates_in_order():
    assert generate_sign("a", "b", "c") == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )
    assert generate_sign("a", "b", "c") != generate_sign("c", "b", "a")


def test_generate_sign_depends_on_timestamp():
    first = generate_sign("placeholder", "1000", "secret")
    second = generate_sign("placeholder", "1001", "secret")
    assert first != second
    assert len(first) == 64
    assert all(ch in "0123456789abcdef" for ch in first)


def test_get_token_sends_signed_request(rsps, manager):
    add_success(rsps)
    assert manager.get_token() == "token"

    request = rsps.calls[0].request
    assert request.headers["Content-Type"] == "application/json;charset=utf-8"
    body = json.loads(request.body)
    assert body["appkey"] == "placeholder"
    assert body["timestamp"].isdigit()
    assert body["sign"] == generate_sign("placeholder", body["timestamp"], "secret")


def test_get_token_is_cached(rsps, manager):
    add_success(rsps)
    assert manager.get_token() == manager.get_token()
    assert len(rsps.calls) == 1
    assert manager.is_token_expired() is False


def test_get_token_sets_expiry_about_a_day_ahead(rsps, manager):
    add_success(rsps)
    before = datetime.now(timezone.utc)
    manager.get_token()
    after = datetime.now(timezone.utc)
    assert before + timedelta(hours=23) <= manager.expire_time <= after + timedelta(hours=23)


def test_get_token_raises_api_error_on_failure_code(rsps, manager):
    rsps.add(responses.POST, AUTH_URL, json={"code": 10001, "msg": "bad sign"})
    with pytest.raises(APIError) as info:
        manager.get_token()
    assert info.value.code == 10001
    assert info.value.message == "bad sign"
    assert manager.token == ""


def test_get_token_wraps_undecodable_response(rsps, manager):
    rsps.add(responses.POST, AUTH_URL, body="not json")
    with pytest.raises(NetworkError) as info:
        manager.get_token()
    assert info.value.message == "failed to decode auth response"


def test_get_token_wraps_connection_failure(rsps, manager):
    rsps.add(responses.POST, AUTH_URL, body=requests.ConnectionError("refused"))
    with pytest.raises(NetworkError) as info:
        manager.get_token()
    assert info.value.message == "failed to send auth request"
    assert isinstance(info.value.cause, requests.ConnectionError)


def test_get_token_requires_token_data(rsps, manager):
    rsps.add(responses.POST, AUTH_URL, json={"code": 0, "msg": "success"})
    with pytest.raises(NetworkError) as info:
        manager.get_token()
    assert info.value.message == "failed to parse token"


def test_set_token_in_future_skips_request(rsps, manager):
    manager.set_token("token", datetime.now(timezone.utc) + timedelta(hours=1))
    assert manager.get_token() == "token"
    assert len(rsps.calls) == 0
    assert manager.is_token_expired() is False


def test_expired_token_is_refreshed(rsps, manager):
    manager.set_token("stale", datetime.now(timezone.utc) - timedelta(seconds=1))
    assert manager.is_token_expired() is True
    add_success(rsps)
    assert manager.get_token() == "token"
    assert len(rsps.calls) == 1


def test_set_token_accepts_naive_datetime(manager):
    manager.set_token("token", datetime.now() + timedelta(hours=1))
    assert manager.is_token_expired() is False
    assert manager.expire_time.tzinfo is not None


def test_clear_token(manager):
    manager.set_token("token", datetime.now(timezone.utc) + timedelta(hours=1))
    manager.clear_token()
    assert manager.token == ""
    assert manager.expire_time is None
    assert manager.is_token_expired() is True