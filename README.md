# getui

A small Python client for the Getui push notification REST API (v2).

It handles authentication for you. It signs an auth request with your app
key and master secret, then caches the returned token for 23 hours. It also
gives you dataclass request objects and wrappers for the push, user and
statistics endpoints.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Configuration

`getui.config.Config` holds the application credentials and the HTTP
settings. All timeouts are in milliseconds. By default the domain is
`https://restapi.getui.com/v2`, the socket (read) timeout is 30000 and the
connect timeout is 10000.

```python
from getui.config import Config

config = Config(
    app_id="my-app-id",
    app_key="placeholder",
    master_secret="secret",
)
config.validate()  # raises ConfigError for the first missing required field
```

Other useful settings:

- `trust_ssl`: when true, TLS certificates are not verified.
- `proxy_config`: an `HTTPProxyConfig(host, port, username, password)` that
  is used for both HTTP and HTTPS.
- `uri_to_socket_timeout_map`: read timeouts for particular endpoint paths,
  for example `{"/push/single/cid": 5000}`. Use
  `config.custom_socket_timeout(uri)` to look one up.

You can also read credentials from a `.env` file. Blank lines and lines
that start with `#` are skipped. A value wrapped in double quotes has the
quotes removed. Only these keys are used:

```
GETUI_TEST_APP_ID=my-app-id
GETUI_TEST_APP_KEY=placeholder
GETUI_TEST_MASTER_SECRET=secret
GETUI_TEST_DOMAIN=https://restapi.getui.com/v2
```

```python
from getui.config import load_config_from_env_file, load_config_from_env_file_or_default

config = load_config_from_env_file(".env")             # raises OSError if unreadable
config = load_config_from_env_file_or_default(".env")  # falls back to Config()
```

## Pushing a notification

```python
from getui.client import Client
from getui.dto import Audience, Notification, PushDTO, PushMessage

with Client(config) as client:
    push = PushDTO(
        audience=Audience(cids=["some-client-id"]),
        push_message=PushMessage(
            notification=Notification(
                title="Hello",
                body="A test notification",
                click_type="url",
                url="https://www.example.com",
            )
        ),
    )
    result = client.push_api.push_to_single_by_cid(push)
    if result.is_success():
        print(result.data)
    else:
        print(result.code, result.msg)
```

`Client(config)` validates the configuration and raises `ConfigError` if it
is incomplete. `Client()` with no argument uses the defaults, which have no
credentials, so it also raises.

If `request_id` is empty, the client fills it with the current time in
nanoseconds (`client.generate_request_id()`). A request id you set yourself
must be 10 to 32 bytes long in UTF-8, or `InvalidRequestIDError` is raised.
A missing audience raises `EmptyAudienceError`. A missing push message
raises `EmptyPushMessageError`, except for list pushes, which carry no
message.

Request objects are turned into JSON by `getui.dto.to_payload`. Optional
fields that hold their zero value (empty string, 0, `False`, `None`, an
empty list or dict) are left out.

The push calls on `client.push_api` are `push_to_single_by_cid`,
`push_to_single_by_alias`, `push_batch_by_cid`, `push_batch_by_alias`,
`push_all`, `push_by_tag`, `push_by_fast_custom_tag`, `create_msg`,
`push_list_by_cid`, `push_list_by_alias`, `stop_push`,
`query_schedule_task` and `delete_schedule_task`. `push_all` replaces the
audience with `"all"`.

## Users and statistics

```python
client.user_api.bind_alias("alias-1", "some-client-id")
client.user_api.query_user_status(["some-client-id"])
client.user_api.set_user_tag("some-client-id", ["vip"])
client.user_api.get_user_list(1, 100)

client.statistic_api.query_push_result_by_task_ids(["task-id"])
client.statistic_api.query_push_result_by_date("2024-01-31")
client.statistic_api.query_online_user_count()
```

`get_user_list` uses page 1 when the page is not positive. It uses a page
size of 100 when the size is not between 1 and 1000. The statistics calls
that take a date accept a `YYYY-MM-DD` string or a `datetime.date`. If you
pass nothing, they use today's date.

## Results

Every call returns an `ApiResult` with `code`, `msg` and `data`.
`is_success()` is true when `code` is 0. `decode_data(factory)` fills a
dataclass, such as `getui.dto.TaskIDDTO`, from the matching keys of `data`
and ignores unknown keys. Any other callable receives the raw data.

## Errors

Every error the library raises derives from `getui.errors.GetuiError`:

- `ConfigError` when a required configuration field is missing. It carries
  `field`.
- `ValidationError` and its subclasses (`InvalidRequestIDError`,
  `EmptyAudienceError`, `EmptyPushMessageError`, `InvalidCIDError`,
  `InvalidAliasError`) when a request argument is wrong. `ValidationError`
  and `ConfigError` are also `ValueError`s.
- `APIError` when the authentication endpoint answers with a non-zero code.
  It carries `code` and `message`. Other endpoints return their non-zero
  codes in the `ApiResult`; they do not raise.
- `NetworkError` when a request cannot be sent or its response cannot be
  decoded. It carries `message` and `cause`.

## Command line

The `getui` command reads credentials from `.env`, or from the file given
with `--env-file`. It prints them with the master secret masked, then runs
a check.

To fetch a token twice and confirm that the second fetch reuses the cached
token:

```
getui token
```

To send a test notification to one client id:

```
getui push --cid some-client-id
```

The command exits with status 0 on success and 1 otherwise.

## Limitations

`Config` keeps several settings that the client stores but never acts on:

- `max_http_try_time`: requests are not retried.
- The stable-domain detection settings (`open_analyse_stable_domain` and
  the related intervals and failure counts).
- The health-check settings.
- `connection_request_timeout`.

Each request is sent once, to the configured `domain`.