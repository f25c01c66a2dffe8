"""Command line tool that checks credentials by fetching a token or pushing a test message."""

from __future__ import annotations

import argparse
import json
import time
from collections.abc import Sequence

from .client import Client
from .config import Config, load_config_from_env_file_or_default
from .dto import Audience, Notification, PushDTO, PushMessage
from .errors import APIError, ConfigError, GetuiError, NetworkError

_DEFAULT_CID = "test_cid_123"


def mask_secret(secret: str) -> str:
    """Hide all but the first and last four characters."""
    if len(secret) <= 8:
        return "***"
    return f"{secret[:4]}****{secret[-4:]}"


def mask_token(token: str) -> str:
    """Hide all but the first and last six characters."""
    if len(token) <= 10:
        return "***"
    return f"{token[:6]}****{token[-6:]}"


def _print_config(config: Config) -> None:
    print(f"📱 AppID: {config.app_id}")
    print(f"🔑 AppKey: {config.app_key}")
    print(f"🔐 MasterSecret: {mask_secret(config.master_secret)}")
    print(f"🌐 Domain: {config.domain}")
    print()


def _elapsed(start: float) -> str:
    return f"{(time.perf_counter() - start) * 1000:.3f}ms"


def _run_push(client: Client, cid: str) -> int:
    push_dto = PushDTO(
        request_id=client.generate_request_id(),
        push_message=PushMessage(
            notification=Notification(
                title="测试推送",
                body="这是一个测试推送消息",
                click_type="url",
                url="https://www.getui.com",
            )
        ),
        audience=Audience(cids=[cid]),
    )
    print("📤 发送测试推送...")
    try:
        result = client.push_api.push_to_single_by_cid(push_dto)
    except APIError as exc:
        print(f"❌ API错误: code={exc.code}, message={exc.message}")
        return 1
    except GetuiError as exc:
        print(f"❌ 其他错误: {exc}")
        return 1

    if result.is_success():
        print(f"✅ 推送成功: {json.dumps(result.data, ensure_ascii=False)}")
        return 0
    print(f"❌ 推送失败: code={result.code}, msg={result.msg}")
    return 1


def _fetch_token(client: Client, label: str) -> str | None:
    try:
        return client.get_token()
    except APIError as exc:
        print(f"❌ {label}API错误: code={exc.code}, message={exc.message}")
    except NetworkError as exc:
        print(f"❌ {label}网络错误: {exc.message}")
    except GetuiError as exc:
        print(f"❌ {label}其他错误: {exc}")
    return None


def _run_token(client: Client) -> int:
    print(f"📝 时间戳: {time.time_ns() // 1_000_000}")
    print()

    print("🔄 正在获取Token...")
    start = time.perf_counter()
    first = _fetch_token(client, "")
    duration = _elapsed(start)
    if first is not None:
        print(f"✅ Token获取成功: {mask_token(first)}")
    print(f"⏱️  耗时: {duration}")
    print()

    print("🔄 再次获取Token（测试缓存）...")
    start = time.perf_counter()
    second = _fetch_token(client, "第二次获取")
    duration = _elapsed(start)
    if second is not None:
        print(f"✅ 第二次Token获取成功: {mask_token(second)}")
        if first == second:
            print("✅ Token缓存验证成功")
        else:
            print("❌ Token缓存验证失败")
    print(f"⏱️  第二次耗时: {duration}")
    print()

    print("✅ Token示例演示完成")
    return 0 if first is not None and first == second else 1


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    parser = argparse.ArgumentParser(
        prog="getui", description="Check push credentials read from a .env file."
    )
    parser.add_argument("--env-file", default=".env", help="file holding the credentials")
    commands = parser.add_subparsers(dest="command", required=True)
    push = commands.add_parser("push", help="send a test notification to one client id")
    push.add_argument("--cid", default=_DEFAULT_CID, help="client id to push to")
    commands.add_parser("token", help="fetch an auth token twice to check caching")
    args = parser.parse_args(argv)

    if args.command == "token":
        print("🔐 个推SDK GetToken示例")
        print("============================")
    else:
        print("🚀 个推SDK .env文件配置示例")
        print("==================================")

    config = load_config_from_env_file_or_default(args.env_file)
    _print_config(config)

    try:
        client = Client(config)
    except ConfigError as exc:
        print(f"❌ 配置错误: {exc}")
        return 1

    with client:
        if args.command == "token":
            return _run_token(client)
        return _run_push(client, args.cid)


if __name__ == "__main__":
    raise SystemExit(main())