"""Slack Incoming Webhook へメッセージを送信するクライアント。"""

from __future__ import annotations

import json
import threading
from collections.abc import Callable
from typing import Any

import httpx

from slack_webhook.shared.config import AppSettings, get_settings
from slack_webhook.shared.exceptions import BaseAppError
from slack_webhook.shared.logging import get_logger
from slack_webhook.shared.types import PayloadObject

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
PAYLOAD_FORM_FIELD = "payload"


class SlackWebhookError(BaseAppError):
    """Webhook 送信に関する例外の基底クラス。"""

    default_message = "Slack webhook delivery failed"


class SerializationError(SlackWebhookError):
    """ペイロードを JSON へ変換できなかった際の例外。"""

    default_message = "Slack webhook payload could not be encoded"


class TransportError(SlackWebhookError):
    """リクエストの組み立てや HTTP 通信に失敗した際の例外。"""

    default_message = "Slack webhook request could not be sent"


def _encode_default(value: Any) -> Any:
    if isinstance(value, PayloadObject):
        return value.to_payload()
    msg = f"Object of type {type(value).__name__} is not JSON serializable"
    raise TypeError(msg)


class SlackWebhookClient:
    """Slack Incoming Webhook へペイロードを POST するクライアント。

    HTTP ステータスコードは検査しない。通信自体が完了すれば 4xx/5xx であっても
    送信成功として扱う。タイムアウトは設定しないため、応答が返らない場合は
    呼び出し元のスレッドがブロックし続ける。リダイレクトには追従する。
    """

    def __init__(
        self,
        *,
        webhook_url: str = "",
        default_username: str = "",
        default_channel: str = "",
        http_post: Callable[..., httpx.Response] = httpx.post,
        logger=None,
    ) -> None:
        self._webhook_url = webhook_url
        self._default_username = default_username
        self._default_channel = default_channel
        self._http_post = http_post
        self._logger = logger or get_logger(__name__)

    @property
    def webhook_url(self) -> str:
        return self._webhook_url

    @property
    def default_username(self) -> str:
        return self._default_username

    @property
    def default_channel(self) -> str:
        return self._default_channel

    # 設定の書き込みは同期しない。複数スレッドからの同時更新は呼び出し側の責任。
    def set_webhook_url(self, webhook_url: str) -> None:
        self._webhook_url = webhook_url

    def set_default_username(self, username: str) -> None:
        self._default_username = username

    def set_default_channel(self, channel: str) -> None:
        self._default_channel = channel

    def encode(self, payload: Any) -> str:
        """ペイロードを送信時と同じ JSON 文字列へ変換する。"""

        try:
            return json.dumps(
                payload, default=_encode_default, ensure_ascii=False, allow_nan=False
            )
        except (TypeError, ValueError) as exc:
            self._logger.error("slack_webhook_serialization_failed", message=str(exc))
            msg = "Slack Webhook ペイロードの変換に失敗しました"
            raise SerializationError(msg) from exc

    def send(self, payload: Any) -> None:
        """ペイロードを `payload` フォームフィールドとして 1 回だけ送信する。

        Raises:
            SerializationError: ペイロードを JSON へ変換できない場合。
            TransportError: URL が不正、または通信が失敗した場合。
        """

        encoded = self.encode(payload)
        try:
            response = self._http_post(
                self._webhook_url,
                data={PAYLOAD_FORM_FIELD: encoded},
                headers={"Content-Type": FORM_CONTENT_TYPE},
                timeout=None,
                follow_redirects=True,
            )
        except (httpx.RequestError, httpx.InvalidURL, UnicodeError) as exc:
            # ホスト名の IDNA 変換に失敗した場合は UnicodeError になる
            self._logger.error(
                "slack_webhook_request_error",
                error_type=type(exc).__name__,
                message=str(exc),
            )
            msg = "Slack Webhook 通信に失敗しました"
            raise TransportError(msg) from exc

        try:
            # レスポンス本文は読み捨てる
            response.read()
        except httpx.RequestError as exc:
            self._logger.error(
                "slack_webhook_request_error",
                error_type=type(exc).__name__,
                message=str(exc),
            )
            msg = "Slack Webhook レスポンスの受信に失敗しました"
            raise TransportError(msg) from exc
        finally:
            response.close()

        if response.is_error:
            self._logger.warning(
                "slack_webhook_unexpected_status",
                status_code=response.status_code,
            )
            return
        self._logger.debug("slack_webhook_sent", status_code=response.status_code)


_client: SlackWebhookClient | None = None
_client_lock = threading.Lock()


def get_or_create_client() -> SlackWebhookClient:
    """プロセス共有のクライアントを返す。初回呼び出し時に一度だけ生成する。"""

    global _client

    client = _client
    if client is None:
        with _client_lock:
            if _client is None:
                _client = SlackWebhookClient()
            client = _client
    return client


def reset_client() -> None:
    """共有クライアントを破棄する。主にテストから利用する。"""

    global _client

    with _client_lock:
        _client = None


def set_webhook_url(webhook_url: str) -> None:
    get_or_create_client().set_webhook_url(webhook_url)


def set_default_username(username: str) -> None:
    get_or_create_client().set_default_username(username)


def set_default_channel(channel: str) -> None:
    get_or_create_client().set_default_channel(channel)


def configure_client(
    settings: AppSettings | None = None,
    *,
    client: SlackWebhookClient | None = None,
) -> SlackWebhookClient:
    """設定値を共有クライアント (または指定クライアント) へ反映する。"""

    slack_settings = (settings or get_settings()).slack
    target = client or get_or_create_client()
    target.set_webhook_url(str(slack_settings.webhook_url))
    target.set_default_username(slack_settings.default_username or "")
    target.set_default_channel(slack_settings.default_channel or "")
    return target


def build_slack_client(
    settings: AppSettings | None = None,
    *,
    http_post: Callable[..., httpx.Response] = httpx.post,
) -> SlackWebhookClient:
    """共有クライアントとは独立したクライアントを設定から生成する。"""

    slack_settings = (settings or get_settings()).slack
    return SlackWebhookClient(
        webhook_url=str(slack_settings.webhook_url),
        default_username=slack_settings.default_username or "",
        default_channel=slack_settings.default_channel or "",
        http_post=http_post,
    )


__all__ = [
    "FORM_CONTENT_TYPE",
    "PAYLOAD_FORM_FIELD",
    "SerializationError",
    "SlackWebhookClient",
    "SlackWebhookError",
    "TransportError",
    "build_slack_client",
    "configure_client",
    "get_or_create_client",
    "reset_client",
    "set_default_channel",
    "set_default_username",
    "set_webhook_url",
]
