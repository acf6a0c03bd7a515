"""Slack Webhook へ送るメッセージのビルダー。"""

from __future__ import annotations

import json
from dataclasses import dataclass

from slack_webhook.shared.types import PayloadObject

from .client import SlackWebhookClient, get_or_create_client


@dataclass(slots=True)
class SlackField(PayloadObject):
    """アタッチメント内に表示するタイトルと値の組。"""

    title: str | None = None
    value: str | None = None
    short: bool | None = None

    def set_title(self, title: str) -> SlackField:
        self.title = title
        return self

    def set_value(self, value: str) -> SlackField:
        self.value = value
        return self

    def set_short(self, short: bool) -> SlackField:
        self.short = short
        return self


@dataclass(slots=True)
class SlackAttachment(PayloadObject):
    """カラーバーやフィールドを持つリッチコンテンツブロック。

    `fields` は追加順がそのまま表示順になる。
    """

    title: str | None = None
    title_link: str | None = None
    text: str | None = None
    color: str | None = None
    author_name: str | None = None
    author_link: str | None = None
    author_icon: str | None = None
    image_url: str | None = None
    thumb_url: str | None = None
    footer: str | None = None
    footer_icon: str | None = None
    fields: list[SlackField] | None = None

    def set_title(self, title: str) -> SlackAttachment:
        self.title = title
        return self

    def set_title_link(self, link: str) -> SlackAttachment:
        self.title_link = link
        return self

    def set_text(self, text: str) -> SlackAttachment:
        self.text = text
        return self

    def set_color(self, color: str) -> SlackAttachment:
        self.color = color
        return self

    def set_author_name(self, author_name: str) -> SlackAttachment:
        self.author_name = author_name
        return self

    def set_author_link(self, author_link: str) -> SlackAttachment:
        self.author_link = author_link
        return self

    def set_author_icon(self, author_icon: str) -> SlackAttachment:
        self.author_icon = author_icon
        return self

    def set_image_url(self, image_url: str) -> SlackAttachment:
        self.image_url = image_url
        return self

    def set_thumb_url(self, thumb_url: str) -> SlackAttachment:
        self.thumb_url = thumb_url
        return self

    def set_footer(self, footer: str) -> SlackAttachment:
        self.footer = footer
        return self

    def set_footer_icon(self, footer_icon: str) -> SlackAttachment:
        self.footer_icon = footer_icon
        return self

    def add_field(self, field: SlackField) -> SlackAttachment:
        """フィールドを末尾へ追加する。"""

        if self.fields is None:
            self.fields = []
        self.fields.append(field)
        return self


@dataclass(slots=True)
class SlackMessage(PayloadObject):
    """Webhook へ送信するトップレベルのメッセージ。

    `icon_url` と `icon_emoji` は両方設定してもよく、どちらを優先するかは
    受信側に委ねる。`link_names` はワイヤ互換のため 0/1 の整数で保持する。
    """

    text: str | None = None
    channel: str | None = None
    username: str | None = None
    icon_url: str | None = None
    icon_emoji: str | None = None
    link_names: int | None = None
    attachments: list[SlackAttachment] | None = None

    def set_text(self, text: str) -> SlackMessage:
        self.text = text
        return self

    def set_channel(self, channel: str) -> SlackMessage:
        self.channel = channel
        return self

    def set_username(self, username: str) -> SlackMessage:
        self.username = username
        return self

    def set_icon_url(self, icon_url: str) -> SlackMessage:
        self.icon_url = icon_url
        return self

    def set_icon_emoji(self, icon_emoji: str) -> SlackMessage:
        self.icon_emoji = icon_emoji
        return self

    def use_link_names(self, enabled: bool) -> SlackMessage:
        self.link_names = 1 if enabled else 0
        return self

    def add_attachment(self, attachment: SlackAttachment) -> SlackMessage:
        """アタッチメントを末尾へ追加する。"""

        if self.attachments is None:
            self.attachments = []
        self.attachments.append(attachment)
        return self

    def to_json(self) -> str:
        """送信されるものと同じ構造の JSON 文字列を返す。"""

        return json.dumps(self.to_payload(), ensure_ascii=False, allow_nan=False)

    def send(self, client: SlackWebhookClient | None = None) -> None:
        """メッセージを送信する。クライアント未指定時は共有クライアントを使う。"""

        (client or get_or_create_client()).send(self)


def new_message(client: SlackWebhookClient | None = None) -> SlackMessage:
    """クライアントの既定ユーザー名・チャンネルを引き継いだメッセージを生成する。

    既定値は生成時点の値をコピーするため、後からクライアント側を変更しても
    生成済みのメッセージには影響しない。
    """

    source = client or get_or_create_client()
    return SlackMessage(
        username=source.default_username or None,
        channel=source.default_channel or None,
    )


def new_attachment() -> SlackAttachment:
    return SlackAttachment()


def new_field() -> SlackField:
    return SlackField()


__all__ = [
    "SlackAttachment",
    "SlackField",
    "SlackMessage",
    "new_attachment",
    "new_field",
    "new_message",
]
