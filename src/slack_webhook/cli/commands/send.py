from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from slack_webhook.infra.slack import (
    SlackAttachment,
    SlackField,
    SlackMessage,
    SlackWebhookClient,
    SlackWebhookError,
    configure_client,
    new_attachment,
    new_field,
    new_message,
)
from slack_webhook.shared.config import AppSettings, get_settings
from slack_webhook.shared.exceptions import ConfigurationError
from slack_webhook.shared.logging import get_logger

app = typer.Typer(help="メッセージを Slack Webhook へ送信するコマンド", invoke_without_command=True)


def _create_client(settings: AppSettings) -> SlackWebhookClient:
    return configure_client(settings)


def _parse_field(raw: str, *, short: bool) -> SlackField:
    title, separator, value = raw.partition("=")
    if not separator or not title:
        msg = f"フィールドは TITLE=VALUE 形式で指定してください: {raw}"
        raise typer.BadParameter(msg)
    return new_field().set_title(title).set_value(value).set_short(short)


def _build_attachment(
    *,
    color: str | None,
    title: str | None,
    title_link: str | None,
    text: str | None,
    footer: str | None,
    fields: list[SlackField],
) -> SlackAttachment | None:
    if not any((color, title, title_link, text, footer, fields)):
        return None

    attachment = new_attachment()
    if color:
        attachment.set_color(color)
    if title:
        attachment.set_title(title)
    if title_link:
        attachment.set_title_link(title_link)
    if text:
        attachment.set_text(text)
    if footer:
        attachment.set_footer(footer)
    for field in fields:
        attachment.add_field(field)
    return attachment


def _build_message(
    *,
    client: SlackWebhookClient,
    text: str | None,
    channel: str | None,
    username: str | None,
    icon_url: str | None,
    icon_emoji: str | None,
    link_names: bool,
    attachment: SlackAttachment | None,
) -> SlackMessage:
    message = new_message(client)
    if text:
        message.set_text(text)
    if channel:
        message.set_channel(channel)
    if username:
        message.set_username(username)
    if icon_url:
        message.set_icon_url(icon_url)
    if icon_emoji:
        message.set_icon_emoji(icon_emoji)
    message.use_link_names(link_names)
    if attachment is not None:
        message.add_attachment(attachment)
    return message


@app.callback()
def run(
    text: Annotated[str | None, typer.Option("--text", "-t", help="本文")] = None,
    channel: Annotated[
        str | None, typer.Option("--channel", "-c", help="投稿先チャンネル。省略時は既定値。")
    ] = None,
    username: Annotated[
        str | None, typer.Option("--username", "-u", help="表示ユーザー名。省略時は既定値。")
    ] = None,
    icon_url: Annotated[str | None, typer.Option("--icon-url", help="アイコン画像の URL")] = None,
    icon_emoji: Annotated[
        str | None, typer.Option("--icon-emoji", help="アイコン絵文字 (例: :robot_face:)")
    ] = None,
    link_names: Annotated[
        bool, typer.Option("--link-names", help="@ユーザー名やチャンネル名をリンク化する")
    ] = False,
    color: Annotated[
        str | None, typer.Option("--color", help="アタッチメントの色 (good/warning/danger/#hex)")
    ] = None,
    title: Annotated[str | None, typer.Option("--title", help="アタッチメントのタイトル")] = None,
    title_link: Annotated[
        str | None, typer.Option("--title-link", help="アタッチメントタイトルのリンク先")
    ] = None,
    attachment_text: Annotated[
        str | None, typer.Option("--attachment-text", help="アタッチメントの本文")
    ] = None,
    footer: Annotated[str | None, typer.Option("--footer", help="アタッチメントのフッター")] = None,
    field: Annotated[
        list[str] | None,
        typer.Option("--field", help="TITLE=VALUE 形式のフィールド。複数指定可。"),
    ] = None,
    short_field: Annotated[
        list[str] | None,
        typer.Option("--short-field", help="横並び表示する TITLE=VALUE 形式のフィールド"),
    ] = None,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="送信せずにペイロードを表示する")
    ] = False,
) -> None:
    """メッセージを組み立てて Webhook へ送信する。"""

    logger = get_logger("cli.send.run", dry_run=dry_run)

    fields = [_parse_field(raw, short=False) for raw in field or []]
    fields.extend(_parse_field(raw, short=True) for raw in short_field or [])

    try:
        settings = get_settings()
        client = _create_client(settings)
    except ConfigurationError as exc:
        logger.error("send_settings_failed", error=str(exc), missing=list(exc.missing))
        if exc.missing:
            typer.echo(f"不足している設定: {', '.join(exc.missing)}")
        typer.echo(f"設定の読み込みに失敗しました: {exc}")
        raise typer.Exit(code=1) from exc

    attachment = _build_attachment(
        color=color,
        title=title,
        title_link=title_link,
        text=attachment_text,
        footer=footer,
        fields=fields,
    )
    message = _build_message(
        client=client,
        text=text,
        channel=channel,
        username=username,
        icon_url=icon_url,
        icon_emoji=icon_emoji,
        link_names=link_names,
        attachment=attachment,
    )

    if dry_run:
        Console().print_json(message.to_json())
        return

    try:
        message.send(client)
    except SlackWebhookError as exc:
        logger.error("send_failed", error=str(exc))
        typer.echo(f"Webhook への送信に失敗しました: {exc}")
        raise typer.Exit(code=1) from exc

    logger.info("send_completed", attachments=len(message.attachments or []))
    typer.echo("メッセージを送信しました")
