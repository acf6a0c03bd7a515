from __future__ import annotations

import typer

from slack_webhook.cli.commands import send
from slack_webhook.shared.logging import configure_logging

app = typer.Typer(help="Slack Incoming Webhook 通知ツールのCLI")

app.add_typer(send.app, name="send", help="メッセージを組み立てて Webhook へ送信")


def main() -> None:
    """エントリポイント。"""

    configure_logging()
    app()


if __name__ == "__main__":  # pragma: no cover - CLI エントリ
    main()
