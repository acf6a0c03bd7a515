"""Slack Incoming Webhook 通知クライアント。"""

from .client import (
    SerializationError,
    SlackWebhookClient,
    SlackWebhookError,
    TransportError,
    build_slack_client,
    configure_client,
    get_or_create_client,
    reset_client,
    set_default_channel,
    set_default_username,
    set_webhook_url,
)
from .models import (
    SlackAttachment,
    SlackField,
    SlackMessage,
    new_attachment,
    new_field,
    new_message,
)

__all__ = [
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
    "SlackAttachment",
    "SlackField",
    "SlackMessage",
    "new_attachment",
    "new_field",
    "new_message",
]
