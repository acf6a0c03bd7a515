from __future__ import annotations

import logging

import pytest

from slack_webhook.shared.logging import (
    _resolve_level,
    configure_logging,
    get_logger,
    redact_webhook_urls,
)


def test_resolve_level_accepts_names_and_numbers() -> None:
    assert _resolve_level("debug") == logging.DEBUG
    assert _resolve_level(logging.WARNING) == logging.WARNING


def test_resolve_level_rejects_unknown_name() -> None:
    with pytest.raises(ValueError):
        _resolve_level("chatty")


def test_get_logger_binds_initial_values() -> None:
    configure_logging("INFO", json_output=True)

    logger = get_logger("tests.logging", component="slack")

    assert logger is not None
    logger.info("logging_configured")


def test_redact_webhook_urls_masks_secret_path() -> None:
    event_dict = {
        "event": "slack_webhook_request_error",
        "message": "failed: https://hooks.slack.com/services/T000/B000/XXX (refused)",
        "status_code": 500,
    }

    redacted = redact_webhook_urls(None, "error", event_dict)

    assert redacted["message"] == "failed: https://hooks.slack.com/services/*** (refused)"
    assert redacted["event"] == "slack_webhook_request_error"
    assert redacted["status_code"] == 500
