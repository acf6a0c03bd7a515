from __future__ import annotations

import pytest

from slack_webhook.infra.slack import reset_client
from slack_webhook.shared.config import get_settings
from slack_webhook.shared.logging import configure_logging


@pytest.fixture(scope="session", autouse=True)
def _configure_logging():
    configure_logging("DEBUG")


@pytest.fixture(autouse=True)
def _reset_shared_state():
    reset_client()
    get_settings.cache_clear()
    yield
    reset_client()
    get_settings.cache_clear()
