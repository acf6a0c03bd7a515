"""structlog によるロギング設定。"""

from __future__ import annotations

import logging
import re
from typing import Any

import structlog

DEFAULT_LOG_LEVEL = "INFO"

_WEBHOOK_SECRET_PATTERN = re.compile(r"""(/services/)[^\s'"]+""")
REDACTED = "***"


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level

    mapping = logging.getLevelNamesMapping()
    resolved = mapping.get(level.upper())
    if resolved is None:
        msg = f"Unsupported log level: {level}"
        raise ValueError(msg)
    return resolved


def redact_webhook_urls(
    _logger: Any, _method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Webhook URL のシークレット部分 (`/services/` 以降) を伏せ字にする。"""

    for key, value in event_dict.items():
        if isinstance(value, str) and "/services/" in value:
            event_dict[key] = _WEBHOOK_SECRET_PATTERN.sub(rf"\g<1>{REDACTED}", value)
    return event_dict


def configure_logging(level: str | int = DEFAULT_LOG_LEVEL, *, json_output: bool = False) -> None:
    """Webhook 送信ログを出力するための structlog 設定を行う。

    Args:
        level: 文字列または数値で表現したログレベル。
        json_output: True の場合 JSON 形式で出力する。
    """

    log_level = _resolve_level(level)
    logging.basicConfig(level=log_level, format="%(message)s")

    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
            structlog.processors.add_log_level,
            redact_webhook_urls,
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None, **initial_values: Any) -> structlog.stdlib.BoundLogger:
    """ロガーを取得し、初期バインド値があれば設定する。"""

    logger = structlog.stdlib.get_logger(name)
    return logger.bind(**initial_values) if initial_values else logger


__all__ = [
    "DEFAULT_LOG_LEVEL",
    "REDACTED",
    "configure_logging",
    "get_logger",
    "redact_webhook_urls",
]
