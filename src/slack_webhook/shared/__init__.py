"""共有レイヤの公開インターフェース。"""

from .config import AppSettings, SlackSettings, get_settings
from .exceptions import BaseAppError, ConfigurationError
from .logging import configure_logging, get_logger
from .types import PayloadObject, is_empty_value, normalize_value

__all__ = [
    "AppSettings",
    "SlackSettings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "BaseAppError",
    "ConfigurationError",
    "PayloadObject",
    "is_empty_value",
    "normalize_value",
]
