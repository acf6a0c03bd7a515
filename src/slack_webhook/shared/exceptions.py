"""共通例外。"""

from __future__ import annotations


class BaseAppError(Exception):
    """全レイヤで共有するベース例外。"""

    default_message = "An unexpected error occurred"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class ConfigurationError(BaseAppError):
    """設定の読み込み失敗や必須項目の不足を示すエラー。

    `missing` には不足している設定キーをドット区切りで保持する。
    """

    default_message = "Slack webhook configuration is invalid or missing"

    def __init__(self, message: str | None = None, *, missing: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.missing = missing


__all__ = [
    "BaseAppError",
    "ConfigurationError",
]
