"""Webhook ペイロード向けの共有型。"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields
from typing import Any


def is_empty_value(value: Any) -> bool:
    """ワイヤ形式で省略すべきゼロ値かどうかを判定する。"""

    if value is None:
        return True
    if isinstance(value, (str, bool, int, float, Sequence, Mapping)):
        return not value
    return False


def normalize_value(value: Any) -> Any:
    """ペイロードオブジェクトやシーケンスを JSON 化可能な値へ展開する。"""

    if isinstance(value, PayloadObject):
        return value.to_payload()
    if isinstance(value, Mapping):
        return {key: normalize_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [normalize_value(item) for item in value]
    return value


@dataclass(slots=True)
class PayloadObject:
    """未設定または空の属性を省略して dict 化できるベースクラス。

    属性名がそのまま JSON キーになる。`None` (未設定) と空文字・0・False・空リスト
    はいずれも出力から除外される。
    """

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if is_empty_value(value):
                continue
            payload[item.name] = normalize_value(value)
        return payload


__all__ = [
    "PayloadObject",
    "is_empty_value",
    "normalize_value",
]
