"""ペイロード用ベース型の省略ルールを検証する。"""

from __future__ import annotations

from dataclasses import dataclass

from slack_webhook.shared.types import PayloadObject, is_empty_value


@dataclass(slots=True)
class _Child(PayloadObject):
    name: str | None = None


@dataclass(slots=True)
class _Parent(PayloadObject):
    label: str | None = None
    count: int | None = None
    enabled: bool | None = None
    children: list[_Child] | None = None


def test_is_empty_value() -> None:
    assert is_empty_value(None)
    assert is_empty_value("")
    assert is_empty_value(0)
    assert is_empty_value(False)
    assert is_empty_value([])
    assert not is_empty_value("x")
    assert not is_empty_value(1)
    assert not is_empty_value(True)
    assert not is_empty_value([_Child()])


def test_to_payload_omits_unset_and_empty_values() -> None:
    parent = _Parent(label="", count=0, enabled=False, children=[])

    assert parent.to_payload() == {}


def test_to_payload_expands_nested_objects() -> None:
    parent = _Parent(label="top", count=2, enabled=True, children=[_Child("a"), _Child()])

    assert parent.to_payload() == {
        "label": "top",
        "count": 2,
        "enabled": True,
        "children": [{"name": "a"}, {}],
    }
