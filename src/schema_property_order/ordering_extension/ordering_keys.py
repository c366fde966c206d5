"""Ordering key classification and comparison."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class OrderingKeyKind(str, Enum):
    """Supported interpretations of an ``x-order`` value."""

    INTEGER = "integer"
    STRING = "string"
    OTHER = "other"


@dataclass(frozen=True)
class OrderingKey:
    """Classified ``x-order`` value."""

    kind: OrderingKeyKind
    value: Any

    def as_text(self) -> str | None:
        """Return the string form used by the string tier, if any."""
        if self.kind is OrderingKeyKind.STRING:
            return self.value
        if self.kind is OrderingKeyKind.INTEGER:
            return str(self.value)
        return None


def classify_ordering_value(value: Any) -> OrderingKey:
    """Classify a raw extension value into an ordering key."""
    # bool is an int subclass but never an ordering integer.
    if isinstance(value, bool):
        return OrderingKey(kind=OrderingKeyKind.OTHER, value=value)
    if isinstance(value, int):
        return OrderingKey(kind=OrderingKeyKind.INTEGER, value=value)
    if isinstance(value, str):
        return OrderingKey(kind=OrderingKeyKind.STRING, value=value)
    return OrderingKey(kind=OrderingKeyKind.OTHER, value=value)


def compare_ordering_keys(left: OrderingKey, right: OrderingKey) -> int | None:
    """Compare two present ordering keys.

    Integers compare numerically. When either side is not an integer, both are
    compared as text, provided both have one. Returns ``None`` when neither
    tier applies so the caller can fall back to comparing names.
    """
    if left.kind is OrderingKeyKind.INTEGER and right.kind is OrderingKeyKind.INTEGER:
        return _three_way(left.value, right.value)
    left_text = left.as_text()
    right_text = right.as_text()
    if left_text is None or right_text is None:
        return None
    return _three_way(left_text, right_text)


def _three_way(left: Any, right: Any) -> int:
    if left < right:
        return -1
    if left > right:
        return 1
    return 0
