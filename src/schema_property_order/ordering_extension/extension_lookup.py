"""Vendor extension access for sub-schemas."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Protocol

ORDER_EXTENSION = "x-order"
EXTENSION_PREFIX = "x-"


class Extensions(Mapping[str, Any]):
    """Read-only view of vendor extensions keyed case-insensitively.

    Keys are normalized to lower case on construction; the last value wins when
    two keys only differ by case.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = {}
        for key, value in (values or {}).items():
            self._values[key.lower()] = value

    def __getitem__(self, key: str) -> Any:
        return self._values[key.lower()]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Extensions({self._values!r})"

    def lookup(self, key: str) -> tuple[Any, bool]:
        """Return the extension value and whether it was present."""
        normalized = key.lower()
        if normalized in self._values:
            return self._values[normalized], True
        return None, False


class SupportsExtensions(Protocol):
    """Anything exposing a vendor extension map."""

    @property
    def extensions(self) -> Mapping[str, Any]: ...


def extract_extensions(keywords: Mapping[str, Any]) -> Extensions:
    """Collect every ``x-`` keyword of a schema node into an extension view."""
    return Extensions(
        {
            key: value
            for key, value in keywords.items()
            if isinstance(key, str) and key.lower().startswith(EXTENSION_PREFIX)
        }
    )


def lookup_ordering_extension(schema: SupportsExtensions) -> tuple[Any, bool]:
    """Read the ``x-order`` value of a schema, returning ``(value, present)``."""
    extensions = schema.extensions
    if isinstance(extensions, Extensions):
        return extensions.lookup(ORDER_EXTENSION)
    return Extensions(extensions).lookup(ORDER_EXTENSION)
