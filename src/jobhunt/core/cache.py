from __future__ import annotations

from typing import Any


class CollectionCache:
    """Whole collections keyed by entity kind."""

    def __init__(self) -> None:
        self._collections: dict[str, list[Any]] = {}

    def get(self, kind: str) -> list[Any] | None:
        return self._collections.get(kind)

    def put(self, kind: str, items: list[Any]) -> None:
        self._collections[kind] = items

    def invalidate(self, kind: str) -> None:
        self._collections.pop(kind, None)

    def clear(self) -> None:
        self._collections.clear()

    def __contains__(self, kind: object) -> bool:
        return kind in self._collections
