from __future__ import annotations

from typing import Dict, Iterator, List, Mapping, Optional, Sequence

from ._types import KeyNotFoundError


class SettingsData:
    """In-memory key -> value-sequence mapping.

    Plain dict underneath, so key insertion order is kept and nothing about the
    values is validated.
    """

    def __init__(self, items: Optional[Mapping[str, List[str]]] = None):
        self.items: Dict[str, List[str]] = dict(items or {})

    def add(self, key: str, values: Sequence[str]) -> None:
        # Last write wins; never merged with earlier values.
        self.items[key] = list(values)

    def get(self, key: str) -> List[str]:
        try:
            return self.items[key]
        except KeyError:
            raise KeyNotFoundError(key) from None

    def get_items(self) -> Dict[str, List[str]]:
        return self.items

    def set_items(self, items: Mapping[str, List[str]]) -> None:
        self.items = dict(items)

    def keys(self) -> List[str]:
        return list(self.items)

    def __contains__(self, key: object) -> bool:
        return key in self.items

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.items)

    def __repr__(self) -> str:
        return f"SettingsData({self.items!r})"
