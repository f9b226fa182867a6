from __future__ import annotations

from typing import List, Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class Settings(Protocol):
    """Settings contract.

    Implementations keep the values in memory; nothing reaches the backing
    storage until ``persist()`` is called.
    """

    def set_value(self, key: str, value: str) -> None: ...

    def set_values(self, key: str, values: Sequence[str]) -> None: ...

    def get_value(self, key: str) -> str: ...

    def find_value(self, key: str) -> Optional[str]: ...

    def get_values(self, key: str) -> List[str]: ...

    def reload(self) -> None: ...

    def persist(self) -> None: ...
