from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol


class KeyValueDocumentStore(Protocol):
    """
    Minimal interface: the whole key-value mapping persisted as one document.
    """

    @property
    def path(self) -> Path:
        ...

    def exists(self) -> bool:
        """Whether a snapshot has been written at this location."""
        ...

    def load(self) -> dict[str, Any]:
        """Load and return the full mapping (empty when nothing is stored)."""
        ...

    def save(self, doc: dict[str, Any]) -> None:
        """Persist the full mapping, replacing whatever was there."""
        ...
