"""
Ledger collaborator interface.

The service only needs two primitives: commit a new version under a key, and
iterate every version ever committed under a key. Anything implementing
`Ledger` can back it (in-memory fake, SQL table, a real ledger peer client).
"""

from __future__ import annotations

import datetime as dt
from typing import Iterator, Protocol, runtime_checkable

from pydantic import BaseModel


class KeyModification(BaseModel):
    """One committed version of a key."""

    tx_id: str
    value: bytes
    timestamp: dt.datetime | None = None

    model_config = {"frozen": True}


@runtime_checkable
class HistoryIterator(Protocol):
    """Lazy per-key version stream. Must be closed after use."""

    def __iter__(self) -> Iterator[KeyModification]: ...

    def __next__(self) -> KeyModification: ...

    def close(self) -> None: ...


@runtime_checkable
class Ledger(Protocol):
    def put_state(self, key: str, value: bytes) -> str:
        """Commit `value` as a new version of `key`. Returns the tx id."""
        ...

    def get_history_for_key(self, key: str) -> HistoryIterator:
        """Every version of `key`, newest first. Unknown key → empty stream."""
        ...


__all__ = ["HistoryIterator", "KeyModification", "Ledger"]
