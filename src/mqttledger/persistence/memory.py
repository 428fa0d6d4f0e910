"""
In-memory ledger. Good enough for tests and local demos; nothing survives
the process.
"""

from __future__ import annotations

import datetime as dt
import logging
import uuid
from collections import defaultdict
from typing import Dict, Iterator, List

from ..errors import CollaboratorError
from .base import KeyModification

logger = logging.getLogger(__name__)


def now_utc() -> dt.datetime:
    return dt.datetime.now(tz=dt.timezone.utc)


class MemoryHistoryIterator:
    def __init__(self, ledger: "MemoryLedger", items: List[KeyModification]):
        self._ledger = ledger
        self._items = iter(items)
        self._served = 0
        self.closed = False
        ledger.open_iterators += 1

    def __iter__(self) -> Iterator[KeyModification]:
        return self

    def __next__(self) -> KeyModification:
        if self.closed:
            raise StopIteration
        fail_after = self._ledger.fail_reads_after
        if fail_after is not None and self._served >= fail_after:
            raise CollaboratorError("history stream interrupted")
        self._served += 1
        return next(self._items)

    def close(self) -> None:
        if not self.closed:
            self.closed = True
            self._ledger.open_iterators -= 1


class MemoryLedger:
    """Per-key append-only version lists.

    `fail_writes` / `fail_reads` make the matching primitive raise
    `CollaboratorError`; `fail_reads_after` lets a history stream yield that
    many versions and then raise it.
    """

    def __init__(self) -> None:
        self._versions: Dict[str, List[KeyModification]] = defaultdict(list)
        self.open_iterators = 0
        self.fail_writes: str | None = None
        self.fail_reads: str | None = None
        self.fail_reads_after: int | None = None

    def put_state(self, key: str, value: bytes) -> str:
        if self.fail_writes:
            raise CollaboratorError(self.fail_writes)
        tx_id = uuid.uuid4().hex
        self._versions[key].append(
            KeyModification(tx_id=tx_id, value=bytes(value), timestamp=now_utc())
        )
        logger.debug("committed %s under key %r", tx_id, key)
        return tx_id

    def get_history_for_key(self, key: str) -> MemoryHistoryIterator:
        if self.fail_reads:
            raise CollaboratorError(self.fail_reads)
        return MemoryHistoryIterator(self, list(reversed(self._versions.get(key, []))))

    # ---- test helpers ----------------------------------------------------
    def append_raw(self, key: str, tx_id: str, value: bytes) -> None:
        """Store a version verbatim, bypassing the codec."""
        self._versions[key].append(KeyModification(tx_id=tx_id, value=value))

    def version_count(self, key: str) -> int:
        return len(self._versions.get(key, []))
