"""
History reconstruction: fold a ledger's per-key version stream into a
`HistoryView` (tx id → DeviceRecord).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator

from pydantic import RootModel

from ..errors import DecodeError
from .record import DeviceRecord, dumps, loads

if TYPE_CHECKING:  # for type-checkers
    from ..persistence.base import KeyModification


class HistoryView(RootModel[dict[str, DeviceRecord]]):
    """Every version ever committed under one key, indexed by tx id."""

    model_config = {"frozen": True}

    def __len__(self) -> int:
        return len(self.root)

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def __getitem__(self, tx_id: str) -> DeviceRecord:
        return self.root[tx_id]

    def __contains__(self, tx_id: object) -> bool:
        return tx_id in self.root

    def records(self) -> list[DeviceRecord]:
        return list(self.root.values())

    def encode(self) -> bytes:
        """Object keyed by tx id in sorted order, values in record wire form."""
        return dumps({tx_id: self.root[tx_id].to_wire() for tx_id in sorted(self.root)})

    @classmethod
    def decode(cls, raw: bytes) -> "HistoryView":
        data = loads(raw)
        if not isinstance(data, dict):
            raise DecodeError("history payload is not an object")
        return cls({tx_id: DeviceRecord.from_wire(v) for tx_id, v in data.items()})


def reconstruct_history(versions: Iterable["KeyModification"]) -> HistoryView:
    """Decode every version; the first undecodable one aborts the whole view.

    Order-agnostic. A repeated tx id keeps the last decoded value.
    """
    entries: dict[str, DeviceRecord] = {}
    for item in versions:
        entries[item.tx_id] = DeviceRecord.decode(item.value)
    return HistoryView(entries)
