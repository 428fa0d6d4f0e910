"""
Public surface for mqttledger.
Importing this module does **not** touch a database; call
`mqttledger.init_ledger(engine)` (or `create_app(db_url=...)`) at start-up.
"""

from .bootstrap import init_ledger
from .core.history import HistoryView, reconstruct_history
from .core.record import DeviceRecord, parse_args
from .dispatcher import Dispatcher, Response
from .errors import (
    ArityError,
    CollaboratorError,
    DecodeError,
    FieldError,
    FormatError,
    LedgerServiceError,
    RangeError,
    UnknownOperation,
)
from .persistence.base import KeyModification, Ledger
from .persistence.memory import MemoryLedger
from .persistence.store import SqlLedger

__all__ = [
    "ArityError",
    "CollaboratorError",
    "DecodeError",
    "DeviceRecord",
    "Dispatcher",
    "FieldError",
    "FormatError",
    "HistoryView",
    "KeyModification",
    "Ledger",
    "LedgerServiceError",
    "MemoryLedger",
    "RangeError",
    "Response",
    "SqlLedger",
    "UnknownOperation",
    "init_ledger",
    "parse_args",
    "reconstruct_history",
]
