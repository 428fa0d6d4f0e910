"""
The two ledger operations: `add` writes one device event, `query` returns
every version ever written under an id.
"""

from __future__ import annotations

import logging
from contextlib import closing
from typing import Sequence

from .core.history import reconstruct_history
from .core.record import parse_args
from .errors import ArityError
from .persistence.base import Ledger
from .registry import operation

logger = logging.getLogger(__name__)


@operation("add")
def add(ledger: Ledger, args: Sequence[str]) -> bytes:
    """Validate, encode and commit one record. Returns the stored bytes."""
    record = parse_args(args)
    payload = record.encode()
    tx_id = ledger.put_state(record.ledger_key, payload)
    logger.info("added record %s (sn=%s) as %s", record.ledger_key, record.sn, tx_id)
    return payload


@operation("query")
def query(ledger: Ledger, args: Sequence[str]) -> bytes:
    """Encoded HistoryView for the key in `args[0]`, passed through as-is."""
    if len(args) != 1:
        raise ArityError(
            1,
            len(args),
            "Incorrect number of arguments. Expecting id of the message to query.",
        )
    key = args[0]
    with closing(ledger.get_history_for_key(key)) as versions:
        history = reconstruct_history(versions)
    logger.debug("query %r: %d version(s)", key, len(history))
    return history.encode()
