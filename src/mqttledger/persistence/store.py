"""
SQL-backed ledger around the `ledger_history` table.
Each call opens its own short-lived Session.
"""

from __future__ import annotations

import logging
from typing import Iterator

from sqlalchemy import insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..errors import CollaboratorError
from .base import KeyModification
from .models import LedgerRow, new_tx_id

logger = logging.getLogger(__name__)


class SqlHistoryIterator:
    """Streams rows for one key *newest→oldest*; owns its Session until closed."""

    def __init__(self, session: Session, key: str):
        self._session = session
        q = (
            select(LedgerRow)
            .where(LedgerRow.key == key)
            .order_by(LedgerRow.seq.desc())
        )
        self._result = session.execute(q).scalars()
        self._rows = iter(self._result)
        self.closed = False

    def __iter__(self) -> Iterator[KeyModification]:
        return self

    def __next__(self) -> KeyModification:
        if self.closed:
            raise StopIteration
        try:
            row = next(self._rows)
        except SQLAlchemyError as exc:
            raise CollaboratorError(str(exc)) from exc
        return KeyModification(tx_id=row.tx_id, value=row.value, timestamp=row.created_ts)

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        try:
            self._result.close()
        finally:
            self._session.close()


class SqlLedger:
    """Thin data‑access layer around the `ledger_history` table."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def _new_session(self) -> Session:
        return Session(bind=self.engine)

    # ---- writes ---------------------------------------------------------
    def put_state(self, key: str, value: bytes) -> str:
        """Insert an immutable version row **exactly once**."""
        tx_id = new_tx_id()
        try:
            with self._new_session() as s:
                s.execute(insert(LedgerRow).values(tx_id=tx_id, key=key, value=value))
                s.commit()
        except SQLAlchemyError as exc:
            raise CollaboratorError(str(exc)) from exc
        logger.debug("committed %s under key %r", tx_id, key)
        return tx_id

    # ---- reads ----------------------------------------------------------
    def get_history_for_key(self, key: str) -> SqlHistoryIterator:
        s = self._new_session()
        try:
            return SqlHistoryIterator(s, key)
        except SQLAlchemyError as exc:
            s.close()
            raise CollaboratorError(str(exc)) from exc
