"""
Single-table schema: every committed version of every key lives here.
"""

import uuid
import datetime as dt

from sqlalchemy import Column, DateTime, Integer, LargeBinary, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def now_utc() -> dt.datetime:  # compact timezone‑aware timestamp
    return dt.datetime.now(tz=dt.timezone.utc)


def new_tx_id() -> str:
    return uuid.uuid4().hex


class LedgerRow(Base):
    """Append-only: rows are inserted, never updated or deleted."""

    __tablename__ = "ledger_history"

    seq = Column(Integer, primary_key=True, autoincrement=True)  # commit order
    tx_id = Column(String(64), nullable=False, unique=True, default=new_tx_id)
    key = Column(String, nullable=False, index=True)
    value = Column(LargeBinary, nullable=False)
    created_ts = Column(DateTime(timezone=True), default=now_utc, nullable=False)
