"""
Single entry-point that wires SQLAlchemy into the ledger.
Call once at application start-up.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from .persistence.models import Base
from .persistence.store import SqlLedger


def init_ledger(engine: Engine) -> SqlLedger:
    """Create the history table if missing and return a ledger bound to it."""
    Base.metadata.create_all(engine)  # ← this line creates table
    return SqlLedger(engine)


def ledger_from_url(database_url: str) -> SqlLedger:
    engine = create_engine(database_url, pool_pre_ping=True)
    return init_ledger(engine)
