import pytest
from sqlalchemy import create_engine

from mqttledger import Dispatcher, MemoryLedger, init_ledger

VALID_ARGS = ["1", "10", "1000", "7", "true", "2"]


@pytest.fixture
def memory_ledger():
    return MemoryLedger()


@pytest.fixture
def sql_ledger(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'ledger.db'}")
    yield init_ledger(engine)
    engine.dispose()


@pytest.fixture
def dispatcher(memory_ledger):
    return Dispatcher(memory_ledger)
