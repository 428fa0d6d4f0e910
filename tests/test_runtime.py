import pytest
from fastapi.testclient import TestClient

from mqttledger import HistoryView, MemoryLedger
from mqttledger.config import Settings
from mqttledger.runtime import create_app

from .conftest import VALID_ARGS


@pytest.fixture
def ledger():
    return MemoryLedger()


@pytest.fixture
def client(ledger):
    return TestClient(create_app(ledger))


def test_health(client):
    assert client.get("/").json() == {"status": "running"}


def test_invoke_add_and_history(client):
    resp = client.post("/invoke", json={"fcn": "add", "args": VALID_ARGS})
    assert resp.status_code == 200
    assert resp.json() == {
        "id": 1, "sn": 10, "time": 1000, "deviceId": 7, "opened": True, "codeType": 2,
    }

    resp = client.get("/records/1/history")
    assert resp.status_code == 200
    view = HistoryView.decode(resp.content)
    assert len(view) == 1


def test_records_shortcut(client):
    assert client.post("/records", json={"args": VALID_ARGS}).status_code == 200
    resp = client.post("/invoke", json={"fcn": "query", "args": ["1"]})
    assert len(resp.json()) == 1


def test_validation_error_is_400(client):
    resp = client.post("/records", json={"args": ["1", "10", "1000", "7", "notabool", "2"]})
    assert resp.status_code == 400
    assert resp.json() == {
        "error": "FormatError",
        "message": 'opened: parsing "notabool": invalid syntax',
    }
    assert client.get("/records/1/history").json() == {}


def test_unknown_operation_is_404(client):
    resp = client.post("/invoke", json={"fcn": "drop", "args": []})
    assert resp.status_code == 404
    assert resp.json()["error"] == "UnknownOperation"


def test_ledger_failure_is_503(client, ledger):
    ledger.fail_writes = "storage unavailable"
    resp = client.post("/records", json={"args": VALID_ARGS})
    assert resp.status_code == 503
    assert resp.json()["message"] == "storage unavailable"


def test_create_app_from_db_url(tmp_path):
    client = TestClient(create_app(db_url=f"sqlite:///{tmp_path / 'app.db'}"))
    assert client.post("/records", json={"args": VALID_ARGS}).status_code == 200
    assert len(client.get("/records/1/history").json()) == 1


def test_create_app_needs_a_ledger():
    with pytest.raises(ValueError):
        create_app()


def test_settings_from_env():
    s = Settings.from_env({"MQTTLEDGER_DATABASE_URL": "sqlite://", "PORT": "8080", "LOG_LEVEL": "debug"})
    assert s.database_url == "sqlite://"
    assert s.port == 8080
    assert s.host == "127.0.0.1"
    assert s.log_level == "DEBUG"


def test_settings_defaults():
    s = Settings.from_env({})
    assert s.database_url == "sqlite:///mqttledger.db"
    assert s.port == 3000
