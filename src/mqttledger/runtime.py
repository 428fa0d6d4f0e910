"""
mqttledger.runtime  ──  HTTP front for the dispatcher.

Usage pattern in user code
--------------------------
    from mqttledger.runtime import create_app

    app = create_app(db_url="sqlite:///mqttledger.db")
    # or, for tests: create_app(MemoryLedger())
"""

from __future__ import annotations
from typing import Any, List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response as HTTPResponse
from pydantic import BaseModel

from .bootstrap import ledger_from_url
from .dispatcher import Dispatcher, Response
from .persistence.base import Ledger

_HTTP_STATUS = {"UnknownOperation": 404, "CollaboratorError": 503}


class InvokeRequest(BaseModel):
    fcn: str
    args: List[str] = []


class AddRequest(BaseModel):
    args: List[str]


def _render(resp: Response) -> HTTPResponse:
    if resp.ok:
        return HTTPResponse(content=resp.payload or b"", media_type="application/json")
    return JSONResponse(
        status_code=_HTTP_STATUS.get(resp.error or "", 400),
        content={"error": resp.error, "message": resp.message},
    )


def create_app(
    ledger: Optional[Ledger] = None,
    *,
    db_url: Optional[str] = None,
    **fastapi_kwargs: Any,
) -> FastAPI:
    """
    One-liner for web apps:
        app = create_app(db_url=URL)
    """
    if ledger is None:
        if not db_url:
            raise ValueError("either a ledger or db_url is required")
        ledger = ledger_from_url(db_url)

    dispatcher = Dispatcher(ledger)
    app = FastAPI(**fastapi_kwargs)
    app.state.dispatcher = dispatcher

    def _dispatcher(request: Request) -> Dispatcher:
        return request.app.state.dispatcher

    @app.get("/")
    def health() -> dict[str, str]:
        return {"status": "running"}

    @app.post("/invoke")
    def invoke(body: InvokeRequest, request: Request):
        return _render(_dispatcher(request).invoke(body.fcn, body.args))

    @app.post("/records")
    def add_record(body: AddRequest, request: Request):
        return _render(_dispatcher(request).invoke("add", body.args))

    @app.get("/records/{key}/history")
    def history(key: str, request: Request):
        return _render(_dispatcher(request).invoke("query", [key]))

    return app
