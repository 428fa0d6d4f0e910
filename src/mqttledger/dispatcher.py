"""
Routes a named operation plus its argument list to the registered handler
and wraps the outcome in a `Response` envelope.
"""

from __future__ import annotations

import logging
from typing import Sequence

from pydantic import BaseModel

from . import operations  # noqa: F401  (registers the handlers)
from .errors import LedgerServiceError
from .persistence.base import Ledger
from .registry import OperationRegistry, default_registry

logger = logging.getLogger(__name__)

OK = 200
ERROR = 500


class Response(BaseModel):
    status: int
    message: str = ""
    payload: bytes | None = None
    error: str | None = None  # error kind, e.g. "RangeError"

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        return self.status == OK

    @classmethod
    def success(cls, payload: bytes | None = None) -> "Response":
        return cls(status=OK, payload=payload)

    @classmethod
    def failure(cls, exc: LedgerServiceError) -> "Response":
        return cls(status=ERROR, message=exc.message, error=exc.kind)


class Dispatcher:
    """Stateless front door: everything it touches lives in the ledger."""

    def __init__(self, ledger: Ledger, registry: OperationRegistry | None = None):
        self.ledger = ledger
        self.registry = registry or default_registry()

    def init(self) -> Response:
        return Response.success()

    def call(self, function: str, args: Sequence[str]) -> bytes:
        """Run `function` and return its payload; service errors propagate."""
        handler = self.registry.get(function)
        return handler(self.ledger, list(args))

    def invoke(self, function: str, args: Sequence[str]) -> Response:
        try:
            payload = self.call(function, args)
        except LedgerServiceError as exc:
            logger.warning("%s failed: %s: %s", function, exc.kind, exc)
            return Response.failure(exc)
        return Response.success(payload)
