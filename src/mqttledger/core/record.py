"""
DeviceRecord kernel – *pure Pydantic* (no SQLAlchemy or FastAPI imports).

* Positional string args ➜ declarative schema ➜ frozen DeviceRecord
* `encode()` gives the canonical wire bytes stored on the ledger
* `decode()` is strict: a version that does not match the schema is an error
"""

from __future__ import annotations

import json
from typing import Any, Callable, NamedTuple, Sequence

from pydantic import BaseModel, Field, ValidationError

from ..errors import ArityError, DecodeError
from .parsing import max_uint, parse_bool, parse_uint

U64_MAX = max_uint(64)
U32_MAX = max_uint(32)


# schema
class FieldSpec(NamedTuple):
    name: str  # wire name, also used in error messages
    parser: Callable[[str, str, int | None], Any]
    width: int | None = None

    def parse(self, raw: str) -> Any:
        return self.parser(self.name, raw, self.width)


RECORD_SCHEMA: tuple[FieldSpec, ...] = (
    FieldSpec("id", parse_uint, 64),
    FieldSpec("sn", parse_uint, 64),
    FieldSpec("time", parse_uint, 64),
    FieldSpec("deviceId", parse_uint, 32),
    FieldSpec("opened", parse_bool),
    FieldSpec("codeType", parse_uint, 32),
)


# DeviceRecord
class DeviceRecord(BaseModel):
    """One device event as committed to the ledger. Immutable."""

    id: int = Field(ge=0, le=U64_MAX)
    sn: int = Field(ge=0, le=U64_MAX)
    time: int = Field(ge=0, le=U64_MAX)  # opaque timestamp, unit set by the device
    device_id: int = Field(alias="deviceId", ge=0, le=U32_MAX)
    opened: bool
    code_type: int = Field(alias="codeType", ge=0, le=U32_MAX)

    model_config = {
        "frozen": True,
        "strict": True,
        "extra": "ignore",
    }

    @property
    def ledger_key(self) -> str:
        """Canonical decimal form of `id`; the ledger partition key."""
        return str(self.id)

    @classmethod
    def from_args(cls, args: Sequence[str]) -> "DeviceRecord":
        return parse_args(args)

    # wire format
    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)

    def encode(self) -> bytes:
        return dumps(self.to_wire())

    @classmethod
    def from_wire(cls, data: Any) -> "DeviceRecord":
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise DecodeError(_describe(exc)) from exc

    @classmethod
    def decode(cls, raw: bytes) -> "DeviceRecord":
        return cls.from_wire(loads(raw))


# helpers
def parse_args(args: Sequence[str]) -> DeviceRecord:
    """Validate positional args against RECORD_SCHEMA; first failure wins."""
    if len(args) != len(RECORD_SCHEMA):
        raise ArityError(len(RECORD_SCHEMA), len(args))
    values = {spec.name: spec.parse(raw) for spec, raw in zip(RECORD_SCHEMA, args)}
    return DeviceRecord(**values)


def dumps(data: Any) -> bytes:
    """Compact JSON, keys kept in insertion order."""
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def loads(raw: bytes) -> Any:
    try:
        return json.loads(raw)
    except (UnicodeDecodeError, ValueError, TypeError, RecursionError) as exc:
        raise DecodeError(f"malformed record payload: {exc}") from exc


def _describe(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(part) for part in err["loc"]) or "record"
    return f"{loc}: {err['msg']}"
