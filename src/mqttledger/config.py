"""
Process settings, read from the environment (and a `.env` file if present).
"""

from __future__ import annotations

import os
from typing import Mapping

from dotenv import load_dotenv
from pydantic import BaseModel

DEFAULT_DATABASE_URL = "sqlite:///mqttledger.db"


class Settings(BaseModel):
    database_url: str = DEFAULT_DATABASE_URL
    host: str = "127.0.0.1"
    port: int = 3000
    log_level: str = "INFO"

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        if environ is None:
            load_dotenv()
            environ = os.environ
        return cls(
            database_url=environ.get("MQTTLEDGER_DATABASE_URL") or DEFAULT_DATABASE_URL,
            host=environ.get("HOST") or "127.0.0.1",
            port=int(environ.get("PORT") or 3000),
            log_level=(environ.get("LOG_LEVEL") or "INFO").upper(),
        )
