#!/usr/bin/env python3
"""Serve the record ledger over HTTP."""

from __future__ import annotations

import logging

import uvicorn

from mqttledger.config import Settings
from mqttledger.runtime import create_app


def main() -> None:
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print(f"\nConnecting to ledger database at {settings.database_url}\n")
    app = create_app(db_url=settings.database_url, title="mqttledger")

    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
