"""Logging configuration for the API process."""

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

_configured = False


def setup_logging(level: str = "INFO", *, sql_echo: bool = False) -> None:
    """
    Configure the root logger with a single console handler.

    Safe to call more than once (uvicorn reload, tests); only the
    first call installs the handler.
    """
    global _configured

    root = logging.getLogger()
    root.setLevel(level.upper())

    if not _configured:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
        _configured = True

    # SQLAlchemy echo already logs through "sqlalchemy.engine"
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if sql_echo else logging.WARNING
    )
    logging.getLogger("asyncio").setLevel(logging.WARNING)
