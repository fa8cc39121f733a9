"""Logger factory.

Loggers are structlog bound loggers wrapping a standard library logger, so
the library stays silent unless the application enables the ``pyxml2json``
logger. Events below the logger's level are dropped before rendering, and
enabled events reach the standard library as plain key-value text:

    log = get_logger(__name__)
    log.debug("xml parse failed", line=3, column=7)
    # event='xml parse failed' line=3 column=7
"""

from __future__ import annotations

import logging

import structlog


def get_logger(name: str = "pyxml2json") -> structlog.stdlib.BoundLogger:
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
