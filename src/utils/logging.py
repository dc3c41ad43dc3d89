"""Logging setup for the form engine.

Records go to stdout, and to Azure Monitor when a connection string is set.
"""

import logging
import os
import sys

from azure.monitor.opentelemetry import configure_azure_monitor
from opentelemetry.instrumentation.logging import LoggingInstrumentor

from constants import LOGGING_LEVEL

LOGGER_NAME = "form_engine"

LOG_FORMAT = "%(asctime)s - PID:%(process)d - Thread:%(thread)d - %(name)s.%(module)s - %(levelname)s - %(message)s"


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.DEBUG


def _build_console_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


logging_level = _resolve_level(LOGGING_LEVEL)

logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(logging_level)
logger.addHandler(_build_console_handler())

appinsights_connection_string = os.environ.get("APPLICATIONINSIGHTS_CONNECTION_STRING")
if appinsights_connection_string:
    configure_azure_monitor(connection_string=appinsights_connection_string)
    LoggingInstrumentor().instrument(level=logging_level, excluded_loggers=["azure"])

# Submissions are logged once, by this logger only
logger.propagate = False
