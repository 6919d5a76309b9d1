"""Numeric verbosity levels mapped onto the standard logging machinery."""

from __future__ import annotations

import logging
import sys

TRACE = 5
DEFAULT_LEVEL = 3
_LOGGER_NAME = "rftclient"


class _StderrHandler(logging.StreamHandler):
    """Stream handler that always writes to the current ``sys.stderr``."""

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    def emit(self, record: logging.LogRecord) -> None:
        self.stream = sys.stderr
        super().emit(record)


class _Formatter(logging.Formatter):
    _LABELS = {TRACE: "TRACE", logging.CRITICAL: "FATAL"}

    def format(self, record: logging.LogRecord) -> str:
        label = self._LABELS.get(record.levelno, record.levelname)
        return f"{label}: {record.getMessage()} ({record.filename}:{record.lineno})"


def _threshold(level: int) -> int:
    if level > 5:
        return TRACE
    if level > 4:
        return logging.DEBUG
    if level > 3:
        return logging.INFO
    if level > 2:
        return logging.WARNING
    if level > 1:
        return logging.ERROR
    if level > 0:
        return logging.CRITICAL
    return logging.CRITICAL + 1


def configure(level: int) -> logging.Logger:
    """Set the verbosity (0 silences, 6 and above traces) and return the logger."""
    logger = logging.getLogger(_LOGGER_NAME)
    if not any(isinstance(h, _StderrHandler) for h in logger.handlers):
        handler = _StderrHandler()
        handler.setFormatter(_Formatter())
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(_threshold(level))
    return logger


def get_logger() -> logging.Logger:
    """Return the package logger, configured with the default level if still unset."""
    logger = logging.getLogger(_LOGGER_NAME)
    if not any(isinstance(h, _StderrHandler) for h in logger.handlers):
        configure(DEFAULT_LEVEL)
    return logger