"""Application logging to a file in the system temp directory."""

from __future__ import annotations

import logging
import os
import tempfile
import time
from typing import TextIO

info_log = logging.getLogger("claudesquad.info")
warning_log = logging.getLogger("claudesquad.warning")
error_log = logging.getLogger("claudesquad.error")

_LOGGERS = {
    "INFO:": info_log,
    "WARNING:": warning_log,
    "ERROR:": error_log,
}

for _logger in _LOGGERS.values():
    _logger.setLevel(logging.DEBUG)
    _logger.propagate = False
    _logger.addHandler(logging.NullHandler())

_log_file: TextIO | None = None


def log_file_path() -> str:
    """Return the path of the log file."""
    return os.path.join(tempfile.gettempdir(), "claudesquad.log")


def _clear_handlers() -> None:
    for logger in _LOGGERS.values():
        for handler in list(logger.handlers):
            logger.removeHandler(handler)


def initialize(daemon: bool) -> None:
    """Send the application loggers to the log file; call close() when done."""
    global _log_file
    try:
        log_file = open(log_file_path(), "a", encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(f"could not open log file: {exc}") from exc

    _clear_handlers()
    if _log_file is not None:
        _log_file.close()
    _log_file = log_file

    for label, logger in _LOGGERS.items():
        prefix = f"[DAEMON] {label}" if daemon else label
        handler = logging.StreamHandler(log_file)
        handler.setFormatter(
            logging.Formatter(
                prefix.replace("%", "%%")
                + "%(asctime)s %(filename)s:%(lineno)d: %(message)s",
                datefmt="%Y/%m/%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)


def close() -> None:
    """Close the log file and tell the user where the logs went."""
    global _log_file
    _clear_handlers()
    for logger in _LOGGERS.values():
        logger.addHandler(logging.NullHandler())
    if _log_file is not None:
        _log_file.close()
        _log_file = None
    print("wrote logs to " + log_file_path())


class Every:
    """Allow an action at most once per timeout (in seconds)."""

    def __init__(self, timeout: float) -> None:
        self.timeout = timeout
        self._last: float | None = None

    def should_log(self) -> bool:
        """Return True if the timeout has passed since the last time this returned True."""
        now = time.monotonic()
        if self._last is None or now - self._last >= self.timeout:
            self._last = now
            return True
        return False