"""Starting and stopping the background auto-yes daemon process."""

from __future__ import annotations

import os
import re
import signal
import subprocess
import sys
from pathlib import Path
from typing import Any

from claudesquad import applog
from claudesquad.config import get_config_dir

PID_FILE_NAME = "daemon.pid"

_PID_RE = re.compile(r"\s*([+-]?\d+)")


def pid_file_path() -> Path:
    """Return the path of the file that records the daemon's process id."""
    return get_config_dir() / PID_FILE_NAME


def _daemon_command() -> list[str]:
    return [sys.executable, "-m", "claudesquad.cli", "--daemon"]


def _detach_options() -> dict[str, Any]:
    """Process options that detach the child from the parent's session."""
    if os.name == "nt":
        return {
            "creationflags": subprocess.CREATE_NEW_PROCESS_GROUP
            | subprocess.DETACHED_PROCESS
        }
    return {"start_new_session": True}


def launch_daemon() -> None:
    """Start the daemon as a detached child process and record its pid."""
    try:
        process = subprocess.Popen(
            _daemon_command(),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            **_detach_options(),
        )
    except OSError as exc:
        raise RuntimeError(f"failed to start child process: {exc}") from exc

    applog.info_log.info("started daemon child process with PID: %d", process.pid)

    try:
        pid_file = pid_file_path()
    except RuntimeError as exc:
        raise RuntimeError(f"failed to get config directory: {exc}") from exc

    try:
        pid_file.write_text(str(process.pid))
    except OSError as exc:
        raise RuntimeError(f"failed to write PID file: {exc}") from exc


def stop_daemon() -> None:
    """Kill a running daemon, if its pid file exists, and remove the pid file."""
    try:
        pid_file = pid_file_path()
    except RuntimeError as exc:
        raise RuntimeError(f"failed to get config directory: {exc}") from exc

    try:
        data = pid_file.read_text()
    except FileNotFoundError:
        return
    except OSError as exc:
        raise RuntimeError(f"failed to read PID file: {exc}") from exc

    match = _PID_RE.match(data)
    if match is None:
        raise ValueError(f"invalid PID file format: {data!r}")
    pid = int(match.group(1))

    kill_signal = getattr(signal, "SIGKILL", signal.SIGTERM)
    try:
        os.kill(pid, kill_signal)
    except (OSError, OverflowError) as exc:
        raise RuntimeError(f"failed to stop daemon process: {exc}") from exc

    try:
        pid_file.unlink()
    except OSError as exc:
        raise RuntimeError(f"failed to remove PID file: {exc}") from exc

    applog.info_log.info("daemon process (PID: %d) stopped successfully", pid)