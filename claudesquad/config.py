"""Persistent application configuration."""

from __future__ import annotations

import getpass
import json
import os
import re
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from claudesquad import applog

CONFIG_FILE_NAME = "config.json"
DEFAULT_PROGRAM = "claude"

_ALIAS_RE = re.compile(r"(?:aliased to|->|=)\s*(\S+)")


def get_config_dir() -> Path:
    """Return the application's configuration directory."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError, OSError) as exc:
        raise RuntimeError(f"failed to get config home directory: {exc}") from exc
    return home / ".claude-squad"


@dataclass
class Config:
    """Application configuration."""

    default_program: str = ""
    auto_yes: bool = False
    # Interval in milliseconds at which the daemon polls sessions.
    daemon_poll_interval: int = 0
    branch_prefix: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the configuration in its on-disk form."""
        return {
            "default_program": self.default_program,
            "auto_yes": self.auto_yes,
            "daemon_poll_interval": self.daemon_poll_interval,
            "branch_prefix": self.branch_prefix,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Config:
        """Build a configuration from its on-disk form; missing fields take zero values."""
        if not isinstance(data, dict):
            raise ValueError("config must be a JSON object")
        program = data.get("default_program", "")
        auto_yes = data.get("auto_yes", False)
        interval = data.get("daemon_poll_interval", 0)
        prefix = data.get("branch_prefix", "")
        if not isinstance(program, str):
            raise ValueError("default_program must be a string")
        if not isinstance(auto_yes, bool):
            raise ValueError("auto_yes must be a boolean")
        if isinstance(interval, bool) or not isinstance(interval, int):
            raise ValueError("daemon_poll_interval must be an integer")
        if not isinstance(prefix, str):
            raise ValueError("branch_prefix must be a string")
        return cls(program, auto_yes, interval, prefix)


def _branch_prefix() -> str:
    try:
        username = getpass.getuser()
    except Exception as exc:  # getuser raises different errors across versions
        applog.error_log.error("failed to get current user: %s", exc)
        return "session/"
    if not username:
        applog.error_log.error("failed to get current user: empty name")
        return "session/"
    return f"{username.lower()}/"


def default_config() -> Config:
    """Return the default configuration."""
    try:
        program = get_claude_command()
    except FileNotFoundError as exc:
        applog.error_log.error("failed to get claude command: %s", exc)
        program = DEFAULT_PROGRAM
    return Config(
        default_program=program,
        auto_yes=False,
        daemon_poll_interval=1000,
        branch_prefix=_branch_prefix(),
    )


def get_claude_command() -> str:
    """Find the claude command via the user's shell, then via PATH."""
    shell = os.environ.get("SHELL") or "/bin/bash"
    if "zsh" in shell:
        shell_cmd = "source ~/.zshrc &>/dev/null || true; which claude"
    elif "bash" in shell:
        shell_cmd = "source ~/.bashrc &>/dev/null || true; which claude"
    else:
        shell_cmd = "which claude"

    try:
        result = subprocess.run(
            [shell, "-c", shell_cmd],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            stdin=subprocess.DEVNULL,
        )
    except OSError:
        result = None

    if result is not None and result.returncode == 0:
        path = result.stdout.decode(errors="replace").strip()
        if path:
            match = _ALIAS_RE.search(path)
            if match:
                path = match.group(1)
            return path

    found = shutil.which("claude")
    if found:
        return found
    raise FileNotFoundError("claude command not found in aliases or PATH")


def load_config() -> Config:
    """Load the configuration, falling back to defaults on any problem."""
    try:
        config_dir = get_config_dir()
    except RuntimeError as exc:
        applog.error_log.error("failed to get config directory: %s", exc)
        return default_config()

    config_path = config_dir / CONFIG_FILE_NAME
    try:
        data = config_path.read_bytes()
    except FileNotFoundError:
        cfg = default_config()
        try:
            save_config(cfg)
        except (OSError, RuntimeError) as exc:
            applog.warning_log.warning("failed to save default config: %s", exc)
        return cfg
    except OSError as exc:
        applog.warning_log.warning("failed to get config file: %s", exc)
        return default_config()

    try:
        return Config.from_dict(json.loads(data))
    except ValueError as exc:
        applog.error_log.error("failed to parse config file: %s", exc)
        return default_config()


def save_config(config: Config) -> None:
    """Write the configuration to disk."""
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / CONFIG_FILE_NAME).write_text(json.dumps(config.to_dict(), indent=2))