"""Command line entry point."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence

from claudesquad import applog
from claudesquad.config import CONFIG_FILE_NAME, get_config_dir, load_config
from claudesquad.daemon import stop_daemon
from claudesquad.state import load_state

VERSION = "1.0.5"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="claude-squad",
        description="Claude Squad - Manage multiple AI agents like Claude Code, "
        "Aider, Codex, and Amp.",
    )
    parser.add_argument("--daemon", action="store_true", help=argparse.SUPPRESS)
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("reset", help="Reset all stored instances")
    commands.add_parser("debug", help="Print debug information like config paths")
    commands.add_parser("version", help="Print the version number of claude-squad")
    return parser


def _reset() -> None:
    applog.initialize(False)
    try:
        state = load_state()
        try:
            state.delete_all_instances()
        except (OSError, RuntimeError) as exc:
            raise RuntimeError(f"failed to reset storage: {exc}") from exc
        print("Storage has been reset successfully")
        stop_daemon()
        print("daemon has been stopped")
    finally:
        applog.close()


def _debug() -> None:
    cfg = load_config()
    try:
        config_dir = get_config_dir()
    except RuntimeError as exc:
        raise RuntimeError(f"failed to get config directory: {exc}") from exc
    print(f"Config: {config_dir / CONFIG_FILE_NAME}")
    print(json.dumps(cfg.to_dict(), indent=2))


def _daemon() -> None:
    applog.initialize(True)
    try:
        load_config()
        message = "failed to start daemon: no session backend is available"
        applog.error_log.error(message)
        raise RuntimeError(message)
    finally:
        applog.close()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line interface and return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        if args.command == "version":
            print(f"claude-squad version {VERSION}")
        elif args.command == "reset":
            _reset()
        elif args.command == "debug":
            _debug()
        elif args.daemon:
            _daemon()
        else:
            parser.print_help()
    except (OSError, RuntimeError, ValueError) as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())