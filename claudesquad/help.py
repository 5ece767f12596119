"""Help screens and tracking of which ones the user has already seen."""

from __future__ import annotations

import enum
import re
from typing import Any, Protocol

from claudesquad import applog

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


class AppState(Protocol):
    def get_help_screens_seen(self) -> int: ...

    def set_help_screens_seen(self, seen: int) -> None: ...


def _rgb(color: str) -> str:
    return f"38;2;{int(color[1:3], 16)};{int(color[3:5], 16)};{int(color[5:7], 16)}"


def _style(text: str, *codes: str) -> str:
    return f"\x1b[{';'.join(codes)}m{text}\x1b[0m"


def _title(text: str) -> str:
    return _style(text, "1", "4", _rgb("#7D56F4"))


def _header(text: str) -> str:
    return _style(text, "1", _rgb("#36CFC9"))


def _key(text: str) -> str:
    return _style(text, "1", _rgb("#FFCC00"))


def _desc(text: str) -> str:
    return _style(text, _rgb("#FFFFFF"))


def _bold(text: str) -> str:
    return _style(text, "1")


def _visible_width(line: str) -> int:
    return len(_ANSI_RE.sub("", line))


def _join_left(*lines: str) -> str:
    """Stack lines vertically, padding each on the right to the widest one."""
    width = max(_visible_width(line) for line in lines)
    return "\n".join(line + " " * (width - _visible_width(line)) for line in lines)


class HelpType(enum.IntEnum):
    GENERAL = 0
    INSTANCE_START = 1
    INSTANCE_ATTACH = 2
    INSTANCE_CHECKOUT = 3

    @property
    def flag(self) -> int:
        """Bit marking this help screen in the seen-screens bitmask."""
        return 1 << self.value

    def to_content(self, instance: Any) -> str:
        """Render the help screen text; INSTANCE_START needs an instance."""
        if self is HelpType.GENERAL:
            return _join_left(
                _title("Claude Squad"),
                "",
                "A terminal UI that manages multiple Claude Code (and other local agents)"
                " in separate workspaces.",
                "",
                _header("Managing:"),
                _key("n") + _desc("         - Create a new session"),
                _key("N") + _desc("         - Create a new session with a prompt"),
                _key("D") + _desc("         - Kill (delete) the selected session"),
                _key("↑/j, ↓/k") + _desc("  - Navigate between sessions"),
                _key("↵/o") + _desc("       - Attach to the selected session"),
                _key("ctrl-q") + _desc("    - Detach from session"),
                "",
                _header("Handoff:"),
                _key("p") + _desc("         - Commit and push branch to github"),
                _key("c") + _desc("         - Checkout: commit changes and pause session"),
                _key("r") + _desc("         - Resume a paused session"),
                "",
                _header("Other:"),
                _key("tab") + _desc("       - Switch between preview and diff tabs"),
                _key("shift-↓/↑") + _desc(" - Scroll in diff view"),
                _key("q") + _desc("         - Quit the application"),
            )
        if self is HelpType.INSTANCE_START:
            if instance is None:
                raise ValueError("the instance start help screen needs an instance")
            return _join_left(
                _title("Instance Created"),
                "",
                _desc("New session created:"),
                _desc(f"• Git branch: {_bold(instance.branch)} (isolated worktree)"),
                _desc(f"• {_bold(instance.program)} running in background tmux session"),
                "",
                _header("Managing:"),
                _key("↵/o") + _desc("   - Attach to the session to interact with it directly"),
                _key("tab") + _desc("   - Switch preview panes to view session diff"),
                _key("D") + _desc("     - Kill (delete) the selected session"),
                "",
                _header("Handoff:"),
                _key("c") + _desc("     - Checkout this instance's branch"),
                _key("p") + _desc("     - Push branch to GitHub to create a PR"),
            )
        if self is HelpType.INSTANCE_ATTACH:
            return _join_left(
                _title("Attaching to Instance"),
                "",
                _desc("To detach from a session, press ") + _key("ctrl-q"),
            )
        return _join_left(
            _title("Checkout Instance"),
            "",
            "Changes will be committed locally. The branch name has been copied to your"
            " clipboard for you to checkout.",
            "",
            "Feel free to make changes to the branch and commit them. When resuming, the"
            " session will continue from where you left off.",
            "",
            _header("Commands:"),
            _key("c") + _desc(" - Checkout: commit changes locally and pause session"),
            _key("r") + _desc(" - Resume a paused session"),
        )


def should_show(help_type: HelpType, app_state: AppState) -> bool:
    """Return True if the screen is the general help or has not been seen yet."""
    return help_type is HelpType.GENERAL or not (
        app_state.get_help_screens_seen() & help_type.flag
    )


def show_help_screen(help_type: HelpType, app_state: AppState, instance: Any) -> str | None:
    """Mark the screen seen and return its content, or None if it should be skipped."""
    if not should_show(help_type, app_state):
        return None
    try:
        app_state.set_help_screens_seen(app_state.get_help_screens_seen() | help_type.flag)
    except (OSError, RuntimeError, ValueError) as exc:
        applog.warning_log.warning("Failed to save help screen state: %s", exc)
    return help_type.to_content(instance)