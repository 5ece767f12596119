"""Key names and their bindings."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class KeyName(enum.IntEnum):
    UP = 0
    DOWN = enum.auto()
    ENTER = enum.auto()
    NEW = enum.auto()
    KILL = enum.auto()
    QUIT = enum.auto()
    REVIEW = enum.auto()
    PUSH = enum.auto()
    SUBMIT = enum.auto()
    # Switches between panes.
    TAB = enum.auto()
    # Submits the name of a new instance.
    SUBMIT_NAME = enum.auto()
    CHECKOUT = enum.auto()
    RESUME = enum.auto()
    PROMPT = enum.auto()
    HELP = enum.auto()
    CLAUDE_RESUME = enum.auto()
    SHIFT_UP = enum.auto()
    SHIFT_DOWN = enum.auto()


@dataclass(frozen=True)
class KeyBinding:
    """Keys that trigger an action, with the help text shown for it."""

    keys: tuple[str, ...]
    help_key: str
    help_desc: str

    def matches(self, key_string: str) -> bool:
        """Return True if the key string triggers this binding."""
        return key_string in self.keys


GLOBAL_KEY_STRINGS: dict[str, KeyName] = {
    "up": KeyName.UP,
    "k": KeyName.UP,
    "down": KeyName.DOWN,
    "j": KeyName.DOWN,
    "shift+up": KeyName.SHIFT_UP,
    "shift+down": KeyName.SHIFT_DOWN,
    "N": KeyName.PROMPT,
    "enter": KeyName.ENTER,
    "o": KeyName.ENTER,
    "n": KeyName.NEW,
    "D": KeyName.KILL,
    "q": KeyName.QUIT,
    "tab": KeyName.TAB,
    "c": KeyName.CHECKOUT,
    "r": KeyName.RESUME,
    "p": KeyName.SUBMIT,
    "?": KeyName.HELP,
    "C": KeyName.CLAUDE_RESUME,
}

GLOBAL_KEY_BINDINGS: dict[KeyName, KeyBinding] = {
    KeyName.UP: KeyBinding(("up", "k"), "↑/k", "up"),
    KeyName.DOWN: KeyBinding(("down", "j"), "↓/j", "down"),
    KeyName.SHIFT_UP: KeyBinding(("shift+up",), "shift+↑", "scroll"),
    KeyName.SHIFT_DOWN: KeyBinding(("shift+down",), "shift+↓", "scroll"),
    KeyName.ENTER: KeyBinding(("enter", "o"), "↵/o", "open"),
    KeyName.NEW: KeyBinding(("n",), "n", "new"),
    KeyName.KILL: KeyBinding(("D",), "D", "kill"),
    KeyName.HELP: KeyBinding(("?",), "?", "help"),
    KeyName.QUIT: KeyBinding(("q",), "q", "quit"),
    KeyName.SUBMIT: KeyBinding(("p",), "p", "push branch"),
    KeyName.PROMPT: KeyBinding(("N",), "N", "new with prompt"),
    KeyName.CHECKOUT: KeyBinding(("c",), "c", "checkout"),
    KeyName.TAB: KeyBinding(("tab",), "tab", "switch tab"),
    KeyName.RESUME: KeyBinding(("r",), "r", "resume"),
    KeyName.CLAUDE_RESUME: KeyBinding(("C",), "C", "new with resume"),
    KeyName.SUBMIT_NAME: KeyBinding(("enter",), "enter", "submit name"),
}


def lookup(key_string: str) -> KeyName | None:
    """Return the key name bound to a key string, or None if it is unbound."""
    return GLOBAL_KEY_STRINGS.get(key_string)