"""Application state persisted between runs."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from claudesquad import applog
from claudesquad.config import get_config_dir

STATE_FILE_NAME = "state.json"
INSTANCES_FILE_NAME = "instances.json"

_UINT32_MAX = 0xFFFFFFFF


def _check_seen(seen: Any) -> int:
    if isinstance(seen, bool) or not isinstance(seen, int):
        raise ValueError("help_screens_seen must be an integer")
    if not 0 <= seen <= _UINT32_MAX:
        raise ValueError("help_screens_seen must fit in 32 unsigned bits")
    return seen


@dataclass
class State:
    """Help screens seen and stored instance data."""

    # Bitmask of help screens already shown.
    help_screens_seen: int = 0
    # JSON-compatible data describing stored instances.
    instances_data: Any = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the state in its on-disk form."""
        return {
            "help_screens_seen": self.help_screens_seen,
            "instances": self.instances_data,
        }

    @classmethod
    def from_dict(cls, data: Any) -> State:
        """Build a state from its on-disk form."""
        if not isinstance(data, dict):
            raise ValueError("state must be a JSON object")
        seen = _check_seen(data.get("help_screens_seen", 0))
        return cls(help_screens_seen=seen, instances_data=data.get("instances", []))

    def save_instances(self, instances_json: Any) -> None:
        """Store instance data and write the state to disk."""
        self.instances_data = instances_json
        save_state(self)

    def get_instances(self) -> Any:
        """Return the stored instance data."""
        return self.instances_data

    def delete_all_instances(self) -> None:
        """Remove all stored instances and write the state to disk."""
        self.instances_data = []
        save_state(self)

    def get_help_screens_seen(self) -> int:
        """Return the bitmask of seen help screens."""
        return self.help_screens_seen

    def set_help_screens_seen(self, seen: int) -> None:
        """Update the bitmask of seen help screens and write the state to disk."""
        self.help_screens_seen = _check_seen(seen)
        save_state(self)


def default_state() -> State:
    """Return the default state."""
    return State(help_screens_seen=0, instances_data=[])


def load_state() -> State:
    """Load the state from disk, falling back to the default state."""
    try:
        config_dir = get_config_dir()
    except RuntimeError as exc:
        applog.error_log.error("failed to get config directory: %s", exc)
        return default_state()

    state_path = config_dir / STATE_FILE_NAME
    try:
        data = state_path.read_bytes()
    except FileNotFoundError:
        state = default_state()
        try:
            save_state(state)
        except (OSError, RuntimeError) as exc:
            applog.warning_log.warning("failed to save default state: %s", exc)
        return state
    except OSError as exc:
        applog.warning_log.warning("failed to get state file: %s", exc)
        return default_state()

    try:
        return State.from_dict(json.loads(data))
    except ValueError as exc:
        applog.error_log.error("failed to parse state file: %s", exc)
        return default_state()


def save_state(state: State) -> None:
    """Write the state to disk."""
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / STATE_FILE_NAME).write_text(json.dumps(state.to_dict(), indent=2))