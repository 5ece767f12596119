import json

import pytest

from claudesquad.config import get_config_dir
from claudesquad.state import (
    STATE_FILE_NAME,
    State,
    default_state,
    load_state,
    save_state,
)


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    return tmp_path


def _state_path(home):
    return home / ".claude-squad" / STATE_FILE_NAME


def test_default_state():
    state = default_state()
    assert state.get_help_screens_seen() == 0
    assert state.get_instances() == []


def test_load_state_creates_file_when_missing(home):
    state = load_state()
    assert state == default_state()
    assert _state_path(home).is_file()


def test_save_and_load_round_trip(home):
    state = State(help_screens_seen=5, instances_data=[{"title": "alpha"}])
    save_state(state)
    assert load_state() == state


def test_file_uses_json_keys(home):
    state = State(help_screens_seen=2, instances_data=[])
    save_state(state)
    data = json.loads((get_config_dir() / STATE_FILE_NAME).read_text())
    assert set(data) == {"help_screens_seen", "instances"}
    assert data["help_screens_seen"] == 2
    assert State.from_dict(data) == state


def test_set_help_screens_seen_persists(home):
    state = load_state()
    state.set_help_screens_seen(state.get_help_screens_seen() | 4)
    assert load_state().get_help_screens_seen() == 4


def test_save_instances_persists(home):
    state = load_state()
    instances = [{"title": "one"}, {"title": "two"}]
    state.save_instances(instances)
    assert state.get_instances() == instances
    assert load_state().get_instances() == instances


def test_delete_all_instances(home):
    state = load_state()
    state.save_instances([{"title": "one"}])
    state.delete_all_instances()
    assert state.get_instances() == []
    assert load_state().get_instances() == []


def test_invalid_state_file_gives_default(home):
    path = _state_path(home)
    path.parent.mkdir(parents=True)
    path.write_text("not json at all")
    assert load_state() == default_state()


def test_set_help_screens_seen_rejects_out_of_range(home):
    state = default_state()
    with pytest.raises(ValueError):
        state.set_help_screens_seen(-1)
    with pytest.raises(ValueError):
        state.set_help_screens_seen(1 << 32)
    assert state.get_help_screens_seen() == 0


def test_from_dict_rejects_bad_input():
    with pytest.raises(ValueError):
        State.from_dict({"help_screens_seen": "many"})
    with pytest.raises(ValueError):
        State.from_dict([1, 2])


def test_to_dict_from_dict_round_trip():
    state = State(help_screens_seen=9, instances_data=[{"title": "t"}])
    assert State.from_dict(state.to_dict()) == state