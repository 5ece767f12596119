# claudesquad

Support code for running several AI coding agents (Claude Code, Aider, Codex,
Amp and others) side by side: persistent configuration and state, help screen
tracking, key bindings, control of a background daemon process, logging, and a
small command-line tool.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

```
claudesquad version     # print the version
claudesquad debug       # print the config file path and the loaded config as JSON
claudesquad reset       # clear stored instances and stop the daemon
```

Run with no subcommand, `claudesquad` prints its help. `reset` empties the
instance list in the state file and stops a running daemon, if there is one.
Exit status is 0 on success and 1 on error.

## Configuration

`claudesquad.config` keeps settings in `~/.claude-squad/config.json`:

```json
{
  "default_program": "claude",
  "auto_yes": false,
  "daemon_poll_interval": 1000,
  "branch_prefix": "yourname/"
}
```

```python
from claudesquad.config import load_config, save_config

cfg = load_config()          # writes a default file if none exists
cfg.auto_yes = True
save_config(cfg)
```

`load_config()` falls back to `default_config()` when the file cannot be read
or parsed. The default program is found by `get_claude_command()`, which asks
the user's shell (`which claude`, after sourcing `~/.bashrc` or `~/.zshrc`) and
then searches `PATH`; it raises `FileNotFoundError` if neither finds it, in
which case the default is `claude`. The default branch prefix is the lower-case
user name followed by `/`, or `session/` when no user name is available.
`get_config_dir()` returns `~/.claude-squad`.

## State

`claudesquad.state` keeps `~/.claude-squad/state.json`, holding a bitmask of
help screens already seen and the stored instance data:

```python
from claudesquad.state import load_state

state = load_state()
state.set_help_screens_seen(state.get_help_screens_seen() | 1)   # saved at once
state.delete_all_instances()                                    # saved at once
```

`save_instances`, `delete_all_instances` and `set_help_screens_seen` each write
the file. The bitmask must fit in 32 unsigned bits; otherwise `ValueError` is
raised.

## Help screens

`claudesquad.help.HelpType` has `GENERAL`, `INSTANCE_START`, `INSTANCE_ATTACH`
and `INSTANCE_CHECKOUT`. Each has a `flag` bit and `to_content(instance)`,
which returns ANSI-styled text (`INSTANCE_START` needs an object with `branch`
and `program` attributes). `show_help_screen(help_type, app_state, instance)`
returns the content and marks the screen as seen, or returns `None` if it was
seen before; the general help is always shown.

## Key bindings

`claudesquad.keys` defines `KeyName`, the `KeyBinding` dataclass,
`GLOBAL_KEY_STRINGS`, `GLOBAL_KEY_BINDINGS`, and `lookup(key_string)`, which
returns the `KeyName` for a key string such as `"j"` or `"shift+up"`, or `None`.

## Daemon control

`claudesquad.daemon.launch_daemon()` starts `python -m claudesquad.cli --daemon`
as a detached process and writes its PID to `~/.claude-squad/daemon.pid`
(`pid_file_path()`). `stop_daemon()` kills the process named in that file and
removes the file; it does nothing if the file is missing and raises
`ValueError` if the file does not hold a PID.

## Running commands and logging

`claudesquad.cmdexec` provides the `Executor` protocol, the subprocess-backed
`Exec`, `make_executor()` and `to_string(args)`.

`claudesquad.applog.initialize(daemon)` sends `info_log`, `warning_log` and
`error_log` to a file in the system temporary directory (`log_file_path()`);
`close()` closes it. `Every(timeout).should_log()` returns `True` at most once
per `timeout` seconds.

## What this package does not do

There is no interactive terminal interface: sessions cannot be created, listed,
attached to, previewed or pushed from here, and there is no session storage,
tmux handling or git worktree management. Because of that, `claudesquad
--daemon` logs an error and exits with status 1 instead of polling sessions,
and `reset` does not clean up tmux sessions or worktrees.