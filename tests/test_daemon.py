import subprocess
import sys
from unittest import mock

import pytest

from claudesquad import daemon
from claudesquad.config import get_config_dir


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    return tmp_path


def test_pid_file_path_is_in_config_dir(home):
    path = daemon.pid_file_path()
    assert path == get_config_dir() / "daemon.pid"
    assert path.parent == home / ".claude-squad"


def test_stop_daemon_without_pid_file_does_nothing(home):
    daemon.stop_daemon()
    assert not daemon.pid_file_path().exists()


def test_stop_daemon_rejects_bad_pid_file(home):
    path = daemon.pid_file_path()
    path.parent.mkdir(parents=True)
    path.write_text("not-a-pid")
    with pytest.raises(ValueError, match="invalid PID file format"):
        daemon.stop_daemon()
    assert path.exists()


def test_stop_daemon_kills_process_and_removes_pid_file(home):
    proc = subprocess.Popen([sys.executable, "-c", "import time; time.sleep(60)"])
    try:
        path = daemon.pid_file_path()
        path.parent.mkdir(parents=True)
        path.write_text(str(proc.pid))
        daemon.stop_daemon()
        assert proc.wait(timeout=20) != 0
        assert not path.exists()
    finally:
        if proc.poll() is None:
            proc.kill()
            proc.wait()


def test_launch_daemon_writes_pid_file(home):
    (home / ".claude-squad").mkdir()
    fake = mock.Mock()
    fake.pid = 4242
    with mock.patch("subprocess.Popen", return_value=fake) as popen:
        daemon.launch_daemon()
    command = popen.call_args.args[0]
    assert command[-1] == "--daemon"
    assert popen.call_args.kwargs["stdin"] == subprocess.DEVNULL
    assert daemon.pid_file_path().read_text() == "4242"


def test_launch_then_stop_round_trip(home):
    (home / ".claude-squad").mkdir()
    child = subprocess.Popen([sys.executable, "-c", "import time; time.sleep(60)"])
    try:
        with mock.patch("subprocess.Popen", return_value=child):
            daemon.launch_daemon()
        assert daemon.pid_file_path().read_text() == str(child.pid)
        daemon.stop_daemon()
        assert child.wait(timeout=20) != 0
        assert not daemon.pid_file_path().exists()
    finally:
        if child.poll() is None:
            child.kill()
            child.wait()


def test_launch_daemon_fails_when_config_dir_missing(home):
    fake = mock.Mock()
    fake.pid = 7
    with mock.patch("subprocess.Popen", return_value=fake):
        with pytest.raises(RuntimeError, match="failed to write PID file"):
            daemon.launch_daemon()


def test_launch_daemon_reports_start_failure(home):
    (home / ".claude-squad").mkdir()
    with mock.patch("subprocess.Popen", side_effect=OSError("boom")):
        with pytest.raises(RuntimeError, match="failed to start child process"):
            daemon.launch_daemon()
    assert not daemon.pid_file_path().exists()