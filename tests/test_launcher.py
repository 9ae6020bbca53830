import os

import pytest

from tasklauncher import launcher as launcher_mod
from tasklauncher.errors import ElevationCancelled, SpawnFailure, TargetNotFoundError
from tasklauncher.launcher import (
    Invocation,
    LaunchController,
    LaunchState,
    PosixSpawner,
    WindowsShellSpawner,
)
from tasklauncher.models import ActionSpec


class _FakeSpawner:
    def __init__(self, exc=None):
        self.exc = exc
        self.calls = []

    def spawn(self, invocation):
        self.calls.append(invocation)
        if self.exc is not None:
            raise self.exc


@pytest.fixture
def target(tmp_path):
    exe = tmp_path / "tool.exe"
    exe.write_bytes(b"")
    return exe


def test_missing_target_fails_without_spawning(tmp_path):
    spawner = _FakeSpawner()
    outcome = LaunchController(spawner).launch(ActionSpec(target_path=str(tmp_path / "nope.exe")))

    assert outcome.state is LaunchState.FAILED
    assert isinstance(outcome.error, TargetNotFoundError)
    assert "nope.exe" in outcome.error.message
    assert spawner.calls == []
    assert not outcome.close_window
    assert outcome.show_error


@pytest.mark.parametrize("path", ["", "   "])
def test_blank_target_fails(path):
    spawner = _FakeSpawner()
    outcome = LaunchController(spawner).launch(ActionSpec(target_path=path))
    assert outcome.state is LaunchState.FAILED
    assert spawner.calls == []


def test_directory_is_not_a_target(tmp_path):
    outcome = LaunchController(_FakeSpawner()).launch(ActionSpec(target_path=str(tmp_path)))
    assert outcome.state is LaunchState.FAILED


def test_successful_launch_closes_window(target):
    spawner = _FakeSpawner()
    controller = LaunchController(spawner)
    spec = ActionSpec(target_path=str(target), args_list=("--mode", "a b"))
    outcome = controller.launch(spec)

    assert outcome.state is LaunchState.SUCCEEDED
    assert controller.state is LaunchState.SUCCEEDED
    assert outcome.close_window
    assert not outcome.show_error
    assert spawner.calls == [
        Invocation(target=str(target), arguments='--mode "a b"',
                   working_directory=str(target.parent), elevate=False)
    ]


def test_working_directory_override(target, tmp_path):
    spawner = _FakeSpawner()
    work = tmp_path / "work"
    LaunchController(spawner).launch(ActionSpec(target_path=str(target), working_directory=str(work)))
    assert spawner.calls[0].working_directory == str(work)


def test_bare_file_name_uses_current_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "tool.exe").write_bytes(b"")
    spawner = _FakeSpawner()
    LaunchController(spawner).launch(ActionSpec(target_path="tool.exe"))
    assert spawner.calls[0].working_directory == os.getcwd()


def test_elevation_flag_is_passed_to_spawner(target):
    spawner = _FakeSpawner()
    LaunchController(spawner).launch(ActionSpec(target_path=str(target), require_elevation=True))
    assert spawner.calls[0].elevate is True


def test_cancelled_elevation_is_silent(target):
    spawner = _FakeSpawner(ElevationCancelled(str(target)))
    controller = LaunchController(spawner)
    outcome = controller.launch(ActionSpec(target_path=str(target), require_elevation=True))

    assert outcome.state is LaunchState.ELEVATION_CANCELLED
    assert outcome.error is None
    assert not outcome.show_error
    assert not outcome.close_window


def test_os_error_reports_target_and_diagnostic(target):
    spawner = _FakeSpawner(PermissionError(13, "Access is denied"))
    outcome = LaunchController(spawner).launch(ActionSpec(target_path=str(target)))

    assert outcome.state is LaunchState.FAILED
    assert isinstance(outcome.error, SpawnFailure)
    assert str(target) in outcome.error.message
    assert "Access is denied" in outcome.error.message
    assert not outcome.close_window


def test_reset_returns_to_idle(target):
    controller = LaunchController(_FakeSpawner(OSError("boom")))
    controller.launch(ActionSpec(target_path=str(target)))
    assert controller.state is LaunchState.FAILED
    controller.reset()
    assert controller.state is LaunchState.IDLE


def test_windows_spawner_uses_shell_verbs(monkeypatch):
    calls = []
    monkeypatch.setattr(launcher_mod.os, "startfile", lambda *a: calls.append(a), raising=False)
    spawner = WindowsShellSpawner()
    spawner.spawn(Invocation("C:\\a.exe", "-x", "C:\\", elevate=False))
    spawner.spawn(Invocation("C:\\a.exe", "", "C:\\", elevate=True))
    assert calls == [("C:\\a.exe", "open", "-x", "C:\\"), ("C:\\a.exe", "runas", "", "C:\\")]


def test_windows_spawner_maps_cancelled_prompt(monkeypatch):
    def _startfile(*args):
        err = OSError(None, "The operation was canceled by the user")
        err.winerror = 1223
        raise err

    monkeypatch.setattr(launcher_mod.os, "startfile", _startfile, raising=False)
    with pytest.raises(ElevationCancelled):
        WindowsShellSpawner().spawn(Invocation("C:\\a.exe", "", "C:\\", elevate=True))


def test_windows_spawner_propagates_other_errors(monkeypatch):
    def _startfile(*args):
        raise FileNotFoundError(2, "not found")

    monkeypatch.setattr(launcher_mod.os, "startfile", _startfile, raising=False)
    with pytest.raises(FileNotFoundError):
        WindowsShellSpawner().spawn(Invocation("C:\\a.exe", "", "C:\\"))


def test_posix_spawner_splits_arguments(monkeypatch):
    seen = {}

    def _popen(argv, **kwargs):
        seen["argv"] = argv
        seen.update(kwargs)

    monkeypatch.setattr(launcher_mod.subprocess, "Popen", _popen)
    PosixSpawner().spawn(Invocation("/opt/tool", '--mode "a b"', "/opt"))
    assert seen["argv"] == ["/opt/tool", "--mode", "a b"]
    assert seen["cwd"] == "/opt"


def test_posix_spawner_elevates_with_pkexec(monkeypatch):
    seen = {}
    monkeypatch.setattr(launcher_mod.shutil, "which", lambda name: "/usr/bin/pkexec")
    monkeypatch.setattr(launcher_mod.subprocess, "Popen", lambda argv, **kw: seen.setdefault("argv", argv))
    PosixSpawner().spawn(Invocation("/opt/tool", "", "/opt", elevate=True))
    assert seen["argv"] == ["/usr/bin/pkexec", "/opt/tool"]


def test_unbalanced_quotes_fail_cleanly(target, monkeypatch):
    monkeypatch.setattr(launcher_mod.subprocess, "Popen", lambda *a, **k: None)
    spec = ActionSpec(target_path=str(target), args_text='--name "unterminated')
    outcome = LaunchController(PosixSpawner()).launch(spec)
    assert outcome.state is LaunchState.FAILED
    assert isinstance(outcome.error, SpawnFailure)
