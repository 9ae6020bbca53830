"""End-to-end flows without a window: load -> layout -> click dispatch -> launch."""

from tasklauncher.config_store import ConfigLoaded, StarterCreated, load_config
from tasklauncher.launcher import LaunchController, LaunchState
from tasklauncher.layout import compute_layout, dispatch_table


class _RecordingSpawner:
    def __init__(self):
        self.calls = []

    def spawn(self, invocation):
        self.calls.append(invocation)


def test_first_start_then_reload_renders_starter(tmp_path, measurer):
    path = tmp_path / "config.json"
    assert isinstance(load_config(path), StarterCreated)

    result = load_config(path)
    assert isinstance(result, ConfigLoaded)

    layout = compute_layout(result.config, result.config.window.width, measurer)
    assert layout.header is not None
    assert len(layout.buttons) == 3
    assert [b.text for b in layout.buttons] == ["App 1 (no args)", "App 2 (string args)", "App 3 (args list)"]


def test_click_on_missing_target_keeps_launcher_open(tmp_path):
    path = tmp_path / "config.json"
    load_config(path)
    config = load_config(path).config

    spawner = _RecordingSpawner()
    controller = LaunchController(spawner)
    table = dispatch_table(config)

    # The starter points at C:\Path\To\... which does not exist here.
    outcome = controller.launch(table["button-0"])
    assert outcome.state is LaunchState.FAILED
    assert not outcome.close_window
    assert spawner.calls == []


def test_click_dispatches_the_matching_action(tmp_path):
    exe = tmp_path / "tool.exe"
    exe.write_bytes(b"")
    path = tmp_path / "config.json"
    path.write_text(
        '{"buttons": ['
        '{"text": "Other", "exePath": "missing.exe"},'
        '{"text": "Tool", "exePath": "' + str(exe).replace("\\", "\\\\") + '", "argsList": ["-v"]},'
        ']}',
        encoding="utf-8",
    )
    config = load_config(path).config
    spawner = _RecordingSpawner()

    outcome = LaunchController(spawner).launch(dispatch_table(config)["button-1"])
    assert outcome.state is LaunchState.SUCCEEDED
    assert spawner.calls[0].target == str(exe)
    assert spawner.calls[0].arguments == "-v"
