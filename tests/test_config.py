from pathlib import Path

from waykeypy.config import Config, get_config_path, load_config


def test_get_config_path_uses_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert get_config_path() == tmp_path / ".config/waykey" / "config.yml"


def test_load_config_all_keys(tmp_path):
    cfg_file = tmp_path / "config.yml"
    cfg_file.write_text(
        "device_path: /dev/input/event3\n"
        "pipe_path: /tmp/custom_pipe\n"
        "state_path: /tmp/custom_state.json\n"
    )
    config = load_config(cfg_file)
    assert config == Config(
        device_path="/dev/input/event3",
        pipe_path="/tmp/custom_pipe",
        state_path="/tmp/custom_state.json",
    )


def test_load_config_partial_and_unknown_keys(tmp_path):
    cfg_file = tmp_path / "config.yml"
    cfg_file.write_text("colour: blue\npipe_path: /tmp/p\n")
    config = load_config(cfg_file)
    assert config.pipe_path == "/tmp/p"
    assert config.device_path is None
    assert config.state_path is None


def test_load_config_values_are_strings(tmp_path):
    cfg_file = tmp_path / "config.yml"
    cfg_file.write_text("pipe_path: 123\n")
    assert load_config(cfg_file).pipe_path == "123"


def test_load_config_missing_file_returns_none(tmp_path):
    assert load_config(tmp_path / "absent.yml") is None


def test_load_config_empty_file(tmp_path):
    cfg_file = tmp_path / "config.yml"
    cfg_file.write_text("")
    assert load_config(cfg_file) == Config()


def test_load_config_keeps_values_before_parse_error(tmp_path):
    cfg_file = tmp_path / "config.yml"
    cfg_file.write_text("device_path: /dev/input/event3\npipe_path: [unclosed\n")
    config = load_config(cfg_file)
    assert config.device_path == "/dev/input/event3"
    assert config.pipe_path is None


def test_load_config_default_location(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    cfg_dir = Path(tmp_path) / ".config" / "waykey"
    cfg_dir.mkdir(parents=True)
    (cfg_dir / "config.yml").write_text("state_path: /tmp/s.json\n")
    assert load_config().state_path == "/tmp/s.json"


def test_load_config_default_location_missing(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert load_config() is None