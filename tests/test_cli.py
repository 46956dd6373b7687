import builtins
import stat

import pytest

from waykeypy.cli import build_parser, main


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


def test_parser_reads_options():
    args = build_parser().parse_args(["-d", "/dev/x", "--pipe", "/p", "-s", "/s", "-l"])
    assert (args.device, args.pipe, args.state, args.list, args.help) == (
        "/dev/x",
        "/p",
        "/s",
        True,
        False,
    )


def test_help_prints_usage(capsys):
    assert main(["-h"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Usage: waykey [OPTIONS]")
    assert "(default: /tmp/waykey_pipe)" in out
    assert "(default: /tmp/waykey_state.json)" in out


def test_unknown_option_fails(capsys):
    assert main(["--bogus"]) == 1
    assert "Usage: waykey [OPTIONS]" in capsys.readouterr().out


def test_list_prints_devices(capsys):
    assert main(["--list"]) == 0
    assert "Detected keyboard devices:" in capsys.readouterr().out


def test_declining_non_keyboard(tmp_path, monkeypatch, capsys):
    node = tmp_path / "event0"
    node.write_bytes(b"")
    monkeypatch.setattr(builtins, "input", lambda prompt: "n")
    pipe = tmp_path / "pipe"
    assert main(["-d", str(node), "-p", str(pipe)]) == 1
    assert "may not be a keyboard" in capsys.readouterr().err
    assert not pipe.exists()


def test_end_of_input_declines(tmp_path, monkeypatch):
    node = tmp_path / "event0"
    node.write_bytes(b"")

    def eof(prompt):
        raise EOFError

    monkeypatch.setattr(builtins, "input", eof)
    assert main(["-d", str(node), "-p", str(tmp_path / "pipe")]) == 1


def test_accepting_non_keyboard_creates_pipe_then_fails(tmp_path, monkeypatch, capsys):
    node = tmp_path / "event0"
    node.write_bytes(b"")
    monkeypatch.setattr(builtins, "input", lambda prompt: "y")
    pipe = tmp_path / "pipe"
    assert main(["-d", str(node), "-p", str(pipe), "-s", str(tmp_path / "s.json")]) == 1
    assert stat.S_ISFIFO(pipe.stat().st_mode)
    captured = capsys.readouterr()
    assert f"info: using keyboard device: {node}" in captured.out
    assert "no process is reading from the pipe yet" in captured.err
    assert "failed to initialize" in captured.err


def test_config_file_values_and_overrides(tmp_path, isolated_home, monkeypatch):
    node = tmp_path / "event0"
    node.write_bytes(b"")
    from_config = tmp_path / "config_pipe"
    from_cli = tmp_path / "cli_pipe"
    config_dir = isolated_home / ".config" / "waykey"
    config_dir.mkdir(parents=True)
    (config_dir / "config.yml").write_text(
        f"device_path: {node}\npipe_path: {from_config}\n"
    )
    monkeypatch.setattr(builtins, "input", lambda prompt: "y")

    assert main([]) == 1
    assert stat.S_ISFIFO(from_config.stat().st_mode)

    assert main(["-p", str(from_cli)]) == 1
    assert stat.S_ISFIFO(from_cli.stat().st_mode)