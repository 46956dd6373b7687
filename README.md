# waykeypy

A small Linux tool that watches a keyboard input device and publishes the
current state of every key it has seen. Each key press or release updates:

- a JSON **state file** (default `/tmp/waykey_state.json`), rewritten in full
  on every event, pretty-printed;
- a **named pipe** (default `/tmp/waykey_pipe`), which receives one compact
  JSON line per event.

This makes it easy to drive on-screen key overlays, status-bar widgets or
screencast helpers on Wayland, where reading global key state is otherwise
not possible.

## Installation

```
pip install .
```

Reading from `/dev/input/event*` normally needs root or membership in the
`input` group.

## Usage

```
waykeypy [OPTIONS]
```

| Option | Meaning |
| --- | --- |
| `-d`, `--device PATH` | Input device to read (auto-detected if omitted) |
| `-p`, `--pipe PATH` | Named pipe path (default `/tmp/waykey_pipe`) |
| `-s`, `--state PATH` | State file path (default `/tmp/waykey_state.json`) |
| `-l`, `--list` | List detected keyboard devices and exit |
| `-h`, `--help` | Show help |

When no device is given, keyboards under `/dev/input` are detected (a device
counts as a keyboard when it reports the A and Z keys; at most 16 are listed).
If there is exactly one, it is used straight away; otherwise you are asked to
pick one by number. If a device given with `--device` does not look like a
keyboard, you are asked whether to continue.

The named pipe is created if it does not exist. It is opened once, at start,
without blocking: if no process is reading from it at that moment, a notice is
printed and only the state file is updated for the rest of the run.

Press Ctrl+C (or send SIGTERM) to stop.

To watch the live stream, start a reader before starting the monitor:

```
cat /tmp/waykey_pipe
```

## Configuration file

Defaults can be set in `~/.config/waykey/config.yml`:

```yaml
device_path: /dev/input/event3
pipe_path: /tmp/waykey_pipe
state_path: /tmp/waykey_state.json
```

Other keys are ignored. Command-line options take precedence over the file.

## Output format

The state file looks like this:

```json
{
  "keys":[
    {
      "name":"ctrl",
      "state":"pressed"
    },
    {
      "name":"c",
      "state":"released"
    }
  ]
}
```

The pipe receives the same document on one line, followed by a newline.

Keys appear in key-code order, and only codes below 256 are tracked. Known
keys carry a short name (left and right modifiers share one, such as `shift`
or `ctrl`); other keys are named `key<code>`. Key autorepeat is not reported.

## Library use

The pieces can be used directly:

```python
from waykeypy.keystate import KeyStateTable

table = KeyStateTable()
table.update(30, pressed=True)
print(table.to_json(pretty=False))
# {"keys": [{"name": "a", "state": "pressed"}]}
```

- `waykeypy.keymap.key_name(code)` returns the short name of a key code.
- `waykeypy.config.load_config(path)` reads a configuration file into a
  `Config`.
- `waykeypy.devices.find_keyboard_devices()` lists keyboards as
  `InputDevice` entries; `prompt_device_selection()` asks the user to pick one.
- `waykeypy.capture.parse_events(data)` decodes raw input event records into
  `KeyEvent` values, and `waykeypy.capture.KeyCapture` runs the read loop over
  a device described by a `KeyCaptureConfig`.

## Limitations

- Events are read straight from the evdev device node; there is no pointer,
  touch or other non-key handling.
- The pipe is not reopened if a reader connects after start-up or goes away.
- Only Linux is supported.