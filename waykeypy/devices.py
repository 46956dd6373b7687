"""Discovery and selection of keyboard input devices."""

from __future__ import annotations

import fcntl
import os
import re
import struct
import sys
from dataclasses import dataclass

INPUT_DIR = "/dev/input"
INPUT_EVENT_PREFIX = "event"
MAX_DEVICES = 16
UNKNOWN_DEVICE = "Unknown Device"

EV_KEY = 0x01
KEY_A = 30
KEY_Z = 44
KEY_MAX = 0x2FF

_NAME_SIZE = 256
_LONG_BYTES = struct.calcsize("L")
_LONG_BITS = _LONG_BYTES * 8
_KEYBIT_BYTES = (KEY_MAX // _LONG_BITS + 1) * _LONG_BYTES
_IOC_READ = 2
_SEPARATOR = "---------------------------"


def _ioc_read(nr: int, size: int) -> int:
    return (_IOC_READ << 30) | (size << 16) | (ord("E") << 8) | nr


def _query_bits(fd: int, event_type: int, size: int) -> tuple[int, ...]:
    buffer = bytearray(size)
    fcntl.ioctl(fd, _ioc_read(0x20 + event_type, size), buffer, True)
    return struct.unpack(f"{size // _LONG_BYTES}L", buffer)


def _has_bit(words: tuple[int, ...], bit: int) -> bool:
    return bool((words[bit // _LONG_BITS] >> (bit % _LONG_BITS)) & 1)


@dataclass(frozen=True)
class InputDevice:
    """An input device node with its reported name."""

    path: str
    name: str
    is_keyboard: bool = True


def is_device_keyboard(path: str | os.PathLike) -> bool:
    """Return True if the device reports key events including A and Z."""
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError:
        return False
    try:
        if not _has_bit(_query_bits(fd, 0, _LONG_BYTES), EV_KEY):
            return False
        keybits = _query_bits(fd, EV_KEY, _KEYBIT_BYTES)
        return _has_bit(keybits, KEY_A) and _has_bit(keybits, KEY_Z)
    except OSError:
        return False
    finally:
        os.close(fd)


def get_device_name(path: str | os.PathLike) -> str:
    """Return the name the device reports, or "Unknown Device"."""
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError:
        return UNKNOWN_DEVICE
    try:
        buffer = bytearray(_NAME_SIZE)
        fcntl.ioctl(fd, _ioc_read(0x06, _NAME_SIZE), buffer, True)
    except OSError:
        return UNKNOWN_DEVICE
    finally:
        os.close(fd)
    return bytes(buffer).split(b"\0", 1)[0].decode("utf-8", "replace")


def find_keyboard_devices(
    max_devices: int = MAX_DEVICES, input_dir: str = INPUT_DIR
) -> list[InputDevice]:
    """List keyboard event devices in the input directory, at most max_devices."""
    try:
        entries = os.listdir(input_dir)
    except OSError as exc:
        print(f"Failed to open {input_dir}: {exc.strerror or exc}", file=sys.stderr)
        return []

    devices: list[InputDevice] = []
    for entry in entries:
        if len(devices) >= max_devices:
            break
        if not entry.startswith(INPUT_EVENT_PREFIX):
            continue
        path = f"{input_dir}/{entry}"
        if is_device_keyboard(path):
            devices.append(InputDevice(path=path, name=get_device_name(path)))
    return devices


def format_device_list(devices: list[InputDevice]) -> str:
    """Render the numbered device listing."""
    lines = ["", "Detected keyboard devices:", _SEPARATOR]
    lines.extend(
        f"[{number}] {device.name} ({device.path})"
        for number, device in enumerate(devices, start=1)
    )
    lines.append(_SEPARATOR)
    return "\n".join(lines) + "\n"


def print_device_list(devices: list[InputDevice]) -> None:
    """Print the numbered device listing to stdout."""
    print(format_device_list(devices), end="")


def _leading_int(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def prompt_device_selection(devices: list[InputDevice], input_func=None) -> str | None:
    """Ask the user to pick a device and return its path, or None."""
    if not devices:
        print("No keyboard devices detected.", file=sys.stderr)
        return None

    if len(devices) == 1:
        only = devices[0]
        print(f"info: found one keyboard device: {only.name} ({only.path})")
        return only.path

    print_device_list(devices)
    ask = input_func if input_func is not None else input
    try:
        answer = ask(f"Select keyboard device (1-{len(devices)}): ")
    except EOFError:
        return None

    selection = _leading_int(answer)
    if not 1 <= selection <= len(devices):
        print("Invalid selection.", file=sys.stderr)
        return None
    return devices[selection - 1].path