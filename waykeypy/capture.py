"""Reading key events from an evdev device and publishing the key state."""

from __future__ import annotations

import os
import struct
import sys
import threading
import time
from dataclasses import dataclass

from .devices import EV_KEY, is_device_keyboard
from .keystate import KeyStateTable

DEFAULT_PIPE_PATH = "/tmp/waykey_pipe"
DEFAULT_STATE_FILE = "/tmp/waykey_state.json"

EVENT_FORMAT = "@llHHi"
EVENT_SIZE = struct.calcsize(EVENT_FORMAT)
POLL_INTERVAL = 0.01
_READ_SIZE = EVENT_SIZE * 64


@dataclass(frozen=True)
class KeyEvent:
    """A key press or release."""

    key: int
    pressed: bool


@dataclass
class KeyCaptureConfig:
    """Where to read events from and where to publish the key state."""

    device_path: str | None = None
    pipe_path: str = DEFAULT_PIPE_PATH
    state_path: str = DEFAULT_STATE_FILE
    pipe_fd: int = -1


def parse_events(data: bytes) -> list[KeyEvent]:
    """Decode raw input_event records into key presses and releases.

    Autorepeat and non-key events are dropped.
    """
    if len(data) % EVENT_SIZE:
        raise ValueError(
            f"event data length {len(data)} is not a multiple of {EVENT_SIZE}"
        )
    return [
        KeyEvent(code, value == 1)
        for _sec, _usec, event_type, code, value in struct.iter_unpack(EVENT_FORMAT, data)
        if event_type == EV_KEY and value in (0, 1)
    ]


def open_device(path: str | None) -> int:
    """Open a keyboard device for non-blocking reading and return its descriptor."""
    if not path:
        raise ValueError("No device path specified")
    fd = os.open(path, os.O_RDONLY | os.O_NONBLOCK)
    if not is_device_keyboard(path):
        os.close(fd)
        raise ValueError("Device is not a keyboard")
    return fd


class KeyCapture:
    """Feeds key events from a device into a state table and its outputs."""

    def __init__(self, config: KeyCaptureConfig, table: KeyStateTable):
        self.config = config
        self.table = table
        self.device_fd: int | None = None
        self._running = threading.Event()
        self._running.set()

    def __enter__(self) -> KeyCapture:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def handle_event(self, event: KeyEvent) -> None:
        """Record one event and publish the new state."""
        self.table.update(event.key, event.pressed)
        self.table.write_state_file(self.config.state_path)
        self.table.send_pipe_update(self.config.pipe_fd)

    def _drain(self, pending: bytes) -> bytes | None:
        while True:
            try:
                chunk = os.read(self.device_fd, _READ_SIZE)
            except BlockingIOError:
                return pending
            except OSError as exc:
                print(f"Error reading from device: {exc.strerror or exc}", file=sys.stderr)
                return None
            if not chunk:
                return pending
            pending += chunk
            usable = len(pending) - len(pending) % EVENT_SIZE
            for event in parse_events(pending[:usable]):
                self.handle_event(event)
            pending = pending[usable:]

    def run(self) -> None:
        """Process events until stop() is called or the device fails."""
        if self.device_fd is None:
            self.device_fd = open_device(self.config.device_path)
        pending = b""
        while self._running.is_set():
            pending = self._drain(pending)
            if pending is None:
                break
            time.sleep(POLL_INTERVAL)

    def stop(self) -> None:
        """Ask the running loop to finish."""
        self._running.clear()

    def close(self) -> None:
        """Release the pipe and the device."""
        if self.config.pipe_fd >= 0:
            os.close(self.config.pipe_fd)
            self.config.pipe_fd = -1
        if self.device_fd is not None:
            os.close(self.device_fd)
            self.device_fd = None
        print("Exiting gracefully...")