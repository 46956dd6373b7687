"""Tracking of key states and their JSON publication."""

from __future__ import annotations

import json
import os
import sys
import threading
from dataclasses import asdict, dataclass

from .keymap import MAX_KEYS, key_name

_NAME_LIMIT = 31
_STATE_LIMIT = 15


@dataclass(frozen=True)
class KeyState:
    """The last known state of one key."""

    name: str
    state: str


class KeyStateTable:
    """Thread-safe table of the last state of every key seen."""

    def __init__(self):
        self._states: dict[int, KeyState] = {}
        self._lock = threading.Lock()

    def update(self, key: int, pressed: bool) -> None:
        """Record a key as pressed or released; codes out of range are ignored."""
        if not 0 <= key < MAX_KEYS:
            return
        name = key_name(key) or f"key{key}"
        state = "pressed" if pressed else "released"
        with self._lock:
            self._states[key] = KeyState(name[:_NAME_LIMIT], state[:_STATE_LIMIT])

    def snapshot(self) -> list[KeyState]:
        """Return the recorded key states ordered by key code."""
        with self._lock:
            return [self._states[code] for code in sorted(self._states)]

    def to_json(self, pretty: bool = False) -> str:
        """Serialise the table as a {"keys": [...]} JSON document."""
        document = {"keys": [asdict(entry) for entry in self.snapshot()]}
        if pretty:
            return json.dumps(document, indent=2, separators=(",", ":"))
        return json.dumps(document)

    def write_state_file(self, path: str | os.PathLike) -> None:
        """Write the pretty JSON state to a file, reporting failures on stderr."""
        text = self.to_json(pretty=True)
        try:
            with open(path, "w", encoding="utf-8") as stream:
                stream.write(text + "\n")
        except OSError as exc:
            print(f"Error writing to state file: {exc.strerror or exc}", file=sys.stderr)

    def send_pipe_update(self, pipe_fd: int | None) -> None:
        """Write one compact JSON line to an open pipe; no-op without a pipe."""
        if pipe_fd is None or pipe_fd < 0:
            return
        for chunk in (self.to_json().encode("utf-8"), b"\n"):
            try:
                written = os.write(pipe_fd, chunk)
            except OSError as exc:
                print(f"Error writing to pipe: {exc.strerror or exc}", file=sys.stderr)
                continue
            if written != len(chunk):
                print("Error writing to pipe: short write", file=sys.stderr)