"""Loading of the user configuration file."""

from __future__ import annotations

import os
import pwd
from dataclasses import dataclass
from pathlib import Path

import yaml

CONFIG_FILE_NAME = "config.yml"
CONFIG_DIR_NAME = ".config/waykey"

_KNOWN_KEYS = ("device_path", "pipe_path", "state_path")


@dataclass
class Config:
    """Settings read from the configuration file; unset entries are None."""

    device_path: str | None = None
    pipe_path: str | None = None
    state_path: str | None = None


def get_config_path() -> Path | None:
    """Return the configuration file path under the user's home directory."""
    home = os.environ.get("HOME")
    if not home:
        try:
            home = pwd.getpwuid(os.getuid()).pw_dir
        except KeyError:
            return None
    return Path(home) / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def _scalar_values(stream):
    """Yield scalar values from a YAML stream, stopping quietly at a parse error."""
    try:
        for event in yaml.parse(stream):
            if isinstance(event, yaml.ScalarEvent):
                yield event.value
    except yaml.YAMLError:
        return


def load_config(path: str | os.PathLike | None = None) -> Config | None:
    """Read the configuration file, returning None if it cannot be opened.

    Scalars are taken pairwise as key and value; unknown keys are ignored and
    a malformed document keeps whatever was read before the error.
    """
    if path is None:
        path = get_config_path()
        if path is None:
            return None

    try:
        stream = open(path, "r", encoding="utf-8")
    except OSError:
        return None

    config = Config()
    with stream:
        key: str | None = None
        for value in _scalar_values(stream):
            if key is None:
                key = value
                continue
            if key in _KNOWN_KEYS:
                setattr(config, key, value)
            key = None
    return config