"""Command line entry point."""

from __future__ import annotations

import argparse
import errno
import os
import signal
import sys

from .capture import (
    DEFAULT_PIPE_PATH,
    DEFAULT_STATE_FILE,
    KeyCapture,
    KeyCaptureConfig,
    open_device,
)
from .config import load_config
from .devices import (
    MAX_DEVICES,
    find_keyboard_devices,
    is_device_keyboard,
    print_device_list,
    prompt_device_selection,
)
from .keystate import KeyStateTable

PROG = "waykey"


class _UsageError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise _UsageError(message)


def _usage(prog: str) -> str:
    return "\n".join(
        [
            f"Usage: {prog} [OPTIONS]",
            "Options:",
            "  -d, --device PATH    Specify input device path "
            "(if not specified, will auto-detect)",
            f"  -p, --pipe PATH      Specify named pipe path (default: {DEFAULT_PIPE_PATH})",
            f"  -s, --state PATH     Specify state file path (default: {DEFAULT_STATE_FILE})",
            "  -l, --list           List available keyboard devices and exit",
            "  -h, --help           Display this help message",
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = _Parser(prog=PROG, add_help=False)
    parser.add_argument("-d", "--device", metavar="PATH")
    parser.add_argument("-p", "--pipe", metavar="PATH")
    parser.add_argument("-s", "--state", metavar="PATH")
    parser.add_argument("-l", "--list", action="store_true")
    parser.add_argument("-h", "--help", action="store_true")
    return parser


def _confirm_non_keyboard() -> bool:
    print("warning: The specified device may not be a keyboard.", file=sys.stderr)
    try:
        response = input("Do you want to continue? (y/n): ")
    except EOFError:
        return False
    return response[:1] in ("y", "Y")


def _open_pipe(settings: KeyCaptureConfig) -> bool:
    if not os.path.exists(settings.pipe_path):
        try:
            os.mkfifo(settings.pipe_path, 0o666)
        except OSError as exc:
            print(f"error creating named pipe: {exc.strerror or exc}", file=sys.stderr)
            return False
    try:
        settings.pipe_fd = os.open(settings.pipe_path, os.O_WRONLY | os.O_NONBLOCK)
    except OSError as exc:
        settings.pipe_fd = -1
        if exc.errno == errno.ENXIO:
            print(
                "info: no process is reading from the pipe yet. "
                "will continue updating the state file.",
                file=sys.stderr,
            )
            print(
                f"info: no connect to the pipe: 'cat {settings.pipe_path}' "
                "in another terminal.",
                file=sys.stderr,
            )
        else:
            print(
                f"warning: could not open named pipe for writing: {exc.strerror or exc}",
                file=sys.stderr,
            )
    return True


def main(argv=None) -> int:
    """Run the key monitor; returns the process exit status."""
    parser = build_parser()
    settings = KeyCaptureConfig()

    file_config = load_config()
    if file_config is not None:
        if file_config.device_path:
            settings.device_path = file_config.device_path
        if file_config.pipe_path:
            settings.pipe_path = file_config.pipe_path
        if file_config.state_path:
            settings.state_path = file_config.state_path

    try:
        args = parser.parse_args(argv)
    except _UsageError as exc:
        print(f"{parser.prog}: {exc}", file=sys.stderr)
        print(_usage(parser.prog))
        return 1
    if args.help:
        print(_usage(parser.prog))
        return 0

    if args.device is not None:
        settings.device_path = args.device
    if args.pipe is not None:
        settings.pipe_path = args.pipe
    if args.state is not None:
        settings.state_path = args.state

    devices = find_keyboard_devices(MAX_DEVICES)
    if args.list:
        print_device_list(devices)
        return 0

    if not settings.device_path:
        if not devices:
            print("error: No keyboard devices found", file=sys.stderr)
            return 1
        settings.device_path = prompt_device_selection(devices)
        if not settings.device_path:
            print("error: No device selected", file=sys.stderr)
            return 1
    elif not is_device_keyboard(settings.device_path):
        if not _confirm_non_keyboard():
            return 1

    print(f"info: using keyboard device: {settings.device_path}")

    if not _open_pipe(settings):
        return 1

    try:
        device_fd = open_device(settings.device_path)
    except (OSError, ValueError) as exc:
        print(f"failed to initialize input device: {exc}", file=sys.stderr)
        if settings.pipe_fd >= 0:
            os.close(settings.pipe_fd)
            settings.pipe_fd = -1
        return 1

    capture = KeyCapture(settings, KeyStateTable())
    capture.device_fd = device_fd

    def _on_signal(signum, frame):
        capture.stop()

    previous = {sig: signal.signal(sig, _on_signal) for sig in (signal.SIGINT, signal.SIGTERM)}
    try:
        capture.run()
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)
        capture.close()
    return 0