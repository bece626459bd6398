"""System power commands: shutdown and suspend."""

import logging
import subprocess
import sys

logger = logging.getLogger(__name__)

_SHUTDOWN = {
    "linux": ["shutdown", "-h", "now"],
    "darwin": ["shutdown", "-h", "now"],
    "windows": ["shutdown", "/s", "/t", "0"],
}

_SUSPEND = {
    "linux": [
        "dbus-send",
        "--system",
        "--print-reply",
        "--dest=org.freedesktop.login1",
        "/org/freedesktop/login1",
        "org.freedesktop.login1.Manager.Suspend",
        "boolean:true",
    ],
    "darwin": ["pmset", "sleepnow"],
    "windows": ["rundll32.exe", "powrprof.dll,SetSuspendState", "0,1,0"],
}


def _current_platform():
    name = sys.platform
    if name.startswith("linux"):
        return "linux"
    if name == "win32":
        return "windows"
    return name


def _run(table, platform):
    platform = platform or _current_platform()
    command = table.get(platform)
    if command is None:
        logger.warning("unsupported platform")
        return
    subprocess.run(command, check=True)


def shutdown(platform=None):
    """Power off the machine now.

    ``platform`` is one of ``linux``, ``darwin`` or ``windows`` and defaults
    to the running system. Raises ``subprocess.CalledProcessError`` or
    ``OSError`` if the command fails.
    """
    _run(_SHUTDOWN, platform)


def suspend(platform=None):
    """Put the machine to sleep now; see ``shutdown`` for arguments."""
    _run(_SUSPEND, platform)