"""Opener adapters that hand navigation URLs to the host."""

from __future__ import annotations

import logging
import webbrowser

from map_navigator.adapters.device import device_command, run_device_command
from map_navigator.errors import OpenError

logger = logging.getLogger(__name__)


class BrowserOpener:
    """Open URLs through the stdlib ``webbrowser`` controller.

    On desktop this opens the default browser; custom schemes are passed to
    whatever the OS has registered for them.
    """

    def __init__(self, new: int = 2) -> None:
        self.new = new

    def open(self, url: str) -> None:
        logger.debug("webbrowser.open %s", url)
        try:
            opened = webbrowser.open(url, new=self.new)
        except webbrowser.Error as exc:
            raise OpenError(str(exc)) from exc
        if not opened:
            raise OpenError("no browser could handle the URL")


class AndroidIntentOpener:
    """Open URLs with an Android ``VIEW`` intent via ``am start``.

    Runs on-device by default; pass ``use_adb``/``adb_serial`` to drive a
    connected device from a workstation.
    """

    def __init__(
        self,
        *,
        use_adb: bool = False,
        adb_serial: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.use_adb = use_adb
        self.adb_serial = adb_serial
        self.timeout = timeout

    def open(self, url: str) -> None:
        command = device_command(
            ["am", "start", "-a", "android.intent.action.VIEW", "-d", url],
            use_adb=self.use_adb,
            adb_serial=self.adb_serial,
        )
        logger.debug("running %s", command)
        try:
            completed = run_device_command(command, timeout=self.timeout)
        except OSError as exc:
            raise OpenError(str(exc)) from exc
        # am start reports unresolvable intents on stdout/stderr with status 0.
        output = f"{completed.stdout}\n{completed.stderr}"
        if "Error:" in output:
            raise OpenError(output.strip())
