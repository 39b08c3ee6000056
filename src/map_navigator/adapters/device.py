"""Shared subprocess plumbing for commands that run on an Android device."""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Sequence


def device_command(
    args: Sequence[str],
    *,
    use_adb: bool = False,
    adb_serial: str | None = None,
) -> list[str]:
    """Return ``args`` as run on-device, or wrapped in ``adb [-s serial] shell``."""
    if not use_adb and adb_serial is None:
        return list(args)
    prefix = ["adb"]
    if adb_serial:
        prefix += ["-s", adb_serial]
    return [*prefix, "shell", *args]


def run_device_command(
    command: Sequence[str],
    timeout: float | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run ``command`` and capture text output.

    Output is decoded as UTF-8 with undecodable bytes replaced, so odd
    package names or device locales never surface as ``UnicodeDecodeError``.

    Raises
    ------
    OSError
        If the executable is missing, the call times out, or it exits non-zero.
    """
    if shutil.which(command[0]) is None:
        raise FileNotFoundError(f"'{command[0]}' is not available on PATH")
    try:
        return subprocess.run(
            list(command),
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=True,
            timeout=timeout,
        )
    except subprocess.CalledProcessError as exc:
        detail = (exc.stderr or exc.stdout or "").strip()
        raise OSError(
            f"{' '.join(command)} exited with status {exc.returncode}: {detail}"
        ) from exc
    except subprocess.TimeoutExpired as exc:
        raise TimeoutError(f"{' '.join(command)} timed out after {timeout}s") from exc
