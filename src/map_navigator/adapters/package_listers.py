"""Package lister adapters backed by the Android package manager."""

from __future__ import annotations

from map_navigator.adapters.device import device_command, run_device_command


class PmPackageLister:
    """List packages with ``pm list packages``.

    Entries keep the ``package:<id>`` form printed by ``pm``.
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

    def list_installed_packages(self) -> set[str]:
        command = device_command(
            ["pm", "list", "packages"],
            use_adb=self.use_adb,
            adb_serial=self.adb_serial,
        )
        completed = run_device_command(command, timeout=self.timeout)
        return {line.strip() for line in completed.stdout.splitlines() if line.strip()}
