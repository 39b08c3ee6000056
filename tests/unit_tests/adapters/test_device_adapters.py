"""Unit tests for subprocess- and webbrowser-backed host adapters."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Sequence

import pytest

from map_navigator.adapters import device, openers, package_listers
from map_navigator.adapters.openers import AndroidIntentOpener, BrowserOpener
from map_navigator.adapters.package_listers import PmPackageLister
from map_navigator.application.use_cases import WEB_FALLBACK_OPENED, is_installed, navigate
from map_navigator.errors import OpenError
from map_navigator.schemas import Destination
from map_navigator.types import Platform


class _Runner:
    """Record subprocess.run calls and replay a canned result."""

    def __init__(
        self,
        stdout: str = "",
        stderr: str = "",
        error: Exception | None = None,
    ) -> None:
        self.stdout = stdout
        self.stderr = stderr
        self.error = error
        self.commands: list[list[str]] = []

    def __call__(self, command: Sequence[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        assert kwargs["check"] is True
        assert kwargs["text"] is True
        assert kwargs["errors"] == "replace"
        self.commands.append(list(command))
        if self.error is not None:
            raise self.error
        return subprocess.CompletedProcess(list(command), 0, self.stdout, self.stderr)


@pytest.fixture
def on_path(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(device.shutil, "which", lambda name: f"/usr/bin/{name}")


def test_device_command_wraps_in_adb_shell() -> None:
    assert device.device_command(["pm", "list"]) == ["pm", "list"]
    assert device.device_command(["pm"], use_adb=True) == ["adb", "shell", "pm"]
    assert device.device_command(["pm"], adb_serial="emulator-5554") == [
        "adb",
        "-s",
        "emulator-5554",
        "shell",
        "pm",
    ]


def test_missing_executable_raises_file_not_found(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(device.shutil, "which", lambda name: None)
    with pytest.raises(FileNotFoundError, match="'pm' is not available"):
        device.run_device_command(["pm", "list", "packages"])


@pytest.mark.usefixtures("on_path")
def test_non_zero_exit_becomes_os_error(monkeypatch: pytest.MonkeyPatch) -> None:
    runner = _Runner(error=subprocess.CalledProcessError(1, ["pm"], stderr="boom"))
    monkeypatch.setattr(device.subprocess, "run", runner)
    with pytest.raises(OSError, match="exited with status 1: boom"):
        device.run_device_command(["pm"])


@pytest.mark.usefixtures("on_path")
def test_timeout_becomes_timeout_error(monkeypatch: pytest.MonkeyPatch) -> None:
    runner = _Runner(error=subprocess.TimeoutExpired(["pm"], 2.0))
    monkeypatch.setattr(device.subprocess, "run", runner)
    with pytest.raises(TimeoutError):
        device.run_device_command(["pm"], timeout=2.0)


@pytest.mark.usefixtures("on_path")
def test_pm_package_lister_parses_output(monkeypatch: pytest.MonkeyPatch) -> None:
    runner = _Runner(stdout="package:com.baidu.BaiduMap\n\npackage:com.tencent.map\n")
    monkeypatch.setattr(device.subprocess, "run", runner)

    packages = PmPackageLister(adb_serial="abc").list_installed_packages()

    assert packages == {"package:com.baidu.BaiduMap", "package:com.tencent.map"}
    assert runner.commands == [["adb", "-s", "abc", "shell", "pm", "list", "packages"]]


@pytest.mark.usefixtures("on_path")
def test_android_intent_opener_runs_view_intent(monkeypatch: pytest.MonkeyPatch) -> None:
    runner = _Runner(stdout="Starting: Intent { act=android.intent.action.VIEW }")
    monkeypatch.setattr(device.subprocess, "run", runner)

    AndroidIntentOpener().open("baidumap://map/direction?destination=Target")

    assert runner.commands == [
        [
            "am",
            "start",
            "-a",
            "android.intent.action.VIEW",
            "-d",
            "baidumap://map/direction?destination=Target",
        ]
    ]


@pytest.mark.usefixtures("on_path")
def test_android_intent_opener_detects_unresolved_intent(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    runner = _Runner(stderr="Error: Activity not started, unable to resolve Intent")
    monkeypatch.setattr(device.subprocess, "run", runner)
    with pytest.raises(OpenError, match="unable to resolve Intent"):
        AndroidIntentOpener().open("qqmap://map/routeplan?type=drive")


@pytest.mark.usefixtures("on_path")
def test_android_intent_opener_wraps_process_failures(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    runner = _Runner(error=subprocess.CalledProcessError(255, ["adb"], stderr="no devices"))
    monkeypatch.setattr(device.subprocess, "run", runner)
    with pytest.raises(OpenError, match="no devices"):
        AndroidIntentOpener(use_adb=True).open("androidamap://navi")


def test_browser_opener_raises_when_no_browser(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(openers.webbrowser, "open", lambda url, new=0: False)
    with pytest.raises(OpenError, match="no browser"):
        BrowserOpener().open("https://uri.amap.com/search?keyword=x")


def test_browser_opener_passes_url(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[tuple[str, int]] = []

    def fake_open(url: str, new: int = 0) -> bool:
        seen.append((url, new))
        return True

    monkeypatch.setattr(openers.webbrowser, "open", fake_open)
    BrowserOpener().open("https://example.org")
    assert seen == [("https://example.org", 2)]


def _emit_bytes_command(payload: bytes) -> list[str]:
    """Command that writes raw ``payload`` bytes to stdout."""
    return [
        sys.executable,
        "-c",
        f"import sys; sys.stdout.buffer.write({payload!r})",
    ]


def test_undecodable_output_is_replaced_not_raised() -> None:
    completed = device.run_device_command(
        _emit_bytes_command(b"package:com.baidu.BaiduMap\n\xff\xfe\n")
    )
    assert "package:com.baidu.BaiduMap" in completed.stdout
    assert "�" in completed.stdout


def test_install_check_survives_undecodable_package_output(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Invalid bytes from pm still yield a membership answer."""
    monkeypatch.setattr(
        package_listers,
        "device_command",
        lambda args, **kwargs: _emit_bytes_command(
            b"package:com.baidu.BaiduMap\n\xff\xfe\n"
        ),
    )
    lister = PmPackageLister()

    assert is_installed(provider="baidu", platform="android", package_lister=lister) is True
    assert is_installed(provider="amap", platform="android", package_lister=lister) is False


def test_undecodable_intent_error_falls_back_to_web(monkeypatch: pytest.MonkeyPatch) -> None:
    """An am failure with invalid bytes still triggers the web fallback."""
    monkeypatch.setattr(
        openers,
        "device_command",
        lambda args, **kwargs: _emit_bytes_command(b"Error: \xff unable to resolve Intent\n"),
    )
    intent_opener = AndroidIntentOpener()
    web_calls: list[str] = []

    class _RoutingOpener:
        def open(self, url: str) -> None:
            if url.startswith("https://"):
                web_calls.append(url)
                return
            intent_opener.open(url)

    with pytest.raises(OpenError, match="unable to resolve Intent"):
        intent_opener.open("baidumap://map/direction?destination=Target")

    outcome = navigate(
        provider="baidu",
        destination=Destination(name="Target"),
        direct_nav=False,
        platform=Platform.ANDROID,
        opener=_RoutingOpener(),
    )
    assert outcome.success is False
    assert outcome.message == WEB_FALLBACK_OPENED
    assert web_calls == [outcome.url]
