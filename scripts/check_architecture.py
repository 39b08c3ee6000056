#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = _read(path)
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    package = ROOT / "src/map_navigator"
    pure_modules = [
        package / "resolver.py",
        package / "urls.py",
        *sorted((package / "providers").glob("*.py")),
        *sorted((package / "application").glob("*.py")),
    ]
    for path in pure_modules:
        _assert_no_imports(
            path,
            [
                "import typer",
                "from typer",
                "import fastapi",
                "from fastapi",
                "import subprocess",
                "import webbrowser",
                "map_navigator.adapters",
            ],
        )

    cli_path = package / "cli/cli.py"
    _assert_no_imports(cli_path, ["import fastapi", "import subprocess"])

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
