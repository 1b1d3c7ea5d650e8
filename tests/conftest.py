"""Test configuration utilities and shared fixtures."""

import json
import sys
from pathlib import Path
from typing import Any, Callable

# Ensure the ``src`` directory is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402

WriteBundle = Callable[[str, dict[str, Any]], Path]


@pytest.fixture()
def arb_dir(tmp_path: Path) -> Path:
    """Return an empty directory for bundle files."""

    directory = tmp_path / "l10n"
    directory.mkdir()
    return directory


@pytest.fixture()
def write_bundle(arb_dir: Path) -> WriteBundle:
    """Write a JSON bundle into ``arb_dir`` and return its path."""

    def _write(name: str, payload: dict[str, Any]) -> Path:
        path = arb_dir / name
        path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        return path

    return _write
