"""Pytest entry point: shared fixtures for the lic test suite."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

API_BASE_URL = "https://api.github.com"


@pytest.fixture(autouse=True)
def _clean_lic_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("LIC_API_BASE_URL", "LIC_USER_AGENT"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def no_git_identity(monkeypatch: pytest.MonkeyPatch) -> None:
    from adapters import git_identity

    monkeypatch.setattr(git_identity, "read_git_user_name", lambda: None)


@pytest.fixture
def licenses_payload() -> list[dict[str, object]]:
    return [
        {
            "key": "mit",
            "name": "MIT License",
            "spdx_id": "MIT",
            "url": "https://api.github.com/licenses/mit",
            "node_id": "MDc6TGljZW5zZTEz",
        },
        {
            "key": "apache-2.0",
            "name": "Apache License 2.0",
            "spdx_id": "Apache-2.0",
            "url": "https://api.github.com/licenses/apache-2.0",
            "node_id": "MDc6TGljZW5zZTI=",
        },
    ]
