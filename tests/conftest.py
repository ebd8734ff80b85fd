from __future__ import annotations

import json
from pathlib import Path

import pytest

from core.auth import keypair_to_auth
from core.config import AppSettings

from payloads import SERVER


@pytest.fixture
def keyfile(tmp_path: Path) -> Path:
    path = tmp_path / "keypairs.json"
    path.write_text(
        json.dumps(
            {
                "localhost": {"server": SERVER + "/", "key": "ABCD", "secret": "s3cret"},
                "prod": {"server": "https://portal.example.org", "key": "K", "secret": "S"},
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def auth() -> str:
    return keypair_to_auth("ABCD", "s3cret")


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)

